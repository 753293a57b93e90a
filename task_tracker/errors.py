"""Errors raised by the task operations.

All of them reach the caller unchanged; nothing here is retried.
"""
from typing import Any, Dict, List, Optional


class TaskTrackerError(Exception):
    """Base class for task tracker failures."""


class ValidationError(TaskTrackerError):
    """Input failed validation before any storage access."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(TaskTrackerError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int):
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id


class StorageError(TaskTrackerError):
    """The database rejected or failed a statement."""
