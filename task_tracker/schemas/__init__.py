from .task import (
    CreateTaskInput,
    DeleteTaskInput,
    DeleteTaskResult,
    Task,
    UpdateTaskInput,
    parse_input,
)

__all__ = [
    "CreateTaskInput",
    "DeleteTaskInput",
    "DeleteTaskResult",
    "Task",
    "UpdateTaskInput",
    "parse_input",
]
