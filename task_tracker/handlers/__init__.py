from .create_task import create_task
from .delete_task import delete_task
from .get_tasks import get_tasks
from .update_task import update_task

__all__ = ["create_task", "delete_task", "get_tasks", "update_task"]
