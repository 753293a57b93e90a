import logging
from typing import Any, Mapping, Union

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StorageError
from ..models import Task as TaskModel
from ..schemas import DeleteTaskInput, DeleteTaskResult, parse_input

logger = logging.getLogger(__name__)


def delete_task(db: Session, task_input: Union[DeleteTaskInput, Mapping[str, Any]]) -> DeleteTaskResult:
    """Permanently remove a task.

    A missing id is not an error: the result just reports ``success=False``.
    """
    data = parse_input(DeleteTaskInput, task_input)

    try:
        result = db.execute(delete(TaskModel).where(TaskModel.id == data.id))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Task deletion failed for id=%s", data.id)
        raise StorageError(f"Task deletion failed for id {data.id}") from exc

    removed = result.rowcount > 0
    if removed:
        logger.info("Deleted task id=%s", data.id)
    else:
        logger.info("Task id=%s not found for delete", data.id)
    return DeleteTaskResult(success=removed)
