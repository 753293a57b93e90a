import logging
from datetime import timedelta
from typing import Any, Mapping, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import NotFoundError, StorageError
from ..models import Task as TaskModel, utcnow
from ..schemas import Task, UpdateTaskInput, parse_input

logger = logging.getLogger(__name__)


def update_task(db: Session, task_input: Union[UpdateTaskInput, Mapping[str, Any]]) -> Task:
    """Set a task's completed flag and refresh its updated_at.

    Raises NotFoundError when no task has the given id.
    """
    data = parse_input(UpdateTaskInput, task_input)

    try:
        task = db.query(TaskModel).filter(TaskModel.id == data.id).first()
        if task is None:
            logger.info("Task id=%s not found for update", data.id)
            raise NotFoundError(data.id)

        now = utcnow()
        # updated_at must move forward even if the clock has not
        if now <= task.updated_at:
            now = task.updated_at + timedelta(microseconds=1)

        task.completed = data.completed
        task.updated_at = now

        db.commit()
        db.refresh(task)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Task update failed for id=%s", data.id)
        raise StorageError(f"Task update failed for id {data.id}") from exc

    logger.info("Updated task id=%s completed=%s", task.id, task.completed)
    return Task.model_validate(task)
