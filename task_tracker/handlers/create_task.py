import logging
from typing import Any, Mapping, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StorageError
from ..models import Task as TaskModel, utcnow
from ..schemas import CreateTaskInput, Task, parse_input

logger = logging.getLogger(__name__)


def create_task(db: Session, task_input: Union[CreateTaskInput, Mapping[str, Any]]) -> Task:
    """Insert a new, not completed task and return it as persisted."""
    data = parse_input(CreateTaskInput, task_input)

    now = utcnow()
    db_task = TaskModel(
        title=data.title,
        description=data.description,
        completed=False,
        created_at=now,
        updated_at=now,
    )
    try:
        db.add(db_task)
        db.commit()
        db.refresh(db_task)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Task creation failed")
        raise StorageError("Task creation failed") from exc

    logger.info("Created task id=%s", db_task.id)
    return Task.model_validate(db_task)
