import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..errors import StorageError
from ..models import Task as TaskModel
from ..schemas import Task

logger = logging.getLogger(__name__)


def get_tasks(db: Session) -> List[Task]:
    """Return every task, newest first."""
    try:
        rows = (
            db.query(TaskModel)
            .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Fetching tasks failed")
        raise StorageError("Fetching tasks failed") from exc

    return [Task.model_validate(row) for row in rows]
