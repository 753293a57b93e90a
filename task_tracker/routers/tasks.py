from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from .. import handlers
from ..database import get_db
from ..schemas import CreateTaskInput, DeleteTaskInput, DeleteTaskResult, Task, UpdateTaskInput

router = APIRouter()

# Procedure-style routes: one endpoint per task operation.


@router.get("/healthcheck")
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/getTasks", response_model=List[Task])
def get_tasks(db: Session = Depends(get_db)):
    """List all tasks, newest first."""
    return handlers.get_tasks(db)


@router.post("/createTask", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(task: CreateTaskInput, db: Session = Depends(get_db)):
    """Create a new task."""
    return handlers.create_task(db, task)


@router.post("/updateTask", response_model=Task)
def update_task(task_update: UpdateTaskInput, db: Session = Depends(get_db)):
    """Mark a task completed or not completed."""
    return handlers.update_task(db, task_update)


@router.post("/deleteTask", response_model=DeleteTaskResult)
def delete_task(task_delete: DeleteTaskInput, db: Session = Depends(get_db)):
    """Delete a task; ``success`` is false when it did not exist."""
    return handlers.delete_task(db, task_delete)
