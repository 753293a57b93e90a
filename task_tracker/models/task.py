from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Task(SQLModel, table=True):
    """Task row.

    ``id`` is assigned by the database and never reused, even after the
    newest row is deleted (SQLite needs AUTOINCREMENT for that).
    """
    __tablename__ = "tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(sa_column_kwargs={"nullable": False})
    description: Optional[str] = None
    completed: bool = Field(default=False, sa_column_kwargs={"nullable": False})
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)
