from pydantic import BaseModel, Field, StrictBool, StrictInt, field_serializer
from pydantic import ValidationError as PydanticValidationError
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Type, TypeVar, Union

from ..errors import ValidationError

InputT = TypeVar("InputT", bound=BaseModel)

# Ids are stored as signed 64-bit integers
MIN_TASK_ID = -(2 ** 63)
MAX_TASK_ID = 2 ** 63 - 1


class Task(BaseModel):
    """Complete task schema with all fields."""
    id: int
    title: str
    description: Optional[str] = None
    completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

    @field_serializer("created_at", "updated_at", when_used="json")
    def _serialize_utc(self, value: datetime) -> str:
        # Stored naive, always UTC
        return value.replace(tzinfo=timezone.utc).isoformat()


class CreateTaskInput(BaseModel):
    """Schema for creating new tasks.

    ``description`` may be omitted or null; both are stored as null.
    """
    title: str = Field(min_length=1)
    description: Optional[str] = None


class UpdateTaskInput(BaseModel):
    """Schema for marking a task completed or not completed."""
    id: StrictInt = Field(ge=MIN_TASK_ID, le=MAX_TASK_ID)
    completed: StrictBool


class DeleteTaskInput(BaseModel):
    """Schema for deleting a task."""
    id: StrictInt = Field(ge=MIN_TASK_ID, le=MAX_TASK_ID)


class DeleteTaskResult(BaseModel):
    success: bool


def parse_input(schema: Type[InputT], data: Union[InputT, Mapping[str, Any]]) -> InputT:
    """Validate raw input against ``schema``.

    Instances of the schema pass through untouched. Anything else is
    validated, and a failure is raised as our own ValidationError.
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid {schema.__name__}: {exc.error_count()} error(s)",
            errors=exc.errors(include_url=False),
        ) from exc
