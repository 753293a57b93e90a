import logging

import pytest

from task_tracker.errors import NotFoundError, ValidationError
from task_tracker.logging_setup import setup_logging
from task_tracker.schemas import CreateTaskInput, DeleteTaskInput, UpdateTaskInput, parse_input


def test_parse_input_passes_instances_through():
    data = CreateTaskInput(title="Write report")

    assert parse_input(CreateTaskInput, data) is data


def test_parse_input_description_defaults_to_none():
    data = parse_input(CreateTaskInput, {"title": "Write report"})

    assert data.description is None


def test_parse_input_wraps_pydantic_errors():
    with pytest.raises(ValidationError) as exc_info:
        parse_input(CreateTaskInput, {"title": ""})

    (error,) = exc_info.value.errors
    assert error["loc"] == ("title",)


def test_update_input_is_strict():
    assert parse_input(UpdateTaskInput, {"id": 3, "completed": False}).completed is False

    with pytest.raises(ValidationError):
        parse_input(UpdateTaskInput, {"id": 3, "completed": 1})
    with pytest.raises(ValidationError):
        parse_input(DeleteTaskInput, {"id": 3.5})
    with pytest.raises(ValidationError):
        parse_input(DeleteTaskInput, {"id": True})


def test_not_found_message():
    assert str(NotFoundError(7)) == "Task with id 7 not found"


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    try:
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
        for h in saved[0]:
            root.addHandler(h)
        root.setLevel(saved[1])
