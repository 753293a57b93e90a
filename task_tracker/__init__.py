"""Single-tenant task tracker: create, list, toggle and delete tasks."""

__version__ = "1.0.0"
