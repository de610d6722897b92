"""Error types shared by the todo layers."""

from __future__ import annotations


class TodoError(Exception):
    """Base error; carries the HTTP status and a client-safe message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class TodoValidationError(TodoError, ValueError):
    status_code = 400
    default_message = "Invalid request"


class TodoNotFoundError(TodoError, LookupError):
    status_code = 404
    default_message = "Todo not found"

    def __init__(self, todo_id: int) -> None:
        self.todo_id = todo_id
        super().__init__(f"Todo with id {todo_id} not found")


class PersistenceError(TodoError):
    """Raised when the backing file cannot be read or written."""

    default_message = "Failed to save todos"


class TemplateError(TodoError):
    """Raised when a fragment template is missing or fails to render."""

    default_message = "Template error"
