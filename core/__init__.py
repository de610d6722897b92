"""Shared configuration, logging and error types for the todo app."""

from .errors import (
    PersistenceError,
    TemplateError,
    TodoError,
    TodoNotFoundError,
    TodoValidationError,
)
from .settings import Settings, get_settings

__all__ = [
    "PersistenceError",
    "Settings",
    "TemplateError",
    "TodoError",
    "TodoNotFoundError",
    "TodoValidationError",
    "get_settings",
]
