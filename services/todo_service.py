"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List

from core.errors import TodoValidationError
from models.todo import Todo
from repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic."""

    def __init__(self, repository: TodoRepository) -> None:
        self.repository = repository

    def list_todos(self) -> List[Todo]:
        """Get all todo items, newest first."""
        return self.repository.list()

    def create_todo(self, text: str) -> Todo:
        """Create a new todo item from raw form input."""
        text = (text or "").strip()
        if not text:
            raise TodoValidationError("Todo text cannot be empty")
        todo = self.repository.add(text)
        logger.info("Created todo id=%s", todo.id)
        return todo

    def toggle_todo(self, todo_id: int) -> Todo:
        """Flip the completed flag of a todo item."""
        todo = self.repository.toggle(todo_id)
        logger.info("Toggled todo id=%s completed=%s", todo.id, todo.completed)
        return todo

    def delete_todo(self, todo_id: int) -> None:
        """Delete a todo item."""
        self.repository.delete(todo_id)
        logger.info("Deleted todo id=%s", todo_id)
