"""API dependencies for todo management."""

from fastapi import Depends, Request

from renderers.todo_renderer import TodoRenderer
from repositories.todo_repository import TodoRepository
from services.todo_service import TodoService


def get_todo_repository(request: Request) -> TodoRepository:
    """Dependency for the repository built once by the app factory."""
    return request.app.state.todo_repository


def get_todo_renderer(request: Request) -> TodoRenderer:
    """Dependency for the fragment renderer."""
    return request.app.state.todo_renderer


def get_todo_service(
    repository: TodoRepository = Depends(get_todo_repository),
) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(repository)
