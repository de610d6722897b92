"""Service layer tests."""

from pathlib import Path

from pytest import fixture, raises

from core.errors import TodoNotFoundError, TodoValidationError
from repositories.todo_repository import TodoRepository
from services.todo_service import TodoService


@fixture
def todo_service(todos_file: Path) -> TodoService:
    """Create todo service for testing."""
    return TodoService(TodoRepository(todos_file))


class TestTodoService:
    """Test suite for TodoService."""

    def test_create_trims_text(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo("  Buy milk \n")

        assert todo.id == 1
        assert todo.text == "Buy milk"
        assert todo.completed is False

    def test_create_todo_invalid_text(self, todo_service: TodoService) -> None:
        """Empty and whitespace-only text is rejected before reaching storage."""
        for text in ("", "   ", "\t\n"):
            with raises(TodoValidationError):
                todo_service.create_todo(text)

        assert todo_service.list_todos() == []
        assert todo_service.repository.next_id == 1

    def test_validation_error_is_a_value_error(self, todo_service: TodoService) -> None:
        with raises(ValueError, match="cannot be empty"):
            todo_service.create_todo(" ")

    def test_list_todos_newest_first(self, todo_service: TodoService) -> None:
        todo_service.create_todo("Todo 1")
        todo_service.create_todo("Todo 2")

        todos = todo_service.list_todos()
        assert [todo.text for todo in todos] == ["Todo 2", "Todo 1"]

    def test_toggle_todo(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo("Original")

        assert todo_service.toggle_todo(todo.id).completed is True
        assert todo_service.toggle_todo(todo.id).completed is False

    def test_delete_todo(self, todo_service: TodoService) -> None:
        todo = todo_service.create_todo("To delete")

        todo_service.delete_todo(todo.id)

        assert todo_service.list_todos() == []

    def test_missing_todo_raises_not_found(self, todo_service: TodoService) -> None:
        with raises(TodoNotFoundError):
            todo_service.toggle_todo(9999)
        with raises(TodoNotFoundError):
            todo_service.delete_todo(9999)
