"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from core.settings import Settings  # noqa: E402
from repositories.todo_repository import TodoRepository  # noqa: E402
from todo_main import create_app  # noqa: E402


@pytest.fixture
def todos_file(tmp_path: Path) -> Path:
    """Path of a backing file that does not exist yet."""
    return tmp_path / "todos.jsonl"


@pytest.fixture
def app(todos_file: Path):
    """Application wired to a temporary todo file."""
    return create_app(Settings(todos_file=str(todos_file)))


@pytest.fixture
def client(app) -> TestClient:
    """Provide a TestClient for integration tests."""
    return TestClient(app)


@pytest.fixture
def repository(app) -> TodoRepository:
    """The repository instance the app serves requests from."""
    return app.state.todo_repository
