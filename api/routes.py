"""HTML fragment routes for todo management."""

from __future__ import annotations

import re
from typing import Callable, Tuple

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse

from api.dependencies import get_todo_renderer, get_todo_service
from core.errors import TodoValidationError
from renderers.todo_renderer import TodoRenderer
from services.todo_service import TodoService

router = APIRouter()

TodoAction = Callable[[TodoService, int], object]

_TODO_ID = re.compile(r"[+-]?[0-9]+")

# ids are signed 64-bit integers
_TODO_ID_MIN = -(2**63)
_TODO_ID_MAX = 2**63 - 1

# (method, shape of the path below /todos/, service call)
TODO_ACTIONS: Tuple[Tuple[str, re.Pattern[str], TodoAction], ...] = (
    ("PUT", re.compile(r"[^/]+/toggle"), TodoService.toggle_todo),
    ("DELETE", re.compile(r"[^/]+"), TodoService.delete_todo),
)


def resolve_todo_action(method: str, todo_path: str) -> Tuple[TodoAction, int]:
    """Map a method and the path below ``/todos/`` to a service call and todo id."""
    segments = todo_path.split("/")
    if not _TODO_ID.fullmatch(segments[0]):
        raise TodoValidationError("Invalid todo ID")
    try:
        todo_id = int(segments[0])
    except ValueError as exc:
        raise TodoValidationError("Invalid todo ID") from exc
    if not _TODO_ID_MIN <= todo_id <= _TODO_ID_MAX:
        raise TodoValidationError("Invalid todo ID")
    for action_method, shape, action in TODO_ACTIONS:
        if method == action_method and shape.fullmatch(todo_path):
            return action, todo_id
    raise TodoValidationError("Invalid request")


def render_todos(service: TodoService, renderer: TodoRenderer) -> HTMLResponse:
    return HTMLResponse(renderer.render(service.list_todos()))


@router.get("/todos", response_class=HTMLResponse)
def list_todos(
    service: TodoService = Depends(get_todo_service),
    renderer: TodoRenderer = Depends(get_todo_renderer),
) -> HTMLResponse:
    """Render the current todo list fragment."""
    return render_todos(service, renderer)


@router.post("/todos", response_class=HTMLResponse)
def create_todo(
    text: str = Form(""),
    service: TodoService = Depends(get_todo_service),
    renderer: TodoRenderer = Depends(get_todo_renderer),
) -> HTMLResponse:
    """Create a todo from the form field ``text`` and re-render the list."""
    service.create_todo(text)
    return render_todos(service, renderer)


@router.api_route(
    "/todos/{todo_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    response_class=HTMLResponse,
)
def todo_action(
    todo_path: str,
    request: Request,
    service: TodoService = Depends(get_todo_service),
    renderer: TodoRenderer = Depends(get_todo_renderer),
) -> HTMLResponse:
    """Toggle or delete a single todo, then re-render the whole list."""
    action, todo_id = resolve_todo_action(request.method, todo_path)
    action(service, todo_id)
    return render_todos(service, renderer)
