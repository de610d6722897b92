"""Main FastAPI application for the todo list."""

from __future__ import annotations

import argparse
import logging
import uuid
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import router as todo_router
from api.static_routes import router as static_router
from core.errors import TodoError
from core.logging_utils import configure_logging, reset_request_id, set_request_id
from core.settings import Settings, get_settings
from renderers.todo_renderer import TodoRenderer
from repositories.todo_repository import TodoRepository

logger = logging.getLogger(__name__)

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with its own repository and renderer."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo List",
        description="Server-rendered todo list backed by a JSON Lines file",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.todo_repository = TodoRepository(settings.todos_file)
    app.state.todo_renderer = TodoRenderer()

    @app.exception_handler(TodoError)
    async def todo_error_handler(request: Request, exc: TodoError) -> PlainTextResponse:
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s",
                request.method,
                request.url.path,
                exc.message,
                exc_info=exc,
            )
        else:
            logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    @app.middleware("http")
    async def request_id_middleware(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_token = set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            reset_request_id(request_token)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health")
    def health(request: Request) -> dict[str, Any]:
        """Liveness probe with the current todo count."""
        repository: TodoRepository = request.app.state.todo_repository
        return {"status": "ok", "todos": len(repository.list())}

    app.include_router(static_router)
    app.include_router(todo_router)
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve the todo list web app.")
    parser.add_argument("--file", help="Path of the JSON Lines todo file (env TODOS_FILE)")
    parser.add_argument("--host", help="Interface to bind (env HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (env PORT)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Log level (env LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    import uvicorn

    args = build_parser().parse_args(argv)
    settings = get_settings().with_overrides(
        todos_file=args.file,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )
    app = create_app(settings)
    logger.info(
        "Starting on %s:%s (todos_file=%s)",
        settings.host,
        settings.port,
        settings.todos_file,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
