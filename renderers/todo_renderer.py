"""HTML fragment rendering for the todo list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import jinja2

from core.errors import TemplateError
from models.todo import Todo

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
EMPTY_STATE_TEMPLATE = "empty-state.html"
TODOS_LIST_TEMPLATE = "todos-list.html"


class TodoRenderer:
    """Turns the current todo list into the fragment swapped in by the page.

    Templates are looked up on every call, so edits on disk show up without
    a restart.
    """

    def __init__(self, templates_dir: Optional[Union[str, Path]] = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR
        self.env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(self.templates_dir),
            autoescape=jinja2.select_autoescape(["html"]),
            undefined=jinja2.StrictUndefined,
            auto_reload=True,
        )

    def render(self, todos: Sequence[Todo]) -> str:
        if not todos:
            return self._read_source(EMPTY_STATE_TEMPLATE)
        try:
            template = self.env.get_template(TODOS_LIST_TEMPLATE)
            return template.render(todos=todos)
        except (jinja2.TemplateError, OSError) as exc:
            logger.error("Failed to render %s: %s", TODOS_LIST_TEMPLATE, exc)
            raise TemplateError() from exc

    def _read_source(self, name: str) -> str:
        try:
            source, _, _ = self.env.loader.get_source(self.env, name)
        except (jinja2.TemplateError, OSError) as exc:
            logger.error("Failed to read template %s: %s", name, exc)
            raise TemplateError() from exc
        return source
