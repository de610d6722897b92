"""Todo repository - file-backed data access layer."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import List, Optional, Union

from core.errors import PersistenceError, TodoNotFoundError
from models.todo import Todo, utc_now

logger = logging.getLogger(__name__)


class TodoRepository:
    """Repository keeping todos in memory, newest first, mirrored to a JSON Lines file.

    Every mutation rewrites the whole file before returning. If the write
    fails the in-memory change stays applied and ``PersistenceError`` is
    raised, so the file may lag behind memory until the next successful save.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._todos: List[Todo] = []
        self._next_id = 1
        self._lock = threading.RLock()
        self.load()

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> None:
        """Read the backing file; a missing file leaves the store empty."""
        with self._lock:
            todos: List[Todo] = []
            seen: set[int] = set()
            try:
                with self.path.open("rb") as fh:
                    for lineno, raw in enumerate(fh, start=1):
                        if not raw.strip():
                            continue
                        try:
                            todo = Todo.from_line(raw)
                        except ValueError as exc:
                            logger.warning(
                                "Skipping malformed todo line %s in %s: %s",
                                lineno,
                                self.path,
                                exc,
                            )
                            continue
                        if todo.id in seen:
                            logger.warning(
                                "Skipping duplicate todo id=%s on line %s in %s",
                                todo.id,
                                lineno,
                                self.path,
                            )
                            continue
                        seen.add(todo.id)
                        todos.append(todo)
            except FileNotFoundError:
                logger.info("Todo file %s not found, starting empty", self.path)
            except OSError as exc:
                logger.error("Failed to read todo file %s: %s", self.path, exc)
                raise PersistenceError(f"Failed to load todos from {self.path}") from exc

            self._todos = todos
            self._next_id = max(self._next_id, max(seen, default=0) + 1)
            logger.info("Loaded %s todos from %s (next_id=%s)", len(todos), self.path, self._next_id)

    def list(self) -> List[Todo]:
        """Return a snapshot of all todos, newest first."""
        with self._lock:
            return list(self._todos)

    def get(self, todo_id: int) -> Optional[Todo]:
        """Return the todo with ``todo_id``, or None when absent."""
        with self._lock:
            return next((todo for todo in self._todos if todo.id == todo_id), None)

    def add(self, text: str) -> Todo:
        """Create a todo from already-validated text and prepend it."""
        with self._lock:
            todo = Todo(id=self._next_id, text=text, completed=False, created_at=utc_now())
            self._todos.insert(0, todo)
            self._next_id += 1
            self._save()
            return todo

    def toggle(self, todo_id: int) -> Todo:
        with self._lock:
            index = self._index_of(todo_id)
            todo = self._todos[index].toggled()
            self._todos[index] = todo
            self._save()
            return todo

    def delete(self, todo_id: int) -> None:
        with self._lock:
            index = self._index_of(todo_id)
            del self._todos[index]
            self._save()

    def _index_of(self, todo_id: int) -> int:
        for index, todo in enumerate(self._todos):
            if todo.id == todo_id:
                return index
        raise TodoNotFoundError(todo_id)

    def _save(self) -> None:
        """Overwrite the backing file with the current in-memory order."""
        payload = "".join(f"{todo.to_line()}\n" for todo in self._todos)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write todo file %s: %s", self.path, exc)
            raise PersistenceError() from exc
