from __future__ import annotations

from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_TODOS_FILE = "todos.jsonl"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "info"


@dataclass(frozen=True)
class Settings:
    todos_file: str = DEFAULT_TODOS_FILE
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, **overrides: Optional[object]) -> "Settings":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def parse_int_env(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid integer env value '%s', using default=%s", value, default)
        return default


@lru_cache
def get_settings() -> Settings:
    todos_file = os.getenv("TODOS_FILE") or DEFAULT_TODOS_FILE
    host = os.getenv("HOST") or DEFAULT_HOST
    port = parse_int_env(os.getenv("PORT"), DEFAULT_PORT)
    log_level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).lower()

    return Settings(
        todos_file=todos_file,
        host=host,
        port=port,
        log_level=log_level,
    )
