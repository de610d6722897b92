from .todo_renderer import TEMPLATES_DIR, TodoRenderer

__all__ = ["TEMPLATES_DIR", "TodoRenderer"]
