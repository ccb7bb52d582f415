"""Route registration helpers."""

from .status import register_status_routes
from .todo import register_todo_routes

__all__ = [
    "register_status_routes",
    "register_todo_routes",
]
