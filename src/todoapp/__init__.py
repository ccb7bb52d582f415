"""Single-user todo list with JSON file persistence."""

from .exceptions import (
    ConfigError,
    EmptyTextError,
    FormatError,
    IndexOutOfRangeError,
    InvalidTextError,
    StorageError,
    TodoAppError,
    TodoValidationError,
)
from .models import TodoItem
from .status import StatusLine
from .store import TodoStore, open_store

__all__ = [
    "TodoItem",
    "TodoStore",
    "open_store",
    "StatusLine",
    "TodoAppError",
    "TodoValidationError",
    "EmptyTextError",
    "InvalidTextError",
    "IndexOutOfRangeError",
    "StorageError",
    "FormatError",
    "ConfigError",
]
