"""Exceptions raised by the todo store.

Every store failure is raised once to the caller; nothing is retried.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class TodoAppError(Exception):
    """Base exception for todoapp."""

    pass


class TodoValidationError(TodoAppError, ValueError):
    """Input rejected before any mutation took place."""

    pass


class EmptyTextError(TodoValidationError):
    """Todo text was empty after trimming."""

    def __init__(self, message: str = "Type something to add a todo.") -> None:
        super().__init__(message)


class InvalidTextError(TodoValidationError):
    """Todo text cannot be stored as UTF-8 (e.g. lone surrogates from undecodable input)."""

    def __init__(self, message: str = "Todo text contains characters that cannot be saved.") -> None:
        super().__init__(message)


class IndexOutOfRangeError(TodoAppError, IndexError):
    """Index does not address an existing item."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Index {index} is out of range for {count} item(s)")


class StorageError(TodoAppError):
    """Filesystem failure while reading or writing the todo file."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class FormatError(TodoAppError, ValueError):
    """The todo file does not contain a list of todo records."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigError(TodoAppError):
    """Settings file has an unexpected structure."""

    pass
