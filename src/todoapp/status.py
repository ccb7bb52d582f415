"""Status line shown under the todo list.

Normally a ``Total: N    Done: M`` summary. A flash message temporarily
replaces it and reverts once ``flash_seconds`` have passed.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

from .store import TodoStore


def summarize(store: TodoStore) -> str:
    return f"Total: {store.count()}    Done: {store.done_count()}"


class StatusLine:
    """Summary text with an optional transient flash message."""

    def __init__(
        self,
        flash_seconds: float = 1.2,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.flash_seconds = flash_seconds
        self._clock = clock
        self._message: Optional[str] = None
        self._is_error = False
        self._expires_at = 0.0

    def flash(self, message: str, is_error: bool = False) -> None:
        """Show ``message`` until ``flash_seconds`` elapse, replacing any earlier flash."""
        self._message = message
        self._is_error = is_error
        self._expires_at = self._clock() + self.flash_seconds

    def clear(self) -> None:
        self._message = None
        self._is_error = False

    @property
    def active(self) -> bool:
        if self._message is None:
            return False
        if self._clock() >= self._expires_at:
            self.clear()
            return False
        return True

    @property
    def is_error(self) -> bool:
        return self.active and self._is_error

    def render(self, store: TodoStore) -> str:
        if self.active:
            return self._message  # type: ignore[return-value]
        return summarize(store)
