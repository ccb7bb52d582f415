"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

import logging
from functools import lru_cache

from ..config import Config, load_config
from ..exceptions import TodoAppError
from ..logger import setup_logger
from ..models import TodoItem
from ..status import StatusLine
from ..store import TodoStore
from .schemas import TodoResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Load settings once and configure logging."""
    config = load_config()
    setup_logger(log_level=config.log_level, log_file=config.log_file)
    return config


@lru_cache(maxsize=1)
def get_status_line() -> StatusLine:
    """Singleton StatusLine."""
    return StatusLine(flash_seconds=get_config().status.flash_seconds)


@lru_cache(maxsize=1)
def get_todo_store() -> TodoStore:
    """Singleton TodoStore, loaded from disk on first use.

    A failed load is reported on the status line and the store starts empty.
    """
    store = TodoStore(get_config().storage_path)
    try:
        store.load()
    except TodoAppError as exc:
        logger.error("Failed to load todos: %s", exc)
        get_status_line().flash(str(exc), is_error=True)
    return store


def serialize_todo(index: int, item: TodoItem) -> TodoResponse:
    """Convert a TodoItem to an API response."""
    return TodoResponse(
        index=index,
        text=item.text,
        done=item.done,
        display=item.display,
    )
