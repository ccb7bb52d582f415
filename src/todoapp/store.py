"""Todo store

Ordered, file-backed collection of todo items. Every mutating call writes the
whole list back to disk (auto-persist) and then notifies listeners so a
presentation layer can re-render.

Related Classes: TodoItem (models.py)
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import replace
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from .exceptions import (
    EmptyTextError,
    FormatError,
    IndexOutOfRangeError,
    InvalidTextError,
    StorageError,
)
from .models import TodoItem
from .schemas import TodoFileAdapter

logger = logging.getLogger(__name__)

Listener = Callable[["TodoStore"], None]


class TodoStore:
    """JSON file backed todo list."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._items: List[TodoItem] = []
        self._listeners: List[Listener] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def items(self) -> Tuple[TodoItem, ...]:
        """Snapshot of the items in order. Mutating the copies has no effect."""
        return tuple(replace(item) for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(self.items)

    def get(self, index: int) -> TodoItem:
        self._check_index(index)
        return replace(self._items[index])

    def count(self) -> int:
        return len(self._items)

    def done_count(self) -> int:
        return sum(1 for item in self._items if item.done)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after each successful change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def add(self, raw_text: str) -> int:
        """Append a new item built from ``raw_text``.

        Args:
            raw_text: User input; surrounding whitespace is stripped.

        Returns:
            Index of the new item.

        Raises:
            EmptyTextError: ``raw_text`` is empty after trimming.
            InvalidTextError: ``raw_text`` cannot be encoded as UTF-8.
            StorageError: the item was added but auto-persist failed.
        """
        text = raw_text.strip()
        if not text:
            raise EmptyTextError()
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidTextError() from exc

        self._items.append(TodoItem(text))
        logger.debug("Added todo %r", text)
        self._commit()
        return len(self._items) - 1

    def remove_at(self, index: int) -> TodoItem:
        """Remove the item at ``index`` and return a copy of it.

        Raises:
            IndexOutOfRangeError: ``index`` is not within ``[0, count())``.
            StorageError: the item was removed but auto-persist failed.
        """
        self._check_index(index)
        removed = self._items.pop(index)
        logger.debug("Removed todo %d %r", index, removed.text)
        self._commit()
        return replace(removed)

    def toggle_at(self, index: int) -> TodoItem:
        """Flip the done flag of the item at ``index``.

        Returns:
            A copy of the item after toggling.

        Raises:
            IndexOutOfRangeError: ``index`` is not within ``[0, count())``.
            StorageError: the item was toggled but auto-persist failed.
        """
        self._check_index(index)
        item = self._items[index]
        item.toggle()
        logger.debug("Toggled todo %d to done=%s", index, item.done)
        self._commit()
        return replace(item)

    def save(self) -> None:
        """Write all items to the storage file, replacing its contents.

        Raises:
            StorageError: the file or its directory could not be written.
        """
        payload = json.dumps(
            [item.to_dict() for item in self._items], ensure_ascii=False, indent=2
        )
        try:
            self._write_atomic(payload)
        except (OSError, UnicodeError) as exc:
            logger.error("Failed to save todos to %s: %s", self._path, exc)
            raise StorageError(f"Save failed: {exc}", path=self._path) from exc
        logger.info("Saved %d todo(s) to %s", len(self._items), self._path)

    def load(self) -> None:
        """Replace the in-memory items with the contents of the storage file.

        A missing file is not an error and leaves the store as it is. On any
        failure the current items are kept.

        Raises:
            StorageError: the file exists but could not be read.
            FormatError: the file is not a JSON array of todo records.
        """
        try:
            raw = self._path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            logger.info("No todo file at %s, starting empty", self._path)
            return
        except UnicodeDecodeError as exc:
            logger.warning("Todo file %s is not valid UTF-8", self._path)
            raise FormatError(f"Load failed: {exc}", path=self._path) from exc
        except OSError as exc:
            logger.error("Failed to read todos from %s: %s", self._path, exc)
            raise StorageError(f"Load failed: {exc}", path=self._path) from exc

        try:
            records = TodoFileAdapter.validate_json(raw)
        except ValidationError as exc:
            logger.warning("Malformed todo file %s: %s", self._path, exc)
            raise FormatError(
                f"Load failed: {self._path} is not a list of todos", path=self._path
            ) from exc

        self._items = [TodoItem.from_record(record) for record in records]
        logger.info("Loaded %d todo(s) from %s", len(self._items), self._path)
        self._notify()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexOutOfRangeError(index, len(self._items))

    def _commit(self) -> None:
        """Auto-persist, then notify. Listeners run even if the save fails."""
        try:
            self.save()
        finally:
            self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _write_atomic(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self._path)
        except BaseException:
            try:
                Path(tmp).unlink()
            except OSError:
                pass
            raise


def open_store(path: Union[Path, str], listener: Optional[Listener] = None) -> TodoStore:
    """Create a store for ``path``, subscribe ``listener`` and load it."""
    store = TodoStore(path)
    if listener is not None:
        store.subscribe(listener)
    store.load()
    return store
