"""Todo endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException

from ...exceptions import IndexOutOfRangeError, StorageError, TodoValidationError
from ..dependencies import get_status_line, get_todo_store, serialize_todo
from ..schemas import SaveResponse, TodoCreateRequest, TodoDeleteResponse, TodoResponse

logger = logging.getLogger(__name__)


def _fail(status_code: int, exc: Exception) -> HTTPException:
    """Flash the error on the status line and build the HTTP error."""
    get_status_line().flash(str(exc), is_error=True)
    return HTTPException(status_code=status_code, detail=str(exc))


def register_todo_routes(app: FastAPI) -> None:
    """Register todo endpoints."""

    @app.get("/api/todos", response_model=List[TodoResponse])
    def list_todos() -> List[TodoResponse]:
        """List todos in their current order."""
        store = get_todo_store()
        return [serialize_todo(i, item) for i, item in enumerate(store.items)]

    @app.post("/api/todos", response_model=TodoResponse)
    def add_todo(request: TodoCreateRequest) -> TodoResponse:
        """Append a todo."""
        store = get_todo_store()
        try:
            index = store.add(request.text)
        except TodoValidationError as exc:
            raise _fail(422, exc) from exc
        except StorageError as exc:
            logger.error("Todo added but not saved: %s", exc)
            raise _fail(500, exc) from exc
        return serialize_todo(index, store.get(index))

    @app.post("/api/todos/save", response_model=SaveResponse)
    def save_todos() -> SaveResponse:
        """Write todos to disk now."""
        store = get_todo_store()
        try:
            store.save()
        except StorageError as exc:
            raise _fail(500, exc) from exc
        get_status_line().flash("Todos saved.")
        return SaveResponse(saved=True, count=store.count())

    @app.post("/api/todos/{index}/toggle", response_model=TodoResponse)
    def toggle_todo(index: int) -> TodoResponse:
        """Flip a todo's done flag."""
        store = get_todo_store()
        try:
            item = store.toggle_at(index)
        except IndexOutOfRangeError as exc:
            raise _fail(404, exc) from exc
        except StorageError as exc:
            logger.error("Todo toggled but not saved: %s", exc)
            raise _fail(500, exc) from exc
        return serialize_todo(index, item)

    @app.delete("/api/todos/{index}", response_model=TodoDeleteResponse)
    def delete_todo(index: int) -> TodoDeleteResponse:
        """Remove a todo; later indices shift down by one."""
        store = get_todo_store()
        try:
            store.remove_at(index)
        except IndexOutOfRangeError as exc:
            raise _fail(404, exc) from exc
        except StorageError as exc:
            logger.error("Todo removed but not saved: %s", exc)
            raise _fail(500, exc) from exc
        return TodoDeleteResponse(deleted=True, index=index)
