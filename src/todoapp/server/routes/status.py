"""Status line endpoint."""

from __future__ import annotations

from fastapi import FastAPI

from ..dependencies import get_status_line, get_todo_store
from ..schemas import StatusResponse


def register_status_routes(app: FastAPI) -> None:
    """Register the status endpoint."""

    @app.get("/api/status", response_model=StatusResponse)
    def get_status() -> StatusResponse:
        """Summary text, or the active flash message."""
        store = get_todo_store()
        status_line = get_status_line()
        return StatusResponse(
            text=status_line.render(store),
            total=store.count(),
            done=store.done_count(),
            is_error=status_line.is_error,
        )
