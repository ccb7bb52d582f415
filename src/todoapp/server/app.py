"""FastAPI application bootstrap."""

from __future__ import annotations

from fastapi import FastAPI

from .routes import register_status_routes, register_todo_routes


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="TodoApp API", version="1.0.0")

    register_todo_routes(app)
    register_status_routes(app)

    return app
