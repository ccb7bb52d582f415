"""Local HTTP front end for the todo store."""

from .app import create_app

__all__ = ["create_app"]
