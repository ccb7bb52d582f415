"""Pydantic schemas for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TodoCreateRequest(BaseModel):
    """Request body for adding a todo."""

    text: str = Field(..., description="Todo text; surrounding whitespace is stripped")


class TodoResponse(BaseModel):
    """Serialized todo item with its current position."""

    index: int
    text: str
    done: bool
    display: str


class TodoDeleteResponse(BaseModel):
    """Response for todo removal."""

    deleted: bool
    index: int


class SaveResponse(BaseModel):
    """Response for an explicit save."""

    saved: bool
    count: int


class StatusResponse(BaseModel):
    """Current status line."""

    text: str
    total: int
    done: int
    is_error: bool
