"""Pydantic schemas for the persisted todo file."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, TypeAdapter


class TodoRecord(BaseModel):
    """One ``{"text": ..., "done": ...}`` entry of the todo file.

    Unknown keys (such as a stray ``display``) are ignored.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    text: str
    done: bool = False


TodoFileAdapter: TypeAdapter[List[TodoRecord]] = TypeAdapter(List[TodoRecord])
