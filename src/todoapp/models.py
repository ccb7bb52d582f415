"""Todoアイテムのデータモデル

関連クラス: TodoStore (store.py), TodoRecord (schemas.py)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .schemas import TodoRecord


@dataclass(slots=True)
class TodoItem:
    """1件のタスクとその完了フラグの表現。

    表示用文字列は読み出しのたびに text と done から導出し、保存形式には含めない。
    """

    text: str
    done: bool = False

    @property
    def display(self) -> str:
        """表示用文字列（例: ``"[x] Buy milk"``）"""
        mark = "x" if self.done else " "
        return f"[{mark}] {self.text}"

    def toggle(self) -> None:
        self.done = not self.done

    def to_dict(self) -> Dict[str, Any]:
        """保存用の辞書に変換（displayは含めない）"""
        return {"text": self.text, "done": self.done}

    @classmethod
    def from_record(cls, record: TodoRecord) -> "TodoItem":
        return cls(text=record.text, done=record.done)
