#!/usr/bin/env python3
"""
TODO管理CLI - ローカルのtodoリストをコマンドラインから操作する

Usage:
    python -m todoapp [--storage-path PATH] [--config PATH] list [--format json|text]
    python -m todoapp add "Buy milk" [--format json|text]
    python -m todoapp toggle INDEX [--format json|text]
    python -m todoapp remove INDEX [--format json|text]
    python -m todoapp save [--format json|text]

インデックスは0始まりで、``list`` の表示順に対応する。
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import load_config
from .exceptions import TodoAppError
from .logger import setup_logger
from .models import TodoItem
from .status import summarize
from .store import TodoStore, open_store


def format_todo_text(index: int, todo: TodoItem) -> str:
    """Todoアイテムをテキスト形式で整形"""
    return f"{index}: {todo.display}"


def format_todo_json(index: int, todo: TodoItem) -> Dict[str, Any]:
    """Todoアイテムを辞書形式に変換"""
    return {
        "index": index,
        "text": todo.text,
        "done": todo.done,
        "display": todo.display,
    }


def print_json(payload: Any) -> None:
    print(json.dumps(payload, ensure_ascii=False))


def cmd_list(store: TodoStore, output_format: str) -> int:
    """Todoリストとステータス行を表示"""
    items = store.items
    if output_format == "json":
        print_json([format_todo_json(i, item) for i, item in enumerate(items)])
        return 0

    if not items:
        print("No todos yet.")
    for i, item in enumerate(items):
        print(format_todo_text(i, item))
    print(summarize(store))
    return 0


def cmd_add(store: TodoStore, words: List[str], output_format: str) -> int:
    """新しいTodoを追加"""
    index = store.add(" ".join(words))
    item = store.get(index)
    if output_format == "json":
        print_json(format_todo_json(index, item))
    else:
        print(f"Added: {format_todo_text(index, item)}")
    return 0


def cmd_toggle(store: TodoStore, index: int, output_format: str) -> int:
    """Todoの完了状態を切り替え"""
    item = store.toggle_at(index)
    if output_format == "json":
        print_json(format_todo_json(index, item))
    else:
        print(f"Toggled: {format_todo_text(index, item)}")
    return 0


def cmd_remove(store: TodoStore, index: int, output_format: str) -> int:
    """Todoを削除"""
    item = store.remove_at(index)
    if output_format == "json":
        print_json({"deleted": True, "index": index, "text": item.text})
    else:
        print(f"Removed: {item.display}")
    return 0


def cmd_save(store: TodoStore, output_format: str) -> int:
    """Todoをファイルに保存"""
    store.save()
    if output_format == "json":
        print_json({"saved": True, "path": str(store.path), "count": store.count()})
    else:
        print("Todos saved.")
    return 0


def add_format_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="text",
        help="Output format (default: text)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todoapp",
        description="Manage a local todo list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--storage-path", type=str, help="Todo JSON file to use")
    parser.add_argument("--config", type=str, help="YAML settings file")

    subparsers = parser.add_subparsers(dest="command", help="Command to run", required=True)

    parser_list = subparsers.add_parser("list", help="Show todos")
    add_format_argument(parser_list)

    parser_add = subparsers.add_parser("add", help="Add a todo")
    parser_add.add_argument("text", nargs="+", help="Todo text")
    add_format_argument(parser_add)

    parser_toggle = subparsers.add_parser("toggle", help="Toggle a todo's done state")
    parser_toggle.add_argument("index", type=int, help="0-based index from `list`")
    add_format_argument(parser_toggle)

    parser_remove = subparsers.add_parser("remove", help="Remove a todo")
    parser_remove.add_argument("index", type=int, help="0-based index from `list`")
    add_format_argument(parser_remove)

    parser_save = subparsers.add_parser("save", help="Write todos to disk now")
    add_format_argument(parser_save)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLIエントリポイント"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(Path(args.config) if args.config else None)
        setup_logger(log_level=config.cli_log_level, log_file=None)
        storage_path = Path(args.storage_path) if args.storage_path else config.storage_path

        store = open_store(storage_path)
        if args.command == "list":
            return cmd_list(store, args.format)
        if args.command == "add":
            return cmd_add(store, args.text, args.format)
        if args.command == "toggle":
            return cmd_toggle(store, args.index, args.format)
        if args.command == "remove":
            return cmd_remove(store, args.index, args.format)
        if args.command == "save":
            return cmd_save(store, args.format)
    except TodoAppError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Error: unknown command: {args.command}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
