"""Value objects and records for the to-do list."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterator

from .task_timer import TaskTimer

TodoId = str

_ids: Iterator[int] = itertools.count(1)


def next_todo_id() -> TodoId:
    """Return a process-unique id for a new to-do record."""
    return f"todo-{next(_ids)}"


def normalize_label(text: object) -> str:
    """Trim surrounding whitespace; ``None`` becomes an empty label."""
    if text is None:
        return ""
    return str(text).strip()


@dataclass
class TodoItem:
    """One entry of the list. Owns its countdown for its whole lifetime."""

    label: str
    timer: TaskTimer
    todo_id: TodoId = field(default_factory=next_todo_id)
    done: bool = False

    def __post_init__(self) -> None:
        self.label = normalize_label(self.label)
        if not self.label:
            raise ValueError("Task label must not be empty.")


__all__ = ["TodoId", "TodoItem", "next_todo_id", "normalize_label"]
