from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..domain.dial import DialSpec
from ..domain.entities import TodoId, TodoItem, normalize_label
from ..domain.ports import SchedulerPort
from ..domain.task_timer import POMODORO_DURATION_S, TaskTimer, TimerState
from .status_format import start_pause_label, state_label


@dataclass(frozen=True)
class TodoRow:
    """View-facing snapshot of one to-do record."""

    todo_id: TodoId
    label: str
    done: bool
    state: TimerState
    status: str
    start_label: str
    controls_enabled: bool
    dial: DialSpec

    @property
    def display_text(self) -> str:
        return self.dial.text


class TodoListVM:
    """Owns the to-do records and their timers; emits row DTOs to the views.

    Records live in insertion order. Each record owns a ``TaskTimer`` whose
    lifetime ends when the record is deleted or ``dispose_all`` runs.
    """

    def __init__(
        self,
        scheduler: SchedulerPort,
        *,
        duration_s: int = POMODORO_DURATION_S,
        on_rows_changed: Optional[Callable[[], None]] = None,
        on_row_updated: Optional[Callable[[TodoRow], None]] = None,
        on_timer_completed: Optional[Callable[[TodoItem], None]] = None,
    ) -> None:
        self._log = logging.getLogger(__name__)
        self._scheduler = scheduler
        self.duration_s = duration_s
        self.on_rows_changed = on_rows_changed
        self.on_row_updated = on_row_updated
        self.on_timer_completed = on_timer_completed
        self._items: Dict[TodoId, TodoItem] = {}

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def add_task(self, text: str) -> Optional[TodoRow]:
        """Create a record for ``text``; blank input is ignored."""
        label = normalize_label(text)
        if not label:
            return None
        timer = TaskTimer(self.duration_s, self._scheduler)
        item = TodoItem(label=label, timer=timer)
        timer.on_tick = lambda _t, todo_id=item.todo_id: self._emit_row(todo_id)
        timer.on_completed = lambda _t, todo_id=item.todo_id: self._handle_completed(todo_id)
        self._items[item.todo_id] = item
        self._log.debug("Added task %s (%s)", item.todo_id, label)
        self._emit_structure()
        return self.row(item.todo_id)

    def toggle_done(self, todo_id: TodoId, done: bool) -> None:
        """Move a record between the active and completed lists.

        The timer is stopped and reset either way, and the record lands at
        the bottom of the list it moves to.
        """
        item = self._items.get(todo_id)
        if item is None:
            return
        item.timer.reset()
        item.done = bool(done)
        self._items[todo_id] = self._items.pop(todo_id)
        self._emit_structure()

    def start_pause(self, todo_id: TodoId) -> None:
        item = self._items.get(todo_id)
        if item is None or item.done:
            return
        item.timer.toggle()

    def reset(self, todo_id: TodoId) -> None:
        item = self._items.get(todo_id)
        if item is None or item.done:
            return
        item.timer.reset()

    def delete(self, todo_id: TodoId) -> None:
        item = self._items.pop(todo_id, None)
        if item is None:
            return
        item.timer.dispose()
        self._log.debug("Deleted task %s", todo_id)
        self._emit_structure()

    def dispose_all(self) -> None:
        """Cancel every pending tick; called when the window closes."""
        for item in self._items.values():
            item.timer.dispose()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, todo_id: TodoId) -> Optional[TodoItem]:
        return self._items.get(todo_id)

    def row(self, todo_id: TodoId) -> Optional[TodoRow]:
        item = self._items.get(todo_id)
        if item is None:
            return None
        return self._build_row(item)

    def rows(self, *, done: Optional[bool] = None) -> List[TodoRow]:
        """Rows in insertion order, optionally filtered by completion flag."""
        return [
            self._build_row(item)
            for item in self._items.values()
            if done is None or item.done == done
        ]

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build_row(item: TodoItem) -> TodoRow:
        timer = item.timer
        return TodoRow(
            todo_id=item.todo_id,
            label=item.label,
            done=item.done,
            state=timer.state,
            status=state_label(timer.state),
            start_label=start_pause_label(timer.state),
            controls_enabled=not item.done,
            dial=DialSpec.from_timer(timer),
        )

    def _emit_row(self, todo_id: TodoId) -> None:
        if not self.on_row_updated:
            return
        row = self.row(todo_id)
        if row is not None:
            self.on_row_updated(row)

    def _emit_structure(self) -> None:
        if self.on_rows_changed:
            self.on_rows_changed()

    def _handle_completed(self, todo_id: TodoId) -> None:
        item = self._items.get(todo_id)
        if item is None:
            return
        self._log.info('Pomodoro for "%s" completed!', item.label)
        if self.on_timer_completed:
            self.on_timer_completed(item)


__all__ = ["TodoListVM", "TodoRow"]
