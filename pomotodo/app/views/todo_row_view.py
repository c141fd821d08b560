"""Single to-do row: checkbox, timer dial, Start/Pause, Reset and Delete.

The row is UI-only; every click is forwarded to callbacks keyed by the
record id.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ...viewmodels.todo_list_vm import TodoRow
from .timer_dial_view import TimerDialView
from .view_utils import safe_call

OnId = Optional[Callable[[str], None]]
OnToggle = Optional[Callable[[str, bool], None]]


class TodoRowView(ttk.Frame):
    """Layout: ``[Checkbutton label | dial | Start/Pause | Reset | Delete]``."""

    def __init__(
        self,
        parent: tk.Widget,
        row: TodoRow,
        *,
        clock_size: int = 50,
        on_toggle_done: OnToggle = None,
        on_start_pause: OnId = None,
        on_reset: OnId = None,
        on_delete: OnId = None,
    ) -> None:
        super().__init__(parent, style="Row.TFrame", padding=4)
        self.todo_id = row.todo_id
        self._on_toggle_done = on_toggle_done
        self._on_start_pause = on_start_pause
        self._on_reset = on_reset
        self._on_delete = on_delete

        self.columnconfigure(0, weight=1)

        self.done_var = tk.BooleanVar(value=row.done)
        self.check = ttk.Checkbutton(
            self,
            text=row.label,
            variable=self.done_var,
            command=self._on_check_clicked,
            style="Row.TCheckbutton",
        )
        self.check.grid(row=0, column=0, sticky="w", padx=(0, 10))

        self.dial = TimerDialView(self, size=clock_size)
        self.dial.grid(row=0, column=1, padx=(0, 10))

        self.btn_start = ttk.Button(self, text=row.start_label, width=6, style="Row.TButton",
                                    command=lambda: safe_call(self._on_start_pause, self.todo_id))
        self.btn_reset = ttk.Button(self, text="Reset", width=6, style="Row.TButton",
                                    command=lambda: safe_call(self._on_reset, self.todo_id))
        self.btn_delete = ttk.Button(self, text="🗑", width=3, style="Row.TButton",
                                     command=lambda: safe_call(self._on_delete, self.todo_id))
        self.btn_start.grid(row=0, column=2, padx=(0, 6))
        self.btn_reset.grid(row=0, column=3, padx=(0, 6))
        self.btn_delete.grid(row=0, column=4)

        self.apply_row(row)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def apply_row(self, row: TodoRow) -> None:
        """Refresh captions, enabled state and the dial from a row DTO."""
        self.done_var.set(row.done)
        self.check.configure(text=row.label, style="Done.TCheckbutton" if row.done else "Row.TCheckbutton")
        self.btn_start.configure(text=row.start_label)
        state = "normal" if row.controls_enabled else "disabled"
        self.btn_start.configure(state=state)
        self.btn_reset.configure(state=state)
        self.dial.set_spec(row.dial)

    # ------------------------------------------------------------------
    def _on_check_clicked(self) -> None:
        safe_call(self._on_toggle_done, self.todo_id, bool(self.done_var.get()))


__all__ = ["TodoRowView"]
