"""Scrollable list of to-do rows.

One instance backs the "Todos" tab and one the "Completed" tab. Rows are
keyed by record id so a redraw only touches the affected row.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Dict, Iterable

from ...viewmodels.todo_list_vm import TodoRow
from .todo_row_view import OnId, OnToggle, TodoRowView


class TodoListView(ttk.Frame):
    """Canvas + inner frame host for ``TodoRowView`` widgets."""

    def __init__(
        self,
        parent: tk.Widget,
        *,
        clock_size: int = 50,
        empty_text: str = "Nothing here yet.",
        on_toggle_done: OnToggle = None,
        on_start_pause: OnId = None,
        on_reset: OnId = None,
        on_delete: OnId = None,
        **kwargs,
    ) -> None:
        super().__init__(parent, **kwargs)
        self.clock_size = clock_size
        self._row_callbacks = dict(
            on_toggle_done=on_toggle_done,
            on_start_pause=on_start_pause,
            on_reset=on_reset,
            on_delete=on_delete,
        )
        self._rows: Dict[str, TodoRowView] = {}

        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0)
        vbar = ttk.Scrollbar(self, orient="vertical", command=self._canvas.yview)
        self._canvas.configure(yscrollcommand=vbar.set)
        self._canvas.grid(row=0, column=0, sticky="nsew")
        vbar.grid(row=0, column=1, sticky="ns")

        self.inner = ttk.Frame(self._canvas)
        self.inner.columnconfigure(0, weight=1)
        self._window_id = self._canvas.create_window((0, 0), window=self.inner, anchor="nw")

        self._empty_label = ttk.Label(self.inner, text=empty_text, style="Subtle.TLabel")

        def _on_inner_configure(_event):
            self._canvas.configure(scrollregion=self._canvas.bbox("all"))

        def _on_canvas_configure(event):
            # keep rows as wide as the visible area
            self._canvas.itemconfigure(self._window_id, width=event.width)

        self.inner.bind("<Configure>", _on_inner_configure)
        self._canvas.bind("<Configure>", _on_canvas_configure)
        self._show_empty_hint()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def set_rows(self, rows: Iterable[TodoRow]) -> None:
        """Sync row widgets with ``rows``, keeping existing widgets in place."""
        rows = list(rows)
        wanted = {row.todo_id for row in rows}
        for todo_id in [tid for tid in self._rows if tid not in wanted]:
            self._rows.pop(todo_id).destroy()

        for index, row in enumerate(rows):
            view = self._rows.get(row.todo_id)
            if view is None:
                view = TodoRowView(self.inner, row, clock_size=self.clock_size, **self._row_callbacks)
                self._rows[row.todo_id] = view
            else:
                view.apply_row(row)
            view.grid(row=index, column=0, sticky="ew", pady=(0, 4))
        self._show_empty_hint()

    def update_row(self, row: TodoRow) -> bool:
        """Redraw one row if this list shows it. Returns True when handled."""
        view = self._rows.get(row.todo_id)
        if view is None:
            return False
        view.apply_row(row)
        return True

    # ------------------------------------------------------------------
    def _show_empty_hint(self) -> None:
        if self._rows:
            self._empty_label.grid_remove()
        else:
            self._empty_label.grid(row=0, column=0, sticky="w", padx=8, pady=8)


__all__ = ["TodoListView"]
