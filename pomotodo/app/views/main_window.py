"""
MainWindowView
---------------
Tkinter main window for Pomotodo. This file contains **only View code**, no
timer logic. It exposes callback hooks that are expected to be connected to
ViewModels.

The window provides:
  * Toolbar with the Settings action
  * Notebook with tabs "Todos" (input row + active list) and "Completed"
  * StatusBar at the bottom for short toasts
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .view_utils import safe_call

PLACEHOLDER = "Add a new task..."


class MainWindowView(tk.Tk):
    """Top-level application window.

    The two list views are created by the app and inserted with
    ``mount_active_list`` / ``mount_completed_list``.
    """

    OnVoid = Optional[Callable[[], None]]
    OnText = Optional[Callable[[str], None]]

    def __init__(
        self,
        *,
        on_add_task: OnText = None,
        on_open_settings: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Pomotodo")
        self.geometry("600x700")
        self.minsize(480, 360)

        self._on_add_task = on_add_task
        self._on_open_settings = on_open_settings
        self._on_close = on_close
        self._placeholder_active = False

        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_main_area(self)
        self._build_statusbar(self)

        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

    # ------------------------------------------------------------------
    # Toolbar
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Widget) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=15, pady=(15, 4))
        toolbar.columnconfigure(0, weight=1)
        ttk.Label(toolbar, text="Pomotodo", font=("TkDefaultFont", 14, "bold")).grid(row=0, column=0, sticky="w")
        ttk.Button(toolbar, text="Settings", command=lambda: safe_call(self._on_open_settings)).grid(
            row=0, column=1, sticky="e"
        )

    # ------------------------------------------------------------------
    # Main Area (Notebook with Todos / Completed)
    # ------------------------------------------------------------------
    def _build_main_area(self, parent: tk.Widget) -> None:
        self.tabs = ttk.Notebook(parent)
        self.tabs.grid(row=1, column=0, sticky="nsew", padx=15, pady=4)

        self.tab_todos = ttk.Frame(self.tabs, padding=(0, 10, 0, 0))
        self.tab_completed = ttk.Frame(self.tabs, padding=(0, 10, 0, 0))
        self.tabs.add(self.tab_todos, text="Todos")
        self.tabs.add(self.tab_completed, text="Completed")

        self.tab_todos.columnconfigure(0, weight=1)
        self.tab_todos.rowconfigure(1, weight=1)
        self.tab_completed.columnconfigure(0, weight=1)
        self.tab_completed.rowconfigure(0, weight=1)

        input_row = ttk.Frame(self.tab_todos)
        input_row.grid(row=0, column=0, sticky="ew", pady=(0, 10))
        input_row.columnconfigure(0, weight=1)

        self.entry_var = tk.StringVar(value="")
        self.entry = ttk.Entry(input_row, textvariable=self.entry_var)
        self.entry.grid(row=0, column=0, sticky="ew", padx=(0, 8))
        ttk.Button(input_row, text="➕ Add Task", style="Primary.TButton", command=self._submit_entry).grid(
            row=0, column=1
        )

        self.entry.bind("<Return>", lambda _e: self._submit_entry())
        self.entry.bind("<FocusIn>", lambda _e: self._clear_placeholder())
        self.entry.bind("<FocusOut>", lambda _e: self._show_placeholder())
        self._show_placeholder()

    # ------------------------------------------------------------------
    # StatusBar
    # ------------------------------------------------------------------
    def _build_statusbar(self, parent: tk.Widget) -> None:
        status = ttk.Frame(parent)
        status.grid(row=2, column=0, sticky="ew", padx=15, pady=(4, 15))
        status.columnconfigure(0, weight=1)

        self.status_message_var = tk.StringVar(value="Ready.")
        ttk.Label(status, textvariable=self.status_message_var, style="Subtle.TLabel").grid(
            row=0, column=0, sticky="w"
        )
        self.counts_var = tk.StringVar(value="")
        ttk.Label(status, textvariable=self.counts_var, style="Subtle.TLabel").grid(row=0, column=1, sticky="e")

    # ------------------------------------------------------------------
    # Public API (called by VMs/presenters)
    # ------------------------------------------------------------------
    def mount_active_list(self, view: tk.Widget) -> None:
        view.grid(row=1, column=0, sticky="nsew")

    def mount_completed_list(self, view: tk.Widget) -> None:
        view.grid(row=0, column=0, sticky="nsew")

    def set_counts(self, active: int, completed: int) -> None:
        self.tabs.tab(self.tab_todos, text=f"Todos ({active})" if active else "Todos")
        self.tabs.tab(self.tab_completed, text=f"Completed ({completed})" if completed else "Completed")
        self.counts_var.set(f"{active} open · {completed} done")

    def show_toast(self, message: str, level: str = "info") -> None:
        """
        Lightweight user feedback in the statusbar.
        level "warning" also rings the bell.
        """
        self.status_message_var.set(message)
        if level == "warning":
            self.bell()

    def entry_text(self) -> str:
        if self._placeholder_active:
            return ""
        return self.entry_var.get()

    def clear_entry(self) -> None:
        self._placeholder_active = False
        self.entry_var.set("")
        self.entry.configure(foreground="")
        self.entry.focus_set()

    # ------------------------------------------------------------------
    def _submit_entry(self) -> None:
        text = self.entry_text()
        safe_call(self._on_add_task, text)
        self.clear_entry()

    def _show_placeholder(self) -> None:
        if self.entry_var.get() or self.focus_get() is self.entry:
            return
        self._placeholder_active = True
        self.entry_var.set(PLACEHOLDER)
        self.entry.configure(foreground="#94a3b8")

    def _clear_placeholder(self) -> None:
        if not self._placeholder_active:
            return
        self._placeholder_active = False
        self.entry_var.set("")
        self.entry.configure(foreground="")

    def _on_close_clicked(self) -> None:
        safe_call(self._on_close)
        self.destroy()
