from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .view_utils import safe_call


class SettingsDialog(tk.Toplevel):
    """Modal dialog to edit app settings (UI-only)."""

    OnVoid = Optional[Callable[[], None]]
    OnSave = Optional[Callable[[dict], None]]

    def __init__(
        self,
        parent: tk.Widget,
        *,
        on_save: OnSave = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__(parent)
        self.title("Settings")
        self.transient(parent)
        self.resizable(False, False)

        self._on_save = on_save
        self._on_close = on_close

        self.protocol("WM_DELETE_WINDOW", self._on_close_clicked)

        self.pomodoro_minutes_var = tk.StringVar(value="25")
        self.clock_size_var = tk.StringVar(value="50")
        self.debug_logging_var = tk.BooleanVar(value=False)

        self._build_ui()

        self.update_idletasks()
        self.geometry(self._center_over_parent(parent))
        self.grab_set()
        self.focus_set()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        pad = dict(padx=8, pady=6)

        timer = ttk.Labelframe(self, text="Timer")
        timer.grid(row=0, column=0, sticky="ew", **pad)
        timer.columnconfigure(1, weight=1)
        ttk.Label(timer, text="Pomodoro length (min)").grid(row=0, column=0, sticky="w")
        ttk.Spinbox(timer, from_=1, to=180, textvariable=self.pomodoro_minutes_var, width=6).grid(
            row=0, column=1, sticky="w", padx=(8, 0)
        )
        ttk.Label(timer, text="Clock size (px)").grid(row=1, column=0, sticky="w", pady=(6, 0))
        ttk.Spinbox(timer, from_=24, to=200, increment=2, textvariable=self.clock_size_var, width=6).grid(
            row=1, column=1, sticky="w", padx=(8, 0), pady=(6, 0)
        )
        ttk.Label(timer, text="Length applies to tasks added afterwards.", style="Subtle.TLabel").grid(
            row=2, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        flags = ttk.Frame(self)
        flags.grid(row=1, column=0, sticky="ew", **pad)
        ttk.Checkbutton(flags, text="Enable debug logging", variable=self.debug_logging_var).pack(side="left")

        footer = ttk.Frame(self)
        footer.grid(row=2, column=0, sticky="ew", **pad)
        self._btn_save = ttk.Button(footer, text="Save", command=self._emit_save)
        self._btn_save.pack(side="right", padx=(0, 6))
        ttk.Button(footer, text="Close", command=self._on_close_clicked).pack(side="right")

    # ------------------------------------------------------------------
    def _emit_save(self) -> None:
        settings = {
            "pomodoro_minutes": self._parse_int(self.pomodoro_minutes_var.get(), 25),
            "clock_size_px": self._parse_int(self.clock_size_var.get(), 50),
            "debug_logging": bool(self.debug_logging_var.get()),
        }
        safe_call(self._on_save, settings)

    def _on_close_clicked(self) -> None:
        safe_call(self._on_close)
        try:
            if self.winfo_exists():
                self.destroy()
        except tk.TclError:
            pass

    # ------------------------------------------------------------------
    # Public setters to initialize dialog fields from VM
    # ------------------------------------------------------------------
    def set_pomodoro_minutes(self, minutes: int) -> None:
        self.pomodoro_minutes_var.set(str(minutes))

    def set_clock_size(self, size_px: int) -> None:
        self.clock_size_var.set(str(size_px))

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging_var.set(bool(enabled))

    # ------------------------------------------------------------------
    @staticmethod
    def _parse_int(text: str, default: int) -> int:
        try:
            return int(text)
        except (TypeError, ValueError):
            return default

    @staticmethod
    def _center_over_parent(parent: tk.Widget) -> str:
        width = 360
        height = 220
        try:
            px = parent.winfo_rootx()
            py = parent.winfo_rooty()
            pw = parent.winfo_width()
            ph = parent.winfo_height()
        except tk.TclError:
            return f"{width}x{height}"
        x = px + (pw - width) // 2
        y = py + (ph - height) // 2
        return f"{width}x{height}+{x}+{y}"
