"""Shared visual theme for Pomotodo views.

The module centralizes ttk style tokens and the color helpers the timer dial
uses, so views do not carry styling logic of their own.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Tuple

BACKGROUND = "#f3f5f9"
CARD_BG = "#ffffff"
BORDER = "#d9dfeb"
PRIMARY = "#2457ff"
TEXT = "#1f2937"
MUTED = "#64748b"

# Opacity of the dial's background disc relative to the foreground color.
DIAL_DISC_ALPHA = 0.2


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply a cohesive ttk + tk visual theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BACKGROUND)

    style.configure(".", background=BACKGROUND, foreground=TEXT)
    style.configure("TFrame", background=BACKGROUND)
    style.configure("Row.TFrame", background=CARD_BG, relief="flat", borderwidth=1)
    style.configure("TLabel", background=BACKGROUND, foreground=TEXT)
    style.configure("Subtle.TLabel", background=BACKGROUND, foreground=MUTED)
    style.configure("Row.TCheckbutton", background=CARD_BG, foreground=TEXT)
    style.configure("Done.TCheckbutton", background=CARD_BG, foreground=MUTED)

    style.configure("TButton", padding=(10, 6), background=CARD_BG, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#edf2ff")])
    style.configure("Primary.TButton", background=PRIMARY, foreground="#ffffff", bordercolor=PRIMARY)
    style.map("Primary.TButton", background=[("active", "#1b45ce")])
    style.configure("Row.TButton", padding=(6, 3))

    style.configure("TNotebook", background=BACKGROUND, borderwidth=0)
    style.configure("TNotebook.Tab", padding=(14, 8), background="#e7ecf6", foreground=TEXT)
    style.map("TNotebook.Tab", background=[("selected", CARD_BG)], foreground=[("selected", TEXT)])

    style.configure("TEntry", fieldbackground="#ffffff", bordercolor=BORDER)


def widget_colors(widget: tk.Misc) -> Tuple[str, str]:
    """Return ``(foreground, background)`` hex colors for ``widget``.

    Falls back to the theme tokens when the widget cannot be queried.
    """
    style = ttk.Style(widget)
    fg = style.lookup("TLabel", "foreground") or TEXT
    bg = style.lookup("Row.TFrame", "background") or CARD_BG
    try:
        return _to_hex(widget, fg), _to_hex(widget, bg)
    except tk.TclError:
        return TEXT, CARD_BG


def blend(fg: str, bg: str, alpha: float) -> str:
    """Mix ``fg`` over ``bg`` with opacity ``alpha`` (Tk has no alpha channel)."""
    alpha = min(1.0, max(0.0, alpha))
    f = _parse_hex(fg)
    b = _parse_hex(bg)
    mixed = tuple(round(fc * alpha + bc * (1 - alpha)) for fc, bc in zip(f, b))
    return "#%02x%02x%02x" % mixed


def _parse_hex(color: str) -> Tuple[int, int, int]:
    text = color.lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    if len(text) != 6:
        raise ValueError(f"Unsupported color: {color!r}")
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)


def _to_hex(widget: tk.Misc, color: str) -> str:
    if color.startswith("#") and len(color) in (4, 7):
        return color
    r, g, b = widget.winfo_rgb(color)
    return "#%02x%02x%02x" % (r >> 8, g >> 8, b >> 8)
