"""Circular countdown indicator drawn on a Tk canvas.

The view renders a ``DialSpec``: a faint background disc, the progress arc
from 12 o'clock clockwise (or a closed ring once finished), and the ``MM:SS``
readout centred on top.
"""

from __future__ import annotations

import tkinter as tk
from typing import Optional

from ...domain.dial import DialSpec, dial_box
from .theme import DIAL_DISC_ALPHA, blend, widget_colors

LINE_WIDTH = 4


class TimerDialView(tk.Canvas):
    """Fixed-size canvas showing one timer's progress."""

    def __init__(self, parent: tk.Widget, *, size: int = 50, **kwargs) -> None:
        _, bg = widget_colors(parent)
        kwargs.setdefault("highlightthickness", 0)
        kwargs.setdefault("bg", bg)
        super().__init__(parent, width=size, height=size, **kwargs)
        self._size = size
        self._spec: Optional[DialSpec] = None

    def set_spec(self, spec: DialSpec) -> None:
        """Store the latest values and redraw."""
        self._spec = spec
        self.redraw()

    def redraw(self) -> None:
        self.delete("all")
        spec = self._spec
        if spec is None:
            return
        fg, bg = widget_colors(self)
        box = dial_box(self._size, self._size)

        self.create_oval(*box.bbox, fill=blend(fg, bg, DIAL_DISC_ALPHA), outline="", tags=("disc",))
        if spec.closed:
            self.create_oval(*box.bbox, outline=fg, width=LINE_WIDTH, tags=("ring",))
        elif spec.fraction > 0:
            start, extent = spec.tk_start_extent()
            self.create_arc(
                *box.bbox,
                start=start,
                extent=extent,
                style=tk.ARC,
                outline=fg,
                width=LINE_WIDTH,
                tags=("arc",),
            )
        self.create_text(
            box.cx,
            box.cy,
            text=spec.text,
            fill=fg,
            font=("TkDefaultFont", 8),
            tags=("text",),
        )


__all__ = ["TimerDialView"]
