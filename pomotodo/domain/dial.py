"""Geometry for the circular countdown indicator.

The arc starts at 12 o'clock (``-pi/2`` in math convention) and sweeps
clockwise by ``fraction * 2pi``. A finished countdown is drawn as a closed
ring instead of an arc.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from .task_timer import TaskTimer, TimerState

START_RADIANS = -math.pi / 2


@dataclass(frozen=True)
class DialSpec:
    """Semantic values a renderer needs for one frame."""

    fraction: float
    text: str
    state: TimerState
    closed: bool

    @classmethod
    def from_timer(cls, timer: TaskTimer) -> "DialSpec":
        return cls(
            fraction=timer.progress_fraction(),
            text=timer.display_text(),
            state=timer.state,
            closed=timer.remaining_s == 0,
        )

    @property
    def start_radians(self) -> float:
        return START_RADIANS

    @property
    def sweep_radians(self) -> float:
        return _clamp_fraction(self.fraction) * 2 * math.pi

    def tk_start_extent(self) -> Tuple[float, float]:
        """Return ``(start, extent)`` in degrees for ``Canvas.create_arc``.

        Tk measures counter-clockwise from 3 o'clock, so 12 o'clock is 90
        and a clockwise sweep is a negative extent.
        """
        return 90.0, -math.degrees(self.sweep_radians)


@dataclass(frozen=True)
class DialBox:
    cx: float
    cy: float
    radius: float

    @property
    def bbox(self) -> Tuple[float, float, float, float]:
        return (
            self.cx - self.radius,
            self.cy - self.radius,
            self.cx + self.radius,
            self.cy + self.radius,
        )


def dial_box(width: float, height: float, inset: float = 2.0) -> DialBox:
    """Centre the largest circle that fits, pulled in by ``inset`` pixels."""
    radius = max(0.0, min(width, height) / 2 - inset)
    return DialBox(cx=width / 2, cy=height / 2, radius=radius)


def _clamp_fraction(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


__all__ = ["DialBox", "DialSpec", "START_RADIANS", "dial_box"]
