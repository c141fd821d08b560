"""Timer-state labeling helpers for view models.

Call context:
    ``TodoListVM`` calls these helpers to map countdown states into button
    captions and status text.
"""

from __future__ import annotations

from typing import Optional

from ..domain.task_timer import TimerState


def state_label(state: Optional[TimerState]) -> str:
    """Convert a timer state into operator-facing label text."""
    mapping = {
        TimerState.IDLE: "Ready",
        TimerState.RUNNING: "Running",
        TimerState.PAUSED: "Paused",
        TimerState.COMPLETED: "Done",
    }
    if state is None:
        return "Ready"
    return mapping.get(state, str(state.value).title())


def start_pause_label(state: Optional[TimerState]) -> str:
    """Caption for the single Start/Pause button."""
    return "Pause" if state is TimerState.RUNNING else "Start"


__all__ = ["start_pause_label", "state_label"]
