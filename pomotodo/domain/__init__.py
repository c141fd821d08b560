"""Domain package exports for the countdown core and to-do records."""

from .dial import DialBox, DialSpec, dial_box
from .entities import TodoId, TodoItem, normalize_label
from .errors import InvalidDurationError, InvalidTransition, TimerError
from .task_timer import (
    POMODORO_DURATION_S,
    TaskTimer,
    TimerState,
    create_timer,
)
from .time_format import format_remaining

__all__ = [
    "DialBox",
    "DialSpec",
    "InvalidDurationError",
    "InvalidTransition",
    "POMODORO_DURATION_S",
    "TaskTimer",
    "TimerError",
    "TimerState",
    "TodoId",
    "TodoItem",
    "create_timer",
    "dial_box",
    "format_remaining",
    "normalize_label",
]
