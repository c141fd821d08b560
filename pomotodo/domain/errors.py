"""Domain-level error types for the countdown timer.

Precondition violations stay local: a rejected transition is normally a
silent no-op, construction errors fail fast.
"""
from __future__ import annotations


class TimerError(Exception):
    """Base class for countdown timer errors."""


class InvalidDurationError(TimerError, ValueError):
    """Raised when a timer is constructed with a non-positive duration."""

    def __init__(self, value: object):
        super().__init__(f"Timer duration must be a positive integer, got {value!r}.")
        self.value = value


class InvalidTransition(TimerError):
    """Raised by strict callers when an operation is not valid in the current state."""

    def __init__(self, operation: str, state: str, message: str = ""):
        text = message or f"Cannot {operation} a timer in state '{state}'."
        super().__init__(text)
        self.operation = operation
        self.state = state


__all__ = ["InvalidDurationError", "InvalidTransition", "TimerError"]
