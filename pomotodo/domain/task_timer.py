"""Countdown state for a single to-do item.

``TaskTimer`` tracks remaining time and exposes the values a rendering layer
needs (progress fraction, ``MM:SS`` readout, state). It knows nothing about
widgets; ticks arrive through a :class:`~pomotodo.domain.ports.SchedulerPort`
owned by the host event loop.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from .errors import InvalidDurationError, InvalidTransition
from .ports import SchedulerPort, TickToken
from .time_format import format_remaining

POMODORO_DURATION_S = 25 * 60
TICK_INTERVAL_S = 1

TimerCallback = Callable[["TaskTimer"], None]


class TimerState(str, Enum):
    """Lifecycle states of a countdown."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class TaskTimer:
    """Per-item countdown with start/pause/reset and a completion callback.

    Args:
        duration_s: Countdown length in whole seconds; must be positive.
        scheduler: Repeating tick source (Tk ``after`` wrapper in the app).
        on_tick: Redraw request, called after every state or value change.
        on_completed: Called exactly once per run that reaches zero.
    """

    def __init__(
        self,
        duration_s: int,
        scheduler: SchedulerPort,
        *,
        on_tick: Optional[TimerCallback] = None,
        on_completed: Optional[TimerCallback] = None,
    ) -> None:
        if isinstance(duration_s, bool) or not isinstance(duration_s, int) or duration_s <= 0:
            raise InvalidDurationError(duration_s)
        self._log = logging.getLogger(__name__)
        self._scheduler = scheduler
        self.duration_s = duration_s
        self.remaining_s = duration_s
        self.state = TimerState.IDLE
        self.on_tick = on_tick
        self.on_completed = on_completed
        self._token: Optional[TickToken] = None
        self._generation = 0
        self._disposed = False

    def __repr__(self) -> str:
        return (
            f"TaskTimer(duration_s={self.duration_s}, remaining_s={self.remaining_s}, "
            f"state={self.state.value})"
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self.state is TimerState.RUNNING

    @property
    def disposed(self) -> bool:
        return self._disposed

    def start(self, *, strict: bool = False) -> bool:
        """Begin or resume counting down.

        Starting a completed (zero-remaining) timer, a running timer, or a
        disposed timer is ignored. With ``strict=True`` those cases raise
        :class:`InvalidTransition` instead.
        """
        reason = self._start_rejection()
        if reason:
            if strict:
                raise InvalidTransition("start", self.state.value, reason)
            self._log.debug("Ignoring start: %s", reason)
            return False

        self._cancel_pending()
        self._generation += 1
        generation = self._generation
        self._token = self._scheduler.every(
            TICK_INTERVAL_S, lambda: self._on_scheduled(generation)
        )
        self.state = TimerState.RUNNING
        self._log.debug("Timer started with %ss remaining", self.remaining_s)
        self._notify_tick()
        return True

    def pause(self) -> bool:
        if self.state is not TimerState.RUNNING:
            return False
        self._cancel_pending()
        self.state = TimerState.PAUSED
        self._log.debug("Timer paused at %ss", self.remaining_s)
        self._notify_tick()
        return True

    def toggle(self) -> bool:
        """Pause when running, start otherwise. Returns True if state changed."""
        if self.is_running:
            return self.pause()
        return self.start()

    def reset(self) -> None:
        self._cancel_pending()
        self.remaining_s = self.duration_s
        self.state = TimerState.IDLE
        self._log.debug("Timer reset to %ss", self.duration_s)
        self._notify_tick()

    def tick(self) -> None:
        """Advance the countdown by one interval while running."""
        if self.state is not TimerState.RUNNING:
            return
        self.remaining_s = max(0, self.remaining_s - 1)
        if self.remaining_s == 0:
            self._cancel_pending()
            self.state = TimerState.COMPLETED
            self._log.debug("Timer completed")
            self._notify_tick()
            if self.on_completed:
                self.on_completed(self)
            return
        self._notify_tick()

    def dispose(self) -> None:
        """Cancel any pending tick and detach callbacks; the timer stays inert."""
        self._cancel_pending()
        if self.state is TimerState.RUNNING:
            self.state = TimerState.PAUSED
        self._disposed = True
        self.on_tick = None
        self.on_completed = None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def progress_fraction(self) -> float:
        return (self.duration_s - self.remaining_s) / self.duration_s

    def display_text(self) -> str:
        return format_remaining(self.remaining_s)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _start_rejection(self) -> str:
        if self._disposed:
            return "timer is disposed"
        if self.state is TimerState.RUNNING:
            return "timer is already running"
        if self.remaining_s <= 0 or self.state is TimerState.COMPLETED:
            return "timer has completed; reset it first"
        return ""

    def _on_scheduled(self, generation: int) -> None:
        # A handle from an earlier run may still fire once after cancel.
        if generation != self._generation or self._token is None:
            return
        self.tick()

    def _cancel_pending(self) -> None:
        token, self._token = self._token, None
        self._generation += 1
        if token is not None:
            self._scheduler.cancel(token)

    def _notify_tick(self) -> None:
        if self.on_tick:
            self.on_tick(self)


def create_timer(
    duration_s: int = POMODORO_DURATION_S,
    scheduler: Optional[SchedulerPort] = None,
    **kwargs,
) -> TaskTimer:
    """Build a timer; without a scheduler ticks must be driven by hand."""
    return TaskTimer(duration_s, scheduler or NullScheduler(), **kwargs)


class NullScheduler:
    """Scheduler that never fires; used when the caller drives ``tick`` itself."""

    def __init__(self) -> None:
        self._next = 0

    def every(self, interval_s: int, callback: Callable[[], None]) -> TickToken:
        self._next += 1
        return self._next

    def cancel(self, token: Optional[TickToken]) -> None:
        return None


__all__ = [
    "NullScheduler",
    "POMODORO_DURATION_S",
    "TICK_INTERVAL_S",
    "TaskTimer",
    "TimerState",
    "create_timer",
]
