"""Repeating tick source built on Tk ``after``/``after_cancel``.

Each countdown asks for a repeating callback and gets a token back. The
scheduler re-arms the Tk timer after every call until the token is canceled,
so at most one Tk ``after`` id is outstanding per token.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

ScheduleFn = Callable[[int, Callable[[], None]], str]
CancelFn = Callable[[str], None]


@dataclass
class TickHandle:
    """Bookkeeping for one repeating callback.

    Attributes:
        token: Key handed back to the caller.
        interval_ms: Delay between invocations.
        callback: Zero-argument function to run.
        after_id: Current Tk ``after`` id, replaced on every re-arm.
    """
    token: int
    interval_ms: int
    callback: Callable[[], None]
    after_id: Optional[str] = None


class TickScheduler:
    """Manage repeating timers using a UI scheduler (for example Tk)."""

    def __init__(self, schedule: ScheduleFn, cancel: CancelFn) -> None:
        """Store schedule/cancel functions and initialize handle registry.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            cancel: Function compatible with ``after_cancel(after_id)``.
        """
        self._log = logging.getLogger(__name__)
        self._schedule = schedule
        self._cancel = cancel
        self._handles: Dict[int, TickHandle] = {}
        self._tokens = itertools.count(1)

    def every(self, interval_s: int, callback: Callable[[], None]) -> int:
        """Run ``callback`` every ``interval_s`` seconds until canceled."""
        interval_ms = max(1, int(interval_s)) * 1000
        handle = TickHandle(token=next(self._tokens), interval_ms=interval_ms, callback=callback)
        self._handles[handle.token] = handle
        self._arm(handle)
        return handle.token

    def cancel(self, token: Optional[int]) -> None:
        """Cancel a repeating callback; unknown tokens are ignored."""
        if token is None:
            return
        handle = self._handles.pop(token, None)
        if not handle or handle.after_id is None:
            return
        try:
            self._cancel(handle.after_id)
        except Exception:
            # Tk raises once the owning widget is destroyed.
            self._log.debug("after_cancel failed for token %s", token, exc_info=True)

    def cancel_all(self) -> None:
        for token in list(self._handles.keys()):
            self.cancel(token)

    def is_active(self, token: int) -> bool:
        return token in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    # ------------------------------------------------------------------
    def _arm(self, handle: TickHandle) -> None:
        handle.after_id = self._schedule(handle.interval_ms, lambda: self._fire(handle.token))

    def _fire(self, token: int) -> None:
        handle = self._handles.get(token)
        if handle is None:
            return
        handle.after_id = None
        try:
            handle.callback()
        finally:
            # Re-arm even when the callback raised, unless it canceled itself.
            if self._handles.get(token) is handle:
                self._arm(handle)


__all__ = ["TickHandle", "TickScheduler"]
