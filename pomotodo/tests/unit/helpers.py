from __future__ import annotations

import itertools
from typing import Callable, Dict, List, Optional, Tuple


class ManualScheduler:
    """SchedulerPort double; ticks fire only when the test says so."""

    def __init__(self) -> None:
        self._tokens = itertools.count(1)
        self.active: Dict[int, Callable[[], None]] = {}
        self.callbacks: Dict[int, Callable[[], None]] = {}
        self.intervals: Dict[int, int] = {}
        self.canceled: List[int] = []

    def every(self, interval_s: int, callback: Callable[[], None]) -> int:
        token = next(self._tokens)
        self.active[token] = callback
        self.callbacks[token] = callback
        self.intervals[token] = interval_s
        return token

    def cancel(self, token: Optional[int]) -> None:
        if token is None:
            return
        if self.active.pop(token, None) is not None:
            self.canceled.append(token)

    def fire(self, times: int = 1) -> None:
        """Invoke every active callback ``times`` times."""
        for _ in range(times):
            for callback in list(self.active.values()):
                callback()

    def fire_token(self, token: int) -> None:
        """Invoke a callback even if it was canceled (late Tk timer)."""
        self.callbacks[token]()

    @property
    def pending(self) -> int:
        return len(self.active)


class FakeTk:
    """Stands in for ``after``/``after_cancel`` of a Tk widget."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self.queue: Dict[str, Tuple[int, Callable[[], None]]] = {}
        self.canceled: List[str] = []

    def after(self, delay_ms: int, callback: Callable[[], None]) -> str:
        after_id = f"after#{next(self._ids)}"
        self.queue[after_id] = (delay_ms, callback)
        return after_id

    def after_cancel(self, after_id: str) -> None:
        self.canceled.append(after_id)
        self.queue.pop(after_id, None)

    def run_pending(self) -> int:
        """Run callbacks queued so far (not ones they enqueue). Returns count."""
        batch = list(self.queue.items())
        self.queue.clear()
        for _after_id, (_delay, callback) in batch:
            callback()
        return len(batch)


__all__ = ["FakeTk", "ManualScheduler"]
