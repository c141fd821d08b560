from __future__ import annotations
from typing import Callable, Dict, Hashable, Optional, Protocol

TickToken = Hashable


# ---- Ports (Hexagonal boundaries) ----
class SchedulerPort(Protocol):
    """Repeating callback source provided by the host event loop.

    ``every`` runs ``callback`` after ``interval_s`` whole seconds and keeps
    re-arming it until the returned token is passed to ``cancel``.
    """

    def every(self, interval_s: int, callback: Callable[[], None]) -> TickToken: ...
    def cancel(self, token: Optional[TickToken]) -> None: ...


class StoragePort(Protocol):
    """Persistence for user settings."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Dict: ...
