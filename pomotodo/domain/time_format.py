"""Readout formatting for countdown values."""

from typing import Any


def format_remaining(seconds: Any) -> str:
    """Format whole seconds as zero-padded ``MM:SS``.

    Minutes are padded to two digits and widen beyond that (``100:00``).
    Negative or unparsable values render as ``00:00``.
    """
    try:
        total = int(seconds)
    except (TypeError, ValueError):
        total = 0
    total = max(0, total)
    minutes, secs = divmod(total, 60)
    return f"{minutes:02d}:{secs:02d}"


__all__ = ["format_remaining"]
