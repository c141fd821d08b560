"""Root logger setup driven by the saved ``debug_logging`` setting.

``POMOTODO_LOG_LEVEL`` (a level name or number) pins the level and a truthy
``POMOTODO_DEBUG`` forces DEBUG; either one wins over the setting.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"
ENV_LEVEL = "POMOTODO_LOG_LEVEL"
ENV_DEBUG = "POMOTODO_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})

Environ = Mapping[str, str]


def env_level(environ: Optional[Environ] = None) -> Optional[int]:
    """Level forced by the environment, or None when the setting decides."""
    env = os.environ if environ is None else environ
    raw = (env.get(ENV_LEVEL) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        level = logging.getLevelName(raw.upper())
        if isinstance(level, int):
            return level
    if (env.get(ENV_DEBUG) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def level_for(debug_logging: bool, environ: Optional[Environ] = None) -> int:
    forced = env_level(environ)
    if forced is not None:
        return forced
    return logging.DEBUG if debug_logging else logging.INFO


def debug_forced(environ: Optional[Environ] = None) -> bool:
    """True when the environment asks for DEBUG (seeds the settings checkbox)."""
    forced = env_level(environ)
    return forced is not None and forced <= logging.DEBUG


def setup_logging(debug_logging: bool = False, environ: Optional[Environ] = None) -> int:
    """Install the console handler once and set the root level.

    Called at startup and again whenever settings are loaded or saved.
    Returns the level now in effect.
    """
    level = level_for(debug_logging, environ)
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
    return level


__all__ = ["debug_forced", "env_level", "level_for", "setup_logging"]
