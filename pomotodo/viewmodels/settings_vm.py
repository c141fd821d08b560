from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Callable, Dict, Mapping, Optional

from ..utils.logging import debug_forced

MAX_POMODORO_MINUTES = 180


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    pomodoro_minutes: int = 25
    clock_size_px: int = 50


def _default_debug_logging() -> bool:
    return debug_forced()


class SettingsVM:
    """Keeps app settings UI state and validation, no I/O here."""

    def __init__(
        self,
        *,
        config: Optional[SettingsConfig] = None,
        on_save: Optional[Callable[[dict], None]] = None,
    ) -> None:
        self.config = config or SettingsConfig()
        self.on_save = on_save
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def pomodoro_minutes(self) -> int:
        return self.config.pomodoro_minutes

    @pomodoro_minutes.setter
    def pomodoro_minutes(self, value: int) -> None:
        self.config = replace(self.config, pomodoro_minutes=self._coerce_config_value("pomodoro_minutes", value))

    @property
    def clock_size_px(self) -> int:
        return self.config.clock_size_px

    @clock_size_px.setter
    def clock_size_px(self, value: int) -> None:
        self.config = replace(self.config, clock_size_px=self._coerce_config_value("clock_size_px", value))

    @property
    def duration_s(self) -> int:
        """Countdown length applied to newly added tasks."""
        return self.pomodoro_minutes * 60

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    def set_debug_logging(self, enabled: bool) -> None:
        self.debug_logging = self._coerce_bool(enabled)

    def cmd_save(self) -> None:
        if self.on_save:
            self.on_save(self.to_dict())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "pomodoro_minutes":
            return self._coerce_int(key, raw, minimum=1, maximum=MAX_POMODORO_MINUTES)
        if key == "clock_size_px":
            return self._coerce_int(key, raw, minimum=24, maximum=200)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, minimum: int, maximum: int) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not minimum <= coerced <= maximum:
            raise ValueError(f"{name} must be between {minimum} and {maximum}.")
        return coerced


def default_settings_payload() -> dict:
    """Return a fresh snapshot containing the default settings payload."""
    return SettingsVM().to_dict()
