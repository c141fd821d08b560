from __future__ import annotations
import json, os, tempfile
from typing import Any, Dict

from pomotodo.domain.ports import StoragePort
from pomotodo.viewmodels.settings_vm import default_settings_payload


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings (JSON)."""

    SETTINGS_FILE = "user_settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, self.SETTINGS_FILE)

    def save_user_settings(self, payload: Dict[str, Any]) -> None:
        os.makedirs(self.root, exist_ok=True)
        # write to a temp file in the same dir, then swap it in
        fd, tmp_path = tempfile.mkstemp(prefix="user_settings_", suffix=".tmp", dir=self.root)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, self.settings_path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def load_user_settings(self) -> Dict[str, Any]:
        if not os.path.exists(self.settings_path):
            return default_settings_payload()
        with open(self.settings_path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        if not isinstance(payload, dict):
            raise ValueError(f"{self.SETTINGS_FILE} must contain a JSON object.")
        return payload
