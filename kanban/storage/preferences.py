"""
preferences.py - Durable preference store
Single responsibility: persist small string preferences across restarts.
"""
import json
import logging
import os
from typing import Protocol

from kanban.config import PREFS_PATH

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class JsonPreferenceStore:
    """Key-value preferences kept in a single JSON object file."""

    def __init__(self, path: str = PREFS_PATH):
        self.path = path

    # -----------------------------------------------------------------------
    # File I/O
    # -----------------------------------------------------------------------

    def _read(self) -> dict:
        """Return the stored object; missing or broken files read as empty."""
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError):
            logger.warning(f"Unreadable preference file: {self.path}", exc_info=True)
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Preference file is not an object: {self.path}")
            return {}
        return data

    def _write(self, data: dict) -> None:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

    # -----------------------------------------------------------------------
    # Public API
    # -----------------------------------------------------------------------

    def get(self, key: str) -> str | None:
        value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)
        logger.debug(f"Preference saved: {key}={value}")
