"""
Preference store for values the form remembers between runs.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

PRIVATE = "private"
READ_LATER = "readLater"


class PreferenceStore:
    """
    Small JSON-backed key-value store scoped to this command.

    Values are loaded when the store is created and written back on every
    change.

    Example:
        >>> store = PreferenceStore(Path("~/.config/bookmark-pinner/preferences.json"))
        >>> store.set("private", True)
        >>> store.get("private", False)
        True
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._values: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences file {self.path}")
            return {}
        return data

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._values, f, indent=2, sort_keys=True)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._values.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self._values.get(key, default)
        return value if isinstance(value, bool) else default

    def set(self, key: str, value: Any) -> None:
        """Store a value and persist it if it changed."""
        if self._values.get(key) == value and key in self._values:
            return
        self._values[key] = value
        self._save()
        logger.debug(f"Saved preference {key}={value!r}")
