"""Preferences persisted in a small JSON file."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

SELECTED_BUS_PASSENGERS = "selectedBusPassengers"
SELECTED_BUS_TRIP_MANAGEMENT = "selectedBusTripMgmt"
SELECTED_BUS_POWER = "selectedBus"


class JsonPreferenceStore:
    """Key/value preferences kept in memory and written through to a JSON file.

    A missing, unreadable or corrupt file yields empty preferences.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, Any] = self._load()

    def _load(self) -> dict[str, Any]:
        if self.path is None or not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences file {self.path}: not a JSON object")
            return {}
        return data

    def _save(self) -> None:
        if self.path is None:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write preferences file {self.path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        self._save()

    def remove(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._save()
