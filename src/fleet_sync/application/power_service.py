"""Power configuration rules for the ESP32 power management view."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.domain.models.board_liveness import BoardLiveness
from fleet_sync.domain.models.power_config import BusPowerConfig


def validate_new_bus_id(bus_id: str, existing_ids: Iterable[str]) -> str:
    """Return the trimmed bus id.

    Raises:
        ValueError: If the id is blank or already configured.
    """
    bus_id = bus_id.strip()
    if not bus_id:
        raise ValueError("Bus ID is required")
    if bus_id in set(existing_ids):
        raise ValueError("Bus ID already exists")
    return bus_id


def new_power_config_payload(bus_id: str) -> dict[str, Any]:
    """Default configuration posted when a bus is added."""
    return {
        "bus_id": bus_id,
        "bus_name": bus_id,
        "deep_sleep_enabled": True,
        "trip_start": "00:00",
        "trip_end": "23:59",
        "maintenance_interval": 5,
        "maintenance_duration": 3,
    }


def classify_boards(
    config: BusPowerConfig,
    classifier: LivenessClassifier,
    now: datetime | None = None,
) -> list[BoardLiveness]:
    return [classifier.classify(board.device_id, board.last_seen, now) for board in config.boards]


def online_board_count(
    config: BusPowerConfig,
    classifier: LivenessClassifier,
    now: datetime | None = None,
) -> tuple[int, int]:
    """Online and total board counts for a bus."""
    boards = classify_boards(config, classifier, now)
    return sum(1 for board in boards if board.online), len(boards)


def sync_message(config: BusPowerConfig, classifier: LivenessClassifier) -> str:
    online, total = online_board_count(config, classifier)
    return f"Config applied. {online}/{total} boards will sync within 30s."
