"""Tests for power configuration rules."""

from datetime import UTC, datetime

import pytest

from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.application.power_service import (
    classify_boards,
    new_power_config_payload,
    online_board_count,
    sync_message,
    validate_new_bus_id,
)
from fleet_sync.domain.models.power_config import BusPowerConfig

NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def config() -> BusPowerConfig:
    """A bus with boards in legacy and current formats."""
    return BusPowerConfig.model_validate(
        {
            "bus_id": "BUS001",
            "boards": [
                {"device_id": "esp-entry", "last_seen": "2025-01-15T11:59:30Z"},
                {"board_id": "esp-exit", "last_seen": "2025-01-15T11:50:00Z"},
                "esp-legacy",
            ],
        }
    )


def test_validate_new_bus_id() -> None:
    """Given blank or duplicate ids, when validating, then the right error is raised."""
    assert validate_new_bus_id("  BUS009 ", ["BUS001"]) == "BUS009"
    with pytest.raises(ValueError, match="Bus ID is required"):
        validate_new_bus_id("   ", [])
    with pytest.raises(ValueError, match="Bus ID already exists"):
        validate_new_bus_id("BUS001", ["BUS001"])


def test_new_bus_payload_defaults() -> None:
    """Given a new bus, when building the payload, then defaults are filled in."""
    payload = new_power_config_payload("BUS009")

    assert payload["bus_id"] == payload["bus_name"] == "BUS009"
    assert payload["deep_sleep_enabled"] is True


def test_legacy_board_formats_are_normalized(config: BusPowerConfig) -> None:
    """Given string and board_id boards, when parsed, then each has a device id."""
    assert [b.device_id for b in config.boards] == ["esp-entry", "esp-exit", "esp-legacy"]


def test_online_board_count(config: BusPowerConfig) -> None:
    """Given one fresh board, when counting with the 90s window, then 1 of 3 is online."""
    classifier = LivenessClassifier(window_seconds=90)

    assert online_board_count(config, classifier, NOW) == (1, 3)
    labels = [b.label for b in classify_boards(config, classifier, NOW)]
    assert labels == ["30s ago", "10m ago", "Never"]


def test_sync_message_mentions_board_count(config: BusPowerConfig) -> None:
    """Given a bus with boards, when syncing, then the message states the counts."""
    message = sync_message(config, LivenessClassifier(window_seconds=90))

    assert message.startswith("Config applied. ")
    assert message.endswith("/3 boards will sync within 30s.")
