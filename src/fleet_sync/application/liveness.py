"""Online/offline classification of telemetry boards from their last heartbeat."""

from __future__ import annotations

import logging
import math
from datetime import UTC, datetime

from fleet_sync.domain.models.board_liveness import BoardLiveness

logger = logging.getLogger(__name__)

CLOCK_SKEW_TOLERANCE_SECONDS = 5.0

NEVER_LABEL = "Never"
INVALID_LABEL = "Invalid timestamp"
JUST_NOW_LABEL = "Just now"


class InvalidTimestampError(ValueError):
    """Raised when a last-seen value cannot be parsed."""


def parse_last_seen(value: str | datetime | None) -> datetime | None:
    """Parse a last-seen value into an aware datetime.

    Returns None when there is no value. Naive timestamps are taken as local
    time, as the board server writes them.

    Raises:
        InvalidTimestampError: If the value is present but not a timestamp.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidTimestampError(f"Invalid timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


class LivenessClassifier:
    """Classifies boards as online when their heartbeat is fresh.

    A board is online when ``-tolerance <= now - last_seen < window``. A
    heartbeat slightly in the future counts as "just now"; further in the
    future it is reported as clock skew and the board is offline.
    """

    def __init__(
        self,
        window_seconds: float,
        skew_tolerance_seconds: float = CLOCK_SKEW_TOLERANCE_SECONDS,
    ) -> None:
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.window_seconds = window_seconds
        self.skew_tolerance_seconds = skew_tolerance_seconds

    def classify(
        self,
        device_id: str,
        last_seen: str | datetime | None,
        now: datetime | None = None,
    ) -> BoardLiveness:
        """Classify one board at ``now`` (defaults to the current time)."""
        now = now or datetime.now(UTC)
        try:
            seen_at = parse_last_seen(last_seen)
        except InvalidTimestampError:
            logger.warning(f"Invalid last_seen for board {device_id}: {last_seen!r}")
            return BoardLiveness(device_id, None, online=False, label=INVALID_LABEL)
        if seen_at is None:
            return BoardLiveness(device_id, None, online=False, label=NEVER_LABEL)

        delta = (now - seen_at).total_seconds()
        if delta < -self.skew_tolerance_seconds:
            label = f"Clock skew: {seen_at.astimezone().strftime('%H:%M:%S')}"
            return BoardLiveness(device_id, seen_at, online=False, label=label, clock_skew=True)

        online = delta < self.window_seconds
        return BoardLiveness(device_id, seen_at, online=online, label=relative_label(delta))

    def is_online(self, last_seen: str | datetime | None, now: datetime | None = None) -> bool:
        return self.classify("", last_seen, now).online


def relative_label(delta_seconds: float) -> str:
    """Human-relative age of a heartbeat that is not beyond the skew tolerance."""
    if delta_seconds < 0:
        return JUST_NOW_LABEL
    seconds = math.floor(delta_seconds)
    if seconds < 60:
        return f"{seconds}s ago"
    minutes = seconds // 60
    if minutes < 60:
        return f"{minutes}m ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours}h ago"
    return f"{hours // 24}d ago"
