"""Recent completed trips from the server's passenger trip analysis."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from fleet_sync.application.query_state import ALL
from fleet_sync.domain.models.trip import RecentTrip

logger = logging.getLogger(__name__)

RECENT_TRIP_DAYS = 7


def recent_trips(
    passenger_trips: list[dict[str, Any]],
    bus_id: str = ALL,
    now: datetime | None = None,
    days: int = RECENT_TRIP_DAYS,
) -> list[RecentTrip]:
    """Trips that started within ``days`` of ``now``, newest first.

    Entries without a parsable start time are skipped.
    """
    now = now or datetime.now(UTC)
    cutoff = now - timedelta(days=days)

    trips: list[RecentTrip] = []
    for entry in passenger_trips:
        if not entry.get("firstEntry"):
            continue
        try:
            trip = RecentTrip(
                trip_id=entry.get("_id") or "UNKNOWN",
                bus_id=entry.get("bus_id") or "UNKNOWN",
                route_name=entry.get("route_name") or "Unknown Route",
                start_time=entry["firstEntry"],
                end_time=entry.get("lastEntry"),
                total_passengers=entry.get("count") or 0,
            )
        except ValidationError as e:
            logger.error(f"Error parsing trip date: {e}")
            continue
        start = trip.start_time if trip.start_time.tzinfo else trip.start_time.astimezone()
        if start < cutoff:
            continue
        if bus_id != ALL and trip.bus_id != bus_id:
            continue
        trips.append(trip)

    trips.sort(key=lambda trip: trip.start_time.timestamp(), reverse=True)
    return trips
