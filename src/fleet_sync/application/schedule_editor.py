"""Editing a bus schedule and pushing it to the bus's boards."""

from __future__ import annotations

import logging

from fleet_sync.domain.contracts.schedule_endpoint import ScheduleEndpointProtocol
from fleet_sync.domain.models.api_result import ApiFailure
from fleet_sync.domain.models.mutation_outcome import MutationOutcome
from fleet_sync.domain.models.trip import BusSchedule, PowerSyncWindow

logger = logging.getLogger(__name__)


class ScheduleEditor:
    """Loads, saves and syncs the schedule of the selected bus."""

    def __init__(self, endpoint: ScheduleEndpointProtocol) -> None:
        self.endpoint = endpoint
        self.schedule: BusSchedule | None = None

    async def load(self, bus_id: str) -> MutationOutcome:
        result = await self.endpoint.load(bus_id)
        if isinstance(result, ApiFailure):
            logger.error(f"Error fetching schedule for {bus_id}: {result.kind} {result.status}")
            return MutationOutcome(False, result.user_message("Failed to fetch schedule"))
        self.schedule = result.data or BusSchedule.empty(bus_id)
        return MutationOutcome(True, f"Loaded schedule for {bus_id}", self.schedule)

    async def save(self, schedule: BusSchedule | None = None) -> MutationOutcome:
        """Save the schedule, then sync the boards' wake window."""
        schedule = schedule or self.schedule
        if schedule is None:
            raise ValueError("No schedule loaded")

        saved = await self.endpoint.save(schedule)
        if isinstance(saved, ApiFailure):
            return MutationOutcome(False, saved.user_message("Failed to save schedule"))
        self.schedule = saved.data or schedule

        synced = await self.endpoint.sync_power_config(schedule.bus_id)
        if isinstance(synced, ApiFailure):
            logger.error(f"Power sync failed for {schedule.bus_id}: {synced.kind}")
            message = synced.user_message("Power sync failed")
            return MutationOutcome(False, f"Schedule saved, but {message}", self.schedule)

        window: PowerSyncWindow = synced.data
        return MutationOutcome(
            True,
            f"Schedule saved and synced! ESP32 will wake at {window.trip_start} "
            f"and sleep at {window.trip_end}",
            self.schedule,
        )

    async def remove_trip(self, index: int) -> MutationOutcome:
        """Remove one trip and save; the local schedule changes only if the save succeeds."""
        if self.schedule is None:
            raise ValueError("No schedule loaded")
        updated = self.schedule.without_trip(index)

        saved = await self.endpoint.save(updated)
        if isinstance(saved, ApiFailure):
            return MutationOutcome(False, saved.user_message("Failed to remove trip"))
        synced = await self.endpoint.sync_power_config(updated.bus_id)
        self.schedule = saved.data or updated
        if isinstance(synced, ApiFailure):
            message = synced.user_message("Trip removed, but power sync failed")
            return MutationOutcome(False, message, self.schedule)
        return MutationOutcome(True, "Trip removed and saved!", self.schedule)
