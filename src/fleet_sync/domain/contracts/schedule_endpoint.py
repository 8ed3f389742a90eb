"""Protocol for bus schedule persistence."""

from typing import Protocol

from fleet_sync.domain.models.api_result import ApiResult
from fleet_sync.domain.models.trip import BusSchedule


class ScheduleEndpointProtocol(Protocol):
    """Load and save bus schedules and push them to the boards."""

    async def load(self, bus_id: str) -> ApiResult:
        """Fetch a schedule; success carries a BusSchedule or None."""
        ...

    async def save(self, schedule: BusSchedule) -> ApiResult:
        """Persist a schedule; success carries the saved BusSchedule or None."""
        ...

    async def sync_power_config(self, bus_id: str) -> ApiResult:
        """Push the schedule's wake window to the boards; carries a PowerSyncWindow."""
        ...
