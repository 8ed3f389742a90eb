"""Bus schedule endpoints."""

from __future__ import annotations

from fleet_sync.adapters.api.payloads import parse_record
from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess
from fleet_sync.domain.models.trip import BusSchedule, PowerSyncWindow

SCHEDULE_PATH = "/api/bus-schedule"
POWER_SYNC_PATH = "/api/power-config/sync"


class ScheduleClient:
    """Loads and saves bus schedules and syncs the boards' power window."""

    def __init__(self, transport: TransportProtocol) -> None:
        self.transport = transport

    async def load(self, bus_id: str) -> ApiResult:
        result = await self.transport.request("GET", f"{SCHEDULE_PATH}/{bus_id}")
        if isinstance(result, ApiFailure):
            return result
        return ApiSuccess(status=result.status, data=parse_record(BusSchedule, result.data))

    async def save(self, schedule: BusSchedule) -> ApiResult:
        """PUT an existing schedule, POST a new one."""
        payload = schedule.model_dump(by_alias=True, exclude_none=True)
        if schedule.is_persisted:
            result = await self.transport.request(
                "PUT", f"{SCHEDULE_PATH}/{schedule.bus_id}", json=payload
            )
        else:
            result = await self.transport.request("POST", SCHEDULE_PATH, json=payload)
        if isinstance(result, ApiFailure):
            return result
        return ApiSuccess(status=result.status, data=parse_record(BusSchedule, result.data))

    async def sync_power_config(self, bus_id: str) -> ApiResult:
        result = await self.transport.request("PUT", POWER_SYNC_PATH, json={"bus_id": bus_id})
        if isinstance(result, ApiFailure):
            return result
        window = parse_record(PowerSyncWindow, result.data) or PowerSyncWindow()
        return ApiSuccess(status=result.status, data=window)
