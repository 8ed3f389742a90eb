"""Season-ticket statistics."""

from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess

STATS_PATH = "/api/season-ticket/stats"


class MemberStatsClient:
    def __init__(self, transport: TransportProtocol) -> None:
        self.transport = transport

    async def stats(self) -> ApiResult:
        """Success carries the stats dict, without the ``success`` flag."""
        result = await self.transport.request("GET", STATS_PATH)
        if isinstance(result, ApiFailure):
            return result
        data = result.data if isinstance(result.data, dict) else {}
        stats = data.get("stats", data)
        if isinstance(stats, dict):
            stats = {k: v for k, v in stats.items() if k != "success"}
        return ApiSuccess(status=result.status, data=stats)
