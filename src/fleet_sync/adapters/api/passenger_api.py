"""Passenger log, unmatched events, trips and route distance."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fleet_sync.adapters.api.payloads import parse_records, total_count, unwrap_list
from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess
from fleet_sync.domain.models.fleet_record import FleetRecord
from fleet_sync.domain.models.passenger import Passenger, UnmatchedPassenger
from fleet_sync.domain.models.record_page import RecordPage
from fleet_sync.domain.models.trip import TripOption

logger = logging.getLogger(__name__)


class PagedRecordSource:
    """A server-paginated collection returning ``{<key>: [...], "total": n}``."""

    def __init__(
        self,
        transport: TransportProtocol,
        path: str,
        collection_key: str,
        model: type[FleetRecord],
    ) -> None:
        self.transport = transport
        self.path = path
        self.collection_key = collection_key
        self.model = model

    async def fetch_page(self, params: Mapping[str, Any]) -> ApiResult:
        result = await self.transport.request("GET", self.path, params=params)
        if isinstance(result, ApiFailure):
            return result
        items = parse_records(self.model, unwrap_list(result.data, self.collection_key))
        page = RecordPage(items=items, total=total_count(result.data, len(items)))
        return ApiSuccess(status=result.status, data=page)


def passenger_source(transport: TransportProtocol) -> PagedRecordSource:
    return PagedRecordSource(transport, "/api/passengers", "passengers", Passenger)


def unmatched_source(transport: TransportProtocol) -> PagedRecordSource:
    return PagedRecordSource(transport, "/api/unmatched", "unmatched", UnmatchedPassenger)


class TripClient:
    """Trip lookups used for filters, trip management and the passenger summary."""

    def __init__(self, transport: TransportProtocol) -> None:
        self.transport = transport

    async def trip_options(self, params: Mapping[str, Any]) -> ApiResult:
        """Trips selectable for a date (and bus); success carries TripOption records."""
        result = await self.transport.request("GET", "/api/trips", params=params)
        if isinstance(result, ApiFailure):
            return result
        options = parse_records(TripOption, unwrap_list(result.data, "trips"))
        return ApiSuccess(status=result.status, data=options)

    async def scheduled_trips(self, bus_id: str | None = None) -> ApiResult:
        result = await self.transport.request(
            "GET", "/api/scheduled-trips", params={"bus_id": bus_id}
        )
        if isinstance(result, ApiFailure):
            return result
        return ApiSuccess(status=result.status, data=unwrap_list(result.data, "trips"))

    async def analyze_trips(self) -> ApiResult:
        """Raw passenger trip aggregates, one per trip."""
        result = await self.transport.request("GET", "/api/trips/analyze")
        if isinstance(result, ApiFailure):
            return result
        return ApiSuccess(status=result.status, data=unwrap_list(result.data, "passengerTrips"))

    async def route_distance(self, params: Mapping[str, Any]) -> ApiResult:
        """Success carries the trip's distance in km, 0.0 when the server has none."""
        result = await self.transport.request("GET", "/api/route-distance", params=params)
        if isinstance(result, ApiFailure):
            return result
        distance = 0.0
        if isinstance(result.data, dict) and result.data.get("success"):
            try:
                distance = float(result.data.get("distance_km") or 0.0)
            except (TypeError, ValueError):
                logger.warning(f"Unexpected distance_km: {result.data.get('distance_km')!r}")
        return ApiSuccess(status=result.status, data=distance)
