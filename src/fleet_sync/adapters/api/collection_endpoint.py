"""REST client for one collection of the domain API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fleet_sync.adapters.api.payloads import parse_record, parse_records, unwrap_list
from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess, FailureKind
from fleet_sync.domain.models.fleet_record import FleetRecord
from fleet_sync.domain.models.resource_endpoint import ResourceEndpoint

logger = logging.getLogger(__name__)


class RestCollectionEndpoint:
    """CRUD calls for a collection laid out as ``GET/POST path``, ``PUT/DELETE path/{id}``."""

    def __init__(self, transport: TransportProtocol, resource: ResourceEndpoint) -> None:
        self.transport = transport
        self.resource = resource

    @property
    def label(self) -> str:
        return self.resource.label

    @property
    def soft_delete(self) -> bool:
        return self.resource.soft_delete

    async def list_records(self, params: Mapping[str, Any] | None = None) -> ApiResult:
        result = await self.transport.request("GET", self.resource.path, params=params)
        if isinstance(result, ApiFailure):
            return result
        records = self.parse_list(result.data)
        logger.debug(f"Fetched {len(records)} {self.label}(s)")
        return ApiSuccess(status=result.status, data=records)

    def parse_list(self, data: Any) -> list[FleetRecord]:
        return parse_records(self.resource.model, unwrap_list(data, self.resource.collection_key))

    async def create_record(self, payload: Mapping[str, Any]) -> ApiResult:
        result = await self.transport.request("POST", self.resource.path, json=dict(payload))
        return self._with_item(result)

    async def update_record(self, record_id: str, fields: Mapping[str, Any]) -> ApiResult:
        result = await self.transport.request(
            "PUT", self.resource.item_path(record_id), json=dict(fields)
        )
        return self._with_item(result)

    async def set_active(self, record_id: str, is_active: bool) -> ApiResult:
        return await self.update_record(record_id, {"is_active": is_active})

    async def delete_record(self, record_id: str) -> ApiResult:
        result = await self.transport.request("DELETE", self.resource.item_path(record_id))
        return self._with_item(result)

    def _with_item(self, result: ApiResult) -> ApiResult:
        if isinstance(result, ApiFailure):
            return result
        record = parse_record(self.resource.model, result.data, self.resource.item_key)
        return ApiSuccess(status=result.status, data=record)


class UpsertCollectionEndpoint(RestCollectionEndpoint):
    """A collection that creates and updates with the same POST, keyed by id.

    Records of such collections have no status flag.
    """

    async def update_record(self, record_id: str, fields: Mapping[str, Any]) -> ApiResult:
        payload = {self.resource.model.id_field: record_id, **fields}
        return await self.create_record(payload)

    async def set_active(self, record_id: str, is_active: bool) -> ApiResult:
        return ApiFailure(
            kind=FailureKind.VALIDATION,
            message=f"{self.label.capitalize()}s cannot be deactivated",
        )
