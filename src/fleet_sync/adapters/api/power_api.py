"""Power configuration and device provisioning endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fleet_sync.adapters.api.collection_endpoint import UpsertCollectionEndpoint
from fleet_sync.adapters.api.endpoints import POWER_CONFIGS
from fleet_sync.adapters.api.payloads import parse_records
from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess
from fleet_sync.domain.models.fleet_record import FleetRecord
from fleet_sync.domain.models.power_config import BusPowerConfig, DeviceNetworkConfig

logger = logging.getLogger(__name__)

DEVICE_CONFIG_ALL_PATH = "/api/device-config/all"
DEVICE_CONFIG_UPDATE_PATH = "/api/device-config/update"
GLOBAL_DEVICE_CONFIG = "default"


class PowerConfigEndpoint(UpsertCollectionEndpoint):
    """Per-bus power configuration.

    The listing comes keyed by bus id, as a list, or wrapped as
    ``{"success": ..., "buses": [...]}``; all are normalized to records.
    """

    def __init__(self, transport: TransportProtocol) -> None:
        super().__init__(transport, POWER_CONFIGS)

    def parse_list(self, data: Any) -> list[FleetRecord]:
        if isinstance(data, dict) and "buses" not in data:
            raw = [
                {"bus_id": bus_id, **config}
                for bus_id, config in data.items()
                if isinstance(config, dict)
            ]
            return parse_records(BusPowerConfig, raw)
        return super().parse_list(data)


class DeviceConfigClient:
    """WiFi and server URL provisioning, globally (``default``) or per bus."""

    def __init__(self, transport: TransportProtocol) -> None:
        self.transport = transport

    async def list_configs(self) -> ApiResult:
        """Success carries a dict of DeviceNetworkConfig keyed by bus id or ``default``."""
        result = await self.transport.request("GET", DEVICE_CONFIG_ALL_PATH)
        if isinstance(result, ApiFailure):
            return result
        raw = result.data.get("configs") if isinstance(result.data, dict) else None
        configs = {
            key: DeviceNetworkConfig.model_validate(value)
            for key, value in (raw or {}).items()
            if isinstance(value, dict)
        }
        return ApiSuccess(status=result.status, data=configs)

    async def update_config(self, bus_id: str, config: DeviceNetworkConfig) -> ApiResult:
        payload = {"bus_id": bus_id, **config.model_dump()}
        return await self.transport.request("POST", DEVICE_CONFIG_UPDATE_PATH, json=payload)

    async def update_global(self, config: DeviceNetworkConfig) -> ApiResult:
        return await self.update_config(GLOBAL_DEVICE_CONFIG, config)

    async def revert_to_global(self, bus_id: str) -> ApiResult:
        """Clear a bus's override so its boards use the global settings."""
        if bus_id == GLOBAL_DEVICE_CONFIG:
            raise ValueError("The global configuration cannot be reverted")
        logger.info(f"Reverting {bus_id} network settings to global")
        return await self.update_config(bus_id, DeviceNetworkConfig())
