"""Power management domain models for ESP32 boards."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fleet_sync.domain.models.fleet_record import FleetRecord, drop_nulls_with_defaults


class Board(BaseModel):
    """An ESP32 board installed on a bus."""

    model_config = ConfigDict(extra="allow")

    device_id: str
    location: str = "Unknown"
    ip_address: str = "No IP"
    # Kept as the raw string: it may be missing or malformed.
    last_seen: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_legacy_formats(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"device_id": data}
        if isinstance(data, dict) and not data.get("device_id"):
            data = dict(data)
            data["device_id"] = data.get("board_id") or "Unknown"
        return drop_nulls_with_defaults(cls, data)


class BusPowerConfig(FleetRecord):
    """Deep-sleep and maintenance configuration for the boards of one bus."""

    id_field: ClassVar[str] = "bus_id"

    bus_id: str
    bus_name: str | None = None
    deep_sleep_enabled: bool = True
    trip_start: str = "00:00"
    trip_end: str = "23:59"
    maintenance_interval: int = 5
    maintenance_duration: int = 3
    boards: list[Board] = Field(default_factory=list)
    last_updated: str | None = None

    def form_values(self) -> dict[str, Any]:
        """Editable fields as an edit form starts out."""
        return {
            "bus_name": self.bus_name or self.bus_id,
            "deep_sleep_enabled": self.deep_sleep_enabled,
            "maintenance_interval": self.maintenance_interval,
            "maintenance_duration": self.maintenance_duration,
        }


class DeviceNetworkConfig(BaseModel):
    """WiFi and server URL provisioned to boards, globally or per bus."""

    model_config = ConfigDict(extra="allow")

    wifi_ssid: str = ""
    wifi_password: str = ""
    server_url: str = ""

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_defaults(cls, data: Any) -> Any:
        return drop_nulls_with_defaults(cls, data)

    @property
    def is_empty(self) -> bool:
        return not (self.wifi_ssid or self.wifi_password or self.server_url)
