"""Passenger log domain models."""

import math
from typing import Any, ClassVar

from pydantic import BaseModel, Field, model_validator

from fleet_sync.domain.models.fleet_record import FleetRecord, drop_nulls_with_defaults

# Kilometres covered by one fare stage when the server did not assign a stage.
KM_PER_STAGE = 3.5


class GeoPoint(BaseModel):
    """A recorded position, optionally with a resolved place name."""

    latitude: float | None = None
    longitude: float | None = None
    location_name: str | None = None

    def format(self) -> str:
        if self.latitude is None or self.longitude is None:
            return "N/A"
        return f"{self.latitude:.6f}, {self.longitude:.6f}"


class DistanceInfo(BaseModel):
    """Distance travelled between entry and exit."""

    distance_km: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def _nulls_as_defaults(cls, data: Any) -> Any:
        return drop_nulls_with_defaults(cls, data)


class Passenger(FleetRecord):
    """A matched passenger journey (entry and exit)."""

    id_field: ClassVar[str] = "id"

    id: str | None = Field(default=None, alias="_id")
    bus_id: str | None = None
    trip_id: str | None = None
    price: float = 0.0
    stage_number: int | None = None
    distance_info: DistanceInfo | None = None
    entry_location: GeoPoint | None = Field(default=None, alias="entryLocation")
    exit_location: GeoPoint | None = Field(default=None, alias="exitLocation")

    def resolved_stage_number(self) -> int:
        """Server-assigned stage, else derived from the travelled distance."""
        if self.stage_number:
            return self.stage_number
        distance = self.distance_info.distance_km if self.distance_info else 0.0
        return math.ceil(distance / KM_PER_STAGE) if distance > 0 else 0


class UnmatchedPassenger(FleetRecord):
    """An entry or exit event that could not be paired with its counterpart."""

    id_field: ClassVar[str] = "id"

    id: str | None = Field(default=None, alias="_id")
    bus_id: str | None = None
    trip_id: str | None = None
    type: str | None = None
    timestamp: str | None = None
    location: GeoPoint | None = None
