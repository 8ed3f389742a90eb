"""Waypoint group domain model."""

from typing import ClassVar

from pydantic import BaseModel, Field

from fleet_sync.domain.models.fleet_record import FleetRecord


class Waypoint(BaseModel):
    """A named coordinate inside a waypoint group."""

    name: str
    latitude: float
    longitude: float
    order: int


class WaypointGroup(FleetRecord):
    """A reusable, ordered group of waypoints shared by routes."""

    id_field: ClassVar[str] = "group_id"

    group_id: str
    group_name: str
    waypoints: list[Waypoint] = Field(default_factory=list)
    is_active: bool = True
