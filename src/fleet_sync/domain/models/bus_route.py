"""Bus route domain model."""

from typing import ClassVar

from pydantic import BaseModel, Field

from fleet_sync.domain.models.fleet_record import FleetRecord


class RouteStop(BaseModel):
    """A stop on a route defined stop by stop."""

    stop_name: str
    latitude: float
    longitude: float
    stop_order: int
    distance_from_start_km: float = 0.0


class WaypointGroupRef(BaseModel):
    """Reference from a route to a waypoint group, in travel order."""

    group_id: str
    order: int


class BusRoute(FleetRecord):
    """A bus route built either from explicit stops or from waypoint groups."""

    id_field: ClassVar[str] = "route_id"

    route_id: str
    route_name: str
    description: str = ""
    estimated_duration_hours: float = 0.0
    assigned_buses: list[str] = Field(default_factory=list)
    stops: list[RouteStop] = Field(default_factory=list)
    waypoint_groups: list[WaypointGroupRef] = Field(default_factory=list)
    is_active: bool = True

    @property
    def uses_waypoint_groups(self) -> bool:
        return bool(self.waypoint_groups)
