"""Domain models for the fleet data-sync client."""

from fleet_sync.domain.models.api_result import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    FailureKind,
    classify_status,
)
from fleet_sync.domain.models.backend import Backend
from fleet_sync.domain.models.board_liveness import BoardLiveness
from fleet_sync.domain.models.bus_route import BusRoute, RouteStop, WaypointGroupRef
from fleet_sync.domain.models.camera_failure import CameraError, CameraFailure
from fleet_sync.domain.models.contractor import Contractor
from fleet_sync.domain.models.face_embedding import FaceEmbeddingResult
from fleet_sync.domain.models.fare_stage import FareStage
from fleet_sync.domain.models.fleet_record import FleetRecord
from fleet_sync.domain.models.mutation_outcome import MutationOutcome
from fleet_sync.domain.models.passenger import (
    DistanceInfo,
    GeoPoint,
    Passenger,
    UnmatchedPassenger,
)
from fleet_sync.domain.models.power_config import Board, BusPowerConfig, DeviceNetworkConfig
from fleet_sync.domain.models.record_page import RecordPage
from fleet_sync.domain.models.resource_endpoint import ResourceEndpoint
from fleet_sync.domain.models.season_ticket_member import SeasonTicketMember, ValidRoute
from fleet_sync.domain.models.trip import (
    BusSchedule,
    PowerSyncWindow,
    RecentTrip,
    ScheduleEntry,
    TripOption,
)
from fleet_sync.domain.models.user import User
from fleet_sync.domain.models.waypoint_group import Waypoint, WaypointGroup

__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "Backend",
    "Board",
    "BoardLiveness",
    "BusPowerConfig",
    "BusRoute",
    "BusSchedule",
    "CameraError",
    "CameraFailure",
    "Contractor",
    "DeviceNetworkConfig",
    "DistanceInfo",
    "FaceEmbeddingResult",
    "FailureKind",
    "FareStage",
    "FleetRecord",
    "GeoPoint",
    "MutationOutcome",
    "Passenger",
    "PowerSyncWindow",
    "RecentTrip",
    "RecordPage",
    "ResourceEndpoint",
    "RouteStop",
    "ScheduleEntry",
    "SeasonTicketMember",
    "TripOption",
    "UnmatchedPassenger",
    "User",
    "ValidRoute",
    "Waypoint",
    "WaypointGroup",
    "WaypointGroupRef",
    "classify_status",
]
