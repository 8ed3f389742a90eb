"""Typed clients for every endpoint of both backends."""

from fleet_sync.adapters.api.auth_api import AuthClient
from fleet_sync.adapters.api.collection_endpoint import (
    RestCollectionEndpoint,
    UpsertCollectionEndpoint,
)
from fleet_sync.adapters.api.endpoints import (
    BUS_ROUTES,
    CONTRACTORS,
    FARE_STAGES,
    SEASON_TICKET_MEMBERS,
    WAYPOINT_GROUPS,
)
from fleet_sync.adapters.api.member_api import MemberStatsClient
from fleet_sync.adapters.api.passenger_api import (
    TripClient,
    passenger_source,
    unmatched_source,
)
from fleet_sync.adapters.api.power_api import DeviceConfigClient, PowerConfigEndpoint
from fleet_sync.adapters.api.schedule_api import ScheduleClient
from fleet_sync.adapters.api.vision_api import VisionClient
from fleet_sync.domain.contracts.credential_store import CredentialStoreProtocol
from fleet_sync.domain.contracts.transport import TransportProtocol


class FleetApi:
    """All endpoint clients, sharing one transport."""

    def __init__(self, transport: TransportProtocol, credentials: CredentialStoreProtocol) -> None:
        self.transport = transport
        self.auth = AuthClient(transport, credentials)
        self.routes = RestCollectionEndpoint(transport, BUS_ROUTES)
        self.waypoint_groups = RestCollectionEndpoint(transport, WAYPOINT_GROUPS)
        self.members = RestCollectionEndpoint(transport, SEASON_TICKET_MEMBERS)
        self.member_stats = MemberStatsClient(transport)
        self.contractors = UpsertCollectionEndpoint(transport, CONTRACTORS)
        self.fare_stages = RestCollectionEndpoint(transport, FARE_STAGES)
        self.power_configs = PowerConfigEndpoint(transport)
        self.device_configs = DeviceConfigClient(transport)
        self.schedules = ScheduleClient(transport)
        self.passengers = passenger_source(transport)
        self.unmatched = unmatched_source(transport)
        self.trips = TripClient(transport)
        self.vision = VisionClient(transport)
