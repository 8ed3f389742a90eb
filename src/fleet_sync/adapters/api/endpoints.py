"""Collections exposed by the domain API."""

from fleet_sync.domain.models.bus_route import BusRoute
from fleet_sync.domain.models.contractor import Contractor
from fleet_sync.domain.models.fare_stage import FareStage
from fleet_sync.domain.models.power_config import BusPowerConfig
from fleet_sync.domain.models.resource_endpoint import ResourceEndpoint
from fleet_sync.domain.models.season_ticket_member import SeasonTicketMember
from fleet_sync.domain.models.waypoint_group import WaypointGroup

BUS_ROUTES = ResourceEndpoint(
    label="route",
    path="/api/bus-routes",
    collection_key="routes",
    item_key="route",
    model=BusRoute,
    soft_delete=True,
)

WAYPOINT_GROUPS = ResourceEndpoint(
    label="waypoint group",
    path="/api/waypoint-groups",
    collection_key="groups",
    item_key="group",
    model=WaypointGroup,
    soft_delete=True,
)

SEASON_TICKET_MEMBERS = ResourceEndpoint(
    label="member",
    path="/api/season-ticket/members",
    collection_key="members",
    item_key="member",
    model=SeasonTicketMember,
)

CONTRACTORS = ResourceEndpoint(
    label="contractor",
    path="/api/contractors",
    collection_key="contractors",
    item_key="contractor",
    model=Contractor,
)

FARE_STAGES = ResourceEndpoint(
    label="fare stage",
    path="/api/fare/stages",
    collection_key="stages",
    item_key="stage",
    model=FareStage,
)

POWER_CONFIGS = ResourceEndpoint(
    label="power configuration",
    path="/api/power-config",
    collection_key="buses",
    item_key="config",
    model=BusPowerConfig,
)
