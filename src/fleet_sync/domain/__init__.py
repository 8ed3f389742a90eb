"""Domain layer - records, result values and contracts."""

from fleet_sync.domain.contracts import (
    CollectionEndpointProtocol,
    TransportProtocol,
)
from fleet_sync.domain.models import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    Backend,
    FailureKind,
    FleetRecord,
)

__all__ = [
    "ApiFailure",
    "ApiResult",
    "ApiSuccess",
    "Backend",
    "CollectionEndpointProtocol",
    "FailureKind",
    "FleetRecord",
    "TransportProtocol",
]
