"""Contracts (protocols) between the application and its adapters."""

from fleet_sync.domain.contracts.collection_endpoint import CollectionEndpointProtocol
from fleet_sync.domain.contracts.credential_store import CredentialStoreProtocol
from fleet_sync.domain.contracts.frame_source import (
    FaceEmbeddingClientProtocol,
    FrameSourceProtocol,
)
from fleet_sync.domain.contracts.paginated_source import PaginatedSourceProtocol
from fleet_sync.domain.contracts.poller import PollerProtocol
from fleet_sync.domain.contracts.preference_store import PreferenceStoreProtocol
from fleet_sync.domain.contracts.schedule_endpoint import ScheduleEndpointProtocol
from fleet_sync.domain.contracts.transport import TransportProtocol

__all__ = [
    "CollectionEndpointProtocol",
    "CredentialStoreProtocol",
    "FaceEmbeddingClientProtocol",
    "FrameSourceProtocol",
    "PaginatedSourceProtocol",
    "PollerProtocol",
    "PreferenceStoreProtocol",
    "ScheduleEndpointProtocol",
    "TransportProtocol",
]
