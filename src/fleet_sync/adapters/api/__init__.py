"""Endpoint clients for the domain and vision APIs."""

from fleet_sync.adapters.api.collection_endpoint import (
    RestCollectionEndpoint,
    UpsertCollectionEndpoint,
)
from fleet_sync.adapters.api.fleet_api import FleetApi

__all__ = ["FleetApi", "RestCollectionEndpoint", "UpsertCollectionEndpoint"]
