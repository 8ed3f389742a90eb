"""Local storage adapters."""

from fleet_sync.adapters.storage.credential_store import CredentialStore
from fleet_sync.adapters.storage.preference_store import (
    SELECTED_BUS_PASSENGERS,
    SELECTED_BUS_POWER,
    SELECTED_BUS_TRIP_MANAGEMENT,
    JsonPreferenceStore,
)

__all__ = [
    "SELECTED_BUS_PASSENGERS",
    "SELECTED_BUS_POWER",
    "SELECTED_BUS_TRIP_MANAGEMENT",
    "CredentialStore",
    "JsonPreferenceStore",
]
