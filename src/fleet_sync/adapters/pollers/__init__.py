"""Background pollers."""

from fleet_sync.adapters.pollers.resource_poller import PollerGroup, ResourcePoller

__all__ = ["PollerGroup", "ResourcePoller"]
