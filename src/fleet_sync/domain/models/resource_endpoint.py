"""Description of a REST collection exposed by the domain API."""

from dataclasses import dataclass

from fleet_sync.domain.models.fleet_record import FleetRecord


@dataclass(frozen=True)
class ResourceEndpoint:
    """Where a collection lives and how its payloads are keyed.

    ``soft_delete`` marks collections whose DELETE only flags the record
    inactive; the record stays listed afterwards.
    """

    label: str
    path: str
    collection_key: str
    item_key: str
    model: type[FleetRecord]
    soft_delete: bool = False

    def item_path(self, record_id: str) -> str:
        return f"{self.path}/{record_id}"
