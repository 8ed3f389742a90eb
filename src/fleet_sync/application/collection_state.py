"""Local copy of one server-side collection."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, TypeVar

from fleet_sync.domain.models.fleet_record import FleetRecord

R = TypeVar("R", bound=FleetRecord)


@dataclass
class EditDraft:
    """Form values of a record the user is editing."""

    baseline: dict[str, Any]
    values: dict[str, Any]

    @property
    def is_dirty(self) -> bool:
        return self.values != self.baseline


@dataclass
class CollectionState(Generic[R]):
    """State for one resource view: records, total and open edits."""

    items: list[R] = field(default_factory=list)
    total: int = 0
    last_update: datetime | None = None
    api_status: str = "unknown"
    drafts: dict[str, EditDraft] = field(default_factory=dict)

    def find(self, record_id: str) -> R | None:
        for item in self.items:
            if item.record_id == record_id:
                return item
        return None

    def index_of(self, record_id: str) -> int | None:
        for index, item in enumerate(self.items):
            if item.record_id == record_id:
                return index
        return None

    def is_editing(self, record_id: str) -> bool:
        return record_id in self.drafts
