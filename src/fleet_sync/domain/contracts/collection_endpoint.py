"""Protocol for CRUD access to one server-side collection."""

from collections.abc import Mapping
from typing import Any, Protocol

from fleet_sync.domain.models.api_result import ApiResult


class CollectionEndpointProtocol(Protocol):
    """CRUD calls against one collection.

    Successful results carry parsed records in ``data``: a list for
    ``list_records``, a single record (or None when the server returned none)
    for the others.
    """

    label: str
    soft_delete: bool

    async def list_records(self, params: Mapping[str, Any] | None = None) -> ApiResult:
        """Fetch the collection."""
        ...

    async def create_record(self, payload: Mapping[str, Any]) -> ApiResult:
        """Create a record and return the server's copy."""
        ...

    async def update_record(self, record_id: str, fields: Mapping[str, Any]) -> ApiResult:
        """Update fields of a record."""
        ...

    async def set_active(self, record_id: str, is_active: bool) -> ApiResult:
        """Flip the status flag of a record."""
        ...

    async def delete_record(self, record_id: str) -> ApiResult:
        """Delete a record (softly when ``soft_delete`` is set)."""
        ...
