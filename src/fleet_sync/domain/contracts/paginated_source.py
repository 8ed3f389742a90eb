"""Protocol for server-paginated collections."""

from collections.abc import Mapping
from typing import Any, Protocol

from fleet_sync.domain.models.api_result import ApiResult


class PaginatedSourceProtocol(Protocol):
    """A collection the server filters and paginates."""

    async def fetch_page(self, params: Mapping[str, Any]) -> ApiResult:
        """Fetch one page; success carries a RecordPage."""
        ...
