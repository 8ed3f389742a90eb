"""Protocol for outbound HTTP transport."""

from collections.abc import Mapping
from typing import Any, Protocol

from fleet_sync.domain.models.api_result import ApiResult
from fleet_sync.domain.models.backend import Backend


class TransportProtocol(Protocol):
    """Protocol for issuing requests against one of the two backends."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        backend: Backend = Backend.PRIMARY,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        """Perform one request and return its result value.

        Args:
            method: HTTP method.
            path: Path relative to the backend's base URL, may carry a query string.
            backend: Which backend to address.
            json: Optional JSON body.
            params: Optional query parameters; ``None`` values are omitted.

        Returns:
            ApiSuccess on 2xx, ApiFailure otherwise. Never raises for HTTP errors.
        """
        ...
