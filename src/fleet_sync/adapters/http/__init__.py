"""HTTP adapters."""

from fleet_sync.adapters.http.api_request_logger import ApiRequestLogger
from fleet_sync.adapters.http.request_ledger import PendingRequestLedger
from fleet_sync.adapters.http.transport import BackendEndpoint, HttpTransport, build_url

__all__ = [
    "ApiRequestLogger",
    "BackendEndpoint",
    "HttpTransport",
    "PendingRequestLedger",
    "build_url",
]
