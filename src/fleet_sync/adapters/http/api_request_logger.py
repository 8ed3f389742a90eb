"""Request logging for outbound API calls, enabled by the ``log_requests`` setting."""

import json
import logging
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
REDACTED = "***REDACTED***"


def redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Redact credentials from headers before they are logged."""
    return {k: REDACTED if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict | list) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


class ApiRequestLogger:
    """Logs outbound requests when enabled."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def log_request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        payload: Any = None,
    ) -> None:
        """Log API request details if request logging is enabled.

        Args:
            method: HTTP method (GET, POST, etc.).
            url: Full request URL including the query string.
            headers: Request headers; credentials are redacted.
            payload: Request body (optional).
        """
        if not self.enabled:
            return

        log_parts = [f"{method} {url}"]
        if headers:
            safe_headers = redact_sensitive_headers(headers)
            log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")
        if payload is not None:
            log_parts.append(f"Payload: {_format_payload(payload)}")

        logger.info("API Request:\n" + "\n".join(log_parts))
