"""Tests for API request logger."""

import logging

import pytest

from fleet_sync.adapters.http.api_request_logger import (
    REDACTED,
    ApiRequestLogger,
    redact_sensitive_headers,
)

LOGGER_NAME = "fleet_sync.adapters.http.api_request_logger"


def test_sensitive_headers_are_redacted() -> None:
    """Given credential headers in any case, when redacting, then their values are hidden."""
    headers = {"Authorization": "Bearer x", "cookie": "sid=1", "X-API-Key": "k", "Accept": "*/*"}

    redacted = redact_sensitive_headers(headers)

    assert redacted == {
        "Authorization": REDACTED,
        "cookie": REDACTED,
        "X-API-Key": REDACTED,
        "Accept": "*/*",
    }


def test_when_disabled_then_does_not_log(caplog: pytest.LogCaptureFixture) -> None:
    """Given logging disabled, when logging a request, then nothing is emitted."""
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        ApiRequestLogger(enabled=False).log_request("GET", "http://api/x")

    assert caplog.records == []


def test_when_enabled_then_logs_redacted_request(caplog: pytest.LogCaptureFixture) -> None:
    """Given logging enabled, when logging, then method, URL and payload appear redacted."""
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        ApiRequestLogger(enabled=True).log_request(
            "POST",
            "http://api/api/auth/login",
            headers={"Authorization": "Bearer secret"},
            payload={"email": "a@b.c"},
        )

    message = caplog.records[0].getMessage()
    assert "POST http://api/api/auth/login" in message
    assert "secret" not in message
    assert '"email": "a@b.c"' in message
