"""aiohttp transport with GET de-duplication and failure classification."""

from __future__ import annotations

import asyncio
import json as jsonlib
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import aiohttp

from fleet_sync.adapters.http.api_request_logger import ApiRequestLogger
from fleet_sync.adapters.http.request_ledger import PendingRequestLedger
from fleet_sync.domain.contracts.credential_store import CredentialStoreProtocol
from fleet_sync.domain.models.api_result import (
    ApiFailure,
    ApiResult,
    ApiSuccess,
    FailureKind,
    classify_status,
)
from fleet_sync.domain.models.backend import Backend

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30
LOGIN_VIEW = "/login"
SESSION_PROBE_PATH = "/api/auth/me"


@dataclass(frozen=True)
class BackendEndpoint:
    """Base URL and HTTP session of one backend."""

    base_url: str
    session: aiohttp.ClientSession
    send_credentials: bool = True


def build_url(base_url: str, path: str, params: Mapping[str, Any] | None = None) -> str:
    """Join base URL and path, appending params in insertion order.

    Params whose value is ``None`` are left out.
    """
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    if not params:
        return url
    query = urlencode([(k, _param_value(v)) for k, v in params.items() if v is not None])
    if not query:
        return url
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def _param_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _server_message(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        return str(message) if message else None
    return None


class HttpTransport:
    """Issues requests against the primary and vision backends.

    Identical GETs issued while one is outstanding share its result; only one
    network request is made. Results are always values: HTTP, timeout and
    connection failures come back as ApiFailure.
    """

    def __init__(
        self,
        endpoints: Mapping[Backend, BackendEndpoint],
        credentials: CredentialStoreProtocol | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        on_session_expired: Callable[[], None] | None = None,
        view_provider: Callable[[], str | None] | None = None,
        request_logger: ApiRequestLogger | None = None,
        ledger: PendingRequestLedger | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            endpoints: Base URL and session per backend.
            credentials: Source of the bearer token sent to credentialed backends.
            timeout_seconds: Total timeout of every request.
            on_session_expired: Called when the primary backend rejects the session.
            view_provider: Returns the current view; no expiry handling on the login view.
            request_logger: Optional request logger.
            ledger: Registry of in-flight GETs.
        """
        self._endpoints = dict(endpoints)
        self._credentials = credentials
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        self._on_session_expired = on_session_expired
        self._view_provider = view_provider
        self._request_logger = request_logger or ApiRequestLogger()
        self.ledger = ledger if ledger is not None else PendingRequestLedger()

    async def request(
        self,
        method: str,
        path: str,
        *,
        backend: Backend = Backend.PRIMARY,
        json: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> ApiResult:
        method = method.upper()
        endpoint = self._endpoints[backend]
        url = build_url(endpoint.base_url, path, params)

        if method != "GET":
            return await self._send(method, url, path, backend, endpoint, json)

        signature = f"GET:{url}"
        task = self.ledger.get(signature)
        if task is None:
            task = asyncio.create_task(
                self._send_and_release(signature, url, path, backend, endpoint)
            )
            self.ledger.add(signature, task)
        else:
            logger.debug(f"Joining pending request {signature}")
        # A cancelled caller must not cancel the request other callers share.
        return await asyncio.shield(task)

    async def _send_and_release(
        self,
        signature: str,
        url: str,
        path: str,
        backend: Backend,
        endpoint: BackendEndpoint,
    ) -> ApiResult:
        try:
            return await self._send("GET", url, path, backend, endpoint, None)
        finally:
            self.ledger.release(signature, asyncio.current_task())

    def _headers(self, endpoint: BackendEndpoint) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if endpoint.send_credentials and self._credentials is not None:
            token = self._credentials.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _send(
        self,
        method: str,
        url: str,
        path: str,
        backend: Backend,
        endpoint: BackendEndpoint,
        payload: Any,
    ) -> ApiResult:
        headers = self._headers(endpoint)
        self._request_logger.log_request(method, url, headers, payload)

        try:
            async with endpoint.session.request(
                method, url, json=payload, headers=headers, timeout=self._timeout
            ) as response:
                status = response.status
                text = await response.text()
        except TimeoutError:
            logger.warning(f"{method} {url} timed out")
            return ApiFailure(kind=FailureKind.NETWORK, message="Request timed out", url=url)
        except aiohttp.ClientError as e:
            logger.warning(f"{method} {url} failed: {e}")
            return ApiFailure(kind=FailureKind.NETWORK, message=str(e), url=url)

        body = self._parse_body(text)
        if 200 <= status < 300:
            logger.debug(f"{method} {url} -> {status}")
            return ApiSuccess(status=status, data=body)
        return self._failure(method, url, path, backend, status, body)

    @staticmethod
    def _parse_body(text: str) -> Any:
        if not text:
            return None
        try:
            return jsonlib.loads(text)
        except ValueError:
            return text

    def _failure(
        self,
        method: str,
        url: str,
        path: str,
        backend: Backend,
        status: int,
        body: Any,
    ) -> ApiFailure:
        kind = classify_status(status)
        message = _server_message(body)
        session_expired = False
        if kind == FailureKind.AUTH and self._is_session_expiry(path, backend):
            session_expired = True
            logger.warning("Session expired")
            if self._on_session_expired is not None:
                self._on_session_expired()
        logger.warning(f"{method} {url} -> {status} ({kind}): {message}")
        return ApiFailure(
            kind=kind,
            status=status,
            message=message,
            url=url,
            session_expired=session_expired,
        )

    def _is_session_expiry(self, path: str, backend: Backend) -> bool:
        if backend != Backend.PRIMARY or SESSION_PROBE_PATH in path:
            return False
        view = self._view_provider() if self._view_provider is not None else None
        return LOGIN_VIEW not in (view or "")
