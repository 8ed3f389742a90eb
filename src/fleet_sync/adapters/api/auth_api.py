"""Login, session probe and logout against the domain API."""

from __future__ import annotations

import logging

from fleet_sync.adapters.api.payloads import parse_record
from fleet_sync.domain.contracts.credential_store import CredentialStoreProtocol
from fleet_sync.domain.contracts.transport import TransportProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess, FailureKind
from fleet_sync.domain.models.user import User

logger = logging.getLogger(__name__)

LOGIN_PATH = "/api/auth/login"
SESSION_PATH = "/api/auth/me"
LOGOUT_PATH = "/api/auth/logout"


class AuthClient:
    """Cookie session plus bearer token captured at login."""

    def __init__(self, transport: TransportProtocol, credentials: CredentialStoreProtocol) -> None:
        self.transport = transport
        self.credentials = credentials

    async def login(self, email: str, password: str) -> ApiResult:
        """Log in; success carries the User and stores the returned token."""
        result = await self.transport.request(
            "POST", LOGIN_PATH, json={"email": email, "password": password}
        )
        if isinstance(result, ApiFailure):
            return result
        data = result.data if isinstance(result.data, dict) else {}
        if data.get("success") is False:
            return ApiFailure(
                kind=FailureKind.VALIDATION,
                status=result.status,
                message=data.get("message") or "Login failed",
            )
        token = data.get("token")
        if token:
            self.credentials.set_token(token)
        user = parse_record(User, data, "user") or User(email=email)
        logger.info(f"Logged in as {user.email} ({user.role})")
        return ApiSuccess(status=result.status, data=user)

    async def check_session(self) -> User | None:
        """Return the logged-in user, or None when there is no valid session."""
        result = await self.transport.request("GET", SESSION_PATH)
        if isinstance(result, ApiFailure):
            return None
        data = result.data if isinstance(result.data, dict) else {}
        if "user" in data:
            return parse_record(User, data, "user")
        return parse_record(User, data)

    async def logout(self) -> ApiResult:
        """Log out; the local token is cleared even if the server call fails."""
        try:
            result = await self.transport.request("POST", LOGOUT_PATH)
        finally:
            self.credentials.clear()
        if isinstance(result, ApiFailure):
            logger.warning(f"Logout request failed: {result.kind}")
        return result
