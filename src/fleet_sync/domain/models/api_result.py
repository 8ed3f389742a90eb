"""Result values returned by the transport instead of raised HTTP errors."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

NETWORK_FAILURE_MESSAGE = "Cannot reach the server. Please check your connection and try again."
SESSION_EXPIRED_MESSAGE = "Your session has expired. Please log in again."


class FailureKind(StrEnum):
    """Status class of a failed request."""

    VALIDATION = "validation"
    AUTH = "auth"
    NETWORK = "network"


class ApiSuccess(BaseModel):
    """A 2xx response with its parsed body."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: int
    data: Any = None

    @property
    def ok(self) -> bool:
        return True


class ApiFailure(BaseModel):
    """A request that did not produce a 2xx response."""

    model_config = ConfigDict(frozen=True)

    kind: FailureKind
    status: int | None = None
    message: str | None = None
    url: str | None = None
    session_expired: bool = False

    @property
    def ok(self) -> bool:
        return False

    def user_message(self, default: str) -> str:
        """Message to show to the user for this failure.

        Validation failures carry the server's message verbatim when it sent one.
        Network failures always get the generic retry guidance.
        """
        if self.kind == FailureKind.NETWORK:
            return NETWORK_FAILURE_MESSAGE
        if self.kind == FailureKind.AUTH and self.session_expired:
            return SESSION_EXPIRED_MESSAGE
        return self.message or default


ApiResult = ApiSuccess | ApiFailure


def classify_status(status: int) -> FailureKind:
    """Map a non-2xx HTTP status to its failure class."""
    if status == 401:
        return FailureKind.AUTH
    if 400 <= status < 500:
        return FailureKind.VALIDATION
    return FailureKind.NETWORK
