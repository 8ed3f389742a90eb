"""Protocol for the bearer credential captured at login."""

from typing import Protocol


class CredentialStoreProtocol(Protocol):
    """Holds the token sent alongside cookie credentials."""

    def get_token(self) -> str | None:
        """Return the current token, if any."""
        ...

    def set_token(self, token: str) -> None:
        """Store the token returned by login."""
        ...

    def clear(self) -> None:
        """Forget the token."""
        ...
