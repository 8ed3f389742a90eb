"""Bearer token storage."""

from fleet_sync.domain.contracts.preference_store import PreferenceStoreProtocol

TOKEN_KEY = "token"


class CredentialStore:
    """Holds the login token, optionally persisted in a preference store."""

    def __init__(self, preferences: PreferenceStoreProtocol | None = None) -> None:
        self._preferences = preferences
        self._token: str | None = preferences.get(TOKEN_KEY) if preferences else None

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token
        if self._preferences is not None:
            self._preferences.set(TOKEN_KEY, token)

    def clear(self) -> None:
        self._token = None
        if self._preferences is not None:
            self._preferences.remove(TOKEN_KEY)
