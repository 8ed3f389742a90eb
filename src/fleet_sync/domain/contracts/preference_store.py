"""Protocol for remembered UI preferences."""

from typing import Any, Protocol


class PreferenceStoreProtocol(Protocol):
    """Small key/value store for convenience state such as the last selected bus."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value, or ``default`` when missing or unreadable."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Remember a value."""
        ...

    def remove(self, key: str) -> None:
        """Forget a value."""
        ...
