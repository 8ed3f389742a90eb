"""Protocol for periodic re-fetching."""

from typing import Protocol


class PollerProtocol(Protocol):
    """Protocol for a cancellable polling task."""

    async def start(self) -> None:
        """Start polling."""
        ...

    async def stop(self) -> None:
        """Stop polling. Safe to call more than once."""
        ...
