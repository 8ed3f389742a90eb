"""Registry of GET requests currently in flight."""

import asyncio

from fleet_sync.domain.models.api_result import ApiResult


class PendingRequestLedger:
    """Maps a request signature to the task performing it.

    An entry lives exactly as long as its request is outstanding.
    """

    def __init__(self) -> None:
        self._pending: dict[str, asyncio.Task[ApiResult]] = {}

    def get(self, signature: str) -> asyncio.Task[ApiResult] | None:
        return self._pending.get(signature)

    def add(self, signature: str, task: asyncio.Task[ApiResult]) -> None:
        if signature in self._pending:
            raise ValueError(f"Request already pending: {signature}")
        self._pending[signature] = task

    def release(self, signature: str, task: asyncio.Task[ApiResult] | None = None) -> None:
        """Forget a settled request.

        When ``task`` is given the entry is only removed if it still belongs to it.
        """
        current = self._pending.get(signature)
        if current is None:
            return
        if task is None or current is task:
            del self._pending[signature]

    def __contains__(self, signature: object) -> bool:
        return signature in self._pending

    def __len__(self) -> int:
        return len(self._pending)
