"""Resource store: a collection endpoint plus its local, patched copy."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic

from fleet_sync.application.collection_patcher import CollectionPatcher
from fleet_sync.application.collection_state import CollectionState, R
from fleet_sync.domain.contracts.collection_endpoint import CollectionEndpointProtocol
from fleet_sync.domain.models.api_result import ApiFailure, ApiResult, ApiSuccess
from fleet_sync.domain.models.mutation_outcome import MutationOutcome

logger = logging.getLogger(__name__)


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


class ResourceStore(Generic[R]):
    """Keeps a local collection in step with the server.

    Every mutation reports its own outcome and never raises for a failed
    request. On failure the local collection is left as it was.
    """

    def __init__(
        self,
        endpoint: CollectionEndpointProtocol,
        state: CollectionState[R] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.state: CollectionState[R] = state if state is not None else CollectionState()
        self.patcher: CollectionPatcher[R] = CollectionPatcher(self.state)
        self.params: dict[str, Any] = dict(params or {})

    @property
    def label(self) -> str:
        return self.endpoint.label

    @property
    def items(self) -> list[R]:
        return self.state.items

    async def fetch(self) -> ApiResult:
        """Fetch the collection without applying it (used by pollers)."""
        return await self.endpoint.list_records(self.params or None)

    def apply_fetched(self, result: ApiSuccess) -> None:
        records = result.data or []
        self.patcher.apply_poll_result(records)

    async def refresh(self, params: Mapping[str, Any] | None = None) -> MutationOutcome:
        """Fetch and apply the collection.

        A failed fetch keeps the records already on display.
        """
        if params is not None:
            self.params = dict(params)
        result = await self.fetch()
        if isinstance(result, ApiFailure):
            self.patcher.mark_failed()
            logger.error(f"Error fetching {self.label}s: {result.kind} {result.status}")
            return MutationOutcome(False, result.user_message(f"Failed to fetch {self.label}s"))
        self.apply_fetched(result)
        return MutationOutcome(True, f"Loaded {len(self.state.items)} {self.label}(s)")

    async def create(self, payload: Mapping[str, Any]) -> MutationOutcome:
        result = await self.endpoint.create_record(payload)
        if isinstance(result, ApiFailure):
            return self._failed("create", result)
        if result.data is None:
            # Nothing to append without the server's copy; fall back to a refresh.
            await self.refresh()
        else:
            self.patcher.apply_created(result.data)
        return MutationOutcome(True, f"{_capitalize(self.label)} created successfully", result.data)

    async def update(self, record_id: str, fields: Mapping[str, Any]) -> MutationOutcome:
        result = await self.endpoint.update_record(record_id, fields)
        if isinstance(result, ApiFailure):
            return self._failed("update", result)
        # Without a returned record the confirmed request fields are merged.
        update = result.data if result.data is not None else fields
        record = self.patcher.apply_updated(record_id, update)
        return MutationOutcome(True, f"{_capitalize(self.label)} updated successfully", record)

    async def deactivate(self, record_id: str) -> MutationOutcome:
        if self.endpoint.soft_delete:
            result = await self.endpoint.delete_record(record_id)
        else:
            result = await self.endpoint.set_active(record_id, False)
        if isinstance(result, ApiFailure):
            return self._failed("deactivate", result)
        self.patcher.apply_status(record_id, False)
        return MutationOutcome(True, f"{_capitalize(self.label)} deactivated successfully")

    async def reactivate(self, record_id: str) -> MutationOutcome:
        result = await self.endpoint.set_active(record_id, True)
        if isinstance(result, ApiFailure):
            return self._failed("reactivate", result)
        self.patcher.apply_status(record_id, True)
        return MutationOutcome(True, f"{_capitalize(self.label)} reactivated successfully")

    async def delete(self, record_id: str) -> MutationOutcome:
        """Delete a record.

        Soft-deleting collections keep the record, flagged inactive; all
        others drop it from the local copy.
        """
        result = await self.endpoint.delete_record(record_id)
        if isinstance(result, ApiFailure):
            return self._failed("delete", result)
        if self.endpoint.soft_delete:
            self.patcher.apply_status(record_id, False)
            return MutationOutcome(True, f"{_capitalize(self.label)} deleted successfully")
        self.patcher.apply_removed(record_id)
        return MutationOutcome(True, f"{_capitalize(self.label)} deleted permanently")

    def _failed(self, action: str, failure: ApiFailure) -> MutationOutcome:
        logger.error(
            f"Failed to {action} {self.label}: {failure.kind} "
            f"(status: {failure.status}, message: {failure.message})"
        )
        return MutationOutcome(False, failure.user_message(f"Failed to {action} {self.label}"))
