"""Applies confirmed server results to a local collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any, Generic

from fleet_sync.application.collection_state import CollectionState, EditDraft, R

logger = logging.getLogger(__name__)


class CollectionPatcher(Generic[R]):
    """Patches a CollectionState in place after a fetch or a mutation.

    Patches are only ever applied after the server confirmed the change;
    there is no speculative apply and therefore no rollback.
    """

    def __init__(self, state: CollectionState[R]) -> None:
        """Initialize the patcher.

        Args:
            state: The CollectionState instance to update.
        """
        self.state = state

    def apply_poll_result(self, records: Iterable[R], total: int | None = None) -> None:
        """Replace the collection with fetched records.

        Records with an open edit keep their local copy so a background
        refresh never overwrites what the user is editing.
        """
        fetched = list(records)
        fetched_ids = {record.record_id for record in fetched}
        merged: list[R] = []
        for record in fetched:
            local = self.state.find(record.record_id)
            if local is not None and self.state.is_editing(record.record_id):
                merged.append(local)
            else:
                merged.append(record)
        for local in self.state.items:
            if local.record_id not in fetched_ids and self.state.is_editing(local.record_id):
                merged.append(local)

        self.state.items = merged
        self.state.total = total if total is not None else len(fetched)
        self.state.last_update = datetime.now(UTC)
        self.state.api_status = "success"
        logger.debug(f"Applied fetch result: {len(merged)} records, total {self.state.total}")

    def mark_failed(self) -> None:
        """Record a failed fetch without touching the records on display."""
        self.state.api_status = "error"

    def apply_created(self, record: R) -> None:
        """Add the server-returned record, merging if its id is already present."""
        index = self.state.index_of(record.record_id)
        if index is not None:
            self.apply_updated(record.record_id, record)
            return
        self.state.items = [*self.state.items, record]
        self.state.total += 1

    def apply_updated(self, record_id: str, update: R | Mapping[str, Any]) -> R | None:
        """Shallow-merge server fields over the local record.

        Fields absent from ``update`` keep their local values.
        """
        index = self.state.index_of(record_id)
        if index is None:
            logger.warning(f"Update for unknown record {record_id} ignored")
            return None
        if isinstance(update, Mapping):
            fields = dict(update)
        else:
            fields = update.model_dump(by_alias=True, exclude_unset=True)
        merged = self.state.items[index].merged_with(fields)
        items = list(self.state.items)
        items[index] = merged
        self.state.items = items
        self.end_edit(record_id)
        return merged

    def apply_status(self, record_id: str, is_active: bool) -> None:
        """Patch only the status flag; the record stays listed."""
        index = self.state.index_of(record_id)
        if index is None:
            logger.warning(f"Status change for unknown record {record_id} ignored")
            return
        items = list(self.state.items)
        items[index] = items[index].model_copy(update={"is_active": is_active})
        self.state.items = items

    def apply_removed(self, record_id: str) -> None:
        """Drop a permanently deleted record."""
        remaining = [item for item in self.state.items if item.record_id != record_id]
        if len(remaining) != len(self.state.items):
            self.state.total = max(self.state.total - 1, 0)
        self.state.items = remaining
        self.state.drafts.pop(record_id, None)

    def begin_edit(self, record_id: str, values: Mapping[str, Any] | None = None) -> EditDraft:
        """Open an edit for a record, seeded from ``values`` or the record itself."""
        if values is None:
            record = self.state.find(record_id)
            if record is None:
                raise KeyError(record_id)
            values = record.model_dump(by_alias=True)
        draft = EditDraft(baseline=dict(values), values=dict(values))
        self.state.drafts[record_id] = draft
        return draft

    def update_draft(self, record_id: str, field: str, value: Any) -> None:
        draft = self.state.drafts.get(record_id)
        if draft is None:
            draft = self.begin_edit(record_id)
        draft.values[field] = value

    def has_unsaved_changes(self, record_id: str) -> bool:
        draft = self.state.drafts.get(record_id)
        return draft is not None and draft.is_dirty

    def end_edit(self, record_id: str) -> None:
        self.state.drafts.pop(record_id, None)
