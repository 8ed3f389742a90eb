"""Season-ticket member listing and expiry handling."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from enum import StrEnum

from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.domain.models.mutation_outcome import MutationOutcome
from fleet_sync.domain.models.season_ticket_member import SeasonTicketMember

logger = logging.getLogger(__name__)


class MemberFilter(StrEnum):
    """Which members a member list shows."""

    ACTIVE = "active"
    ALL = "all"
    EXPIRED = "expired"

    @property
    def active_only(self) -> bool:
        return self is MemberFilter.ACTIVE


def visible_members(
    members: list[SeasonTicketMember],
    member_filter: MemberFilter,
    now: datetime | None = None,
) -> list[SeasonTicketMember]:
    """Members shown for ``member_filter``; the server only filters on activity."""
    if member_filter is MemberFilter.EXPIRED:
        now = now or datetime.now(UTC)
        return [member for member in members if member.is_expired(now)]
    return list(members)


async def deactivate_expired(
    store: ResourceStore[SeasonTicketMember],
    now: datetime | None = None,
) -> int:
    """Deactivate every active member whose ticket has expired.

    Failures are logged per member and do not stop the others.

    Returns:
        Number of members deactivated.
    """
    now = now or datetime.now(UTC)
    expired = [member for member in store.items if member.is_active and member.is_expired(now)]
    if expired:
        logger.info(f"Auto-deactivating {len(expired)} expired members")

    deactivated = 0
    for member in expired:
        outcome = await store.deactivate(member.member_id)
        if outcome.ok:
            deactivated += 1
        else:
            logger.error(f"Failed to auto-deactivate {member.member_id}: {outcome.message}")
    return deactivated


async def load_members(
    store: ResourceStore[SeasonTicketMember],
    member_filter: MemberFilter,
    now: datetime | None = None,
) -> MutationOutcome:
    """Fetch members for a filter and deactivate the expired ones."""
    active_only = "true" if member_filter.active_only else "false"
    outcome = await store.refresh({"active_only": active_only})
    if not outcome.ok:
        return outcome

    deactivated = await deactivate_expired(store, now)
    if deactivated:
        return MutationOutcome(True, f"Auto-deactivated {deactivated} expired member(s)")
    return outcome
