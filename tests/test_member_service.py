"""Tests for season-ticket member listing and expiry handling."""

from datetime import UTC, datetime

import pytest

from fleet_sync.application.collection_state import CollectionState
from fleet_sync.application.member_service import (
    MemberFilter,
    deactivate_expired,
    load_members,
    visible_members,
)
from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.domain.models.season_ticket_member import SeasonTicketMember
from tests.fakes import FakeCollectionEndpoint, failed, ok

NOW = datetime(2025, 3, 1, 9, 0, tzinfo=UTC)


def _member(member_id: str, valid_until: str | None, is_active: bool = True) -> SeasonTicketMember:
    return SeasonTicketMember(
        member_id=member_id,
        name=member_id,
        valid_until=valid_until,
        is_active=is_active,
    )


@pytest.fixture
def members() -> list[SeasonTicketMember]:
    return [
        _member("current", "2025-03-31T23:59:59Z"),
        _member("expired", "2025-02-28T23:59:59Z"),
        _member("expired-inactive", "2025-01-31T23:59:59Z", is_active=False),
        _member("open-ended", None),
    ]


def test_expired_filter_shows_only_expired(members: list[SeasonTicketMember]) -> None:
    """Given mixed members, when filtering expired, then only past validity is shown."""
    shown = visible_members(members, MemberFilter.EXPIRED, NOW)

    assert [m.member_id for m in shown] == ["expired", "expired-inactive"]
    assert len(visible_members(members, MemberFilter.ALL, NOW)) == 4


@pytest.mark.asyncio
async def test_deactivate_expired_only_touches_active_expired(
    members: list[SeasonTicketMember],
) -> None:
    """Given one active expired member, when sweeping, then only it is deactivated."""
    endpoint = FakeCollectionEndpoint(label="member")
    store = ResourceStore(endpoint, CollectionState(items=members, total=4))

    count = await deactivate_expired(store, NOW)

    assert count == 1
    assert endpoint.calls == [("set_active", "expired", False)]
    assert store.state.find("expired").is_active is False


@pytest.mark.asyncio
async def test_load_members_requests_filter_and_reports_sweep(
    members: list[SeasonTicketMember],
) -> None:
    """Given the all filter, when loading, then active_only=false is sent and expiry swept."""
    endpoint = FakeCollectionEndpoint(label="member")
    endpoint.list_result = ok(members)
    store = ResourceStore(endpoint)

    outcome = await load_members(store, MemberFilter.ALL, NOW)

    assert endpoint.calls[0] == ("list", {"active_only": "false"})
    assert outcome.message == "Auto-deactivated 1 expired member(s)"


@pytest.mark.asyncio
async def test_failed_sweep_is_not_counted(members: list[SeasonTicketMember]) -> None:
    """Given the server rejects deactivation, when sweeping, then the count excludes it."""
    endpoint = FakeCollectionEndpoint(label="member")
    endpoint.status_result = failed(message="Locked")
    store = ResourceStore(endpoint, CollectionState(items=members, total=4))

    assert await deactivate_expired(store, NOW) == 0
    assert store.state.find("expired").is_active is True


def test_active_filter_flag() -> None:
    """Given the filters, when asking for active_only, then only ACTIVE is true."""
    assert MemberFilter.ACTIVE.active_only is True
    assert MemberFilter.EXPIRED.active_only is False
