"""Tests for the pending request ledger."""

import asyncio

import pytest

from fleet_sync.adapters.http.request_ledger import PendingRequestLedger


@pytest.mark.asyncio
async def test_release_only_removes_owning_task() -> None:
    """Given a newer task under a signature, when an older task releases, then it stays."""
    ledger = PendingRequestLedger()
    old = asyncio.get_running_loop().create_future()
    new = asyncio.get_running_loop().create_future()

    ledger.add("GET:http://api/x", old)
    ledger.release("GET:http://api/x", old)
    ledger.add("GET:http://api/x", new)
    ledger.release("GET:http://api/x", old)

    assert ledger.get("GET:http://api/x") is new
    assert "GET:http://api/x" in ledger
    assert len(ledger) == 1


@pytest.mark.asyncio
async def test_adding_twice_is_rejected() -> None:
    """Given a pending signature, when adding it again, then ValueError is raised."""
    ledger = PendingRequestLedger()
    pending = asyncio.get_running_loop().create_future()
    ledger.add("GET:http://api/x", pending)

    with pytest.raises(ValueError, match="already pending"):
        ledger.add("GET:http://api/x", pending)


def test_release_of_unknown_signature_is_noop() -> None:
    """Given an empty ledger, when releasing, then nothing happens."""
    ledger = PendingRequestLedger()

    ledger.release("GET:http://api/missing")

    assert len(ledger) == 0
