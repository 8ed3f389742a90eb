"""Tests for the resource poller."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from fleet_sync.adapters.pollers.resource_poller import PollerGroup, ResourcePoller
from fleet_sync.domain.models.api_result import ApiSuccess, FailureKind
from tests.fakes import failed, ok


@pytest.mark.asyncio
async def test_start_fetches_immediately_then_on_interval() -> None:
    """Given a short interval, when started, then fetch runs at once and repeatedly."""
    fetch = AsyncMock(return_value=ok([1]))
    apply = MagicMock()
    poller = ResourcePoller("boards", fetch, apply, interval_seconds=0.02)

    await poller.start()
    await asyncio.sleep(0)
    await asyncio.sleep(0)
    assert fetch.await_count >= 1
    await asyncio.sleep(0.07)
    await poller.stop()

    assert fetch.await_count >= 3
    apply.assert_called_with(ok([1]))


@pytest.mark.asyncio
async def test_failed_tick_keeps_polling() -> None:
    """Given a failure then a success, when polling, then only the success is applied."""
    fetch = AsyncMock(side_effect=[failed(FailureKind.NETWORK, 500), RuntimeError("boom"), ok(2)])
    apply = MagicMock()
    poller = ResourcePoller("boards", fetch, apply, interval_seconds=0.01)

    await poller.tick()
    await poller.tick()
    await poller.tick()

    assert poller.failed_ticks == 2
    apply.assert_called_once_with(ok(2))


@pytest.mark.asyncio
async def test_result_after_stop_is_discarded() -> None:
    """Given a fetch still running, when the poller stops, then its result is not applied."""
    release = asyncio.Event()

    async def slow_fetch() -> ApiSuccess:
        await release.wait()
        return ok("late")

    apply = MagicMock()
    poller = ResourcePoller("boards", slow_fetch, apply, interval_seconds=10)
    await poller.start()
    await asyncio.sleep(0)

    tick = asyncio.create_task(poller.tick())
    await asyncio.sleep(0)
    await poller.stop()
    release.set()
    await tick

    apply.assert_not_called()
    assert poller.running is False


@pytest.mark.asyncio
async def test_stop_is_idempotent() -> None:
    """Given a started poller, when stopped twice, then the second call is a no-op."""
    poller = ResourcePoller("boards", AsyncMock(return_value=ok()), MagicMock(), 10)
    await poller.start()

    await poller.stop()
    await poller.stop()

    assert poller.running is False


@pytest.mark.asyncio
async def test_stop_before_start_is_noop() -> None:
    """Given a poller never started, when stopped, then nothing fails."""
    poller = ResourcePoller("boards", AsyncMock(return_value=ok()), MagicMock(), 10)

    await poller.stop()


def test_non_positive_interval_is_rejected() -> None:
    """Given a zero interval, when creating a poller, then ValueError is raised."""
    with pytest.raises(ValueError):
        ResourcePoller("boards", AsyncMock(), MagicMock(), 0)


@pytest.mark.asyncio
async def test_poller_group_starts_and_stops_all() -> None:
    """Given a group of pollers, when used as a context, then all start and stop."""
    first, second = AsyncMock(), AsyncMock()

    async with PollerGroup([first, second]):
        first.start.assert_awaited_once()
        second.start.assert_awaited_once()

    first.stop.assert_awaited_once()
    second.stop.assert_awaited_once()


@pytest.mark.asyncio
async def test_ticks_keep_a_fixed_rate_despite_slow_fetches() -> None:
    """Given fetches taking 0.3 s of a 1 s period, when polling, then each wait is 0.7 s."""
    clock = [100.0]
    delays: list[float] = []

    async def fetch() -> ApiSuccess:
        clock[0] += 0.3
        return ok()

    poller = ResourcePoller("boards", fetch, MagicMock(), interval_seconds=1.0)

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)
        clock[0] += delay
        if len(delays) == 3:
            poller._running = False

    poller._running = True
    with (
        patch("fleet_sync.adapters.pollers.resource_poller.time") as fake_time,
        patch("asyncio.sleep", fake_sleep),
    ):
        fake_time.monotonic.side_effect = lambda: clock[0]
        await poller._poll_loop()

    assert delays == pytest.approx([0.7, 0.7, 0.7])


@pytest.mark.asyncio
async def test_overrunning_fetch_does_not_queue_missed_ticks() -> None:
    """Given a fetch longer than the period, when polling, then the next tick is not delayed."""
    clock = [0.0]
    delays: list[float] = []

    async def fetch() -> ApiSuccess:
        clock[0] += 2.5
        return ok()

    poller = ResourcePoller("boards", fetch, MagicMock(), interval_seconds=1.0)

    async def fake_sleep(delay: float) -> None:
        delays.append(delay)
        clock[0] += delay
        if len(delays) == 2:
            poller._running = False

    poller._running = True
    with (
        patch("fleet_sync.adapters.pollers.resource_poller.time") as fake_time,
        patch("asyncio.sleep", fake_sleep),
    ):
        fake_time.monotonic.side_effect = lambda: clock[0]
        await poller._poll_loop()

    assert delays == [0.0, 0.0]
