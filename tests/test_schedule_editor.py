"""Tests for schedule editing and power sync."""

from unittest.mock import AsyncMock

import pytest

from fleet_sync.application.schedule_editor import ScheduleEditor
from fleet_sync.domain.models.api_result import FailureKind
from fleet_sync.domain.models.trip import BusSchedule, PowerSyncWindow
from tests.fakes import failed, ok


def _schedule() -> BusSchedule:
    return BusSchedule.model_validate(
        {
            "_id": "s1",
            "bus_id": "BUS001",
            "trips": [
                {"trip_name": "Morning", "start_time": "06:00", "end_time": "08:00"},
                {"trip_name": "Evening", "start_time": "17:00", "end_time": "19:00"},
            ],
        }
    )


@pytest.fixture
def endpoint() -> AsyncMock:
    endpoint = AsyncMock()
    endpoint.load.return_value = ok(_schedule())
    endpoint.save.return_value = ok(None)
    endpoint.sync_power_config.return_value = ok(
        PowerSyncWindow(trip_start="05:45", trip_end="19:15")
    )
    return endpoint


@pytest.mark.asyncio
async def test_missing_schedule_becomes_empty(endpoint: AsyncMock) -> None:
    """Given no stored schedule, when loading, then an empty one is synthesized."""
    endpoint.load.return_value = ok(None)
    editor = ScheduleEditor(endpoint)

    outcome = await editor.load("BUS009")

    assert outcome.ok is True
    assert editor.schedule.bus_id == "BUS009"
    assert editor.schedule.trips == []
    assert editor.schedule.is_persisted is False


@pytest.mark.asyncio
async def test_save_syncs_power_window(endpoint: AsyncMock) -> None:
    """Given a loaded schedule, when saving, then the boards' wake window is reported."""
    editor = ScheduleEditor(endpoint)
    await editor.load("BUS001")

    outcome = await editor.save()

    assert outcome.ok is True
    assert outcome.message == (
        "Schedule saved and synced! ESP32 will wake at 05:45 and sleep at 19:15"
    )
    endpoint.sync_power_config.assert_awaited_once_with("BUS001")


@pytest.mark.asyncio
async def test_remove_trip_saves_remaining_trips(endpoint: AsyncMock) -> None:
    """Given two trips, when removing the first, then the saved schedule has one."""
    editor = ScheduleEditor(endpoint)
    await editor.load("BUS001")

    outcome = await editor.remove_trip(0)

    saved: BusSchedule = endpoint.save.await_args.args[0]
    assert outcome.message == "Trip removed and saved!"
    assert [t.trip_name for t in saved.trips] == ["Evening"]
    assert [t.trip_name for t in editor.schedule.trips] == ["Evening"]


@pytest.mark.asyncio
async def test_failed_save_keeps_local_schedule(endpoint: AsyncMock) -> None:
    """Given the save fails, when removing a trip, then the local schedule is unchanged."""
    endpoint.save.return_value = failed(message="Invalid time")
    editor = ScheduleEditor(endpoint)
    await editor.load("BUS001")

    outcome = await editor.remove_trip(1)

    assert outcome.ok is False
    assert outcome.message == "Invalid time"
    assert len(editor.schedule.trips) == 2
    endpoint.sync_power_config.assert_not_awaited()


@pytest.mark.asyncio
async def test_sync_failure_after_save_is_reported(endpoint: AsyncMock) -> None:
    """Given the sync fails, when saving, then the outcome says the schedule was saved."""
    endpoint.sync_power_config.return_value = failed(FailureKind.NETWORK, None)
    editor = ScheduleEditor(endpoint)
    await editor.load("BUS001")

    outcome = await editor.save()

    assert outcome.ok is False
    assert outcome.message.startswith("Schedule saved, but ")


@pytest.mark.asyncio
async def test_remove_out_of_range_trip_raises(endpoint: AsyncMock) -> None:
    """Given two trips, when removing index 5, then IndexError is raised."""
    editor = ScheduleEditor(endpoint)
    await editor.load("BUS001")

    with pytest.raises(IndexError):
        await editor.remove_trip(5)
