"""Tests for the command line front end and client wiring."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from fleet_sync.adapters.config import AppConfig
from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.application.resource_store import ResourceStore
from fleet_sync.cli import CommandError, _build_parser, main, show_boards, whoami
from fleet_sync.domain.models.power_config import BusPowerConfig
from fleet_sync.domain.models.user import User
from fleet_sync.main import FleetClient
from tests.fakes import FakeCollectionEndpoint, failed, ok


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def _board_client(endpoint: FakeCollectionEndpoint) -> MagicMock:
    client = MagicMock()
    client.power_config_store.return_value = ResourceStore(endpoint)
    client.board_classifier.return_value = LivenessClassifier(90)
    return client


def test_parser_reads_passenger_filters() -> None:
    args = _build_parser().parse_args(
        ["--json", "passengers", "--date", "2024-05-01", "--bus", "BUS001", "--page", "2"]
    )

    assert args.json is True
    assert args.date == date(2024, 5, 1)
    assert args.bus == "BUS001"
    assert args.trip is None
    assert args.page == 2


def test_parser_rejects_unknown_member_filter() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["members", "--filter", "lapsed"])


@pytest.mark.asyncio
async def test_main_without_command_prints_help(capsys) -> None:
    """Given no subcommand, when running, then help is printed and the exit code is 1."""
    with pytest.raises(SystemExit) as exc_info:
        await main([])

    assert exc_info.value.code == 1
    assert "Fleet operations data-sync client" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_show_boards_prints_liveness(capsys) -> None:
    """Given a bus with a board never seen, when showing boards, then it is listed offline."""
    endpoint = FakeCollectionEndpoint(label="power configuration")
    endpoint.list_result = ok([BusPowerConfig(bus_id="BUS001", boards=["esp-1"])])

    await show_boards(_board_client(endpoint), as_json=False)

    out = capsys.readouterr().out
    assert "BUS001 (BUS001): 0/1 online" in out
    assert "esp-1" in out
    assert "Never" in out


@pytest.mark.asyncio
async def test_show_boards_as_json(capsys) -> None:
    endpoint = FakeCollectionEndpoint(label="power configuration")
    endpoint.list_result = ok([BusPowerConfig(bus_id="BUS001", boards=["esp-1"])])

    await show_boards(_board_client(endpoint), as_json=True)

    data = json.loads(capsys.readouterr().out)
    assert data["BUS001"][0]["device_id"] == "esp-1"
    assert data["BUS001"][0]["online"] is False


@pytest.mark.asyncio
async def test_show_boards_failure_raises_command_error() -> None:
    endpoint = FakeCollectionEndpoint(label="power configuration")
    endpoint.list_result = failed(message="Database unavailable")

    with pytest.raises(CommandError, match="Database unavailable"):
        await show_boards(_board_client(endpoint), as_json=False)


@pytest.mark.asyncio
async def test_whoami_without_session_raises() -> None:
    client = MagicMock()
    client.fleet_api.auth.check_session = _returning(None)

    with pytest.raises(CommandError, match="Not logged in"):
        await whoami(client, as_json=False)


@pytest.mark.asyncio
async def test_whoami_prints_user(capsys) -> None:
    client = MagicMock()
    client.fleet_api.auth.check_session = _returning(
        User(email="ops@example.com", name="Ops", role="operator")
    )

    await whoami(client, as_json=False)

    assert capsys.readouterr().out.strip() == "Ops <ops@example.com> (operator)"


def _returning(value):
    async def _call():
        return value

    return _call


class TestFleetClient:
    """Tests for FleetClient wiring."""

    def test_api_requires_entering(self, tmp_path) -> None:
        client = FleetClient(AppConfig(preferences_file=str(tmp_path / "prefs.json")))

        with pytest.raises(RuntimeError):
            _ = client.fleet_api

    @pytest.mark.asyncio
    async def test_factories_use_config(self, tmp_path) -> None:
        """Given a config, when building views, then page size and windows are applied."""
        config = AppConfig(
            preferences_file=str(tmp_path / "prefs.json"),
            page_size=25,
            power_dashboard_window_seconds=120,
        )

        async with FleetClient(config) as client:
            view = client.passenger_view(date(2024, 5, 1))
            classifier = client.board_classifier()
            heartbeat = client.heartbeat_classifier()

        assert view.query.page_size == 25
        assert classifier.window_seconds == 120
        assert heartbeat.window_seconds == 75

    @pytest.mark.asyncio
    async def test_default_session_expiry_clears_token(self, tmp_path) -> None:
        config = AppConfig(preferences_file=str(tmp_path / "prefs.json"))
        client = FleetClient(config)
        client.credentials.set_token("tok")

        client._on_session_expired()

        assert client.credentials.get_token() is None
