"""Command line front end for the fleet data-sync client."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import sys
from dataclasses import asdict
from datetime import date
from typing import Any

from pydantic import ValidationError

from fleet_sync.adapters.config import AppConfig
from fleet_sync.adapters.pollers import ResourcePoller
from fleet_sync.application.liveness import LivenessClassifier
from fleet_sync.application.member_service import MemberFilter, load_members, visible_members
from fleet_sync.application.passenger_stats import summarize_passengers
from fleet_sync.application.power_service import classify_boards
from fleet_sync.application.query_state import ALL
from fleet_sync.domain.models.api_result import ApiFailure, ApiSuccess
from fleet_sync.domain.models.power_config import BusPowerConfig
from fleet_sync.main import FleetClient, configure_logging


class CommandError(Exception):
    """A command failed; the message is shown to the user."""


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


async def login(client: FleetClient, email: str, password: str | None) -> None:
    password = password or getpass.getpass("Password: ")
    result = await client.fleet_api.auth.login(email, password)
    if isinstance(result, ApiFailure):
        raise CommandError(result.user_message("Login failed"))
    user = result.data
    print(f"Logged in as {user.name or user.email} ({user.role})")


async def whoami(client: FleetClient, as_json: bool) -> None:
    user = await client.fleet_api.auth.check_session()
    if user is None:
        raise CommandError("Not logged in")
    if as_json:
        _print_json(user.model_dump())
    else:
        print(f"{user.name or user.email} <{user.email}> ({user.role})")


async def list_passengers(
    client: FleetClient,
    on_date: date,
    bus_id: str | None,
    trip_id: str | None,
    page: int,
    as_json: bool,
) -> None:
    view = client.passenger_view(on_date)
    if bus_id:
        view.set_bus(bus_id)
    if trip_id:
        view.set_trip(trip_id)
    outcome = await view.load()
    if page and view.go_to_page(page):
        outcome = await view.load()
    if not outcome.ok:
        raise CommandError(outcome.message)

    distance_km = 0.0
    if view.query.trip_id != ALL:
        distance = await client.fleet_api.trips.route_distance(
            view.query.route_distance_params()
        )
        if not isinstance(distance, ApiFailure):
            distance_km = distance.data
    stats = summarize_passengers(view.items, distance_km)

    if as_json:
        _print_json(
            {
                "total": view.total,
                "page": view.query.page,
                "passengers": [p.model_dump(by_alias=True) for p in view.items],
                "revenue": stats.total_revenue,
                "route_distance_km": stats.route_distance_km,
            }
        )
        return

    for passenger in view.items:
        print(
            f"  {passenger.bus_id or '-':<10} {passenger.trip_id or '-':<14} "
            f"stage {passenger.resolved_stage_number():<3} {passenger.price:>8.2f}"
        )
    info = view.page_info
    print(f"\n{info.summary}")
    if info.show_controls and not info.shows_all:
        print(info.position)
    print(
        f"Revenue on page: {stats.total_revenue:.2f}, "
        f"route distance: {stats.route_distance_km} km"
    )


async def list_members(client: FleetClient, member_filter: MemberFilter, as_json: bool) -> None:
    store = client.member_store()
    outcome = await load_members(store, member_filter)
    if not outcome.ok:
        raise CommandError(outcome.message)
    members = visible_members(store.items, member_filter)
    if as_json:
        _print_json([member.model_dump() for member in members])
        return
    print(outcome.message)
    for member in members:
        status = "active" if member.is_active else "inactive"
        until = member.valid_until.date() if member.valid_until else "-"
        print(
            f"  {member.member_id:<12} {member.name:<24} "
            f"{member.ticket_type:<10} {until} {status}"
        )


def _print_boards(configs: list[BusPowerConfig], classifier: LivenessClassifier) -> None:
    for config in configs:
        boards = classify_boards(config, classifier)
        online = sum(1 for board in boards if board.online)
        name = config.bus_name or config.bus_id
        print(f"{config.bus_id} ({name}): {online}/{len(boards)} online")
        for board in boards:
            state = "online" if board.online else "offline"
            print(f"  {board.device_id:<20} {state:<8} {board.label}")


async def show_boards(client: FleetClient, as_json: bool) -> None:
    store = client.power_config_store()
    outcome = await store.refresh()
    if not outcome.ok:
        raise CommandError(outcome.message)
    classifier = client.board_classifier()
    if as_json:
        _print_json(
            {
                config.bus_id: [asdict(board) for board in classify_boards(config, classifier)]
                for config in store.items
            }
        )
        return
    _print_boards(store.items, classifier)


async def watch_boards(client: FleetClient, duration: float | None) -> None:
    store = client.power_config_store()
    classifier = client.board_classifier()

    def apply_and_print(result: ApiSuccess) -> None:
        store.apply_fetched(result)
        print(f"--- {store.state.last_update:%Y-%m-%d %H:%M:%S} UTC")
        _print_boards(store.items, classifier)

    poller = ResourcePoller(
        "watch-boards", store.fetch, apply_and_print, client.config.poll_intervals.boards
    )
    await poller.start()
    try:
        if duration is None:
            await asyncio.Event().wait()
        else:
            await asyncio.sleep(duration)
    finally:
        await poller.stop()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Fleet operations data-sync client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Log in and check the session
  fleet-sync login admin@example.com
  fleet-sync whoami

  # Passengers of one day and bus
  fleet-sync passengers --date 2024-05-01 --bus BUS001

  # Season-ticket members, deactivating expired ones
  fleet-sync members --filter expired

  # Board liveness, once or continuously
  fleet-sync boards
  fleet-sync watch-boards --duration 60
        """,
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    login_parser = subparsers.add_parser("login", help="Log in to the fleet API")
    login_parser.add_argument("email", help="Account email")
    login_parser.add_argument("--password", help="Password (prompted when omitted)")

    subparsers.add_parser("whoami", help="Show the logged-in user")

    passengers_parser = subparsers.add_parser("passengers", help="List passengers")
    passengers_parser.add_argument(
        "--date", type=date.fromisoformat, default=date.today(), help="Day (YYYY-MM-DD)"
    )
    passengers_parser.add_argument("--bus", help="Bus id (remembered for next time)")
    passengers_parser.add_argument("--trip", help="Trip id")
    passengers_parser.add_argument("--page", type=int, default=0, help="Page, starting at 0")

    members_parser = subparsers.add_parser("members", help="List season-ticket members")
    members_parser.add_argument(
        "--filter",
        choices=[f.value for f in MemberFilter],
        default=MemberFilter.ACTIVE.value,
        help="Which members to show",
    )

    subparsers.add_parser("boards", help="Show board liveness per bus")

    watch_parser = subparsers.add_parser("watch-boards", help="Poll board liveness")
    watch_parser.add_argument("--duration", type=float, help="Stop after this many seconds")
    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)
    configure_logging(config.log_level)

    try:
        async with FleetClient(config) as client:
            if args.command == "login":
                await login(client, args.email, args.password)
            elif args.command == "whoami":
                await whoami(client, args.json)
            elif args.command == "passengers":
                await list_passengers(
                    client, args.date, args.bus, args.trip, args.page, args.json
                )
            elif args.command == "members":
                await list_members(client, MemberFilter(args.filter), args.json)
            elif args.command == "boards":
                await show_boards(client, args.json)
            elif args.command == "watch-boards":
                await watch_boards(client, args.duration)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
