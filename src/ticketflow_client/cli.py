from __future__ import annotations

import argparse
import asyncio
import json
from typing import Any

from .auth_store import AuthStore
from .checkout import CheckoutOrchestrator, CheckoutStatus
from .clients.events import EventsClient
from .clients.health import HealthClient
from .config import ClientConfig, load_config
from .diagnostics import configure_logging
from .exceptions import ApiError
from .formatting import format_date
from .forms import LoginForm, RegisterForm
from .http_client import HttpClient
from .result import Err
from .seat_selection import LoadStatus, SeatSelectionEngine
from .session import SessionProvider, SessionStore


def _print(payload: Any) -> None:
    print(json.dumps(payload, indent=2, default=str))


class CommandFailed(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


async def cmd_health(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    _print((await HealthClient(http=http).health()).model_dump())


async def cmd_login(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    form = LoginForm(session=store)
    if not await form.submit(args.email, args.password):
        raise CommandFailed(form.error or "Login failed")
    _print({"user": store.identity.model_dump(mode="json")})


async def cmd_register(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    form = RegisterForm(session=store)
    if not await form.submit(args.email, args.password, args.name):
        raise CommandFailed(form.error or "Registration failed")
    _print({"user": store.identity.model_dump(mode="json")})


async def cmd_logout(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    store.logout()
    _print({"authenticated": False})


async def cmd_whoami(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    identity = store.identity.model_dump(mode="json") if store.authenticated else None
    _print({"authenticated": store.authenticated, "user": identity})


async def cmd_events(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    events = await EventsClient(http=http).list()
    _print(
        [
            {"id": event.id, "name": event.name, "starts": format_date(event.start_date)}
            for event in events
        ]
    )


async def _load_engine(http: HttpClient, store: SessionStore, event_id: str) -> SeatSelectionEngine:
    engine = SeatSelectionEngine(http=http, session=store)
    await engine.load(event_id)
    if engine.status is LoadStatus.ERROR:
        raise CommandFailed(engine.error or "Failed to load")
    return engine


async def cmd_seats(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    engine = await _load_engine(http, store, args.event_id)
    _print(
        {
            "event": engine.event.name if engine.event else None,
            "sections": {
                section: [{"id": seat.id, "label": seat.label} for seat in seats]
                for section, seats in engine.sections.items()
            },
        }
    )


async def cmd_reserve(args: argparse.Namespace, http: HttpClient, store: SessionStore) -> None:
    if not store.authenticated:
        raise CommandFailed("Log in to reserve seats.")
    engine = await _load_engine(http, store, args.event_id)
    for seat_id in dict.fromkeys(args.seat_ids):
        if not engine.toggle(seat_id):
            raise CommandFailed(f"Seat {seat_id} is not available.")
    reservation = await engine.reserve()
    if isinstance(reservation, Err):
        raise CommandFailed(reservation.message)

    destination = reservation.value
    checkout = CheckoutOrchestrator.from_query(
        http=http,
        user=store.identity,
        event_id=args.event_id,
        seat_ids_param=destination.query.get("seatIds"),
    )
    await checkout.run()
    if checkout.status is not CheckoutStatus.SUCCESS:
        raise CommandFailed(checkout.error or "Checkout failed")
    _print({"order_id": checkout.order_id, "payment_intent_ready": True})


async def _run(args: argparse.Namespace, config: ClientConfig) -> None:
    async with HttpClient(config=config) as http:
        provider = SessionProvider(http, AuthStore(base_dir=config.session_dir))
        with provider as store:
            await args.func(args, http, store)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="TicketFlow client CLI")
    parser.add_argument("--env-file", default=None)
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("health").set_defaults(func=cmd_health)

    login_parser = subparsers.add_parser("login")
    login_parser.add_argument("--email", required=True)
    login_parser.add_argument("--password", required=True)
    login_parser.set_defaults(func=cmd_login)

    register_parser = subparsers.add_parser("register")
    register_parser.add_argument("--email", required=True)
    register_parser.add_argument("--password", required=True)
    register_parser.add_argument("--name", required=True)
    register_parser.set_defaults(func=cmd_register)

    subparsers.add_parser("logout").set_defaults(func=cmd_logout)
    subparsers.add_parser("whoami").set_defaults(func=cmd_whoami)
    subparsers.add_parser("events").set_defaults(func=cmd_events)

    seats_parser = subparsers.add_parser("seats")
    seats_parser.add_argument("event_id")
    seats_parser.set_defaults(func=cmd_seats)

    reserve_parser = subparsers.add_parser("reserve")
    reserve_parser.add_argument("event_id")
    reserve_parser.add_argument("seat_ids", nargs="+")
    reserve_parser.set_defaults(func=cmd_reserve)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    config = load_config(args.env_file)
    configure_logging(config.log_level)
    try:
        asyncio.run(_run(args, config))
    except ApiError as exc:
        _print({"error": type(exc).__name__, "message": exc.message, "status": exc.status_code})
        raise SystemExit(1) from exc
    except CommandFailed as exc:
        _print({"error": "command_failed", "message": exc.message})
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
