from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import quote, urlencode

from .session import SessionStore

EVENTS_PATH = "/events"
LOGIN_PATH = "/login"
REGISTER_PATH = "/register"


@dataclass(frozen=True)
class Destination:
    path: str
    query: dict[str, str] = field(default_factory=dict)

    @property
    def href(self) -> str:
        if not self.query:
            return self.path
        return f"{self.path}?{urlencode(self.query, safe=',')}"


def event_path(event_id: str) -> str:
    return f"{EVENTS_PATH}/{quote(event_id, safe='')}"


def seats_destination(event_id: str) -> Destination:
    return Destination(f"{event_path(event_id)}/seats")


def checkout_destination(event_id: str, seat_ids: list[str]) -> Destination:
    return Destination(f"{event_path(event_id)}/checkout", {"seatIds": ",".join(seat_ids)})


@dataclass(frozen=True)
class NavLink:
    key: str
    label: str
    href: str | None = None


def header_links(store: SessionStore) -> list[NavLink]:
    links = [NavLink("events", "Events", EVENTS_PATH)]
    if not store.ready:
        return links
    if store.authenticated:
        links.append(NavLink("logout", "Log out"))
    else:
        links.append(NavLink("login", "Log in", LOGIN_PATH))
        links.append(NavLink("register", "Sign up", REGISTER_PATH))
    return links
