"""Seat selection: reconcile a local selection set with server-reported seat status.

The server owns seat status. The engine only ever reads it, keeps the user's
in-progress selection restricted to seats last reported as available, and
submits a reservation for that selection.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum

from .clients.events import EventsClient
from .clients.reservations import ReservationsClient
from .diagnostics import DiagnosticLogger
from .exceptions import ApiError
from .http_client import HttpClient, to_err
from .models import Event, EventSeat, SeatStatus
from .navigation import Destination, checkout_destination
from .result import Err, ErrorKind, Ok, Result
from .session import SessionStore

LOAD_FAILED = "Failed to load"
RESERVATION_FAILED = "Reservation failed"

log = DiagnosticLogger("seats")


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class SeatInventory:
    event: Event
    seats: list[EventSeat]


async def load_event_inventory(events: EventsClient, event_id: str) -> SeatInventory:
    """Fetch the event and its seats concurrently; both must succeed."""
    event, seats = await asyncio.gather(events.get(event_id), events.seats(event_id))
    return SeatInventory(event=event, seats=seats)


def partition_seats(seats: list[EventSeat]) -> dict[SeatStatus, list[EventSeat]]:
    groups: dict[SeatStatus, list[EventSeat]] = {status: [] for status in SeatStatus}
    for seat in seats:
        groups[seat.status].append(seat)
    return groups


def group_by_section(seats: list[EventSeat]) -> dict[str, list[EventSeat]]:
    """Available seats keyed by section, in order of first appearance."""
    sections: dict[str, list[EventSeat]] = {}
    for seat in seats:
        if seat.is_available:
            sections.setdefault(seat.section, []).append(seat)
    return sections


@dataclass
class SeatSelectionEngine:
    http: HttpClient
    session: SessionStore
    event_id: str | None = None
    event: Event | None = None
    seats: list[EventSeat] = field(default_factory=list)
    status: LoadStatus = LoadStatus.IDLE
    error: str | None = None
    reserving: bool = False
    destination: Destination | None = None
    _selected: dict[str, None] = field(default_factory=dict, init=False, repr=False)
    _generation: int = field(default=0, init=False, repr=False)

    @property
    def selected(self) -> tuple[str, ...]:
        return tuple(self._selected)

    @property
    def needs_login(self) -> bool:
        return self.status is LoadStatus.READY and not self.session.authenticated

    @property
    def can_reserve(self) -> bool:
        return (
            bool(self._selected)
            and self.session.authenticated
            and bool(self.event_id)
            and not self.reserving
        )

    @property
    def sections(self) -> dict[str, list[EventSeat]]:
        return group_by_section(self.seats)

    @property
    def has_unavailable_seats(self) -> bool:
        return any(not seat.is_available for seat in self.seats)

    @property
    def selection_summary(self) -> str:
        count = len(self._selected)
        return f"{count} seat{'' if count == 1 else 's'} selected"

    @property
    def submit_label(self) -> str:
        return "Reserving..." if self.reserving else "Continue to checkout"

    def reset(self) -> None:
        """Drop everything tied to the current event, e.g. when navigating away."""
        self._generation += 1
        self.event_id = None
        self.event = None
        self.seats = []
        self._selected.clear()
        self.status = LoadStatus.IDLE
        self.error = None
        self.destination = None

    async def load(self, event_id: str) -> Result[SeatInventory]:
        self.reset()
        generation = self._generation
        self.event_id = event_id
        self.status = LoadStatus.LOADING
        log.debug("Seats load", event_id=event_id)

        try:
            inventory = await load_event_inventory(EventsClient(http=self.http), event_id)
        except ApiError as exc:
            return self._fail_load(generation, event_id, to_err(exc))

        if generation != self._generation:
            log.debug("Discarding stale seats load", event_id=event_id)
            return Ok(inventory)
        self.event = inventory.event
        self.seats = inventory.seats
        self.status = LoadStatus.READY
        log.info("Seats loaded", event_id=event_id, seat_count=len(inventory.seats))
        return Ok(inventory)

    def _fail_load(self, generation: int, event_id: str, err: Err) -> Err:
        if generation == self._generation:
            self.status = LoadStatus.ERROR
            self.error = err.message or LOAD_FAILED
        log.warn("Seats load failed", event_id=event_id, message=err.message)
        return err

    def _seat(self, seat_id: str) -> EventSeat | None:
        return next((seat for seat in self.seats if seat.id == seat_id), None)

    def toggle(self, seat_id: str) -> bool:
        """Flip membership of an available seat. Anything else is ignored."""
        seat = self._seat(seat_id)
        if seat is None or not seat.is_available:
            return False
        if seat_id in self._selected:
            del self._selected[seat_id]
        else:
            self._selected[seat_id] = None
        return True

    async def reserve(self) -> Result[Destination]:
        if not self.can_reserve:
            return Err(ErrorKind.PRECONDITION, "Select seats and log in to reserve.")
        event_id = self.event_id
        seat_ids = list(self._selected)
        self.reserving = True
        self.error = None
        log.info("Reservation started", event_id=event_id, seat_count=len(seat_ids))
        client = ReservationsClient(http=self.http, access_token=self.session.credential)
        try:
            await client.create(event_id, seat_ids)
        except ApiError as exc:
            err = to_err(exc)
            self.error = err.message or RESERVATION_FAILED
            log.warn("Reservation failed", event_id=event_id, message=self.error)
            return err
        finally:
            self.reserving = False

        log.info("Reservation success", event_id=event_id, seat_ids=seat_ids)
        self._selected.clear()
        self.destination = checkout_destination(event_id, seat_ids)
        return Ok(self.destination)
