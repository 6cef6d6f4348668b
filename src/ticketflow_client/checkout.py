from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import ValidationError as ModelValidationError

from .clients.orders import OrdersClient
from .diagnostics import DiagnosticLogger
from .exceptions import ResponseFormatError, TransportError
from .http_client import HttpClient
from .models import CheckoutRequest, CheckoutResponse, User
from .navigation import Destination, seats_destination
from .result import Err, ErrorKind, Ok, Result

MISSING_PRECONDITIONS = "Missing user, seats, or event."
NO_PAYMENT_INTENT = "No payment intent returned."
CHECKOUT_FAILED = "Checkout failed"

log = DiagnosticLogger("checkout")


class CheckoutStatus(str, Enum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def parse_seat_ids(raw: str | None) -> list[str]:
    """Split the comma-joined ``seatIds`` parameter, dropping empty entries."""
    if not raw:
        return []
    return [seat_id for seat_id in raw.split(",") if seat_id]


def failure_message(error: BaseException) -> str:
    if isinstance(error, (ResponseFormatError, ModelValidationError)):
        return CHECKOUT_FAILED
    message = getattr(error, "message", None)
    if not isinstance(message, str):
        message = str(error)
    return message.strip() or CHECKOUT_FAILED


@dataclass
class CheckoutOrchestrator:
    """Turns a reserved seat set into an order with a payment intent.

    ``loading`` moves once to ``success`` or ``error`` and never leaves it.
    There is no automatic retry; the user goes back to seat selection instead.
    """

    http: HttpClient
    user: User | None
    event_id: str | None
    seat_ids: list[str]
    status: CheckoutStatus = CheckoutStatus.LOADING
    order_id: str | None = None
    client_secret: str | None = None
    error: str | None = None
    _started: bool = field(default=False, init=False, repr=False)

    @classmethod
    def from_query(
        cls,
        http: HttpClient,
        user: User | None,
        event_id: str | None,
        seat_ids_param: str | None,
    ) -> "CheckoutOrchestrator":
        return cls(http=http, user=user, event_id=event_id, seat_ids=parse_seat_ids(seat_ids_param))

    @property
    def back_link(self) -> Destination | None:
        if not self.event_id:
            return None
        return seats_destination(self.event_id)

    async def run(self) -> Result[CheckoutResponse]:
        if self._started:
            if self.status is CheckoutStatus.SUCCESS:
                return Ok(CheckoutResponse(order_id=self.order_id, client_secret=self.client_secret))
            return Err(ErrorKind.PRECONDITION, self.error or CHECKOUT_FAILED)
        self._started = True

        if self.user is None or not self.seat_ids or not self.event_id:
            log.warn(
                "Checkout skipped",
                has_user=self.user is not None,
                seat_count=len(self.seat_ids),
                event_id=self.event_id,
            )
            return self._fail(ErrorKind.PRECONDITION, MISSING_PRECONDITIONS)

        request = CheckoutRequest(
            user_id=self.user.id,
            event_id=self.event_id,
            seat_ids=list(self.seat_ids),
            # No pricing tiers yet: the first seat id stands in for the tier.
            tier_id=self.seat_ids[0],
            email=self.user.email,
        )
        log.info("Checkout started", event_id=self.event_id, seat_count=len(self.seat_ids), user_id=self.user.id)
        try:
            response = await OrdersClient(http=self.http).checkout(request)
        except Exception as exc:
            kind = ErrorKind.TRANSPORT if isinstance(exc, TransportError) else ErrorKind.PROTOCOL
            message = failure_message(exc)
            log.error("Checkout failed", event_id=self.event_id, message=message)
            return self._fail(kind, message)

        self.order_id = response.order_id
        self.client_secret = response.client_secret
        if not response.client_secret:
            log.warn("Checkout no clientSecret", order_id=response.order_id)
            return self._fail(ErrorKind.BUSINESS, NO_PAYMENT_INTENT)

        self.status = CheckoutStatus.SUCCESS
        log.info("Checkout success", order_id=response.order_id)
        return Ok(response)

    def _fail(self, kind: ErrorKind, message: str) -> Err:
        self.status = CheckoutStatus.ERROR
        self.error = message
        return Err(kind, message)
