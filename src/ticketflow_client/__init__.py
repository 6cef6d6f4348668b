from .auth_store import AuthStore
from .checkout import CheckoutOrchestrator, CheckoutStatus, parse_seat_ids
from .config import ClientConfig, ConfigError, load_config
from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ResponseFormatError,
    SessionProviderError,
    TransportError,
    ValidationError,
)
from .forms import LoginForm, RegisterForm
from .http_client import HttpClient
from .models import (
    AuthResponse,
    CheckoutResponse,
    Event,
    EventSeat,
    ReservationResponse,
    SeatStatus,
    User,
    UserRole,
)
from .navigation import Destination, checkout_destination, header_links
from .result import Err, ErrorKind, Ok, Result
from .seat_selection import LoadStatus, SeatInventory, SeatSelectionEngine, load_event_inventory
from .session import Session, SessionProvider, SessionStore
from .validation import validate_email, validate_name, validate_password

__all__ = [
    "ApiError",
    "AuthError",
    "AuthResponse",
    "AuthStore",
    "CheckoutOrchestrator",
    "CheckoutResponse",
    "CheckoutStatus",
    "ClientConfig",
    "ConfigError",
    "ConflictError",
    "Destination",
    "Err",
    "ErrorKind",
    "Event",
    "EventSeat",
    "ForbiddenError",
    "HttpClient",
    "LoadStatus",
    "LoginForm",
    "NotFoundError",
    "Ok",
    "RegisterForm",
    "ReservationResponse",
    "ResponseFormatError",
    "Result",
    "SeatInventory",
    "SeatSelectionEngine",
    "SeatStatus",
    "Session",
    "SessionProvider",
    "SessionProviderError",
    "SessionStore",
    "TransportError",
    "User",
    "UserRole",
    "ValidationError",
    "checkout_destination",
    "header_links",
    "load_config",
    "load_event_inventory",
    "parse_seat_ids",
    "validate_email",
    "validate_name",
    "validate_password",
]
