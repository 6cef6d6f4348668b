from .auth import AuthClient
from .events import EventsClient
from .health import HealthClient
from .orders import OrdersClient
from .reservations import ReservationsClient

__all__ = [
    "AuthClient",
    "EventsClient",
    "HealthClient",
    "OrdersClient",
    "ReservationsClient",
]
