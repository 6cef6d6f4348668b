from __future__ import annotations

from dataclasses import dataclass

GENERIC_REQUEST_FAILURE = "Request failed"
UNEXPECTED_RESPONSE = "Unexpected response from server"


@dataclass
class ApiError(Exception):
    message: str
    status_code: int
    kind: str = "protocol"
    details: object | None = None
    raw_payload: object | None = None

    def __str__(self) -> str:
        return self.message


class AuthError(ApiError):
    """401: credentials rejected or session expired."""


class ForbiddenError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class ValidationError(ApiError):
    pass


class ConflictError(ApiError):
    """409, e.g. a seat was taken by another user."""


class RateLimitError(ApiError):
    pass


class ServerError(ApiError):
    pass


class TransportError(ApiError):
    """Network/transport failure before an HTTP response was returned."""


class SessionProviderError(RuntimeError):
    """The session store was used outside its provider lifecycle."""


class ResponseFormatError(ApiError):
    """A successful response whose body does not have the expected shape."""
