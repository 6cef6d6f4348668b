from __future__ import annotations

from typing import Mapping

from .exceptions import (
    GENERIC_REQUEST_FAILURE,
    ApiError,
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    ValidationError,
)


def resolve_message(payload: object, status_text: str | None) -> str:
    """JSON ``message`` first, then a fixed fallback.

    The HTTP reason phrase only stands in when the body was not JSON at all
    (``payload is None``); a parsed body without a message gets the fallback.
    """
    if payload is None:
        if status_text and status_text.strip():
            return status_text
        return GENERIC_REQUEST_FAILURE
    if isinstance(payload, Mapping):
        message = payload.get("message")
        if isinstance(message, str) and message.strip():
            return message
    return GENERIC_REQUEST_FAILURE


def map_error(status_code: int, payload: object, status_text: str | None = None) -> ApiError:
    message = resolve_message(payload, status_text)
    details = payload.get("details") if isinstance(payload, Mapping) else None
    mapped: type[ApiError]
    if status_code == 401:
        mapped = AuthError
    elif status_code == 403:
        mapped = ForbiddenError
    elif status_code == 404:
        mapped = NotFoundError
    elif status_code in {400, 422}:
        mapped = ValidationError
    elif status_code == 409:
        mapped = ConflictError
    elif status_code == 429:
        mapped = RateLimitError
    elif status_code >= 500:
        mapped = ServerError
    else:
        mapped = ApiError
    return mapped(
        message=message,
        status_code=status_code,
        kind="protocol",
        details=details,
        raw_payload=dict(payload) if isinstance(payload, Mapping) else payload,
    )
