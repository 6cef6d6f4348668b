from __future__ import annotations

import re

MAX_EMAIL_LENGTH = 254
MAX_PASSWORD_LENGTH = 512
MAX_NAME_LENGTH = 200

EMAIL_REGEX = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _sanitize_string(value: object, max_length: int) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    if not trimmed or len(trimmed) > max_length:
        return None
    return trimmed


def validate_email(value: object) -> str | None:
    normalized = _sanitize_string(value, MAX_EMAIL_LENGTH)
    if normalized is None or not EMAIL_REGEX.match(normalized):
        return None
    return normalized


def validate_password(value: object) -> str | None:
    # Complexity policy is enforced server-side.
    return _sanitize_string(value, MAX_PASSWORD_LENGTH)


def validate_name(value: object) -> str | None:
    return _sanitize_string(value, MAX_NAME_LENGTH)
