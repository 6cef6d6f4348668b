from __future__ import annotations

from datetime import datetime


def _parse(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return value
    # fromisoformat only accepts a trailing "Z" from 3.11 on.
    text = value.strip()
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)


def format_date(value: str | datetime) -> str:
    """Render an event date like ``Sat, Mar 15, 2025, 8:00 PM``."""
    moment = _parse(value)
    hour = moment.hour % 12 or 12
    meridiem = "AM" if moment.hour < 12 else "PM"
    return f"{moment:%a}, {moment:%b} {moment.day}, {moment.year}, {hour}:{moment:%M} {meridiem}"
