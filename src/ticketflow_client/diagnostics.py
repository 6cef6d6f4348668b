"""Structured, level-filtered logging with secret redaction.

Every record is one JSON object so the output can be shipped as-is. Metadata
is redacted before it is serialised: credentials never reach a handler.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "ticketflow"
REDACTED = "[REDACTED]"
SENSITIVE_KEY_MARKERS = (
    "password",
    "token",
    "authorization",
    "cookie",
    "secret",
    "clientsecret",
    "apikey",
    "accesstoken",
    "refreshtoken",
)

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever sys.stderr is at emit time."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(f"{ROOT_LOGGER}.{name}" if name != ROOT_LOGGER else name)
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
        root.setLevel(logging.DEBUG)
    return logger


def configure_logging(level: str) -> None:
    """Set the minimum severity for every ticketflow logger."""
    get_logger(ROOT_LOGGER).setLevel(_LEVELS.get(level.lower(), logging.DEBUG))


def is_sensitive_key(key: str) -> bool:
    lowered = key.lower().replace("_", "").replace("-", "")
    return any(marker in lowered for marker in SENSITIVE_KEY_MARKERS)


def redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            key: REDACTED if is_sensitive_key(str(key)) else redact(nested)
            for key, nested in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


def log_event(logger: logging.Logger, level: str, event: str, /, **meta: Any) -> None:
    severity = _LEVELS[level]
    if not logger.isEnabledFor(severity):
        return
    payload: dict[str, Any] = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level.upper(),
        "message": event,
    }
    if meta:
        payload["meta"] = redact(meta)
    logger.log(severity, json.dumps(payload, default=str))


class DiagnosticLogger:
    def __init__(self, name: str) -> None:
        self.logger = get_logger(name)

    def debug(self, event: str, /, **meta: Any) -> None:
        log_event(self.logger, "debug", event, **meta)

    def info(self, event: str, /, **meta: Any) -> None:
        log_event(self.logger, "info", event, **meta)

    def warn(self, event: str, /, **meta: Any) -> None:
        log_event(self.logger, "warn", event, **meta)

    def error(self, event: str, /, **meta: Any) -> None:
        log_event(self.logger, "error", event, **meta)
