from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_API_URL = "http://localhost:3001"
LOG_LEVELS = ("debug", "info", "warn", "error")
_PRODUCTION_NAMES = {"production", "prod"}


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    env_name: str
    api_base_url: str = DEFAULT_API_URL
    log_level: str = "debug"
    timeout_seconds: float = 10.0
    verify_ssl: bool = True
    session_dir: str | None = None

    @property
    def normalized_env(self) -> str:
        return self.env_name.lower().strip()

    @property
    def is_production(self) -> bool:
        return self.normalized_env in _PRODUCTION_NAMES


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def resolve_log_level(raw: str | None, *, production: bool) -> str:
    """Map an env value onto debug|info|warn|error, defaulting by environment."""
    default = "info" if production else "debug"
    if not raw:
        return default
    value = raw.strip().lower()
    if value == "warning":
        value = "warn"
    return value if value in LOG_LEVELS else default


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    env_name = (os.getenv("TICKETFLOW_ENV") or "development").strip()
    env_key = env_name.upper()

    api_base_url = (
        (os.getenv(f"TICKETFLOW_API_URL_{env_key}") or "").strip()
        or (os.getenv("TICKETFLOW_API_URL") or "").strip()
        or DEFAULT_API_URL
    )

    timeout_seconds = _read_float("TICKETFLOW_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid TICKETFLOW_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    production = env_name.lower() in _PRODUCTION_NAMES
    log_level = resolve_log_level(os.getenv("TICKETFLOW_LOG_LEVEL"), production=production)

    session_dir = (os.getenv("TICKETFLOW_SESSION_DIR") or "").strip() or None

    return ClientConfig(
        env_name=env_name,
        api_base_url=api_base_url.rstrip("/"),
        log_level=log_level,
        timeout_seconds=timeout_seconds,
        verify_ssl=_coerce_bool(os.getenv("TICKETFLOW_VERIFY_SSL"), True),
        session_dir=session_dir,
    )
