from __future__ import annotations

import pytest

from ticketflow_client.config import DEFAULT_API_URL, ConfigError, load_config, resolve_log_level


def test_defaults_outside_production() -> None:
    cfg = load_config()
    assert cfg.api_base_url == DEFAULT_API_URL
    assert cfg.log_level == "debug"
    assert cfg.is_production is False


def test_production_defaults_to_info(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKETFLOW_ENV", "production")
    cfg = load_config()
    assert cfg.is_production is True
    assert cfg.log_level == "info"


def test_env_profile_overrides_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKETFLOW_ENV", "staging")
    monkeypatch.setenv("TICKETFLOW_API_URL", "https://api.example.com")
    monkeypatch.setenv("TICKETFLOW_API_URL_STAGING", "https://staging.example.com/")
    cfg = load_config()
    assert cfg.api_base_url == "https://staging.example.com"


def test_explicit_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TICKETFLOW_ENV", "production")
    monkeypatch.setenv("TICKETFLOW_LOG_LEVEL", "WARNING")
    assert load_config().log_level == "warn"


@pytest.mark.parametrize(
    ("raw", "production", "expected"),
    [
        (None, False, "debug"),
        (None, True, "info"),
        ("error", False, "error"),
        ("verbose", True, "info"),
    ],
)
def test_resolve_log_level(raw: str | None, production: bool, expected: str) -> None:
    assert resolve_log_level(raw, production=production) == expected


@pytest.mark.parametrize("value", ["0", "-1", "abc"])
def test_rejects_invalid_timeout(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("TICKETFLOW_TIMEOUT_SECONDS", value)
    with pytest.raises(ConfigError, match="TICKETFLOW_TIMEOUT_SECONDS"):
        load_config()


def test_session_dir_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.setenv("TICKETFLOW_SESSION_DIR", str(tmp_path))
    assert load_config().session_dir == str(tmp_path)
