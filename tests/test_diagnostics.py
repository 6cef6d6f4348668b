from __future__ import annotations

import json
import logging

import pytest

from ticketflow_client.diagnostics import REDACTED, DiagnosticLogger, configure_logging, redact


def test_redact_walks_nested_structures() -> None:
    payload = {
        "eventId": "e1",
        "Authorization": "Bearer abc",
        "user": {"name": "Alice", "accessToken": "t"},
        "attempts": [{"password": "p", "seat": "s1"}],
        "clientSecret": "pi_secret",
        "api_key": "k",
    }
    assert redact(payload) == {
        "eventId": "e1",
        "Authorization": REDACTED,
        "user": {"name": "Alice", "accessToken": REDACTED},
        "attempts": [{"password": REDACTED, "seat": "s1"}],
        "clientSecret": REDACTED,
        "api_key": REDACTED,
    }


def test_redact_leaves_scalars_alone() -> None:
    assert redact("token") == "token"
    assert redact(None) is None


def test_records_are_json_with_redacted_meta(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="ticketflow")
    DiagnosticLogger("test").info("Checkout started", event_id="e1", token="jwt")
    record = json.loads(caplog.records[-1].getMessage())
    assert record["level"] == "INFO"
    assert record["message"] == "Checkout started"
    assert record["meta"] == {"event_id": "e1", "token": REDACTED}


def test_level_filter_drops_lower_severity(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG)
    configure_logging("warn")
    try:
        log = DiagnosticLogger("filtered")
        log.debug("hidden")
        log.info("hidden too")
        log.warn("shown")
    finally:
        configure_logging("debug")
    messages = [json.loads(r.getMessage())["message"] for r in caplog.records if r.name.startswith("ticketflow")]
    assert messages == ["shown"]


def test_message_is_accepted_as_metadata(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="ticketflow")
    log = DiagnosticLogger("meta")
    log.warn("Reservation failed", event_id="e1", message="Seat already reserved")
    log.error("API transport failure", message="connection refused")
    first, second = (json.loads(r.getMessage()) for r in caplog.records[-2:])
    assert first["message"] == "Reservation failed"
    assert first["meta"] == {"event_id": "e1", "message": "Seat already reserved"}
    assert second["level"] == "ERROR"
    assert second["meta"] == {"message": "connection refused"}
