from __future__ import annotations

import pytest

from ticketflow_client.auth_store import AuthStore


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    for key in (
        "TICKETFLOW_ENV",
        "TICKETFLOW_API_URL",
        "TICKETFLOW_LOG_LEVEL",
        "TICKETFLOW_TIMEOUT_SECONDS",
        "TICKETFLOW_VERIFY_SSL",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TICKETFLOW_SESSION_DIR", str(tmp_path / "session"))


@pytest.fixture
def auth_store(tmp_path) -> AuthStore:
    return AuthStore(base_dir=str(tmp_path / "store"))
