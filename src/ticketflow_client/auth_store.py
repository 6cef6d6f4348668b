from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from platformdirs import user_data_dir

STORAGE_KEY = "ticketing-auth"


@dataclass
class AuthStore:
    """Durable backing store for the session: one JSON record ``{token, user}``."""

    app_name: str = "ticketflow"
    base_dir: str | None = None
    key: str = STORAGE_KEY

    def _path(self) -> Path:
        base = Path(self.base_dir) if self.base_dir else Path(user_data_dir(self.app_name, "TicketFlow"))
        base.mkdir(parents=True, exist_ok=True)
        return base / f"{self.key}.json"

    def save(self, token: str, user: dict[str, Any]) -> None:
        path = self._path()
        path.write_text(json.dumps({"token": token, "user": user}))
        try:
            path.chmod(0o600)
        except OSError:
            pass

    def read_raw(self) -> str | None:
        path = self._path()
        if not path.exists():
            return None
        return path.read_text()

    def load(self) -> dict[str, Any] | None:
        try:
            raw = self.read_raw()
        except UnicodeDecodeError:
            self.clear()
            return None
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            self.clear()
            return None
        if not isinstance(data, dict):
            self.clear()
            return None
        return data

    def clear(self) -> None:
        path = self._path()
        if path.exists():
            path.unlink()
