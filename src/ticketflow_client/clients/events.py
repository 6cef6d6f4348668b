from __future__ import annotations

from urllib.parse import quote

from ..models import Event, EventSeat
from .base import BaseClient


class EventsClient(BaseClient):
    async def list(self) -> list[Event]:
        data = await self.http.request("GET", "/events")
        return self._parse_list(Event, data)

    async def get(self, event_id: str) -> Event:
        data = await self.http.request("GET", f"/events/{quote(event_id, safe='')}")
        return self._parse(Event, data)

    async def seats(self, event_id: str) -> list[EventSeat]:
        data = await self.http.request("GET", f"/events/{quote(event_id, safe='')}/seats")
        return self._parse_list(EventSeat, data)
