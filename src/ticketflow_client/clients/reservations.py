from __future__ import annotations

from ..models import ReservationRequest, ReservationResponse
from .base import BaseClient


class ReservationsClient(BaseClient):
    async def create(self, event_id: str, seat_ids: list[str]) -> ReservationResponse:
        if not self.access_token:
            raise ValueError("Reservations require a bearer credential")
        body = ReservationRequest(event_id=event_id, seat_ids=list(seat_ids))
        data = await self._request("POST", "/reservations", json_body=body.model_dump(by_alias=True))
        return self._parse(ReservationResponse, data or {})
