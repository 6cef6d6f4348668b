from __future__ import annotations

from ..models import HealthResponse
from .base import BaseClient


class HealthClient(BaseClient):
    async def health(self) -> HealthResponse:
        data = await self.http.request("GET", "/health")
        return self._parse(HealthResponse, data or {})
