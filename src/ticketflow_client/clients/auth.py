from __future__ import annotations

from ..models import AuthResponse
from .base import BaseClient


class AuthClient(BaseClient):
    async def login(self, email: str, password: str) -> AuthResponse:
        payload = {"email": email, "password": password}
        data = await self.http.request("POST", "/auth/login", json_body=payload)
        return self._parse(AuthResponse, data)

    async def register(self, email: str, password: str, name: str) -> AuthResponse:
        payload = {"email": email, "password": password, "name": name}
        data = await self.http.request("POST", "/auth/register", json_body=payload)
        return self._parse(AuthResponse, data)
