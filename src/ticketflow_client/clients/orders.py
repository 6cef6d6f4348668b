from __future__ import annotations

from ..models import CheckoutRequest, CheckoutResponse
from .base import BaseClient


class OrdersClient(BaseClient):
    async def checkout(self, request: CheckoutRequest) -> CheckoutResponse:
        # The checkout contract is unauthenticated; no bearer is sent.
        data = await self.http.request(
            "POST",
            "/orders/checkout",
            json_body=request.model_dump(by_alias=True),
        )
        return self._parse(CheckoutResponse, data)
