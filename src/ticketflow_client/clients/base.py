from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as ModelValidationError

from ..exceptions import UNEXPECTED_RESPONSE, ResponseFormatError
from ..http_client import HttpClient, JsonBody

ModelT = TypeVar("ModelT", bound=BaseModel)


def _malformed(data: Any, details: object) -> ResponseFormatError:
    return ResponseFormatError(
        message=UNEXPECTED_RESPONSE,
        status_code=0,
        kind="protocol",
        details=details,
        raw_payload=data,
    )


@dataclass
class BaseClient:
    http: HttpClient
    access_token: str | None = None

    async def _request(self, method: str, path: str, **kwargs: Any) -> JsonBody:
        kwargs.setdefault("bearer", self.access_token)
        return await self.http.request(method, path, **kwargs)

    @staticmethod
    def _parse(model: type[ModelT], data: Any) -> ModelT:
        """Validate a 2xx body, reporting a shape mismatch as an ``ApiError``."""
        try:
            return model.model_validate(data)
        except ModelValidationError as exc:
            raise _malformed(data, exc.errors(include_url=False)) from exc

    @classmethod
    def _parse_list(cls, model: type[ModelT], data: Any) -> list[ModelT]:
        if data is None:
            return []
        if not isinstance(data, list):
            raise _malformed(data, {"expected": "list"})
        return [cls._parse(model, item) for item in data]
