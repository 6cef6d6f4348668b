from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from .config import ClientConfig
from .diagnostics import DiagnosticLogger
from .error_mapper import map_error
from .exceptions import GENERIC_REQUEST_FAILURE, ApiError, TransportError
from .result import Err, ErrorKind, Ok, Result

JsonBody = dict[str, Any] | list[Any] | None

log = DiagnosticLogger("gateway")


@dataclass
class HttpClient:
    """Single chokepoint for calls to the ticketing API.

    Does not retry and does not cache. Failures are raised as ``ApiError``
    from ``request`` or returned as ``Err`` from ``call``.
    """

    config: ClientConfig
    transport: httpx.AsyncBaseTransport | None = None
    _client: httpx.AsyncClient | None = field(default=None, init=False, repr=False)

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_base_url,
                timeout=self.config.timeout_seconds,
                verify=self.config.verify_ssl,
                transport=self.transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        bearer: str | None = None,
    ) -> JsonBody:
        normalized_method = method.upper()
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"

        log.debug("API request", path=path, method=normalized_method)
        try:
            response = await self._http().request(
                normalized_method,
                path,
                headers=headers,
                json=json_body,
            )
        except httpx.HTTPError as exc:
            message = str(exc).strip() or GENERIC_REQUEST_FAILURE
            log.error("API transport failure", path=path, method=normalized_method, message=message)
            raise TransportError(
                message=message,
                status_code=0,
                kind="transport",
                details={"type": type(exc).__name__},
            ) from exc

        if response.is_success:
            if not response.content:
                return None
            try:
                return response.json()
            except ValueError:
                return None

        try:
            payload: object = response.json()
        except ValueError:
            payload = None
        error = map_error(response.status_code, payload, response.reason_phrase)
        log.warn(
            "API request failed",
            path=path,
            method=normalized_method,
            status=response.status_code,
            message=error.message,
        )
        raise error

    async def call(
        self,
        method: str,
        path: str,
        *,
        json_body: dict[str, Any] | None = None,
        bearer: str | None = None,
    ) -> Result[JsonBody]:
        try:
            return Ok(await self.request(method, path, json_body=json_body, bearer=bearer))
        except ApiError as error:
            return to_err(error)


def to_err(error: ApiError) -> Err:
    kind = ErrorKind.TRANSPORT if isinstance(error, TransportError) else ErrorKind.PROTOCOL
    return Err(kind=kind, message=error.message, status_code=error.status_code or None)
