"""Relay client towards the app backend that owns users and notifications."""

from typing import Any

import httpx

from pagoproxy.common.config import settings
from pagoproxy.common.logging import logger, trace_id_ctx
from pagoproxy.common.metrics import backend_app_relays_total


class BackendAppError(Exception):
    """Raised when the app backend rejects or cannot receive a relay."""


class BackendAppClient:
    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.backend_app_url).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def _send(self, method: str, kind: str, path: str, **kwargs) -> httpx.Response:
        headers = {"x-trace-id": trace_id_ctx.get(), **kwargs.pop("headers", {})}
        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                resp = await client.request(method, f"{self.base_url}{path}", headers=headers, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            backend_app_relays_total.labels(service=settings.service_name, kind=kind, status="error").inc()
            logger.error("backend app relay failed kind=%s error=%s", kind, exc)
            raise BackendAppError(f"{kind} relay failed") from exc
        backend_app_relays_total.labels(service=settings.service_name, kind=kind, status="ok").inc()
        return resp

    async def post(self, kind: str, path: str, payload: dict) -> None:
        """Forward one JSON payload; any transport or HTTP error raises."""

        await self._send("POST", kind, path, json=payload)

    async def get(
        self,
        kind: str,
        path: str,
        params: dict | None = None,
        headers: dict | None = None,
    ) -> Any:
        """Fetch a JSON document on behalf of the caller."""

        resp = await self._send("GET", kind, path, params=params, headers=headers or {})
        try:
            return resp.json()
        except ValueError as exc:
            logger.error("backend app answered non-JSON kind=%s", kind)
            raise BackendAppError(f"{kind} relay failed") from exc
