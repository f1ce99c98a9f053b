"""HTTP transport to the PagoPA node RPC endpoints."""

import httpx
from pydantic import BaseModel, ValidationError

from pagoproxy.common.config import settings
from pagoproxy.common.logging import logger
from pagoproxy.common.metrics import pagopa_call_failures_total, pagopa_call_seconds
from pagoproxy.services.payments.pagopa_models import (
    NodoAttivaRPTInput,
    NodoAttivaRPTOutput,
    NodoVerificaRPTInput,
    NodoVerificaRPTOutput,
)


class PagoPaClientError(Exception):
    """Raised when the node cannot be reached or answers with garbage."""


class PagoPaClient:
    """Posts node inputs as JSON and decodes the typed outputs."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.pagopa_url).rstrip("/")
        self.timeout_seconds = timeout_seconds or settings.pagopa_timeout_seconds
        self.transport = transport

    async def _call(self, operation: str, payload: BaseModel, output_model: type[BaseModel]):
        with pagopa_call_seconds.labels(service=settings.service_name, operation=operation).time():
            try:
                async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                    resp = await client.post(
                        f"{self.base_url}/{operation}",
                        json=payload.model_dump(mode="json", exclude_none=True),
                    )
                resp.raise_for_status()
                return output_model.model_validate(resp.json())
            except (httpx.HTTPError, ValueError, ValidationError) as exc:
                pagopa_call_failures_total.labels(service=settings.service_name, operation=operation).inc()
                logger.error("pagopa call failed operation=%s error=%s", operation, exc)
                raise PagoPaClientError(f"{operation} failed") from exc

    async def nodo_verifica_rpt(self, payload: NodoVerificaRPTInput) -> NodoVerificaRPTOutput:
        return await self._call("nodoVerificaRPT", payload, NodoVerificaRPTOutput)

    async def nodo_attiva_rpt(self, payload: NodoAttivaRPTInput) -> NodoAttivaRPTOutput:
        return await self._call("nodoAttivaRPT", payload, NodoAttivaRPTOutput)
