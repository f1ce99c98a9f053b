"""Payment flows: convert, call the node, convert back.

Each method returns the converter's `Success`/`Failure`. Transport faults from
the node or the app backend propagate as exceptions for the HTTP edge to map.
"""

from opentelemetry import trace

from pagoproxy.common.backend_app import BackendAppClient
from pagoproxy.common.config import PagoPaConfig
from pagoproxy.common.logging import codice_contesto_pagamento_ctx, logger
from pagoproxy.common.metrics import conversion_results_total
from pagoproxy.common.result import Failure, Result, Success
from pagoproxy.services.payments import converter
from pagoproxy.services.payments.client import PagoPaClient
from pagoproxy.services.payments.pagopa_models import CdInfoWispInput, Esito
from pagoproxy.services.payments.schemas import (
    PaymentsActivationRequest,
    PaymentsActivationResponse,
    PaymentsCheckRequest,
    PaymentsCheckResponse,
    PaymentsStatusUpdateRequest,
)

tracer = trace.get_tracer("pagoproxy.payments")


class PaymentsService:
    """Runs check, activation and status-update flows against the node."""

    def __init__(
        self,
        pagopa_config: PagoPaConfig,
        pagopa_client: PagoPaClient,
        backend_app_client: BackendAppClient,
        service_name: str = "pagopa-proxy",
    ) -> None:
        self.pagopa_config = pagopa_config
        self.pagopa_client = pagopa_client
        self.backend_app_client = backend_app_client
        self.service_name = service_name

    def _record(self, operation: str, result: Result) -> Result:
        if isinstance(result, Failure):
            conversion_results_total.labels(
                service=self.service_name, operation=operation, outcome=result.error.name
            ).inc()
            logger.warning("conversion failed operation=%s error=%s", operation, result.error.name)
        else:
            conversion_results_total.labels(service=self.service_name, operation=operation, outcome="OK").inc()
        return result

    async def check(self, request: PaymentsCheckRequest) -> Result[PaymentsCheckResponse]:
        """Verify a payment notice, opening a new payment flow."""

        token_result = self._record("generate_token", converter.generate_codice_contesto_pagamento())
        if isinstance(token_result, Failure):
            return token_result
        codice_contesto_pagamento = token_result.value
        codice_contesto_pagamento_ctx.set(codice_contesto_pagamento)

        nodo_input = converter.get_payments_check_request_pagopa(
            self.pagopa_config, request, codice_contesto_pagamento
        )
        if isinstance(nodo_input, Failure):
            return self._record("check_request", nodo_input)
        with tracer.start_as_current_span("pagopa.nodoVerificaRPT"):
            output = await self.pagopa_client.nodo_verifica_rpt(nodo_input.value)
        if output.nodoVerificaRPTRisposta.esito == Esito.KO:
            logger.info("nodoVerificaRPT rejected fault=%s", output.nodoVerificaRPTRisposta.fault)
        return self._record(
            "check_response",
            converter.get_payments_check_response(output, codice_contesto_pagamento),
        )

    async def activate(self, request: PaymentsActivationRequest) -> Result[PaymentsActivationResponse]:
        """Lock the amount of a previously checked payment notice."""

        codice_contesto_pagamento_ctx.set(request.codiceContestoPagamento)
        nodo_input = converter.get_payments_activation_request_pagopa(self.pagopa_config, request)
        if isinstance(nodo_input, Failure):
            return self._record("activation_request", nodo_input)
        with tracer.start_as_current_span("pagopa.nodoAttivaRPT"):
            output = await self.pagopa_client.nodo_attiva_rpt(nodo_input.value)
        if output.nodoAttivaRPTRisposta.esito == Esito.KO:
            logger.info("nodoAttivaRPT rejected fault=%s", output.nodoAttivaRPTRisposta.fault)
        return self._record("activation_response", converter.get_payments_activation_response(output))

    async def update_status(self, push: CdInfoWispInput) -> Result[PaymentsStatusUpdateRequest]:
        """Decode a node status push and relay it to the app backend."""

        result = self._record("status_update", converter.get_payments_status_update_request(push))
        if isinstance(result, Success):
            update = result.value
            codice_contesto_pagamento_ctx.set(update.codiceContestoPagamento)
            await self.backend_app_client.post("status_update", "/payments/status", update.model_dump())
        return result
