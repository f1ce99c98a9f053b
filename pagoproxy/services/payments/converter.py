"""Payments converter.

Maps controller requests to PagoPA node inputs and node outputs back to
controller responses. Every function is pure and returns a `Success` or a
`Failure` carrying a `ControllerError`; only configuration defects raise.
"""

import uuid
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from pagoproxy.common.config import PagoPaConfig
from pagoproxy.common.errors import ControllerError
from pagoproxy.common.result import Failure, Result, Success
from pagoproxy.services.payments.pagopa_models import (
    CdInfoWispInput,
    CodificaInfrastrutturaPSP,
    CtDatiPagamentoPSP,
    Esito,
    NodoAttivaRPTInput,
    NodoAttivaRPTOutput,
    NodoVerificaRPTInput,
    NodoVerificaRPTOutput,
)
from pagoproxy.services.payments.schemas import (
    PaymentsActivationRequest,
    PaymentsActivationResponse,
    PaymentsCheckRequest,
    PaymentsCheckResponse,
    PaymentsStatusUpdateRequest,
)
from pagoproxy.services.payments.types import CodiceContestoPagamento

_codice_contesto_pagamento_adapter = TypeAdapter(CodiceContestoPagamento)

_ENTE_BENEFICIARIO_DETAILS = (
    "denominazioneBeneficiario",
    "codiceUnitOperBeneficiario",
    "denomUnitOperBeneficiario",
    "indirizzoBeneficiario",
    "civicoBeneficiario",
    "capBeneficiario",
    "localitaBeneficiario",
    "provinciaBeneficiario",
    "nazioneBeneficiario",
)


def _dati_pagamento_fields(dati: Any, identifier_key: str) -> dict:
    """Flatten a raw `datiPagamentoPA` block into response fields.

    A block that is not an object yields absent fields and a malformed
    beneficiary is passed on as-is, so response decoding rejects both.
    """

    if not isinstance(dati, dict):
        dati = {}
    ente = dati.get("enteBeneficiario")
    if isinstance(ente, dict):
        ente = {
            identifier_key: ente.get("identificativoUnivocoBeneficiario"),
            **{key: ente.get(key) for key in _ENTE_BENEFICIARIO_DETAILS},
        }
    return {
        "importoSingoloVersamento": dati.get("importoSingoloVersamento"),
        "ibanAccredito": dati.get("ibanAccredito"),
        "causaleVersamento": dati.get("causaleVersamento"),
        "enteBeneficiario": ente,
        "spezzoniCausaleVersamento": dati.get("spezzoniCausaleVersamento"),
    }


def _rejected_or_unknown(esito: Any) -> Optional[Failure]:
    """Classify a node outcome other than `OK`; `None` means go on decoding."""

    if esito == Esito.KO:
        return Failure(ControllerError.REQUEST_REJECTED)
    if esito != Esito.OK:
        return Failure(ControllerError.ERROR_INVALID_INPUT)
    return None


def get_payments_check_request_pagopa(
    pagopa_config: PagoPaConfig,
    payments_check_request: PaymentsCheckRequest,
    codice_contesto_pagamento: str,
) -> Result[NodoVerificaRPTInput]:
    """Convert a controller check request into a `nodoVerificaRPT` input."""

    return Success(
        NodoVerificaRPTInput(
            identificativoPSP=pagopa_config.IDENTIFICATIVO_PSP,
            identificativoIntermediarioPSP=pagopa_config.IDENTIFICATIVO_INTERMEDIARIO_PSP,
            identificativoCanale=pagopa_config.IDENTIFICATIVO_CANALE,
            password=pagopa_config.TOKEN,
            codiceContestoPagamento=codice_contesto_pagamento,
            codificaInfrastrutturaPSP=CodificaInfrastrutturaPSP.QR_CODE,
            codiceIdRPT=payments_check_request.codiceIdRPT,
        )
    )


def get_payments_check_response(
    nodo_verifica_rpt_output: NodoVerificaRPTOutput,
    codice_contesto_pagamento: str,
) -> Result[PaymentsCheckResponse]:
    """Convert a `nodoVerificaRPT` output into a controller check response."""

    risposta = nodo_verifica_rpt_output.nodoVerificaRPTRisposta
    failure = _rejected_or_unknown(risposta.esito)
    if failure is not None:
        return failure
    try:
        response = PaymentsCheckResponse.model_validate(
            {
                "codiceContestoPagamento": codice_contesto_pagamento,
                **_dati_pagamento_fields(risposta.datiPagamentoPA, "codiceIdentificativoUnivoco"),
            }
        )
    except ValidationError:
        return Failure(ControllerError.ERROR_INVALID_INPUT)
    return Success(response)


def get_payments_activation_request_pagopa(
    pagopa_config: PagoPaConfig,
    payments_activation_request: PaymentsActivationRequest,
) -> Result[NodoAttivaRPTInput]:
    """Convert a controller activation request into a `nodoAttivaRPT` input.

    The node carries the channel identity twice, once for the inquiring actor
    and once for the paying one; this PSP is both.
    """

    return Success(
        NodoAttivaRPTInput(
            identificativoPSP=pagopa_config.IDENTIFICATIVO_PSP,
            identificativoIntermediarioPSP=pagopa_config.IDENTIFICATIVO_INTERMEDIARIO_PSP,
            identificativoCanale=pagopa_config.IDENTIFICATIVO_CANALE,
            password=pagopa_config.TOKEN,
            codiceContestoPagamento=payments_activation_request.codiceContestoPagamento,
            identificativoIntermediarioPSPPagamento=pagopa_config.IDENTIFICATIVO_INTERMEDIARIO_PSP,
            identificativoCanalePagamento=pagopa_config.IDENTIFICATIVO_CANALE,
            codificaInfrastrutturaPSP=CodificaInfrastrutturaPSP.QR_CODE,
            codiceIdRPT=payments_activation_request.codiceIdRPT,
            datiPagamentoPSP=CtDatiPagamentoPSP(
                importoSingoloVersamento=payments_activation_request.importoSingoloVersamento
            ),
        )
    )


def get_payments_activation_response(
    nodo_attiva_rpt_output: NodoAttivaRPTOutput,
) -> Result[PaymentsActivationResponse]:
    """Convert a `nodoAttivaRPT` output into a controller activation response."""

    risposta = nodo_attiva_rpt_output.nodoAttivaRPTRisposta
    failure = _rejected_or_unknown(risposta.esito)
    if failure is not None:
        return failure
    try:
        response = PaymentsActivationResponse.model_validate(
            _dati_pagamento_fields(risposta.datiPagamentoPA, "identificativoUnivocoBeneficiario")
        )
    except ValidationError:
        return Failure(ControllerError.ERROR_INVALID_INPUT)
    return Success(response)


def get_payments_status_update_request(
    cd_info_wisp_input: CdInfoWispInput,
) -> Result[PaymentsStatusUpdateRequest]:
    """Convert a node status push into a controller status update."""

    try:
        request = PaymentsStatusUpdateRequest.model_validate(
            {
                "codiceContestoPagamento": cd_info_wisp_input.codiceContestoPagamento,
                "idPagamento": cd_info_wisp_input.idPagamento,
            }
        )
    except ValidationError:
        return Failure(ControllerError.ERROR_INVALID_INPUT)
    return Success(request)


def generate_codice_contesto_pagamento() -> Result[str]:
    """Mint the session token that ties together one check/activate flow."""

    try:
        token = _codice_contesto_pagamento_adapter.validate_python(str(uuid.uuid1()))
    except ValidationError:
        return Failure(ControllerError.ERROR_INTERNAL)
    return Success(token)
