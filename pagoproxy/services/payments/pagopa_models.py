"""Wire shapes of the PagoPA node RPC contract (PPTPort).

Field names and nesting must match the node verbatim. Inputs are built by the
converters and are fully typed. Outputs only fix the response envelope; the
outcome flag and the payment data stay raw, so validation happens once, in the
converters.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from pagoproxy.services.payments.types import CodiceIdRPT, FrozenModel


class Esito(str, Enum):
    OK = "OK"
    KO = "KO"


class CodificaInfrastrutturaPSP(str, Enum):
    QR_CODE = "QR_CODE"
    BARCODE_128_AIM = "BARCODE-128-AIM"
    BARCODE_GS1_128 = "BARCODE-GS1-128"


class NodoOutputModel(BaseModel):
    """Transport-decoded node response; tolerant of extra fields."""

    model_config = ConfigDict(frozen=True, extra="allow")


class EsitoNodoVerificaRPTRisposta(NodoOutputModel):
    esito: Optional[Any] = None
    fault: Optional[Any] = None
    datiPagamentoPA: Optional[Any] = None


class NodoVerificaRPTOutput(NodoOutputModel):
    nodoVerificaRPTRisposta: EsitoNodoVerificaRPTRisposta


class EsitoNodoAttivaRPTRisposta(NodoOutputModel):
    esito: Optional[Any] = None
    fault: Optional[Any] = None
    datiPagamentoPA: Optional[Any] = None


class NodoAttivaRPTOutput(NodoOutputModel):
    nodoAttivaRPTRisposta: EsitoNodoAttivaRPTRisposta


class CdInfoWispInput(NodoOutputModel):
    """Status push sent by the node once a payment instance exists."""

    identificativoDominio: Optional[Any] = None
    identificativoUnivocoVersamento: Optional[Any] = None
    codiceContestoPagamento: Optional[Any] = None
    idPagamento: Optional[Any] = None


class NodoVerificaRPTInput(FrozenModel):
    identificativoPSP: str
    identificativoIntermediarioPSP: str
    identificativoCanale: str
    password: str
    codiceContestoPagamento: str
    codificaInfrastrutturaPSP: CodificaInfrastrutturaPSP
    codiceIdRPT: CodiceIdRPT


class CtDatiPagamentoPSP(FrozenModel):
    importoSingoloVersamento: float


class NodoAttivaRPTInput(FrozenModel):
    identificativoPSP: str
    identificativoIntermediarioPSP: str
    identificativoCanale: str
    password: str
    codiceContestoPagamento: str
    identificativoIntermediarioPSPPagamento: str
    identificativoCanalePagamento: str
    codificaInfrastrutturaPSP: CodificaInfrastrutturaPSP
    codiceIdRPT: CodiceIdRPT
    datiPagamentoPSP: CtDatiPagamentoPSP
