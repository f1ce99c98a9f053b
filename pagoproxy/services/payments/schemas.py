"""Controller-facing request/response records for payment endpoints."""

from typing import Optional

from pagoproxy.services.payments.types import (
    CodiceContestoPagamento,
    CodiceIdRPT,
    FrozenModel,
    Iban,
    IdPagamento,
    Importo,
)


class _EnteBeneficiarioDetails(FrozenModel):
    denominazioneBeneficiario: str
    codiceUnitOperBeneficiario: Optional[str] = None
    denomUnitOperBeneficiario: Optional[str] = None
    indirizzoBeneficiario: Optional[str] = None
    civicoBeneficiario: Optional[str] = None
    capBeneficiario: Optional[str] = None
    localitaBeneficiario: Optional[str] = None
    provinciaBeneficiario: Optional[str] = None
    nazioneBeneficiario: Optional[str] = None


class CheckEnteBeneficiario(_EnteBeneficiarioDetails):
    """Payee as returned by the check endpoint.

    The identifier is published as `codiceIdentificativoUnivoco` here, while
    activation keeps PagoPA's `identificativoUnivocoBeneficiario`. Clients
    depend on both names.
    """

    codiceIdentificativoUnivoco: str


class ActivationEnteBeneficiario(_EnteBeneficiarioDetails):
    """Payee as returned by the activation endpoint."""

    identificativoUnivocoBeneficiario: str


class PaymentsCheckRequest(FrozenModel):
    codiceIdRPT: CodiceIdRPT


class PaymentsCheckResponse(FrozenModel):
    importoSingoloVersamento: Importo
    codiceContestoPagamento: CodiceContestoPagamento
    ibanAccredito: Iban
    causaleVersamento: str
    enteBeneficiario: CheckEnteBeneficiario
    spezzoniCausaleVersamento: Optional[list[str]] = None


class PaymentsActivationRequest(FrozenModel):
    codiceIdRPT: CodiceIdRPT
    codiceContestoPagamento: CodiceContestoPagamento
    importoSingoloVersamento: Importo


class PaymentsActivationResponse(FrozenModel):
    importoSingoloVersamento: Importo
    ibanAccredito: Iban
    causaleVersamento: str
    enteBeneficiario: ActivationEnteBeneficiario
    spezzoniCausaleVersamento: Optional[list[str]] = None


class PaymentsStatusUpdateRequest(FrozenModel):
    """Status push from the node, relayed to the app backend."""

    codiceContestoPagamento: CodiceContestoPagamento
    idPagamento: IdPagamento
