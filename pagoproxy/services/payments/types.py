"""Validated domain primitives shared by controller and PagoPA shapes.

Anchoring differs per field on purpose: `FiscalCode` is an exact match while
`Iban`, `IUV` and `CodiceStazionePA` are searched anywhere in the value, the same way
PagoPA's own validators test them.
"""

import re
from typing import Annotated, Literal, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def pattern_string(pattern: str):
    """Build a string type that must contain a match for `pattern`."""

    compiled = re.compile(pattern)

    def _check(value: str) -> str:
        if compiled.search(value) is None:
            raise ValueError(f"string does not match pattern {pattern}")
        return value

    return Annotated[str, AfterValidator(_check)]


Iban = pattern_string(r"[a-zA-Z]{2,2}[0-9]{2,2}[a-zA-Z0-9]{1,30}")

FiscalCode = pattern_string(
    r"^[A-Z]{6}[0-9LMNPQRSTUV]{2}[ABCDEHLMPRST][0-9LMNPQRSTUV]{2}[A-Z][0-9LMNPQRSTUV]{3}[A-Z]$"
)

IUV = pattern_string(r"[0-9]{15}|[0-9]{17}")

CodiceStazionePA = pattern_string(r"[0-9]{2}")

# Strict so "10.50" or True never pass as an amount.
Importo = Annotated[float, Field(strict=True, ge=0.11, le=999999.99)]

CodiceContestoPagamento = pattern_string(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)

IdPagamento = Annotated[str, Field(min_length=1)]

AuxDigitCode = Literal["0", "1", "2", "3"]


class FrozenModel(BaseModel):
    """Immutable value object; every composite record derives from this."""

    model_config = ConfigDict(frozen=True)


class CodiceIdRPT(FrozenModel):
    """Identifies one payment notice at the PagoPA node.

    `CodStazPA` is optional here. Whether a given `AuxDigit` needs it is a
    routing rule the node enforces, not this gateway.
    """

    CF: FiscalCode
    AuxDigit: AuxDigitCode
    CodIUV: IUV
    CodStazPA: Optional[CodiceStazionePA] = None
