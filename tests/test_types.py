"""Unit tests for validated domain primitives."""

import pytest
from pydantic import TypeAdapter, ValidationError

from pagoproxy.services.payments.schemas import PaymentsActivationRequest, PaymentsCheckRequest
from pagoproxy.services.payments.types import (
    IUV,
    CodiceContestoPagamento,
    CodiceIdRPT,
    FiscalCode,
    Iban,
    Importo,
)

iban = TypeAdapter(Iban)
fiscal_code = TypeAdapter(FiscalCode)
iuv = TypeAdapter(IUV)
importo = TypeAdapter(Importo)
token = TypeAdapter(CodiceContestoPagamento)


@pytest.mark.parametrize(
    "value",
    ["IT60X0542811101000000123456", "DE89370400440532013000", "gb82WEST12345698765432", "IT001"],
)
def test_valid_iban_round_trips(value):
    assert iban.validate_python(value) == value


@pytest.mark.parametrize("value", ["", "IT6", "12345678", "IT-60-X054", "I"])
def test_invalid_iban_rejected(value):
    with pytest.raises(ValidationError):
        iban.validate_python(value)


def test_iban_rejects_non_string():
    with pytest.raises(ValidationError):
        iban.validate_python(1234)


def test_fiscal_code_is_exact_match():
    """Fiscal code must match the whole string, not a substring."""

    assert fiscal_code.validate_python("RSSMRA80A01H501U") == "RSSMRA80A01H501U"
    with pytest.raises(ValidationError):
        fiscal_code.validate_python("XRSSMRA80A01H501U")
    with pytest.raises(ValidationError):
        fiscal_code.validate_python("RSSMRA80A01H501UX")
    with pytest.raises(ValidationError):
        fiscal_code.validate_python("rssmra80a01h501u")
    with pytest.raises(ValidationError):
        fiscal_code.validate_python("RSSMRA80Z01H501U")


@pytest.mark.parametrize("value", ["123456789012345", "12345678901234567"])
def test_valid_iuv(value):
    assert iuv.validate_python(value) == value


@pytest.mark.parametrize("value", ["", "12345678901234", "ABCDEFGHIJKLMNOPQ"])
def test_invalid_iuv(value):
    with pytest.raises(ValidationError):
        iuv.validate_python(value)


@pytest.mark.parametrize("value", [0.11, 1, 250.5, 999999.99])
def test_amount_inside_range(value):
    assert importo.validate_python(value) == value


@pytest.mark.parametrize("value", [0.10, 0, -1, 1000000.00])
def test_amount_outside_range(value):
    with pytest.raises(ValidationError):
        importo.validate_python(value)


@pytest.mark.parametrize("value", ["10.50", True])
def test_amount_rejects_non_numbers(value):
    with pytest.raises(ValidationError):
        importo.validate_python(value)


def test_token_requires_uuid_layout():
    assert token.validate_python("6f1e6c2a-4f6b-11ee-be56-0242ac120002")
    with pytest.raises(ValidationError):
        token.validate_python("6f1e6c2a4f6b11eebe560242ac120002")
    with pytest.raises(ValidationError):
        token.validate_python("not-a-token")


def test_codice_id_rpt_station_code_is_optional(codice_id_rpt):
    parsed = CodiceIdRPT.model_validate(codice_id_rpt)
    assert parsed.CodStazPA is None

    with_station = CodiceIdRPT.model_validate({**codice_id_rpt, "AuxDigit": "3", "CodStazPA": "02"})
    assert with_station.CodStazPA == "02"


@pytest.mark.parametrize("aux_digit", ["4", "", "00"])
def test_codice_id_rpt_rejects_unknown_aux_digit(codice_id_rpt, aux_digit):
    with pytest.raises(ValidationError):
        CodiceIdRPT.model_validate({**codice_id_rpt, "AuxDigit": aux_digit})


@pytest.mark.parametrize("missing", ["CF", "AuxDigit", "CodIUV"])
def test_codice_id_rpt_mandatory_fields(codice_id_rpt, missing):
    codice_id_rpt.pop(missing)
    with pytest.raises(ValidationError):
        CodiceIdRPT.model_validate(codice_id_rpt)


def test_records_are_immutable(codice_id_rpt):
    request = PaymentsCheckRequest.model_validate({"codiceIdRPT": codice_id_rpt})
    with pytest.raises(ValidationError):
        request.codiceIdRPT = CodiceIdRPT.model_validate(codice_id_rpt)
    with pytest.raises(ValidationError):
        request.codiceIdRPT.CF = "VRDLGU80A01H501X"


def test_activation_request_is_all_or_nothing(codice_id_rpt):
    """One bad field fails the whole record."""

    with pytest.raises(ValidationError):
        PaymentsActivationRequest.model_validate(
            {
                "codiceIdRPT": codice_id_rpt,
                "codiceContestoPagamento": "6f1e6c2a-4f6b-11ee-be56-0242ac120002",
                "importoSingoloVersamento": 0.05,
            }
        )
