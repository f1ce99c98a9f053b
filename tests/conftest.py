"""Shared fixtures: test settings and canned PagoPA node payloads."""

import os

os.environ.setdefault("PAGOPA_IDENTIFICATIVO_PSP", "PSP1")
os.environ.setdefault("PAGOPA_IDENTIFICATIVO_INTERMEDIARIO_PSP", "INT1")
os.environ.setdefault("PAGOPA_IDENTIFICATIVO_CANALE", "CH1")
os.environ.setdefault("PAGOPA_TOKEN", "TOK1")
os.environ.setdefault("OTEL_ENABLED", "false")

import pytest

from pagoproxy.common.config import PagoPaConfig

@pytest.fixture
def pagopa_config() -> PagoPaConfig:
    return PagoPaConfig(
        IDENTIFICATIVO_PSP="PSP1",
        IDENTIFICATIVO_INTERMEDIARIO_PSP="INT1",
        IDENTIFICATIVO_CANALE="CH1",
        TOKEN="TOK1",
    )


@pytest.fixture
def codice_id_rpt() -> dict:
    return {"CF": "RSSMRA80A01H501U", "AuxDigit": "0", "CodIUV": "123456789012345"}


@pytest.fixture
def ente_beneficiario() -> dict:
    return {
        "identificativoUnivocoBeneficiario": "00000000201",
        "denominazioneBeneficiario": "Comune di Roma",
        "codiceUnitOperBeneficiario": "01",
        "denomUnitOperBeneficiario": "Tributi",
        "indirizzoBeneficiario": "Via del Campidoglio",
        "civicoBeneficiario": "1",
        "capBeneficiario": "00186",
        "localitaBeneficiario": "Roma",
        "provinciaBeneficiario": "RM",
        "nazioneBeneficiario": "IT",
    }


@pytest.fixture
def dati_pagamento_pa(ente_beneficiario) -> dict:
    return {
        "importoSingoloVersamento": 99.05,
        "ibanAccredito": "IT60X0542811101000000123456",
        "causaleVersamento": "TARI 2024 rata unica",
        "enteBeneficiario": ente_beneficiario,
        "spezzoniCausaleVersamento": ["TARI", "2024"],
    }
