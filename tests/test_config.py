"""Tests for settings and redacted startup logging."""

from pagoproxy.common.config import CommonSettings
from pagoproxy.common.startup import log_startup_config


def test_pagopa_config_from_environment(monkeypatch):
    monkeypatch.setenv("PAGOPA_IDENTIFICATIVO_PSP", "PSP9")
    monkeypatch.setenv("PAGOPA_TOKEN", "secret")

    config = CommonSettings().pagopa_config()

    assert config.IDENTIFICATIVO_PSP == "PSP9"
    assert config.IDENTIFICATIVO_INTERMEDIARIO_PSP == "INT1"
    assert config.IDENTIFICATIVO_CANALE == "CH1"
    assert config.TOKEN == "secret"


def test_startup_config_redacts_secrets():
    snapshot = log_startup_config(CommonSettings(), ["pagopa_url", "pagopa_token", "missing_field"])

    assert snapshot["pagopa_url"] == "http://pagopa-node:8080"
    assert snapshot["pagopa_token"] == "<redacted>"
    assert snapshot["missing_field"] == "<unset>"
