"""Central environment-driven settings for the gateway process.

Loaded once at startup. PagoPA identifiers are mandatory; everything else has a
sensible default for local runs (see `.env.example`).
"""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class PagoPaConfig(BaseModel):
    """Fixed identifiers this PSP presents to the PagoPA node on every call."""

    model_config = ConfigDict(frozen=True)

    IDENTIFICATIVO_PSP: str
    IDENTIFICATIVO_INTERMEDIARIO_PSP: str
    IDENTIFICATIVO_CANALE: str
    TOKEN: str


class CommonSettings(BaseSettings):
    """Typed view of runtime configuration from environment variables."""

    service_name: str = "pagopa-proxy"
    log_level: str = "INFO"
    port: int = 3000
    otel_enabled: bool = True
    otel_exporter_otlp_endpoint: str = "http://otel-collector:4318/v1/traces"
    pagopa_url: str = "http://pagopa-node:8080"
    pagopa_timeout_seconds: float = 10.0
    backend_app_url: str = "http://backend-app:8000"
    pagopa_identificativo_psp: str
    pagopa_identificativo_intermediario_psp: str
    pagopa_identificativo_canale: str
    pagopa_token: str
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    def pagopa_config(self) -> PagoPaConfig:
        return PagoPaConfig(
            IDENTIFICATIVO_PSP=self.pagopa_identificativo_psp,
            IDENTIFICATIVO_INTERMEDIARIO_PSP=self.pagopa_identificativo_intermediario_psp,
            IDENTIFICATIVO_CANALE=self.pagopa_identificativo_canale,
            TOKEN=self.pagopa_token,
        )


settings = CommonSettings()
