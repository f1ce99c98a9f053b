"""Startup-time helpers for safe config logging."""

from pydantic_settings import BaseSettings

from pagoproxy.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def _safe_value(name: str, value) -> str:
    """Return a printable setting value, redacting secret-like field names."""

    if value is None:
        return "<unset>"
    if any(marker in name.lower() for marker in SECRET_MARKERS):
        return "<redacted>"
    return str(value)


def log_startup_config(config: BaseSettings, fields: list[str]) -> dict[str, str]:
    """Log selected settings fields for quick troubleshooting."""

    snapshot = {name: _safe_value(name, getattr(config, name, None)) for name in fields}
    logger.info("startup_config=%s", snapshot)
    return snapshot
