from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_NAMES = {
    "auth_username": "AUTH_USERNAME",
    "auth_password": "AUTH_PASSWORD",
    "host": "HOST",
    "http_port": "HTTP_PORT",
    "https_port": "HTTPS_PORT",
    "tls_enabled": "TLS_ENABLED",
    "tls_cert_file": "TLS_CERT_FILE",
    "tls_key_file": "TLS_KEY_FILE",
    "log_level": "LOG_LEVEL",
}


class ConfigError(ValueError):
    """Raised when the process environment cannot produce valid settings."""


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    auth_username: str = Field(min_length=1)
    auth_password: str = Field(min_length=1)
    host: str = "0.0.0.0"
    http_port: int = Field(default=80, ge=1, le=65535)
    https_port: int = Field(default=443, ge=1, le=65535)
    tls_enabled: bool = True
    tls_cert_file: Path = Path("./localhost.pem")
    tls_key_file: Path = Path("./localhost-key.pem")
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        field = error["loc"][0] if error["loc"] else ""
        name = ENV_NAMES.get(str(field), str(field))
        problems.append(f"{name}: {error['msg']} (got {error.get('input')!r})")
    return "; ".join(problems)


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build :class:`Settings` from environment variables.

    Unset or empty variables fall back to the field defaults. Credentials
    are mandatory. When TLS is enabled the certificate and key files must
    already exist, since the TLS listener cannot start without them.
    """
    env = os.environ if environ is None else environ

    if not env.get("AUTH_USERNAME"):
        raise ConfigError("basic auth username must be provided")
    if not env.get("AUTH_PASSWORD"):
        raise ConfigError("basic auth password must be provided")

    values = {}
    for field, name in ENV_NAMES.items():
        raw = env.get(name)
        if raw is None:
            continue
        if field.startswith("auth_"):
            values[field] = raw
        elif raw.strip():
            values[field] = raw.strip()
    try:
        settings = Settings(**values)
    except ValidationError as exc:
        raise ConfigError(_describe(exc)) from exc

    if settings.tls_enabled:
        if not settings.tls_cert_file.is_file():
            raise ConfigError(f"TLS certificate file not found: {settings.tls_cert_file}")
        if not settings.tls_key_file.is_file():
            raise ConfigError(f"TLS key file not found: {settings.tls_key_file}")

    return settings


@lru_cache
def get_settings() -> Settings:
    return load_settings()


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging once at process startup."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
