"""
Client configuration read from the environment (a .env file is loaded by the entry points).
"""
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

import requests

from rajaongkir.api.client import DEFAULT_BASE_URL, RajaOngkir
from rajaongkir.api.errors import RajaOngkirError
from rajaongkir.api.handle_requests import DEFAULT_TIMEOUT

API_KEY_VAR = "RAJAONGKIR_API_KEY"
BASE_URL_VAR = "RAJAONGKIR_BASE_URL"
TIMEOUT_VAR = "RAJAONGKIR_TIMEOUT"
STRICT_STATUS_VAR = "RAJAONGKIR_STRICT_STATUS"
LOG_LEVEL_VAR = "RAJAONGKIR_LOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(RajaOngkirError):
    """Required settings are missing or malformed."""


@dataclass(frozen=True)
class ClientSettings:
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    strict_status: bool = False
    log_level: str = "INFO"


def load_settings(environ: Mapping[str, str] | None = None) -> ClientSettings:
    env = os.environ if environ is None else environ

    api_key = (env.get(API_KEY_VAR) or "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_VAR} not found in environment. Set it in your .env file or environment.")

    raw_timeout = env.get(TIMEOUT_VAR)
    timeout = DEFAULT_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"{TIMEOUT_VAR} must be a number of seconds, got {raw_timeout!r}") from e
        if timeout <= 0:
            raise ConfigError(f"{TIMEOUT_VAR} must be positive, got {raw_timeout!r}")

    log_level = (env.get(LOG_LEVEL_VAR) or "INFO").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"{LOG_LEVEL_VAR} must be one of {sorted(_LOG_LEVELS)}, got {log_level!r}")

    return ClientSettings(
        api_key=api_key,
        base_url=env.get(BASE_URL_VAR) or DEFAULT_BASE_URL,
        timeout=timeout,
        strict_status=(env.get(STRICT_STATUS_VAR) or "").strip().lower() in _TRUTHY,
        log_level=log_level,
    )


def build_client(settings: ClientSettings, session: requests.Session | None = None) -> RajaOngkir:
    logging.debug(
        f"Building client: base_url={settings.base_url} timeout={settings.timeout}s strict_status={settings.strict_status}"
    )
    return RajaOngkir(
        settings.api_key,
        settings.base_url,
        session,
        timeout=settings.timeout,
        strict_status=settings.strict_status,
    )
