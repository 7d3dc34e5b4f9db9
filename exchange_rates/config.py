"""Environment-driven configuration for the exchange rates client."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

from exchange_rates.logging import DEFAULT_LOG_FORMAT
from exchange_rates.providers.http_client import DEFAULT_BASE_URL


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ExchangeRatesConfig:
    """Settings for reaching the provider and for the package logger."""

    base_url: str = DEFAULT_BASE_URL
    api_key: str | None = None
    timeout: float = 5.0
    log_level: str = "INFO"
    log_json_enabled: bool = False
    log_format: str = DEFAULT_LOG_FORMAT


def get_config(env_file: str | os.PathLike[str] | None = None) -> ExchangeRatesConfig:
    """Build the configuration from environment variables.

    Args:
        env_file: Optional path to a ``.env`` file loaded before the
            environment is read. Variables already set take precedence.

    Raises:
        ValueError: If the base URL or timeout is not usable.
    """

    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    config = ExchangeRatesConfig(
        base_url=_get_env("EXCHANGE_RATES_API_BASE_URL", DEFAULT_BASE_URL),
        api_key=os.getenv("EXCHANGE_RATES_API_KEY") or None,
        timeout=float(_get_env("REQUEST_TIMEOUT_SECONDS", "5")),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_json_enabled=_to_bool(_get_env("LOG_JSON_ENABLED", "false")),
        log_format=_get_env("LOG_FORMAT", DEFAULT_LOG_FORMAT),
    )
    _validate(config)
    return config


def _validate(config: ExchangeRatesConfig) -> None:
    parsed = urlparse(config.base_url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise ValueError(
            f"Unsupported EXCHANGE_RATES_API_BASE_URL '{config.base_url}'. "
            "Expected an absolute http(s) URL."
        )
    if config.timeout <= 0:
        raise ValueError(f"REQUEST_TIMEOUT_SECONDS must be positive, got {config.timeout}")
