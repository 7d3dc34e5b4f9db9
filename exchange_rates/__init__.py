"""Client for exchange rate lookups and currency conversions."""

from .config import ExchangeRatesConfig, get_config
from .errors import (
    ExchangeRatesError,
    InvalidCurrencyError,
    InvalidDateError,
    MissingRateError,
    ProviderError,
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
    UnsupportedCurrencyError,
    ValidationError,
)
from .services import ExchangeRate

__all__ = [
    "ExchangeRate",
    "ExchangeRatesConfig",
    "ExchangeRatesError",
    "InvalidCurrencyError",
    "InvalidDateError",
    "MissingRateError",
    "ProviderError",
    "ProviderResponseError",
    "ProviderTimeoutError",
    "ProviderUnavailableError",
    "UnsupportedCurrencyError",
    "ValidationError",
    "get_config",
]
