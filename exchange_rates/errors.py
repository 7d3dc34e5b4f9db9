"""Error taxonomy for the exchange rates client."""

from __future__ import annotations

from datetime import date
from typing import Any


class ExchangeRatesError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, *, payload: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class ValidationError(ExchangeRatesError):
    """Input was rejected locally, before any request was made."""


class InvalidCurrencyError(ValidationError):
    """Raised for currency codes that are not three ASCII letters."""


class InvalidDateError(ValidationError):
    """Raised for dates outside the supported range or inverted ranges."""


class UnsupportedCurrencyError(ValidationError):
    """Raised when a currency has no known ISO 4217 minor unit."""


class ProviderError(ExchangeRatesError):
    """Base class for failures attributable to the rate provider."""


class ProviderUnavailableError(ProviderError):
    """The provider could not be reached (DNS, connection, timeout)."""


class ProviderTimeoutError(ProviderUnavailableError, TimeoutError):
    """The request did not complete within the allotted timeout."""


class ProviderResponseError(ProviderError):
    """The provider answered with a non-success status or an unusable body."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message, payload={"status_code": status_code})
        self.status_code = status_code
        self.body = body


class MissingRateError(ProviderError):
    """A successful response did not contain the requested currency."""

    def __init__(self, currency: str, *, on: date | None = None) -> None:
        message = f"Provider response has no rate for '{currency}'"
        if on is not None:
            message += f" on {on.isoformat()}"
        super().__init__(message + ".", payload={"currency": currency})
        self.currency = currency
        self.date = on
