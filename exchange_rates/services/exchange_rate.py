"""Public facade combining validation, provider requests and conversions."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, localcontext
from typing import Any, TypeVar

from exchange_rates.config import ExchangeRatesConfig
from exchange_rates.errors import InvalidCurrencyError, MissingRateError, ProviderResponseError
from exchange_rates.providers.http_client import HTTPClient, HTTPClientConfig
from exchange_rates.providers.request_builder import RequestBuilder
from exchange_rates.utils.datetime import as_date, format_date
from exchange_rates.validation import (
    validate_currency_code,
    validate_date,
    validate_start_and_end_dates,
)

from .money import convert_minor_amount, get_decimal_context, minor_unit, to_decimal

DateLike = date | datetime | str
_V = TypeVar("_V")


class ExchangeRate:
    """Looks up exchange rates and converts amounts between currencies.

    Every operation validates its input before issuing a single request and
    accepts an optional ``timeout`` in seconds that is handed to the
    transport.
    """

    def __init__(self, request_builder: RequestBuilder | None = None) -> None:
        self._request_builder = request_builder or RequestBuilder(HTTPClient())

    @classmethod
    def from_config(cls, config: ExchangeRatesConfig) -> ExchangeRate:
        client = HTTPClient(
            HTTPClientConfig(
                base_url=config.base_url,
                timeout=config.timeout,
                api_key=config.api_key,
            )
        )
        return cls(RequestBuilder(client))

    def currencies(self, seed: Iterable[str] | None = None, *, timeout: float | None = None) -> list[str]:
        """Return ``seed`` followed by the base and every quoted currency.

        Codes keep the provider's order and are neither sorted nor deduplicated.
        """

        if isinstance(seed, str):
            raise TypeError("seed must be an iterable of currency codes, not a single string")

        response = self._request_builder.make_request("/latest", {}, timeout=timeout)

        currencies = list(seed or [])
        currencies.append(_require_base(response))
        currencies.extend(response["rates"])
        return currencies

    def exchange_rate(
        self,
        from_: str,
        to: str | Sequence[str],
        date: DateLike | None = None,
        *,
        timeout: float | None = None,
    ) -> Decimal | dict[str, Decimal]:
        """Return the rate from ``from_`` to ``to`` on ``date`` (latest if omitted).

        ``to`` may be a list of codes, in which case a mapping of code to rate
        is returned in the order requested.
        """

        base = validate_currency_code(from_, field="from")
        targets = _validate_targets(to)

        params: dict[str, Any] = {"base": base}
        if not isinstance(targets, str):
            params["symbols"] = targets

        path = "/latest"
        if date is not None:
            path = "/" + format_date(validate_date(date))

        response = self._request_builder.make_request(path, params, timeout=timeout)
        rates = response["rates"]

        if isinstance(targets, str):
            return _pick_rate(rates, targets)
        return {code: _pick_rate(rates, code) for code in targets}

    def exchange_rate_between_date_range(
        self,
        from_: str,
        to: str,
        start: DateLike,
        end: DateLike,
        seed: Mapping[DateLike, Decimal] | None = None,
        *,
        timeout: float | None = None,
    ) -> dict[date, Decimal]:
        """Return the daily rates between ``start`` and ``end``, oldest first.

        Provider dates are merged over ``seed``; the result is always ordered
        chronologically regardless of the order the provider used.
        """

        base = validate_currency_code(from_, field="from")
        target = validate_currency_code(to, field="to")
        start_day, end_day = validate_start_and_end_dates(start, end)

        response = self._request_builder.make_request(
            "/history",
            {
                "base": base,
                "start_at": format_date(start_day),
                "end_at": format_date(end_day),
                "symbols": target,
            },
            timeout=timeout,
        )

        rates = _keyed_by_date(seed)
        for raw_day, day_rates in response["rates"].items():
            day = _response_date(raw_day)
            if not isinstance(day_rates, Mapping):
                raise ProviderResponseError(
                    f"Provider history entry for {raw_day} is not an object",
                    body=response,
                )
            rates[day] = _pick_rate(day_rates, target, on=day)

        return _sorted_by_date(rates)

    def convert(
        self,
        value: int | float | Decimal,
        from_: str,
        to: str | Sequence[str],
        date: DateLike | None = None,
        *,
        timeout: float | None = None,
    ) -> float | dict[str, float]:
        """Convert ``value`` using the rate from :meth:`exchange_rate`."""

        amount = to_decimal(value)
        rate = self.exchange_rate(from_, to, date, timeout=timeout)

        with localcontext(get_decimal_context()):
            if isinstance(rate, dict):
                return {code: float(code_rate * amount) for code, code_rate in rate.items()}
            return float(rate * amount)

    def convert_between_date_range(
        self,
        value: int,
        from_: str,
        to: str,
        start: DateLike,
        end: DateLike,
        seed: Mapping[DateLike, Decimal] | None = None,
        *,
        timeout: float | None = None,
    ) -> dict[date, Decimal]:
        """Convert ``value`` minor units of ``from_`` for every day in the range.

        Each amount is rounded to whole minor units of ``from_`` and returned
        in major units, e.g. ``100`` USD cents at 0.8 gives ``Decimal("0.80")``.
        """

        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be an integer amount of minor units, got {type(value).__name__}")

        source = validate_currency_code(from_, field="from")
        minor_unit(source)

        rates = self.exchange_rate_between_date_range(source, to, start, end, timeout=timeout)

        conversions = _keyed_by_date(seed)
        for day, rate in rates.items():
            conversions[day] = convert_minor_amount(value, rate, source)

        return _sorted_by_date(conversions)


def _validate_targets(to: str | Sequence[str]) -> str | list[str]:
    if isinstance(to, str):
        return validate_currency_code(to, field="to")
    if not isinstance(to, list | tuple) or not to:
        raise InvalidCurrencyError(
            "'to' must be a currency code or a non-empty list of codes.",
            payload={"field": "to"},
        )
    return [validate_currency_code(code, field="to") for code in to]


def _require_base(response: Mapping[str, Any]) -> str:
    base = response.get("base")
    if not isinstance(base, str):
        raise ProviderResponseError("Provider response missing 'base' field", body=response)
    return base


def _pick_rate(rates: Mapping[str, Any], currency: str, *, on: date | None = None) -> Decimal:
    value = rates.get(currency)
    if value is None:
        raise MissingRateError(currency, on=on)
    try:
        rate = to_decimal(value)
    except InvalidOperation as exc:
        raise ProviderResponseError(
            f"Provider rate for '{currency}' is not numeric: {value!r}",
            body=rates,
        ) from exc

    if not rate.is_finite() or rate <= 0:
        raise ProviderResponseError(
            f"Provider rate for '{currency}' must be a positive number, got {value!r}",
            body=rates,
        )
    return rate


def _response_date(raw: str) -> date:
    try:
        return as_date(raw)
    except (TypeError, ValueError) as exc:
        raise ProviderResponseError(f"Provider returned an invalid date key {raw!r}") from exc


def _keyed_by_date(seed: Mapping[DateLike, _V] | None) -> dict[date, _V]:
    return {as_date(day): value for day, value in (seed or {}).items()}


def _sorted_by_date(values: Mapping[date, _V]) -> dict[date, _V]:
    return dict(sorted(values.items()))
