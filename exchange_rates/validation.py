"""Validation helpers run before any request is sent to the provider."""

from __future__ import annotations

import re
from datetime import date, datetime

from exchange_rates.errors import InvalidCurrencyError, InvalidDateError
from exchange_rates.utils.datetime import as_date, format_date, utc_today

# First day of published euro reference rates.
EARLIEST_SUPPORTED_DATE = date(1999, 1, 4)

_CURRENCY_CODE_PATTERN = re.compile(r"[A-Z]{3}")


def validate_currency_code(code: str, *, field: str = "currency_code") -> str:
    """Ensure ``code`` looks like an ISO 4217 code and return it upper-cased."""

    if not isinstance(code, str):
        raise InvalidCurrencyError(
            f"'{field}' must be a string, got {type(code).__name__}.",
            payload={"field": field},
        )

    normalized = code.upper()
    if not code.isascii() or not _CURRENCY_CODE_PATTERN.fullmatch(normalized):
        raise InvalidCurrencyError(
            f"Invalid currency code '{code}'. Expected three letters, e.g. 'USD'.",
            payload={"field": field, "code": code},
        )

    return normalized


def validate_date(value: date | datetime | str, *, field: str = "date") -> date:
    """Ensure ``value`` is a date the provider can have rates for."""

    try:
        day = as_date(value)
    except (TypeError, ValueError) as exc:
        raise InvalidDateError(
            f"'{field}' is not a valid date: {value!r}.",
            payload={"field": field},
        ) from exc

    if day > utc_today():
        raise InvalidDateError(
            f"Exchange rates are not available for future dates ({format_date(day)}).",
            payload={"field": field, "date": format_date(day)},
        )
    if day < EARLIEST_SUPPORTED_DATE:
        raise InvalidDateError(
            f"Exchange rates are only available from {format_date(EARLIEST_SUPPORTED_DATE)} "
            f"onwards ({format_date(day)}).",
            payload={"field": field, "date": format_date(day)},
        )

    return day


def validate_start_and_end_dates(
    start: date | datetime | str,
    end: date | datetime | str,
) -> tuple[date, date]:
    """Validate both ends of a range and that the range is not inverted."""

    start_day = validate_date(start, field="start")
    end_day = validate_date(end, field="end")

    if start_day > end_day:
        raise InvalidDateError(
            f"The start date ({format_date(start_day)}) must not be after "
            f"the end date ({format_date(end_day)}).",
            payload={"field": "start", "start": format_date(start_day), "end": format_date(end_day)},
        )

    return start_day, end_day
