"""Shared date helpers for provider requests and responses."""

from __future__ import annotations

from datetime import UTC, date, datetime


def utc_today() -> date:
    """Return the current calendar date in UTC."""

    return datetime.now(UTC).date()


def as_date(value: date | datetime | str) -> date:
    """Coerce a date, datetime or ISO ``YYYY-MM-DD`` string into a date."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")


def format_date(value: date) -> str:
    """Render a date the way the provider expects it in paths and params."""

    return value.strftime("%Y-%m-%d")
