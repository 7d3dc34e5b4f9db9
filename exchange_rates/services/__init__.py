"""Rate lookups and monetary conversions."""

from .exchange_rate import ExchangeRate
from .money import MINOR_UNITS, convert_minor_amount, minor_unit, to_decimal

__all__ = [
    "ExchangeRate",
    "MINOR_UNITS",
    "convert_minor_amount",
    "minor_unit",
    "to_decimal",
]
