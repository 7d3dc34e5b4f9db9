from __future__ import annotations

from decimal import Decimal

import pytest

from exchange_rates.errors import UnsupportedCurrencyError
from exchange_rates.services.money import MINOR_UNITS, convert_minor_amount, minor_unit, to_decimal


@pytest.mark.parametrize(
    ("code", "expected"),
    [("USD", 2), ("eur", 2), ("JPY", 0), ("KRW", 0), ("KWD", 3), ("CLF", 4), ("HRK", 2)],
)
def test_minor_unit_lookup(code, expected):
    assert minor_unit(code) == expected


@pytest.mark.parametrize("code", ["XAU", "XDR", "ABC"])
def test_minor_unit_unknown_currency(code):
    with pytest.raises(UnsupportedCurrencyError):
        minor_unit(code)


def test_minor_units_table_only_holds_three_letter_codes():
    assert all(len(code) == 3 and code.isupper() for code in MINOR_UNITS)
    assert set(MINOR_UNITS.values()) == {0, 2, 3, 4}


def test_to_decimal_avoids_binary_float_artefacts():
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal("1.1915") == Decimal("1.1915")


def test_convert_minor_amount_two_decimals():
    result = convert_minor_amount(100, Decimal("0.8"), "USD")
    assert result == Decimal("0.80")
    assert str(result) == "0.80"


def test_convert_minor_amount_zero_decimals():
    result = convert_minor_amount(100, "0.8", "JPY")
    assert str(result) == "80"


def test_convert_minor_amount_three_decimals():
    assert str(convert_minor_amount(1000, "3.2544", "KWD")) == "3.254"


def test_convert_minor_amount_rounds_half_up_to_minor_units():
    assert convert_minor_amount(1, "0.5", "USD") == Decimal("0.01")
    assert convert_minor_amount(12345, "0.86183", "EUR") == Decimal("106.39")


def test_convert_minor_amount_absorbs_float_noise():
    assert convert_minor_amount(1000, 0.1 + 0.2, "USD") == Decimal("3.00")
    assert convert_minor_amount(3, 0.1, "JPY") == Decimal("0")


def test_convert_minor_amount_unknown_currency():
    with pytest.raises(UnsupportedCurrencyError):
        convert_minor_amount(100, "1.1", "XAU")
