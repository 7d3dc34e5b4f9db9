"""ISO 4217 minor units and Decimal arithmetic for monetary conversions."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP, Context, Decimal, getcontext, localcontext

from exchange_rates.errors import UnsupportedCurrencyError

ROUNDING_PRECISION = 28

_ZERO_DECIMALS = (
    "BIF CLP DJF GNF ISK JPY KMF KRW PYG RWF UGX UYI VND VUV XAF XOF XPF"
)
_THREE_DECIMALS = "BHD IQD JOD KWD LYD OMR TND"
_FOUR_DECIMALS = "CLF UYW"
_TWO_DECIMALS = (
    "AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BMD BND BOB BOV BRL BSD "
    "BTN BWP BYN BZD CAD CDF CHE CHF CHW CNY COP COU CRC CUP CVE CZK DKK DOP DZD EGP "
    "ERN ETB EUR FJD FKP GBP GEL GHS GIP GMD GTQ GYD HKD HNL HTG HUF IDR ILS INR IRR "
    "JMD KES KGS KHR KPW KYD KZT LAK LBP LKR LRD LSL MAD MDL MGA MKD MMK MNT MOP MRU "
    "MUR MVR MWK MXN MXV MYR MZN NAD NGN NIO NOK NPR NZD PAB PEN PGK PHP PKR PLN QAR "
    "RON RSD RUB SAR SBD SCR SDG SEK SGD SHP SLE SOS SRD SSP STN SVC SYP SZL THB TJS "
    "TMT TOP TRY TTD TWD TZS UAH USD USN UYU UZS VED VES WST XCD XCG YER ZAR ZMW ZWL"
)
# Withdrawn codes that still appear in historical reference rates.
_HISTORICAL_TWO_DECIMALS = "CYP EEK HRK LTL LVL MTL SIT SKK"

MINOR_UNITS: dict[str, int] = {
    **{code: 2 for code in _HISTORICAL_TWO_DECIMALS.split()},
    **{code: 2 for code in _TWO_DECIMALS.split()},
    **{code: 0 for code in _ZERO_DECIMALS.split()},
    **{code: 3 for code in _THREE_DECIMALS.split()},
    **{code: 4 for code in _FOUR_DECIMALS.split()},
}


def get_decimal_context() -> Context:
    """Return the Decimal context used for rate arithmetic."""

    context = getcontext().copy()
    context.prec = ROUNDING_PRECISION
    context.rounding = ROUND_HALF_EVEN
    return context


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert input into a Decimal without binary float artefacts."""

    context = get_decimal_context()
    with localcontext(context):
        return Decimal(str(value))


def minor_unit(currency: str) -> int:
    """Return the number of decimal places of ``currency``'s minor unit."""

    try:
        return MINOR_UNITS[currency.upper()]
    except KeyError as exc:
        raise UnsupportedCurrencyError(
            f"No ISO 4217 minor unit is known for '{currency}'.",
            payload={"code": currency},
        ) from exc


def convert_minor_amount(value: int, rate: Decimal | int | float | str, currency: str) -> Decimal:
    """Multiply a minor-unit amount by ``rate`` and express it in major units.

    The product is rounded half-up to a whole number of minor units of
    ``currency`` and then scaled, so ``convert_minor_amount(100, "0.8", "USD")``
    is ``Decimal("0.80")`` and the same call with ``"JPY"`` is ``Decimal("80")``.
    """

    exponent = minor_unit(currency)
    context = get_decimal_context()
    with localcontext(context):
        product = to_decimal(value) * to_decimal(rate)
        minor_units = product.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return minor_units.scaleb(-exponent)
