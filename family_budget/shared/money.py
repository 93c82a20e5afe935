"""
Yen money formatting helpers.

Every amount shown by the API goes through these functions so that balances,
totals and history rows render the same way (``¥15,000``).
"""
import math
import re
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional

MAX_SAFE_INTEGER = 2 ** 53 - 1
YEN_SYMBOL = "¥"

_NON_DIGITS = re.compile(r"[^0-9]")


class MoneyRangeError(ValueError):
    """Raised when an amount is beyond the safe integer bound."""

    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Amount is too large. Values above MAX_SAFE_INTEGER ({MAX_SAFE_INTEGER}) "
            f"lose precision and are not supported. Got: {value}"
        )


@dataclass(frozen=True)
class MoneyFormatOptions:
    show_symbol: bool = True
    empty_on_zero: bool = False
    empty_on_negative: bool = False
    decimal_places: int = 0


def check_safe_integer(value) -> None:
    """
    Raise MoneyRangeError when ``abs(value)`` exceeds MAX_SAFE_INTEGER.

    :param value: Number to check.
    """
    if abs(value) > MAX_SAFE_INTEGER:
        raise MoneyRangeError(value)


def _is_invalid(value) -> bool:
    if value is None or isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return True
    if isinstance(value, Decimal):
        return value.is_nan()
    return isinstance(value, float) and math.isnan(value)


def _group_digits(value, decimal_places: int) -> str:
    # Intl rounds half away from zero, Decimal's ROUND_HALF_UP does the same
    exponent = Decimal(1).scaleb(-decimal_places)
    with localcontext() as ctx:
        ctx.prec = len(str(MAX_SAFE_INTEGER)) + decimal_places + 1
        rounded = Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    return f"{rounded:,.{decimal_places}f}"


def format_money(value, options: Optional[MoneyFormatOptions] = None, **overrides) -> str:
    """
    Format a number as a yen string with comma grouping.

    :param value: Amount to format. None, NaN and non-numbers give "".
    :param options: MoneyFormatOptions, defaults to symbol on and zero/negative shown.
    :param overrides: Individual MoneyFormatOptions fields to replace.
    :return: Formatted string such as "¥15,000" or "¥-1,500".
    :raises MoneyRangeError: If the amount exceeds MAX_SAFE_INTEGER.

    >>> format_money(15000)
    '¥15,000'
    >>> format_money(1500.75, decimal_places=2)
    '¥1,500.75'
    >>> format_money(0, empty_on_zero=True)
    ''
    """
    options = options or MoneyFormatOptions()
    if overrides:
        options = replace(options, **overrides)

    if _is_invalid(value):
        return ""

    check_safe_integer(value)

    if value == 0 and options.empty_on_zero:
        return ""

    if value < 0 and options.empty_on_negative:
        return ""

    formatted = _group_digits(value, options.decimal_places)
    return f"{YEN_SYMBOL}{formatted}" if options.show_symbol else formatted


def format_money_for_input(value) -> str:
    """Format for editable fields: zero, negative and invalid values become ""."""
    return format_money(value, MoneyFormatOptions(
        show_symbol=True,
        empty_on_zero=True,
        empty_on_negative=True,
    ))


def format_money_for_display(value, show_symbol: bool = True, decimal_places: int = 0) -> str:
    """Format for read-only views: zero and negative values are always shown."""
    return format_money(value, MoneyFormatOptions(
        show_symbol=show_symbol,
        empty_on_zero=False,
        empty_on_negative=False,
        decimal_places=decimal_places,
    ))


def format_money_views(value) -> dict:
    return {
        "for_input": format_money_for_input(value),
        "for_display": format_money_for_display(value),
    }


def parse_money_string(text) -> int:
    """
    Extract the integer amount from a formatted money string.

    Every character that is not an ASCII digit is dropped, so "¥15,000" gives
    15000 and "abc123def" gives 123. Non-string input gives 0.

    :raises MoneyRangeError: If the digits exceed MAX_SAFE_INTEGER.
    """
    if not isinstance(text, str):
        return 0

    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return 0

    amount = int(digits)
    check_safe_integer(amount)
    return amount
