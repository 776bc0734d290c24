"""
numbers.py

Fixed-point scaling and digit grouping for on-chain amounts.

Amounts arrive as integer strings of arbitrary size (18-decimal drip values
routinely exceed the float-safe range), so scaling works on Python ints and
strings only.
"""

import re
from decimal import Decimal
from typing import Union

NATIVE_DECIMALS = 18
GAS_DECIMALS = 9
NATIVE_UNIT = "CFX"
GAS_UNIT = "Gdrip"

Numeric = Union[int, str]

_INTEGER = re.compile(r"^[+-]?[0-9]+$")
_GROUPABLE = re.compile(r"^([+-]?)([0-9]*)(\.[0-9]*)?$")
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def _integer_text(raw: Numeric) -> str:
    if isinstance(raw, bool):
        raise ValueError(f"Invalid amount: {raw!r}")
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, str) and _INTEGER.match(raw.strip()):
        return raw.strip()
    raise ValueError(f"Invalid amount: {raw!r}")


def scale_amount(raw: Numeric, decimals: int) -> str:
    """
    Places the decimal point ``decimals`` digits from the right of an integer amount.

    The result is exact. Trailing fractional zeros are dropped, and so is the point
    when nothing remains after it.

    >>> scale_amount("1500000000000000000", 18)
    '1.5'
    >>> scale_amount("42", 3)
    '0.042'

    :param raw: Integer amount as int or digit string.
    :param decimals: Number of implied fractional digits.
    :return: The scaled decimal string.
    :raises ValueError: If raw is not an integer or decimals is negative.
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise ValueError(f"Invalid decimals: {decimals!r}")

    amount = int(_integer_text(raw))
    if decimals == 0:
        return str(amount)

    sign = "-" if amount < 0 else ""
    whole, fraction = divmod(abs(amount), 10 ** decimals)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    if fraction_text:
        return f"{sign}{whole}.{fraction_text}"
    return f"{sign}{whole}"


def group_number(value: Union[int, float, str, Decimal]) -> str:
    """
    Inserts a comma every three digits of the integer part.

    The fractional part and the sign are kept exactly as given.

    :param value: A number or numeric string.
    :return: The grouped string.
    :raises ValueError: If the value is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid number: {value!r}")
    if isinstance(value, (float, Decimal)):
        text = format(Decimal(str(value)), "f")
    else:
        text = str(value).strip()

    match = _GROUPABLE.match(text)
    if not match or not (match.group(2) or (match.group(3) or "")[1:]):
        raise ValueError(f"Invalid number: {value!r}")

    sign, whole, fraction = match.group(1), match.group(2), match.group(3) or ""
    return f"{sign}{_THOUSANDS.sub(',', whole)}{fraction}"


def format_native_currency(raw: Numeric) -> str:
    """Drip amount rendered in CFX, e.g. ``'1,234.5 CFX'``."""
    return f"{group_number(scale_amount(raw, NATIVE_DECIMALS))} {NATIVE_UNIT}"


def format_gas_amount(raw: Numeric) -> str:
    """Drip amount rendered in Gdrip, e.g. ``'21,000 Gdrip'``."""
    return f"{group_number(scale_amount(raw, GAS_DECIMALS))} {GAS_UNIT}"


def format_token_amount(raw: Numeric, decimals: int) -> str:
    """Token amount scaled by the token's own decimals, without a unit."""
    return scale_amount(raw, decimals)
