"""Argument value types and coercions.

Defines the values a message argument may hold and how they are turned into
numbers (for plural/selectordinal) and text (for placeholders):
    - MessageArgument: Union of supported argument value types
    - coerce_number: Numeric coercion with failure as None
    - format_numeral: Invariant, ungrouped decimal rendering
    - format_value: Text form used for simple placeholders and select

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

from icumsgkit.constants import MAX_NUMERAL_DIGITS

__all__ = [
    "MessageArgs",
    "MessageArgument",
    "Numeric",
    "coerce_number",
    "format_numeral",
    "format_value",
]

type Numeric = int | float | Decimal

type MessageArgument = str | int | float | bool | Decimal | date | datetime | time | None

type MessageArgs = Mapping[str, MessageArgument]

_INT_BOUND = 10**MAX_NUMERAL_DIGITS


def coerce_number(value: object) -> Numeric | None:
    """Coerce an argument to a number for plural category selection.

    Ints and floats are accepted uniformly. Numeric strings are parsed
    (integers to int, everything else to Decimal). bool is rejected even
    though it subclasses int, as are NaN and infinities. Values whose
    decimal exponent reaches MAX_NUMERAL_DIGITS are rejected too, so a
    short string such as "1e50000000" never expands into a huge numeral.

    Args:
        value: Argument value

    Returns:
        The numeric value, or None if the value is not usable as a number

    Example:
        >>> coerce_number(3)
        3
        >>> coerce_number("2.5")
        Decimal('2.5')
        >>> coerce_number(True) is None
        True
    """
    match value:
        case bool():
            return None
        case int():
            return value if abs(value) < _INT_BOUND else None
        case float():
            return value if math.isfinite(value) else None
        case Decimal():
            return value if _bounded(value) else None
        case str():
            return _parse_numeric(value)
        case _:
            return None


def _parse_numeric(text: str) -> Numeric | None:
    text = text.strip()
    if not text:
        return None
    try:
        whole = int(text)
    except ValueError:
        pass
    else:
        return whole if abs(whole) < _INT_BOUND else None
    try:
        parsed = Decimal(text)
    except InvalidOperation:
        return None
    return parsed if _bounded(parsed) else None


def _bounded(value: Decimal) -> bool:
    return value.is_finite() and abs(value.adjusted()) < MAX_NUMERAL_DIGITS


def format_numeral(value: Numeric) -> str:
    """Render a number in invariant decimal form.

    No grouping separators and no exponent. Integral floats drop the
    trailing ".0", so 3.0 renders as "3".

    Example:
        >>> format_numeral(1234567)
        '1234567'
        >>> format_numeral(2.0)
        '2'
        >>> format_numeral(1e-7)
        '0.0000001'
    """
    match value:
        case float() if value.is_integer():
            return str(int(value))
        case float():
            return format(Decimal(repr(value)), "f")
        case Decimal():
            return format(value, "f")
        case _:
            return str(value)


def format_value(value: object) -> str:
    """Render an argument value as placeholder text.

    None renders as the empty string; numbers use format_numeral().
    """
    match value:
        case str():
            return value
        case None:
            return ""
        case bool():
            return str(value)
        case int() | float() | Decimal() if coerce_number(value) is not None:
            return format_numeral(value)
        case _:
            return str(value)
