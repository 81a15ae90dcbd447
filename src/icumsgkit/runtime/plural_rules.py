"""Simplified plural and ordinal category rules.

Cardinal: 0 -> zero, 1 -> one, 2 -> two, everything else -> other.
Ordinal: 11-13 (mod 100) -> other; otherwise by last digit
1 -> one, 2 -> two, 3 -> few, everything else -> other.

These English-like rules are applied for every locale; CLDR per-locale
plural tables are deliberately not consulted.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal

from icumsgkit.constants import OTHER_BRANCH
from icumsgkit.enums import PluralCategory

from .value_types import Numeric

__all__ = [
    "ordinal_category",
    "ordinal_form",
    "plural_category",
    "plural_form",
    "select_branch",
]


def _whole_remainder(n: Numeric) -> int | None:
    """Return abs(n) % 100 when n is a finite whole number, else None."""
    match n:
        case float() if not math.isfinite(n) or not n.is_integer():
            return None
        case Decimal() if not n.is_finite():
            return None
        case Decimal():
            return _last_two_digits(n)
        case _:
            return abs(int(n)) % 100


def _last_two_digits(n: Decimal) -> int | None:
    # int(n) and n % 100 both scale with the exponent; read the digit tuple.
    parts = n.as_tuple()
    digits = parts.digits
    exponent = int(parts.exponent)
    if exponent >= 2:
        return 0
    if exponent > 0:
        digits = (*digits, *(0,) * exponent)
    elif exponent < 0:
        if any(digits[exponent:]):
            return None
        digits = digits[:exponent]
    tens = digits[-2] if len(digits) > 1 else 0
    ones = digits[-1] if digits else 0
    return tens * 10 + ones


def plural_category(n: Numeric) -> PluralCategory:
    """Select the cardinal plural category.

    Args:
        n: Number to categorize

    Returns:
        zero, one, two or other. Non-integral and negative values are other.

    Examples:
        >>> plural_category(0)
        <PluralCategory.ZERO: 'zero'>
        >>> plural_category(1.0)
        <PluralCategory.ONE: 'one'>
        >>> plural_category(1.5)
        <PluralCategory.OTHER: 'other'>
    """
    remainder = _whole_remainder(n)
    if remainder is None or n < 0 or n > 2:
        return PluralCategory.OTHER
    match remainder:
        case 0:
            return PluralCategory.ZERO
        case 1:
            return PluralCategory.ONE
        case _:
            return PluralCategory.TWO


def ordinal_category(n: Numeric) -> PluralCategory:
    """Select the ordinal category (1st, 2nd, 3rd, 4th ...).

    Negative values use their magnitude. Non-integral values are other.

    Examples:
        >>> ordinal_category(1)
        <PluralCategory.ONE: 'one'>
        >>> ordinal_category(12)
        <PluralCategory.OTHER: 'other'>
        >>> ordinal_category(23)
        <PluralCategory.FEW: 'few'>
    """
    remainder = _whole_remainder(n)
    if remainder is None or 11 <= remainder <= 13:
        return PluralCategory.OTHER
    match remainder % 10:
        case 1:
            return PluralCategory.ONE
        case 2:
            return PluralCategory.TWO
        case 3:
            return PluralCategory.FEW
        case _:
            return PluralCategory.OTHER


def select_branch[T](forms: Mapping[str, T], label: str) -> T | None:
    """Pick the form for label, falling back to "other".

    Args:
        forms: Forms keyed by branch label
        label: Category or select value to look up (case-sensitive)

    Returns:
        The matching form, the "other" form, or None when neither exists
    """
    if label in forms:
        return forms[label]
    return forms.get(OTHER_BRANCH)


def plural_form(count: Numeric, forms: Mapping[str, str]) -> str:
    """Return the cardinal form for count, the "other" form, or "".

    Example:
        >>> plural_form(1, {"one": "item", "other": "items"})
        'item'
        >>> plural_form(5, {"one": "item"})
        ''
    """
    return select_branch(forms, plural_category(count)) or ""


def ordinal_form(n: Numeric, forms: Mapping[str, str]) -> str:
    """Return the ordinal form for n, the "other" form, or ""."""
    return select_branch(forms, ordinal_category(n)) or ""
