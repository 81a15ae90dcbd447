"""Tests for plural_rules.py - simplified cardinal and ordinal categories.

Property-Based Testing Strategy:
    Ordinal categories depend only on n mod 100, and non-integral values
    always fall to "other"; both are checked with Hypothesis.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from icumsgkit.enums import PluralCategory
from icumsgkit.runtime.plural_rules import (
    ordinal_category,
    ordinal_form,
    plural_category,
    plural_form,
    select_branch,
)

ORDINAL_FORMS = {"one": "#st", "two": "#nd", "few": "#rd", "other": "#th"}

# ============================================================================
# Cardinal
# ============================================================================


class TestPluralCategory:
    """zero/one/two/other cardinal rule."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(0, "zero"), (1, "one"), (2, "two"), (3, "other"), (11, "other"), (100, "other")],
    )
    def test_integers(self, n: int, expected: str) -> None:
        assert plural_category(n) == expected

    def test_integral_float_and_decimal(self) -> None:
        assert plural_category(1.0) is PluralCategory.ONE
        assert plural_category(Decimal("2.0")) is PluralCategory.TWO

    def test_non_integers_are_other(self) -> None:
        assert plural_category(1.5) is PluralCategory.OTHER
        assert plural_category(Decimal("0.5")) is PluralCategory.OTHER

    def test_negative_is_other(self) -> None:
        assert plural_category(-1) is PluralCategory.OTHER

    def test_non_finite_is_other(self) -> None:
        assert plural_category(float("inf")) is PluralCategory.OTHER

    def test_huge_exponent_is_other(self) -> None:
        assert plural_category(Decimal("1E+50000000")) is PluralCategory.OTHER
        assert plural_category(Decimal("1E-50000000")) is PluralCategory.OTHER
        assert plural_category(Decimal("-0")) is PluralCategory.ZERO

    @given(st.integers(min_value=3))
    def test_large_values_are_other(self, n: int) -> None:
        assert plural_category(n) is PluralCategory.OTHER


# ============================================================================
# Ordinal
# ============================================================================


class TestOrdinalCategory:
    """one/two/few/other ordinal rule with the 11-13 exception."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (1, "one"),
            (2, "two"),
            (3, "few"),
            (4, "other"),
            (11, "other"),
            (12, "other"),
            (13, "other"),
            (21, "one"),
            (22, "two"),
            (23, "few"),
            (101, "one"),
            (111, "other"),
            (112, "other"),
            (0, "other"),
        ],
    )
    def test_table(self, n: int, expected: str) -> None:
        assert ordinal_category(n) == expected

    def test_negative_uses_magnitude(self) -> None:
        assert ordinal_category(-1) is PluralCategory.ONE
        assert ordinal_category(-12) is PluralCategory.OTHER

    def test_non_integral_is_other(self) -> None:
        assert ordinal_category(1.5) is PluralCategory.OTHER
        assert ordinal_category(float("nan")) is PluralCategory.OTHER

    def test_integral_float(self) -> None:
        assert ordinal_category(3.0) is PluralCategory.FEW

    @pytest.mark.parametrize(
        ("n", "expected"),
        [
            (Decimal("1.23E+2"), "few"),
            (Decimal("101.00"), "one"),
            (Decimal("-112"), "other"),
            (Decimal("2E+1"), "other"),
            (Decimal("0.00"), "other"),
            (Decimal("1E+50000000"), "other"),
            (Decimal("1.5E+1"), "other"),
        ],
    )
    def test_decimal_digits(self, n: Decimal, expected: str) -> None:
        assert ordinal_category(n) == expected

    def test_huge_decimal_fraction_is_other(self) -> None:
        assert ordinal_category(Decimal("1E-50000000")) is PluralCategory.OTHER

    @given(st.integers(min_value=0, max_value=10**9))
    def test_depends_only_on_last_two_digits(self, n: int) -> None:
        assert ordinal_category(n) == ordinal_category(n % 100)

    @given(st.floats(allow_nan=False, allow_infinity=False).filter(lambda f: not f.is_integer()))
    def test_fractions_are_other(self, n: float) -> None:
        assert ordinal_category(n) is PluralCategory.OTHER


# ============================================================================
# Branch selection and standalone helpers
# ============================================================================


class TestSelectBranch:
    """Exact label, then "other", then None."""

    def test_exact(self) -> None:
        assert select_branch({"one": "a", "other": "b"}, "one") == "a"

    def test_falls_back_to_other(self) -> None:
        assert select_branch({"other": "b"}, "one") == "b"

    def test_none_without_other(self) -> None:
        assert select_branch({"one": "a"}, "two") is None

    def test_case_sensitive(self) -> None:
        assert select_branch({"Male": "a", "other": "b"}, "male") == "b"


class TestStandaloneForms:
    """plural_form() and ordinal_form()."""

    def test_plural_form(self) -> None:
        forms = {"one": "item", "other": "items"}

        assert plural_form(1, forms) == "item"
        assert plural_form(5, forms) == "items"

    def test_plural_form_without_match(self) -> None:
        assert plural_form(5, {"one": "item"}) == ""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "#st"), (2, "#nd"), (3, "#rd"), (4, "#th"), (11, "#th"), (22, "#nd")],
    )
    def test_ordinal_form(self, n: int, expected: str) -> None:
        assert ordinal_form(n, ORDINAL_FORMS) == expected
