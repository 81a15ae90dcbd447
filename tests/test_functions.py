"""Tests for runtime/functions.py - Babel-backed number/date/time formatters.

Time output is checked structurally: CLDR time patterns contain narrow
no-break spaces that vary between CLDR releases.
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal

import pytest
from babel import Locale

from icumsgkit.core import FormattingError
from icumsgkit.enums import ConstructKind
from icumsgkit.runtime.functions import (
    DATE_STYLES,
    FormatterRegistry,
    create_default_formatters,
    date_format,
    get_shared_formatters,
    number_format,
    time_format,
)

EN = Locale.parse("en_US")
DE = Locale.parse("de_DE")


class TestNumberFormat:
    """number construct."""

    def test_default(self) -> None:
        assert number_format(1234.5, EN) == "1,234.5"

    def test_german_separators(self) -> None:
        assert number_format(1234.5, DE) == "1.234,5"

    def test_decimal_input(self) -> None:
        assert number_format(Decimal("1234.50"), EN) == "1,234.5"

    def test_numeric_string(self) -> None:
        assert number_format("42", EN) == "42"

    def test_integer_style(self) -> None:
        assert number_format(1234, EN, "integer") == "1,234"

    def test_percent_style(self) -> None:
        assert number_format(0.25, EN, "percent") == "25%"

    def test_pattern_style(self) -> None:
        assert number_format(1234.5, EN, "#,##0.00") == "1,234.50"

    def test_non_numeric_raises_with_fallback(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            number_format("abc", EN)

        assert exc_info.value.fallback_value == "abc"

    def test_bool_rejected(self) -> None:
        with pytest.raises(FormattingError):
            number_format(True, EN)


class TestDateFormat:
    """date construct."""

    def test_default_medium(self) -> None:
        assert date_format(date(2024, 1, 15), EN) == "Jan 15, 2024"

    def test_short(self) -> None:
        assert date_format(date(2024, 1, 15), EN, "short") == "1/15/24"

    def test_pattern(self) -> None:
        assert date_format(date(2024, 1, 15), EN, "yyyy-MM-dd") == "2024-01-15"

    @pytest.mark.parametrize("style", ["SHORT", " Short ", "short"])
    def test_named_width_ignores_case(self, style: str) -> None:
        assert date_format(date(2024, 1, 15), EN, style) == "1/15/24"

    def test_named_widths(self) -> None:
        assert DATE_STYLES == {"short", "medium", "long", "full"}
        assert date_format(date(2024, 1, 15), EN, "long") == "January 15, 2024"

    def test_datetime_uses_date_part(self) -> None:
        assert date_format(datetime(2024, 1, 15, 23, 59), EN, "short") == "1/15/24"

    def test_iso_string(self) -> None:
        assert date_format("2024-01-15", EN, "short") == "1/15/24"

    def test_invalid_string_falls_back_to_input(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            date_format("not a date", EN)

        assert exc_info.value.fallback_value == "not a date"

    def test_time_of_day_rejected(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            date_format(time(14, 30), EN)

        assert exc_info.value.fallback_value == "14:30:00"

    def test_number_rejected(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            date_format(5, EN)

        assert exc_info.value.fallback_value == "5"


class TestTimeFormat:
    """time construct."""

    def test_pattern(self) -> None:
        assert time_format(time(14, 30), EN, "HH:mm") == "14:30"

    def test_datetime(self) -> None:
        assert time_format(datetime(2024, 1, 15, 9, 5), EN, "HH:mm") == "09:05"

    def test_named_width_ignores_case(self) -> None:
        assert time_format(time(14, 30), EN, "SHORT") == time_format(time(14, 30), EN, "short")

    def test_short_contains_digits(self) -> None:
        result = time_format(time(14, 30), EN, "short")

        assert "2" in result
        assert "30" in result

    def test_plain_date_rejected(self) -> None:
        with pytest.raises(FormattingError) as exc_info:
            time_format(date(2024, 1, 15), EN)

        assert exc_info.value.fallback_value == "2024-01-15"


class TestFormatterRegistry:
    """Registry behavior."""

    def test_default_contents(self) -> None:
        registry = create_default_formatters()

        assert set(registry) == {ConstructKind.NUMBER, ConstructKind.DATE, ConstructKind.TIME}
        assert len(registry) == 3

    def test_register_by_string(self) -> None:
        registry = FormatterRegistry()
        registry.register("number", number_format)

        assert ConstructKind.NUMBER in registry
        assert registry.get(ConstructKind.NUMBER) is number_format

    def test_branching_kind_rejected(self) -> None:
        with pytest.raises(ValueError, match="plural"):
            FormatterRegistry().register(ConstructKind.PLURAL, number_format)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            FormatterRegistry().register("currency", number_format)

    def test_shared_registry_is_frozen(self) -> None:
        shared = get_shared_formatters()

        assert shared.frozen
        assert get_shared_formatters() is shared
        with pytest.raises(TypeError):
            shared.register(ConstructKind.NUMBER, number_format)

    def test_copy_is_unfrozen_and_independent(self) -> None:
        shared = get_shared_formatters()
        custom = shared.copy()

        def shout(value: object, locale: Locale, style: str | None) -> str:
            return str(value).upper()

        custom.register(ConstructKind.DATE, shout)

        assert not custom.frozen
        assert custom.get(ConstructKind.DATE) is shout
        assert shared.get(ConstructKind.DATE) is date_format

    def test_repr(self) -> None:
        assert repr(FormatterRegistry()) == "FormatterRegistry(formatters=0)"
        assert "frozen" in repr(get_shared_formatters())
