"""Locale-aware formatters for number, date and time constructs.

{price, number}            -> "1,234.5"   (en_US)
{ratio, number, percent}   -> "25%"
{count, number, integer}   -> "1,234"
{price, number, #,##0.00}  -> "1,234.50"  (style is a Babel number pattern)
{when, date, short}        -> "1/15/24"
{when, time, HH:mm}        -> "14:30"     (style is a Babel date pattern)

Every formatter has the signature (value, locale, style) -> str and raises
FormattingError carrying a fallback value when the value cannot be
formatted. The evaluator collects the error and writes the fallback.

Python 3.13+. Depends on Babel for CLDR data.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from datetime import date, datetime, time
from decimal import InvalidOperation

from babel import Locale
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from icumsgkit.core.errors import FormattingError
from icumsgkit.enums import ConstructKind

from .value_types import coerce_number, format_value

__all__ = [
    "DATE_STYLES",
    "Formatter",
    "FormatterRegistry",
    "create_default_formatters",
    "date_format",
    "get_shared_formatters",
    "number_format",
    "time_format",
]

logger = logging.getLogger(__name__)

type Formatter = Callable[[object, Locale, str | None], str]

# Named widths accepted by date and time constructs, matched ignoring case
# and surrounding whitespace. Any other style is a Babel (LDML) pattern.
DATE_STYLES: frozenset[str] = frozenset(("short", "medium", "long", "full"))

_FORMAT_ERRORS = (ValueError, TypeError, InvalidOperation, AttributeError, KeyError)


def number_format(value: object, locale: Locale, style: str | None = None) -> str:
    """Format a number with locale-specific separators.

    Args:
        value: int, float, Decimal or numeric string
        locale: Babel locale
        style: None, "integer", "percent", or a Babel number pattern

    Returns:
        Formatted number

    Raises:
        FormattingError: Value is not numeric or the pattern is invalid

    Examples:
        >>> number_format(1234.5, Locale.parse("de_DE"))
        '1.234,5'
        >>> number_format(0.25, Locale.parse("en_US"), "percent")
        '25%'
    """
    number = coerce_number(value)
    if number is None:
        msg = f"Number formatting failed for {value!r}: not a number"
        raise FormattingError(msg, fallback_value=format_value(value))
    try:
        match style:
            case None:
                return str(babel_numbers.format_decimal(number, locale=locale))
            case "integer":
                return str(babel_numbers.format_decimal(number, format="#,##0", locale=locale))
            case "percent":
                return str(babel_numbers.format_percent(number, locale=locale))
            case _:
                return str(babel_numbers.format_decimal(number, format=style, locale=locale))
    except _FORMAT_ERRORS as e:
        msg = f"Number formatting failed for '{value}': {e}"
        raise FormattingError(msg, fallback_value=format_value(value)) from e


def _coerce_temporal(value: object, kind: str) -> date | datetime | time:
    """Accept date/datetime/time values and ISO 8601 strings."""
    match value:
        case date() | time():
            return value
        case str():
            try:
                return datetime.fromisoformat(value.strip())
            except ValueError as e:
                msg = f"{kind.capitalize()} formatting failed for {value!r}: {e}"
                raise FormattingError(msg, fallback_value=value) from e
        case _:
            msg = f"{kind.capitalize()} formatting failed for {value!r}: not a date or time"
            raise FormattingError(msg, fallback_value=format_value(value))


def _temporal_format(style: str | None) -> str:
    """Babel format argument for a date or time style (default medium)."""
    if style is None:
        return "medium"
    width = style.strip().lower()
    return width if width in DATE_STYLES else style


def date_format(value: object, locale: Locale, style: str | None = None) -> str:
    """Format the date part of a date, datetime or ISO 8601 string.

    Args:
        value: date, datetime, or ISO 8601 string
        locale: Babel locale
        style: short/medium/long/full (default medium) or a Babel date pattern

    Raises:
        FormattingError: Value is not a date or the pattern is invalid
    """
    temporal = _coerce_temporal(value, "date")
    if isinstance(temporal, time):
        msg = f"Date formatting failed for {value!r}: time of day has no date"
        raise FormattingError(msg, fallback_value=temporal.isoformat())
    try:
        return str(babel_dates.format_date(temporal, format=_temporal_format(style), locale=locale))
    except _FORMAT_ERRORS as e:
        msg = f"Date formatting failed for '{value}': {e}"
        raise FormattingError(msg, fallback_value=temporal.isoformat()) from e


def time_format(value: object, locale: Locale, style: str | None = None) -> str:
    """Format the time part of a datetime, time or ISO 8601 string.

    Args:
        value: datetime, time, or ISO 8601 string
        locale: Babel locale
        style: short/medium/long/full (default medium) or a Babel time pattern

    Raises:
        FormattingError: Value has no time part or the pattern is invalid
    """
    temporal = _coerce_temporal(value, "time")
    if not isinstance(temporal, (datetime, time)):
        msg = f"Time formatting failed for {value!r}: date has no time of day"
        raise FormattingError(msg, fallback_value=temporal.isoformat())
    try:
        return str(babel_dates.format_time(temporal, format=_temporal_format(style), locale=locale))
    except _FORMAT_ERRORS as e:
        msg = f"Time formatting failed for '{value}': {e}"
        raise FormattingError(msg, fallback_value=temporal.isoformat()) from e


class FormatterRegistry:
    """Registry mapping formatting construct kinds to formatter callables.

    Provides dict-like interface for introspection:
        - __iter__: Iterate over registered kinds
        - __len__: Count registered formatters
        - __contains__: Check if a kind has a formatter

    Example:
        >>> registry = FormatterRegistry()
        >>> registry.register(ConstructKind.NUMBER, number_format)
        >>> ConstructKind.NUMBER in registry
        True
    """

    __slots__ = ("_formatters", "_frozen")

    def __init__(self) -> None:
        """Initialize empty formatter registry."""
        self._formatters: dict[ConstructKind, Formatter] = {}
        self._frozen = False

    def register(self, kind: ConstructKind | str, formatter: Formatter) -> None:
        """Register (or replace) the formatter for a construct kind.

        Args:
            kind: Formatting construct kind (number, date or time)
            formatter: Callable (value, locale, style) -> str

        Raises:
            TypeError: Registry is frozen
            ValueError: kind is a branching kind (plural, select, selectordinal)
        """
        if self._frozen:
            msg = "Cannot register formatters on a frozen registry; use copy() first"
            raise TypeError(msg)
        kind = ConstructKind(kind)
        if kind.has_branches:
            msg = f"'{kind}' constructs select branches and cannot take a formatter"
            raise ValueError(msg)
        self._formatters[kind] = formatter

    def get(self, kind: ConstructKind) -> Formatter | None:
        """Return the formatter for kind, or None."""
        return self._formatters.get(kind)

    def freeze(self) -> None:
        """Make the registry read-only."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def copy(self) -> FormatterRegistry:
        """Create an unfrozen shallow copy of this registry."""
        new_registry = FormatterRegistry()
        new_registry._formatters = self._formatters.copy()
        return new_registry

    def __iter__(self) -> Iterator[ConstructKind]:
        return iter(self._formatters)

    def __len__(self) -> int:
        return len(self._formatters)

    def __contains__(self, kind: object) -> bool:
        return kind in self._formatters

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"FormatterRegistry(formatters={len(self._formatters)}{state})"


def create_default_formatters() -> FormatterRegistry:
    """Create a new, unfrozen registry with number, date and time formatters."""
    registry = FormatterRegistry()
    registry.register(ConstructKind.NUMBER, number_format)
    registry.register(ConstructKind.DATE, date_format)
    registry.register(ConstructKind.TIME, time_format)
    return registry


# Module-level cached default registry, initialized lazily on first access.
_SHARED_FORMATTERS: FormatterRegistry | None = None


def get_shared_formatters() -> FormatterRegistry:
    """Get the shared, frozen default FormatterRegistry.

    Calling register() on the returned registry raises TypeError. Use
    copy() or create_default_formatters() to customize.
    """
    global _SHARED_FORMATTERS  # noqa: PLW0603
    if _SHARED_FORMATTERS is None:
        _SHARED_FORMATTERS = create_default_formatters()
        _SHARED_FORMATTERS.freeze()
        logger.debug("Initialized shared formatter registry: %r", _SHARED_FORMATTERS)
    return _SHARED_FORMATTERS
