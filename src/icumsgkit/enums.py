"""Enumerations for icumsgkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ConstructKind(StrEnum):
    """Keyword in the second position of an ICU construct.

    StrEnum provides automatic string conversion: str(ConstructKind.PLURAL) == "plural"
    """

    PLURAL = "plural"
    """Cardinal plural: {count, plural, one{# item} other{# items}}"""

    SELECT = "select"
    """Verbatim value match: {gender, select, male{He} other{They}}"""

    SELECTORDINAL = "selectordinal"
    """Ordinal plural: {place, selectordinal, one{#st} other{#th}}"""

    NUMBER = "number"
    """Locale-aware number: {price, number} or {ratio, number, percent}"""

    DATE = "date"
    """Locale-aware date: {when, date} or {when, date, short}"""

    TIME = "time"
    """Locale-aware time: {when, time, short}"""

    @property
    def has_branches(self) -> bool:
        """True for kinds whose body is a list of label{subpattern} branches."""
        return self in _BRANCHING_KINDS


_BRANCHING_KINDS = frozenset(
    (ConstructKind.PLURAL, ConstructKind.SELECT, ConstructKind.SELECTORDINAL)
)


class PluralCategory(StrEnum):
    """Plural and ordinal category labels.

    Only the simplified English-like subset is produced by the resolvers:
    cardinal zero/one/two/other, ordinal one/two/few/other.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    OTHER = "other"


class TableFormat(StrEnum):
    """Flat translation table serialization format.

    StrEnum provides automatic string conversion: str(TableFormat.TSV) == "tsv"
    """

    TSV = "tsv"
    """Tab-separated values (default)"""

    CSV = "csv"
    """Comma-separated values (spreadsheet friendly)"""

    HTML = "html"
    """HTML table that spreadsheet applications can open"""

    @property
    def extension(self) -> str:
        """File extension including the leading dot."""
        return f".{self.value}"


__all__ = [
    "ConstructKind",
    "PluralCategory",
    "TableFormat",
]
