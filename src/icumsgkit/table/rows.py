"""Records exchanged with translators through flat tables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from icumsgkit.constants import DEFAULT_CATEGORY

__all__ = ["FlatTableRow", "ImportedTranslation", "TableEntry"]


@dataclass(frozen=True, slots=True)
class TableEntry:
    """Localization entry as handed to the table builder.

    Attributes:
        namespace: Namespace the key lives in
        key: Entry key within the namespace
        source: Source-language pattern
        category: Grouping shown to translators
        context: Where the text appears (optional)
        comment: Note for translators (optional)
        translations: Existing translations keyed by culture code
        max_length: Display length limit (optional)
    """

    namespace: str
    key: str
    source: str
    category: str = DEFAULT_CATEGORY
    context: str | None = None
    comment: str | None = None
    translations: Mapping[str, str] = field(default_factory=dict)
    max_length: int | None = None

    def __post_init__(self) -> None:
        """Freeze the translations mapping."""
        if not isinstance(self.translations, MappingProxyType):
            object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))

    @property
    def entry_id(self) -> str:
        """Namespace-qualified key: "<namespace>:<key>"."""
        return f"{self.namespace}:{self.key}"


@dataclass(slots=True)
class FlatTableRow:
    """One table row, with placeholders already protected when requested."""

    key: str
    namespace: str
    category: str
    source: str
    context: str | None = None
    comment: str | None = None
    translations: dict[str, str] = field(default_factory=dict)
    max_length: int | None = None

    def cells(self, cultures: Sequence[str]) -> list[str]:
        """Cell values in column order: fixed columns, cultures, MaxLength."""
        return [
            self.key,
            self.namespace,
            self.category,
            self.source,
            self.context or "",
            self.comment or "",
            *(self.translations.get(culture, "") for culture in cultures),
            "" if self.max_length is None else str(self.max_length),
        ]


@dataclass(frozen=True, slots=True)
class ImportedTranslation:
    """Translation read back from a table, placeholders restored."""

    namespace: str
    key: str
    culture: str
    text: str

    @property
    def entry_id(self) -> str:
        """Namespace-qualified key: "<namespace>:<key>"."""
        return f"{self.namespace}:{self.key}"
