"""Placeholder kinds recognized by the protector.

A kind decides whether one balanced brace group ("{...}", outer braces
included) is a placeholder that translators must not edit. ICU kinds are
always consulted before the simple ones, so {count, plural, ...} is
protected as a whole and never as {count}.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from icumsgkit.enums import ConstructKind
from icumsgkit.syntax import BraceIndex

__all__ = [
    "PlaceholderKind",
    "PlaceholderKindRegistry",
    "create_default_kind_registry",
    "get_shared_kind_registry",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlaceholderKind:
    """Named predicate over balanced brace groups.

    A kind either wraps a regex that must match the whole group or names
    the construct keyword it accepts. Groups are tested in place inside a
    BraceIndex, so a regex is applied with pos/endpos and should not rely
    on "^" or lookbehind.

    Attributes:
        name: Kind name reported by PlaceholderProtector.matched_kinds()
        regex: Pattern matched against the whole group, braces included
        construct: Construct keyword accepted instead of a regex
        icu: ICU kinds are tried before all non-ICU kinds
    """

    name: str
    regex: re.Pattern[str] | None = None
    construct: ConstructKind | None = None
    icu: bool = False

    def matches_at(self, index: BraceIndex, start: int, end: int) -> bool:
        """Check whether the group [start, end) of index.pattern is of this kind."""
        if self.construct is not None:
            return index.construct_kind(start, end) is self.construct
        if self.regex is None:
            return False
        return self.regex.fullmatch(index.pattern, start, end) is not None

    def matches(self, source: str) -> bool:
        """Check whether source (a balanced {...} group) is of this kind."""
        return self.matches_at(BraceIndex(source), 0, len(source))

    @classmethod
    def from_regex(
        cls, name: str, pattern: str | re.Pattern[str], icu: bool = False
    ) -> PlaceholderKind:
        """Create a kind whose regex must match the whole brace group.

        Example:
            >>> percent = PlaceholderKind.from_regex("Printf", r"\\{%[sd]\\}")
            >>> percent.matches("{%s}")
            True
        """
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return cls(name=name, regex=compiled, icu=icu)

    @classmethod
    def from_construct(cls, name: str, kind: ConstructKind) -> PlaceholderKind:
        """Create an ICU kind matching well-formed constructs of one keyword."""
        return cls(name=name, construct=kind, icu=True)


class PlaceholderKindRegistry:
    """Ordered, freezable collection of placeholder kinds.

    Iteration yields ICU kinds first, then the others; each group keeps
    registration order. Registering a name again replaces the kind in place.

    Example:
        >>> registry = get_shared_kind_registry().copy()
        >>> registry.register(PlaceholderKind.from_regex("Printf", r"\\{%[sd]\\}"))
        >>> [kind.name for kind in registry][-1]
        'Printf'
    """

    __slots__ = ("_frozen", "_kinds")

    def __init__(self, kinds: Iterable[PlaceholderKind] = ()) -> None:
        """Initialize registry, registering kinds in order."""
        self._kinds: dict[str, PlaceholderKind] = {}
        self._frozen = False
        for kind in kinds:
            self.register(kind)

    def register(self, kind: PlaceholderKind) -> None:
        """Add or replace a kind.

        Raises:
            TypeError: Registry is frozen
        """
        if self._frozen:
            msg = "Cannot register placeholder kinds on a frozen registry; use copy() first"
            raise TypeError(msg)
        self._kinds[kind.name] = kind

    def get(self, name: str) -> PlaceholderKind | None:
        """Return the kind registered under name, or None."""
        return self._kinds.get(name)

    def match(self, source: str) -> PlaceholderKind | None:
        """Return the first kind, in priority order, that accepts source."""
        return self.match_at(BraceIndex(source), 0, len(source))

    def match_at(self, index: BraceIndex, start: int, end: int) -> PlaceholderKind | None:
        """Return the first kind that accepts the group [start, end) of index.pattern."""
        for kind in self:
            if kind.matches_at(index, start, end):
                return kind
        return None

    def freeze(self) -> None:
        """Make the registry read-only. Frozen registries are safe to share."""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        """True once freeze() has been called."""
        return self._frozen

    def copy(self) -> PlaceholderKindRegistry:
        """Create an unfrozen shallow copy of this registry."""
        new_registry = PlaceholderKindRegistry()
        new_registry._kinds = self._kinds.copy()
        return new_registry

    def __iter__(self) -> Iterator[PlaceholderKind]:
        kinds = self._kinds.values()
        yield from (kind for kind in kinds if kind.icu)
        yield from (kind for kind in kinds if not kind.icu)

    def __len__(self) -> int:
        return len(self._kinds)

    def __contains__(self, name: object) -> bool:
        return name in self._kinds

    def __repr__(self) -> str:
        state = ", frozen" if self._frozen else ""
        return f"PlaceholderKindRegistry(kinds={len(self._kinds)}{state})"


def create_default_kind_registry() -> PlaceholderKindRegistry:
    """Create a new, unfrozen registry with the built-in kinds.

    Priority order: ICU_Plural, ICU_Select, ICU_Ordinal, ICU_Date, ICU_Time,
    ICU_Number, Indexed ({0}), Named ({identifier}).
    """
    return PlaceholderKindRegistry(
        (
            PlaceholderKind.from_construct("ICU_Plural", ConstructKind.PLURAL),
            PlaceholderKind.from_construct("ICU_Select", ConstructKind.SELECT),
            PlaceholderKind.from_construct("ICU_Ordinal", ConstructKind.SELECTORDINAL),
            PlaceholderKind.from_construct("ICU_Date", ConstructKind.DATE),
            PlaceholderKind.from_construct("ICU_Time", ConstructKind.TIME),
            PlaceholderKind.from_construct("ICU_Number", ConstructKind.NUMBER),
            PlaceholderKind.from_regex("Indexed", r"\{\d+\}"),
            PlaceholderKind.from_regex("Named", r"\{[A-Za-z_][A-Za-z0-9_]*\}"),
        )
    )


# Module-level cached default registry, initialized lazily on first access.
_SHARED_KINDS: PlaceholderKindRegistry | None = None


def get_shared_kind_registry() -> PlaceholderKindRegistry:
    """Get the shared, frozen default PlaceholderKindRegistry.

    Calling register() on the returned registry raises TypeError. Use
    copy() or create_default_kind_registry() to customize.
    """
    global _SHARED_KINDS  # noqa: PLW0603
    if _SHARED_KINDS is None:
        _SHARED_KINDS = create_default_kind_registry()
        _SHARED_KINDS.freeze()
        logger.debug("Initialized shared placeholder kind registry: %r", _SHARED_KINDS)
    return _SHARED_KINDS
