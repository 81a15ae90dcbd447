"""Token definitions for tokenized message patterns.

A pattern is re-tokenized on every evaluation; tokens are immutable and
carry the exact source slice they came from, so any token that cannot be
resolved is written back verbatim.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

from icumsgkit.diagnostics import Diagnostic
from icumsgkit.enums import ConstructKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Pattern elements
    "TextElement",
    "Placeholder",
    "Branch",
    "Construct",
    "Junk",
    # Type aliases
    "Token",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open character range [start, end) within a pattern."""

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span bounds."""
        if self.start < 0 or self.end < self.start:
            msg = f"Invalid span [{self.start}, {self.end})"
            raise ValueError(msg)


# ============================================================================
# PATTERN ELEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text segment, escape sequences ({{ and }}) kept as written."""

    value: str

    @staticmethod
    def guard(token: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement."""
        return isinstance(token, TextElement)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Simple argument reference: {name} or {0}.

    Attributes:
        name: Argument name (decimal numeral for positional arguments)
        source: Exact source text including braces
        span: Location in the pattern
    """

    name: str
    source: str
    span: Span

    @property
    def is_positional(self) -> bool:
        """True for {0}, {1}, ... placeholders."""
        return self.name.isdecimal()

    @staticmethod
    def guard(token: object) -> TypeIs["Placeholder"]:
        """Type guard for Placeholder."""
        return isinstance(token, Placeholder)


@dataclass(frozen=True, slots=True)
class Branch:
    """One label{subpattern} alternative of a plural/select construct.

    The body is kept as raw pattern text; it is tokenized again only when
    the branch is selected.
    """

    label: str
    body: str


@dataclass(frozen=True, slots=True)
class Construct:
    """ICU construct: {argument, kind, ...}.

    Branching kinds (plural, select, selectordinal) carry at least one
    branch and no style. Formatting kinds (number, date, time) carry no
    branches and an optional style.

    Attributes:
        argument: Argument name the construct reads
        kind: Construct keyword
        branches: Alternatives in source order (branching kinds only)
        style: Text after the second comma (formatting kinds only)
        source: Exact source text including the outer braces
        span: Location in the pattern

    Example:
        {count, plural, one{# item} other{# items}} parses to
        Construct(argument="count", kind=ConstructKind.PLURAL,
                  branches=(Branch("one", "# item"), Branch("other", "# items")), ...)
    """

    argument: str
    kind: ConstructKind
    branches: tuple[Branch, ...]
    style: str | None
    source: str
    span: Span

    @property
    def forms(self) -> dict[str, str]:
        """Branch bodies keyed by label. The first branch wins on duplicate labels."""
        forms: dict[str, str] = {}
        for branch in self.branches:
            forms.setdefault(branch.label, branch.body)
        return forms

    @staticmethod
    def guard(token: object) -> TypeIs["Construct"]:
        """Type guard for Construct."""
        return isinstance(token, Construct)


@dataclass(frozen=True, slots=True)
class Junk:
    """Text that failed to parse, emitted literally.

    Attributes:
        content: Literal text to write to the output
        diagnostic: Why the text was not recognized
        span: Location in the pattern
    """

    content: str
    diagnostic: Diagnostic
    span: Span

    @staticmethod
    def guard(token: object) -> TypeIs["Junk"]:
        """Type guard for Junk."""
        return isinstance(token, Junk)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Token = TextElement | Placeholder | Construct | Junk
