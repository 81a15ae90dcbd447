"""Placeholder protection for translator-facing text.

protect() swaps every placeholder and ICU construct for a numbered
placeholder {0}, {1}, ... so translators see (and can reorder) opaque
tokens instead of nested plural/select syntax. restore() puts the
originals back.

Numbering follows document order with one counter per protect() call,
shared across all kinds:

    "Hello, {name}! You have {count, plural, one{# item} other{# items}}."
    -> "Hello, {0}! You have {1}."
       {"{0}": "{name}", "{1}": "{count, plural, one{# item} other{# items}}"}

restore() substitutes all keys in one pass, so a restored value that itself
looks like a numbered placeholder is never replaced again.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from icumsgkit.constants import PLACEHOLDER_TEMPLATE
from icumsgkit.syntax import BraceIndex

from .kinds import PlaceholderKindRegistry, get_shared_kind_registry

__all__ = [
    "PlaceholderProtector",
    "ReplacementEntry",
    "protect_placeholders",
    "restore_placeholders",
]

logger = logging.getLogger(__name__)

_NUMBERED = re.compile(r"\{(\d+)\}")

# "{{" is an escape sequence; matching it first keeps "{{0}}" literal on
# restore exactly as protect() left it.
_ESCAPE = r"\{\{"


@dataclass(frozen=True, slots=True)
class ReplacementEntry:
    """Result of protect().

    Attributes:
        original: Input text
        replaced: Text with placeholders swapped for {0}, {1}, ...
        placeholder_map: Numbered placeholder -> original text, in first-seen order
        kinds: Kind name of each protected placeholder, in the same order
    """

    original: str
    replaced: str
    placeholder_map: Mapping[str, str] = field(default_factory=dict)
    kinds: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Freeze the placeholder map."""
        if not isinstance(self.placeholder_map, MappingProxyType):
            frozen = MappingProxyType(dict(self.placeholder_map))
            object.__setattr__(self, "placeholder_map", frozen)

    @property
    def has_placeholders(self) -> bool:
        """True when at least one placeholder was protected."""
        return bool(self.placeholder_map)

    def restore(self, text: str | None = None) -> str:
        """Restore placeholders in text (default: the protected text)."""
        return restore_placeholders(self.replaced if text is None else text, self.placeholder_map)


class PlaceholderProtector:
    """Protects and restores placeholders using a kind registry.

    Example:
        >>> protector = PlaceholderProtector()
        >>> entry = protector.protect("Hi {name}, you are {place, selectordinal, other{#th}}")
        >>> entry.replaced
        'Hi {0}, you are {1}'
        >>> protector.restore("{1}: {0}", entry.placeholder_map)
        '{place, selectordinal, other{#th}}: {name}'
    """

    __slots__ = ("_kinds",)

    def __init__(self, kinds: PlaceholderKindRegistry | None = None) -> None:
        """Initialize protector.

        Args:
            kinds: Kind registry (default: shared frozen registry)
        """
        self._kinds = kinds if kinds is not None else get_shared_kind_registry()

    @property
    def kinds(self) -> PlaceholderKindRegistry:
        """Kind registry used to recognize placeholders."""
        return self._kinds

    def protect(self, text: str) -> ReplacementEntry:
        """Replace placeholders with numbered placeholders.

        Each balanced top-level brace group is offered to the kinds in
        priority order. A group no kind accepts is left in place and its
        contents are scanned, so placeholders inside it are still protected.
        Braces are paired once per call and groups are tested in place, so
        the work grows with the length of text.

        Args:
            text: Source or translated text

        Returns:
            ReplacementEntry; identity (empty map) when nothing matched
        """
        parts: list[str] = []
        placeholder_map: dict[str, str] = {}
        kinds: list[str] = []
        text_start = 0
        pos = 0
        index = BraceIndex(text)
        while (found := index.next_group(pos)) is not None:
            start, end = found
            kind = self._kinds.match_at(index, start, end)
            if kind is None:
                pos = start + 1
                continue
            source = text[start:end]
            placeholder = PLACEHOLDER_TEMPLATE.format(index=len(placeholder_map))
            parts.append(text[text_start:start])
            parts.append(placeholder)
            placeholder_map[placeholder] = source
            kinds.append(kind.name)
            text_start = pos = end

        if not placeholder_map:
            return ReplacementEntry(original=text, replaced=text)

        parts.append(text[text_start:])
        logger.debug("Protected %d placeholder(s)", len(placeholder_map))
        return ReplacementEntry(
            original=text,
            replaced="".join(parts),
            placeholder_map=placeholder_map,
            kinds=tuple(kinds),
        )

    def restore(self, text: str, placeholder_map: Mapping[str, str]) -> str:
        """Put original placeholder text back into (translated) text."""
        return restore_placeholders(text, placeholder_map)

    def matched_kinds(self, text: str) -> tuple[str, ...]:
        """Kind name of each placeholder protect() would replace, in order."""
        return self.protect(text).kinds


def _restore_order(key: str) -> tuple[int, int]:
    numbered = _NUMBERED.fullmatch(key)
    return (int(numbered.group(1)) if numbered else 0, len(key))


def restore_placeholders(text: str, placeholder_map: Mapping[str, str]) -> str:
    """Replace every map key in text with its mapped value.

    Keys are tried highest index first. Keys missing from text are ignored,
    repeated keys are all replaced, and replacement text is never rescanned.

    Args:
        text: Text containing numbered placeholders
        placeholder_map: Numbered placeholder -> original text

    Returns:
        Restored text

    Example:
        >>> restore_placeholders("你好，{0}！", {"{0}": "{name}"})
        '你好，{name}！'
    """
    if not placeholder_map:
        return text
    keys = sorted(placeholder_map, key=_restore_order, reverse=True)
    pattern = re.compile("|".join((_ESCAPE, *(re.escape(key) for key in keys))))

    def substitute(match: re.Match[str]) -> str:
        matched = match.group()
        return placeholder_map.get(matched, matched)

    return pattern.sub(substitute, text)


def protect_placeholders(text: str) -> ReplacementEntry:
    """Protect text with the default kind registry."""
    return PlaceholderProtector().protect(text)
