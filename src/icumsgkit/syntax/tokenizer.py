"""Forward brace-depth tokenizer for ICU message patterns.

One left-to-right pass. Every top-level "{" is matched to its closing "}",
then the balanced group is classified:

    1. Construct   {count, plural, one{# item} other{# items}}
    2. Placeholder {name} or {0}

Constructs are tried first, so {count, plural, ...} is never read as a
simple placeholder. A balanced group that is neither is not consumed: its
"{" stays literal and scanning resumes one character later, so placeholders
nested inside unrecognized text still resolve. "{{" and "}}" are escape
sequences and are kept as literal text.

Brace pairs are computed once per pattern (BraceIndex) and groups are
classified in place by offset, without slicing, so tokenizing runs in time
proportional to the pattern length however many braces fail to close.

The tokenizer never raises on malformed input; problems become Junk tokens.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass

from icumsgkit.diagnostics import ErrorTemplate
from icumsgkit.enums import ConstructKind

from .tokens import Branch, Construct, Junk, Placeholder, Span, TextElement, Token

__all__ = [
    "BraceIndex",
    "find_placeholder",
    "match_brace",
    "parse_branches",
    "parse_construct",
    "tokenize",
]

_BRACE = re.compile(r"[{}]")
_PLACEHOLDER = re.compile(r"\{(\w+)\}")
_HEADER = re.compile(r"\s*(\w+)\s*,\s*(\w+)\s*")
_LABEL = re.compile(r"[^\s{},]+")

_KINDS = {kind.value: kind for kind in ConstructKind}

# Longest construct text quoted in a malformed-construct diagnostic.
_EXCERPT_LENGTH = 40


def match_brace(pattern: str, open_pos: int) -> int | None:
    """Find the end of the brace group opened at open_pos.

    Args:
        pattern: Text to scan
        open_pos: Index of an opening "{"

    Returns:
        Index one past the matching "}", or None if the group never closes

    Example:
        >>> match_brace("a {b {c}} d", 2)
        9
        >>> match_brace("a {b", 2) is None
        True
    """
    depth = 0
    for pos in range(open_pos, len(pattern)):
        match pattern[pos]:
            case "{":
                depth += 1
            case "}":
                depth -= 1
                if depth == 0:
                    return pos + 1
    return None


def _next_open(pattern: str, pos: int) -> int | None:
    """Index of the next "{" at or after pos that does not start an escape."""
    while (found := pattern.find("{", pos)) != -1:
        if pattern.startswith("{{", found):
            pos = found + 2
            continue
        return found
    return None


@dataclass(frozen=True, slots=True)
class _Layout:
    """Offsets of a well-formed construct inside its pattern."""

    argument: str
    kind: ConstructKind
    branches: tuple[tuple[str, int, int], ...]
    style: tuple[int, int] | None


class BraceIndex:
    """Brace pairs of one pattern, computed in a single stack pass.

    end_of() answers what match_brace() answers, in constant time: every
    "{" is paired with the "}" that brings its depth back to zero, and a
    "{" that never closes has no entry. Like match_brace(), pairing does
    not treat "{{" specially; escapes only matter when choosing where a
    top-level group opens (next_group()).

    The most recent construct classification is remembered, so asking
    several kinds about the same group parses it once.

    Example:
        >>> index = BraceIndex("a { b {name}")
        >>> index.end_of(2) is None
        True
        >>> index.next_group(0)
        (6, 12)
    """

    __slots__ = ("_ends", "_last", "pattern")

    def __init__(self, pattern: str) -> None:
        """Pair every brace in pattern."""
        self.pattern = pattern
        self._ends: dict[int, int] = {}
        self._last: tuple[int, int, _Layout | None] | None = None
        opens: list[int] = []
        for brace in _BRACE.finditer(pattern):
            if brace.group() == "{":
                opens.append(brace.start())
            elif opens:
                self._ends[opens.pop()] = brace.end()

    def end_of(self, open_pos: int) -> int | None:
        """Index one past the "}" closing the "{" at open_pos, or None."""
        return self._ends.get(open_pos)

    def next_group(self, pos: int = 0) -> tuple[int, int] | None:
        """Next balanced top-level group at or after pos, as (start, end)."""
        while (open_pos := _next_open(self.pattern, pos)) is not None:
            end = self._ends.get(open_pos)
            if end is not None:
                return open_pos, end
            pos = open_pos + 1
        return None

    def construct_kind(self, start: int, end: int) -> ConstructKind | None:
        """Kind of the well-formed construct spanning [start, end), or None."""
        layout = self._layout(start, end)
        return None if layout is None else layout.kind

    def construct(self, start: int, end: int, offset: int = 0) -> Construct | None:
        """Build the construct spanning [start, end), or None if malformed.

        Args:
            start: Index of the opening "{"
            end: Index one past the closing "}"
            offset: Added to the span, for groups cut from a larger pattern
        """
        layout = self._layout(start, end)
        if layout is None:
            return None
        pattern = self.pattern
        branches = tuple(
            Branch(label=label, body=pattern[body_start:body_end])
            for label, body_start, body_end in layout.branches
        )
        style: str | None = None
        if layout.style is not None:
            style = pattern[layout.style[0] : layout.style[1]].strip() or None
        return Construct(
            argument=layout.argument,
            kind=layout.kind,
            branches=branches,
            style=style,
            source=pattern[start:end],
            span=Span(start + offset, end + offset),
        )

    def looks_like_construct(self, start: int, end: int) -> bool:
        """True when [start, end) opens with "argument, keyword" for a known kind."""
        header = self._header(start, end)
        return header is not None and header.group(2) in _KINDS

    def branch_spans(self, pos: int, stop: int) -> tuple[tuple[str, int, int], ...] | None:
        """Parse label{body} branches in [pos, stop).

        Returns:
            (label, body_start, body_end) per branch in source order, or None
            unless the range is a non-empty, fully consumed branch list
        """
        pattern = self.pattern
        spans: list[tuple[str, int, int]] = []
        while True:
            while pos < stop and pattern[pos].isspace():
                pos += 1
            if pos == stop:
                break
            label = _LABEL.match(pattern, pos, stop)
            if label is None:
                return None
            pos = label.end()
            while pos < stop and pattern[pos].isspace():
                pos += 1
            if pos == stop or pattern[pos] != "{":
                return None
            end = self._ends.get(pos)
            if end is None or end > stop:
                return None
            spans.append((label.group(), pos + 1, end - 1))
            pos = end
        return tuple(spans) or None

    def _header(self, start: int, end: int) -> re.Match[str] | None:
        header = _HEADER.match(self.pattern, start + 1, end - 1)
        if header is None or (header.end() < end - 1 and self.pattern[header.end()] != ","):
            return None
        return header

    def _layout(self, start: int, end: int) -> _Layout | None:
        if self._last is not None and self._last[:2] == (start, end):
            return self._last[2]
        layout = self._parse_layout(start, end)
        self._last = (start, end, layout)
        return layout

    def _parse_layout(self, start: int, end: int) -> _Layout | None:
        if end - start < 2 or self.pattern[start] != "{" or self.pattern[end - 1] != "}":
            return None
        header = self._header(start, end)
        if header is None:
            return None
        argument, keyword = header.groups()
        kind = _KINDS.get(keyword)
        if kind is None:
            return None
        # Text after the comma that follows the keyword, if there is one.
        rest = header.end() + 1 if header.end() < end - 1 else None

        if kind.has_branches:
            if rest is None:
                return None
            branches = self.branch_spans(rest, end - 1)
            if branches is None:
                return None
            return _Layout(argument, kind, branches, None)
        style = None if rest is None else (rest, end - 1)
        return _Layout(argument, kind, (), style)


def find_placeholder(pattern: str, start: int = 0) -> tuple[int, int] | None:
    """Find the next balanced top-level brace group.

    Escaped "{{" and unbalanced "{" are skipped.

    Args:
        pattern: Text to scan
        start: Index to start scanning from

    Returns:
        (start, end) of the group including braces, or None
    """
    return BraceIndex(pattern).next_group(start)


def parse_branches(text: str) -> tuple[Branch, ...] | None:
    """Parse a whitespace-separated list of label{subpattern} branches.

    Args:
        text: Branch list, e.g. " one{# item} other{# items}"

    Returns:
        Branches in source order, or None if the text is not a non-empty,
        fully consumed branch list
    """
    spans = BraceIndex(text).branch_spans(0, len(text))
    if spans is None:
        return None
    return tuple(Branch(label=label, body=text[start:end]) for label, start, end in spans)


def parse_construct(source: str, start: int = 0) -> Construct | None:
    """Parse a balanced brace group as an ICU construct.

    Args:
        source: Brace group including its outer braces
        start: Offset of source within the enclosing pattern (for the span)

    Returns:
        Construct, or None if the group is not a well-formed construct
    """
    return BraceIndex(source).construct(0, len(source), offset=start)


def _excerpt(pattern: str, start: int, end: int) -> str:
    if end - start <= _EXCERPT_LENGTH:
        return pattern[start:end]
    return pattern[start : start + _EXCERPT_LENGTH] + "..."


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split a pattern into text, placeholder, construct and junk tokens.

    Args:
        pattern: Message pattern

    Returns:
        Tokens in source order. Concatenating the source text of all tokens
        (TextElement.value, Placeholder.source, Construct.source, Junk.content)
        reproduces the pattern.

    Example:
        >>> tokenize("Hi {name}!")
        (TextElement(value='Hi '), Placeholder(name='name', ...), TextElement(value='!'))
    """
    index = BraceIndex(pattern)
    tokens: list[Token] = []
    text_start = 0
    pos = 0

    def flush(until: int) -> None:
        if until > text_start:
            tokens.append(TextElement(pattern[text_start:until]))

    while (open_pos := _next_open(pattern, pos)) is not None:
        end = index.end_of(open_pos)
        if end is None:
            flush(open_pos)
            tokens.append(
                Junk(
                    content="{",
                    diagnostic=ErrorTemplate.unbalanced_brace(open_pos),
                    span=Span(open_pos, open_pos + 1),
                )
            )
            text_start = pos = open_pos + 1
            continue

        token: Token | None = index.construct(open_pos, end)
        if token is None and (simple := _PLACEHOLDER.fullmatch(pattern, open_pos, end)):
            token = Placeholder(
                name=simple.group(1), source=simple.group(), span=Span(open_pos, end)
            )

        if token is None:
            if index.looks_like_construct(open_pos, end):
                flush(open_pos)
                excerpt = _excerpt(pattern, open_pos, end)
                tokens.append(
                    Junk(
                        content="{",
                        diagnostic=ErrorTemplate.malformed_construct(excerpt, open_pos),
                        span=Span(open_pos, open_pos + 1),
                    )
                )
                text_start = open_pos + 1
            pos = open_pos + 1
            continue

        flush(open_pos)
        tokens.append(token)
        text_start = pos = end

    flush(len(pattern))
    return tuple(tokens)
