"""Message evaluator: resolves a pattern against an argument map.

Architecture:
    - Re-tokenizes the pattern on every call (no persistent AST)
    - Collects errors instead of raising; unresolvable text stays literal
    - Returns (result, errors) tuples from evaluate_with_errors()
    - Selected branch bodies are evaluated recursively under a DepthGuard

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from icumsgkit.constants import DEFAULT_LOCALE, MAX_DEPTH
from icumsgkit.core import DepthGuard, DepthLimitExceededError, FormattingError
from icumsgkit.diagnostics import (
    ErrorTemplate,
    MessageFormatError,
    MessageReferenceError,
    MessageResolutionError,
    MessageSyntaxError,
)
from icumsgkit.enums import ConstructKind
from icumsgkit.locale_utils import normalize_locale, resolve_babel_locale
from icumsgkit.syntax import Construct, Junk, Placeholder, TextElement, tokenize

from .functions import FormatterRegistry, get_shared_formatters
from .plural_rules import ordinal_category, plural_category, select_branch
from .value_types import MessageArgs, MessageArgument, coerce_number, format_numeral, format_value

__all__ = [
    "MessageEvaluator",
    "build_plural",
    "build_select",
    "format_message",
    "format_positional",
]

logger = logging.getLogger(__name__)


class MessageEvaluator:
    """Resolves ICU-style message patterns to display text.

    Handles plural, select and selectordinal constructs (with # substitution
    in plural branches), number/date/time constructs via locale-aware
    formatters, and simple {name} / {0} placeholders.

    Never raises for missing or ill-typed arguments: the offending
    placeholder or construct is written back verbatim and the problem is
    reported through evaluate_with_errors().

    Example:
        >>> evaluator = MessageEvaluator()
        >>> evaluator.evaluate("There {count, plural, one{is # cat} other{are # cats}}.",
        ...                    {"count": 3})
        'There are 3 cats.'
    """

    __slots__ = ("_formatters", "_locale", "_max_depth")

    def __init__(
        self,
        locale: str = DEFAULT_LOCALE,
        *,
        formatters: FormatterRegistry | None = None,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize evaluator.

        Args:
            locale: Locale for number/date/time constructs (BCP-47 or POSIX)
            formatters: Formatter registry (default: shared frozen registry)
            max_depth: Maximum nesting depth of constructs inside selected branches
        """
        self._locale = normalize_locale(locale)
        self._formatters = formatters if formatters is not None else get_shared_formatters()
        self._max_depth = max_depth

    @property
    def locale(self) -> str:
        """Normalized locale code."""
        return self._locale

    def evaluate(self, pattern: str, args: MessageArgs | None = None) -> str:
        """Resolve pattern against args.

        Args:
            pattern: Message pattern
            args: Argument map; empty or None returns the pattern unchanged

        Returns:
            Resolved text (never None)
        """
        result, _ = self.evaluate_with_errors(pattern, args)
        return result

    def evaluate_with_errors(
        self, pattern: str, args: MessageArgs | None = None
    ) -> tuple[str, tuple[MessageFormatError, ...]]:
        """Resolve pattern against args, collecting errors.

        Args:
            pattern: Message pattern
            args: Argument map; empty or None returns the pattern unchanged

        Returns:
            Tuple of (text, errors):
            - text: Resolved text; unresolvable parts kept literally
            - errors: Exceptions describing every degraded part (immutable)
        """
        if not args:
            return pattern, ()
        errors: list[MessageFormatError] = []
        guard = DepthGuard(max_depth=self._max_depth)
        result = self._resolve_pattern(pattern, args, errors, guard, None)
        if errors:
            logger.debug("Pattern %r resolved with %d error(s)", pattern, len(errors))
        return result, tuple(errors)

    def evaluate_positional(self, pattern: str, *args: MessageArgument) -> str:
        """Resolve pattern with positional arguments bound to "0", "1", ...

        Example:
            >>> MessageEvaluator().evaluate_positional("{0} + {1} = {2}", 1, 2, 3)
            '1 + 2 = 3'
        """
        return self.evaluate(pattern, {str(index): value for index, value in enumerate(args)})

    def _resolve_pattern(
        self,
        pattern: str,
        args: MessageArgs,
        errors: list[MessageFormatError],
        guard: DepthGuard,
        numeral: str | None,
    ) -> str:
        """Resolve one pattern level.

        numeral is the enclosing plural value; when set, "#" in literal text
        is replaced by it.
        """
        parts: list[str] = []
        for token in tokenize(pattern):
            match token:
                case TextElement(value=value):
                    parts.append(value if numeral is None else value.replace("#", numeral))
                case Placeholder():
                    parts.append(self._resolve_placeholder(token, args, errors))
                case Construct():
                    parts.append(self._resolve_construct(token, args, errors, guard, numeral))
                case Junk(content=content, diagnostic=diagnostic):
                    errors.append(MessageSyntaxError(diagnostic))
                    parts.append(content)
        return "".join(parts)

    def _resolve_placeholder(
        self, token: Placeholder, args: MessageArgs, errors: list[MessageFormatError]
    ) -> str:
        if token.name not in args:
            errors.append(MessageReferenceError(ErrorTemplate.argument_not_provided(token.name)))
            logger.debug("Unresolved placeholder %s kept literally", token.source)
            return token.source
        return format_value(args[token.name])

    def _resolve_construct(
        self,
        token: Construct,
        args: MessageArgs,
        errors: list[MessageFormatError],
        guard: DepthGuard,
        numeral: str | None,
    ) -> str:
        if token.argument not in args:
            errors.append(
                MessageReferenceError(ErrorTemplate.argument_not_provided(token.argument))
            )
            logger.debug("Construct argument %r missing, kept literally", token.argument)
            return token.source
        value = args[token.argument]

        match token.kind:
            case ConstructKind.PLURAL | ConstructKind.SELECTORDINAL:
                number = coerce_number(value)
                if number is None:
                    diagnostic = ErrorTemplate.argument_not_numeric(
                        token.argument, token.kind, type(value).__name__
                    )
                    errors.append(MessageResolutionError(diagnostic))
                    return token.source
                if token.kind is ConstructKind.PLURAL:
                    category = plural_category(number)
                else:
                    category = ordinal_category(number)
                rendered = format_numeral(number)
                body = select_branch(token.forms, category)
                if body is None:
                    return rendered
                return self._resolve_branch(token, body, args, errors, guard, rendered)

            case ConstructKind.SELECT:
                selector = format_value(value)
                body = select_branch(token.forms, selector)
                if body is None:
                    return selector
                return self._resolve_branch(token, body, args, errors, guard, numeral)

            case _:
                return self._format_construct(token, value, errors)

    def _resolve_branch(
        self,
        token: Construct,
        body: str,
        args: MessageArgs,
        errors: list[MessageFormatError],
        guard: DepthGuard,
        numeral: str | None,
    ) -> str:
        try:
            with guard:
                return self._resolve_pattern(body, args, errors, guard, numeral)
        except DepthLimitExceededError as e:
            errors.append(e)
            return token.source

    def _format_construct(
        self, token: Construct, value: MessageArgument, errors: list[MessageFormatError]
    ) -> str:
        formatter = self._formatters.get(token.kind)
        if formatter is None:
            errors.append(MessageResolutionError(ErrorTemplate.formatter_not_found(token.kind)))
            return format_value(value)
        try:
            return formatter(value, resolve_babel_locale(self._locale), token.style)
        except FormattingError as e:
            diagnostic = ErrorTemplate.formatting_failed(token.argument, token.kind, str(e))
            errors.append(FormattingError(diagnostic, e.fallback_value))
            return e.fallback_value


def format_message(
    pattern: str, args: MessageArgs | None = None, *, locale: str = DEFAULT_LOCALE
) -> str:
    """Resolve pattern with a one-off evaluator.

    Example:
        >>> format_message("Hello, {name}! Today is {day}.", {"name": "World"})
        'Hello, World! Today is {day}.'
    """
    return MessageEvaluator(locale).evaluate(pattern, args)


def format_positional(
    pattern: str, *args: MessageArgument, locale: str = DEFAULT_LOCALE
) -> str:
    """Resolve pattern with positional arguments bound to "0", "1", ..."""
    return MessageEvaluator(locale).evaluate_positional(pattern, *args)


def _build_construct(argument: str, kind: ConstructKind, forms: Mapping[str, str]) -> str:
    branches = " ".join(f"{label}{{{body}}}" for label, body in forms.items())
    return f"{{{argument}, {kind}, {branches}}}"


def build_plural(argument: str, forms: Mapping[str, str]) -> str:
    """Build plural construct source from a label -> body mapping.

    Example:
        >>> build_plural("count", {"one": "# item", "other": "# items"})
        '{count, plural, one{# item} other{# items}}'
    """
    return _build_construct(argument, ConstructKind.PLURAL, forms)


def build_select(argument: str, forms: Mapping[str, str]) -> str:
    """Build select construct source from a label -> body mapping.

    Example:
        >>> build_select("gender", {"male": "He", "other": "They"})
        '{gender, select, male{He} other{They}}'
    """
    return _build_construct(argument, ConstructKind.SELECT, forms)
