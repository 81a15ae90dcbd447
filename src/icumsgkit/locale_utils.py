"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale normalization and Babel locale lookup for the
number/date/time formatting constructs. Normalizing at the boundary keeps
cache keys consistent: "zh-CN" and "zh_CN" share one Locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from icumsgkit.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
    "resolve_babel_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Turn a culture code from a table header into a Babel identifier.

    Table columns use hyphenated culture codes (zh-CN); Babel expects
    underscores (zh_CN). Surrounding whitespace is stripped.

    Example:
        >>> normalize_locale("zh-CN")
        'zh_CN'
        >>> normalize_locale(" fr ")
        'fr'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parse locale_code into a cached Babel Locale.

    Raises:
        babel.UnknownLocaleError: No CLDR data for the code
        ValueError: Code is not a locale identifier

    Example:
        >>> get_babel_locale("zh-CN").territory
        'CN'
    """
    # Babel loads CLDR data at import time
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


@functools.lru_cache(maxsize=128)
def resolve_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale, falling back to DEFAULT_LOCALE for unknown codes.

    Unlike get_babel_locale(), never raises for bad locale input: the
    fallback is logged once per distinct code (the result is cached).

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale for locale_code, or for DEFAULT_LOCALE on failure
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        return get_babel_locale(locale_code)
    except UnknownLocaleError as e:
        logger.warning(
            "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
        )
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s",
            locale_code,
            e,
            DEFAULT_LOCALE,
        )
    return get_babel_locale(DEFAULT_LOCALE)
