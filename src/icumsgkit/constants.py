"""Shared constants for icumsgkit.

This module provides centralized configuration constants used across the
syntax, runtime, protection and table packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested construct evaluation
- Numeric bounds: Magnitude limit for numeric arguments
- Locale defaults: Fallback locale for Babel-backed formatting
- Placeholder protection: Numbered placeholder template and map file naming
- Table layout: Fixed flat-table column names

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Selection
    "OTHER_BRANCH",
    # Numeric bounds
    "MAX_NUMERAL_DIGITS",
    # Placeholder protection
    "PLACEHOLDER_TEMPLATE",
    "SOURCE_CULTURE",
    "PLACEHOLDER_MAP_SUFFIX",
    # Table layout
    "COLUMN_KEY",
    "COLUMN_NAMESPACE",
    "COLUMN_CATEGORY",
    "COLUMN_SOURCE",
    "COLUMN_CONTEXT",
    "COLUMN_COMMENT",
    "COLUMN_MAX_LENGTH",
    "LEADING_COLUMNS",
    "FIXED_COLUMNS",
    "DEFAULT_CATEGORY",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth when a selected branch body itself contains
# plural/select/selectordinal constructs. Branch bodies are evaluated
# recursively, so this bounds the Python call stack.
MAX_DEPTH: int = 100

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used for number/date/time constructs when none is given, and the
# fallback when Babel does not recognize the requested locale.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# SELECTION
# ============================================================================

# Branch label used when no branch matches the resolved category or value.
OTHER_BRANCH: str = "other"

# ============================================================================
# NUMERIC BOUNDS
# ============================================================================

# Largest decimal exponent a plural, selectordinal or number argument may
# carry. Rendering "#" writes every digit, so "1e50000000" would otherwise
# expand to fifty million characters. Matches the CPython int/str default.
MAX_NUMERAL_DIGITS: int = 4300

# ============================================================================
# PLACEHOLDER PROTECTION
# ============================================================================

# Numbered placeholder substituted for protected constructs.
# Format string - use .format(index=...)
PLACEHOLDER_TEMPLATE: str = "{{{index}}}"  # e.g., {0}

# Culture slot used in map keys for the untranslated source text:
# "<namespace>:<key>:source"
SOURCE_CULTURE: str = "source"

# Placeholder map file written beside an exported table:
# strings.tsv -> strings.map.json
PLACEHOLDER_MAP_SUFFIX: str = ".map.json"

# ============================================================================
# TABLE LAYOUT
# ============================================================================

COLUMN_KEY: str = "Key"
COLUMN_NAMESPACE: str = "Namespace"
COLUMN_CATEGORY: str = "Category"
COLUMN_SOURCE: str = "Source"
COLUMN_CONTEXT: str = "Context"
COLUMN_COMMENT: str = "Comment"
COLUMN_MAX_LENGTH: str = "MaxLength"

# Columns preceding the per-culture columns, in export order.
LEADING_COLUMNS: tuple[str, ...] = (
    COLUMN_KEY,
    COLUMN_NAMESPACE,
    COLUMN_CATEGORY,
    COLUMN_SOURCE,
    COLUMN_CONTEXT,
    COLUMN_COMMENT,
)

# Every non-culture column. Any other header on import is a culture column.
FIXED_COLUMNS: frozenset[str] = frozenset((*LEADING_COLUMNS, COLUMN_MAX_LENGTH))

DEFAULT_CATEGORY: str = "General"
