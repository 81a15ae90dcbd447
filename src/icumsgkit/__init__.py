"""icumsgkit - ICU-style message formatting with placeholder protection.

Resolves localization patterns (plural, select, selectordinal, number, date,
time and simple placeholders) into display text, and round-trips those
patterns through translator-facing flat tables without corrupting their
nested braces.

Public API:
    MessageEvaluator - Pattern evaluation against an argument map
    format_message - One-off evaluation with named arguments
    format_positional - One-off evaluation with positional arguments
    PlaceholderProtector - protect()/restore() of placeholders
    TableConverter - Flat table export and import
    export_to_file / import_from_file - Table plus placeholder map files

Exceptions:
    MessageFormatError - Base exception class
    MessageSyntaxError - Malformed patterns (collected, never raised by evaluate)
    MessageReferenceError - Missing arguments (collected)
    MessageResolutionError - Evaluation failures (collected)
    PlaceholderMapError - Invalid placeholder map files
    TableFormatError - Unusable translation tables

Submodules:
    icumsgkit.syntax - Tokenizer and token types
    icumsgkit.runtime - Evaluator, category rules, formatters
    icumsgkit.protection - Placeholder kinds and protector
    icumsgkit.table - Flat tables and placeholder map persistence
    icumsgkit.diagnostics - Error types and diagnostic codes
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import (
    MessageFormatError,
    MessageReferenceError,
    MessageResolutionError,
    MessageSyntaxError,
    PlaceholderMapError,
    TableFormatError,
)
from .enums import ConstructKind, PluralCategory, TableFormat
from .protection import (
    PlaceholderKind,
    PlaceholderKindRegistry,
    PlaceholderProtector,
    ReplacementEntry,
    protect_placeholders,
    restore_placeholders,
)
from .runtime import (
    MessageArgument,
    MessageEvaluator,
    build_plural,
    build_select,
    format_message,
    format_positional,
    ordinal_category,
    ordinal_form,
    plural_category,
    plural_form,
)
from .table import (
    PlaceholderMapStore,
    TableConverter,
    TableEntry,
    export_to_file,
    import_from_file,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("icumsgkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConstructKind",
    "MessageArgument",
    "MessageEvaluator",
    "MessageFormatError",
    "MessageReferenceError",
    "MessageResolutionError",
    "MessageSyntaxError",
    "PlaceholderKind",
    "PlaceholderKindRegistry",
    "PlaceholderMapError",
    "PlaceholderMapStore",
    "PlaceholderProtector",
    "PluralCategory",
    "ReplacementEntry",
    "TableConverter",
    "TableEntry",
    "TableFormat",
    "TableFormatError",
    "__version__",
    "build_plural",
    "build_select",
    "export_to_file",
    "format_message",
    "format_positional",
    "import_from_file",
    "ordinal_category",
    "ordinal_form",
    "plural_category",
    "plural_form",
    "protect_placeholders",
    "restore_placeholders",
]
