"""Diagnostic system for icumsgkit errors.

Provides structured error diagnostics with codes, hints and positions.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    MessageFormatError,
    MessageReferenceError,
    MessageResolutionError,
    MessageSyntaxError,
    PlaceholderMapError,
    TableFormatError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "MessageFormatError",
    "MessageReferenceError",
    "MessageResolutionError",
    "MessageSyntaxError",
    "PlaceholderMapError",
    "TableFormatError",
]
