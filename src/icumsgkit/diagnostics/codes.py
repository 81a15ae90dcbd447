"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Reference errors (arguments not supplied)
        2000-2999: Resolution errors (evaluation and formatting failures)
        3000-3999: Syntax errors (unbalanced braces, malformed constructs)
        4000-4999: Persistence errors (placeholder map files, flat tables)
    """

    # Reference errors (1000-1999)
    ARGUMENT_NOT_PROVIDED = 1001

    # Resolution errors (2000-2999)
    ARGUMENT_NOT_NUMERIC = 2001
    FORMATTING_FAILED = 2002
    MAX_DEPTH_EXCEEDED = 2003
    FORMATTER_NOT_FOUND = 2004

    # Syntax errors (3000-3999)
    UNBALANCED_BRACE = 3001
    MALFORMED_CONSTRUCT = 3002

    # Persistence errors (4000-4999)
    PLACEHOLDER_MAP_INVALID = 4001
    TABLE_HEADER_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        argument_name: Argument that caused the error (evaluation errors)
        position: Character offset in the pattern (syntax errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    argument_name: str | None = None
    position: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            error[ARGUMENT_NOT_NUMERIC]: Argument 'count' is not numeric
              --> position 6
              = help: Pass an int, float or Decimal for plural arguments

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
