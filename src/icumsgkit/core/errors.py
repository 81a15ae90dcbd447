"""Core error types shared across runtime layers.

Python 3.13+.
"""

from icumsgkit.diagnostics import MessageResolutionError
from icumsgkit.diagnostics.codes import Diagnostic

__all__ = ["FormattingError"]


class FormattingError(MessageResolutionError):
    """Raised when locale-aware number, date or time formatting fails.

    The evaluator catches this error, collects it, and writes fallback_value
    into the output so the message stays readable.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
