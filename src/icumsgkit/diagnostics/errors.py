"""Exception hierarchy with structured diagnostics.

All exceptions optionally store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(Exception):
    """Base exception for all icumsgkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class MessageSyntaxError(MessageFormatError):
    """Pattern syntax problem (unbalanced brace, malformed construct).

    Never raised by the evaluator; collected by evaluate_with_errors().
    Fallback: offending text is kept literally.
    """


class MessageReferenceError(MessageFormatError):
    """Pattern references an argument that was not supplied.

    Fallback: placeholder or construct text is kept literally.
    """


class MessageResolutionError(MessageFormatError):
    """Runtime error while evaluating a construct.

    Examples:
    - Non-numeric value passed to plural or selectordinal
    - Nesting depth exceeded
    - No formatter registered for a construct kind
    """


class PlaceholderMapError(MessageFormatError, ValueError):
    """Persisted placeholder map content is not a map of maps of strings."""


class TableFormatError(MessageFormatError, ValueError):
    """Imported translation table is structurally unusable."""
