"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Every degraded evaluation and every persistence failure maps to exactly one
    template, which keeps messages testable and consistent.
    """

    @staticmethod
    def argument_not_provided(name: str) -> Diagnostic:
        """Placeholder or construct references an argument that was not passed.

        Args:
            name: Argument name (decimal numeral for positional arguments)

        Returns:
            Diagnostic for ARGUMENT_NOT_PROVIDED
        """
        msg = f"Argument '{name}' not provided"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_PROVIDED,
            message=msg,
            hint="The placeholder is kept literally in the output",
            argument_name=name,
        )

    @staticmethod
    def argument_not_numeric(name: str, kind: str, received_type: str) -> Diagnostic:
        """Plural or ordinal selector could not be coerced to a number.

        Args:
            name: Argument name
            kind: Construct keyword (plural or selectordinal)
            received_type: Type name of the supplied value

        Returns:
            Diagnostic for ARGUMENT_NOT_NUMERIC
        """
        msg = f"Argument '{name}' for {kind} is not numeric (got {received_type})"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_NUMERIC,
            message=msg,
            hint="Pass an int, float, Decimal or numeric string",
            argument_name=name,
        )

    @staticmethod
    def formatting_failed(name: str, kind: str, reason: str) -> Diagnostic:
        """Locale-aware number/date/time formatting failed.

        Args:
            name: Argument name
            kind: Construct keyword (number, date or time)
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Formatting '{name}' as {kind} failed: {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            argument_name=name,
        )

    @staticmethod
    def formatter_not_found(kind: str) -> Diagnostic:
        """No formatter is registered for a formatting construct kind.

        Args:
            kind: Construct keyword

        Returns:
            Diagnostic for FORMATTER_NOT_FOUND
        """
        msg = f"No formatter registered for '{kind}' constructs"
        return Diagnostic(
            code=DiagnosticCode.FORMATTER_NOT_FOUND,
            message=msg,
            hint="Register one with FormatterRegistry.register()",
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int) -> Diagnostic:
        """Nested constructs exceeded the evaluation depth limit.

        Args:
            max_depth: Configured limit

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum construct nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten nested plural/select constructs",
        )

    @staticmethod
    def unbalanced_brace(position: int) -> Diagnostic:
        """Opening brace without a matching closing brace.

        Args:
            position: Offset of the opening brace

        Returns:
            Diagnostic for UNBALANCED_BRACE
        """
        msg = f"Unbalanced '{{' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNBALANCED_BRACE,
            message=msg,
            hint="Escape literal braces as '{{' and '}}'",
            position=position,
        )

    @staticmethod
    def malformed_construct(source: str, position: int) -> Diagnostic:
        """Text looks like a construct but its branches do not parse.

        Args:
            source: Offending construct text (an excerpt when long)
            position: Offset of the opening brace

        Returns:
            Diagnostic for MALFORMED_CONSTRUCT
        """
        msg = f"Malformed construct {source!r}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_CONSTRUCT,
            message=msg,
            hint="Expected {name, kind, label{text} ...}",
            position=position,
        )

    @staticmethod
    def placeholder_map_invalid(reason: str) -> Diagnostic:
        """Placeholder map JSON does not have the expected shape.

        Args:
            reason: What was wrong

        Returns:
            Diagnostic for PLACEHOLDER_MAP_INVALID
        """
        msg = f"Invalid placeholder map file: {reason}"
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_MAP_INVALID,
            message=msg,
            hint='Expected {"<namespace>:<key>:<culture>": {"{0}": "..."}}',
        )

    @staticmethod
    def table_header_invalid(missing: str) -> Diagnostic:
        """Imported table lacks a required column.

        Args:
            missing: Required column name

        Returns:
            Diagnostic for TABLE_HEADER_INVALID
        """
        msg = f"Translation table header is missing the '{missing}' column"
        return Diagnostic(
            code=DiagnosticCode.TABLE_HEADER_INVALID,
            message=msg,
            hint="Re-export the table rather than editing its header row",
        )
