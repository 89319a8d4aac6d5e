"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["EOF_MARKER", "ErrorTemplate"]

# Stand-in for the found character when the input is exhausted.
EOF_MARKER: str = "EOF"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases

    Parse failures carry only the ``message`` of the returned Diagnostic, so
    message texts are part of the public contract and must stay stable.
    """

    @staticmethod
    def unexpected_eof() -> Diagnostic:
        """Primitive invoked on empty input where one character is required.

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message="Unexpected end of input",
        )

    @staticmethod
    def unexpected_character(expected: str, found: str | None) -> Diagnostic:
        """Single-character mismatch.

        Args:
            expected: Description of what was required, already quoted if literal
            found: The character found, or None at end of input

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        shown = EOF_MARKER if found is None else found
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=f"Expected {expected}, found '{shown}'",
        )

    @staticmethod
    def unexpected_text(expected: str, found: str) -> Diagnostic:
        """Literal string mismatch.

        Args:
            expected: The literal that was required
            found: The input prefix of the same length (or all remaining input)

        Returns:
            Diagnostic for UNEXPECTED_TEXT
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TEXT,
            message=f'Expected "{expected}", found "{found}"',
        )

    @staticmethod
    def no_alternatives() -> Diagnostic:
        """choice() constructed with an empty list of alternatives.

        Returns:
            Diagnostic for NO_ALTERNATIVES
        """
        return Diagnostic(
            code=DiagnosticCode.NO_ALTERNATIVES,
            message="No alternatives matched",
            hint="Pass at least one parser to choice()",
        )

    @staticmethod
    def too_few_occurrences() -> Diagnostic:
        """many1() matched zero times.

        Returns:
            Diagnostic for TOO_FEW_OCCURRENCES
        """
        return Diagnostic(
            code=DiagnosticCode.TOO_FEW_OCCURRENCES,
            message="Expected at least one occurrence",
        )

    @staticmethod
    def trailing_input(found: str) -> Diagnostic:
        """Input left over where end of input was required.

        Args:
            found: First unconsumed character

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=f"Expected end of input, found '{found}'",
        )

    @staticmethod
    def integer_overflow(max_value: int) -> Diagnostic:
        """Integer literal larger than the configured bound.

        Args:
            max_value: The largest accepted value

        Returns:
            Diagnostic for INTEGER_OVERFLOW
        """
        return Diagnostic(
            code=DiagnosticCode.INTEGER_OVERFLOW,
            message=f"Integer overflow: value exceeds {max_value}",
            hint="Use integer_parser(max_value=None) for unbounded integers",
        )

    @staticmethod
    def no_progress(combinator: str, parser_name: str) -> Diagnostic:
        """Repetition element succeeded without consuming input.

        Args:
            combinator: Name of the repeating combinator (many, sep_by, ...)
            parser_name: Name of the offending element parser

        Returns:
            Diagnostic for NO_PROGRESS
        """
        return Diagnostic(
            code=DiagnosticCode.NO_PROGRESS,
            message=(
                f"{combinator}() element parser '{parser_name}' "
                "succeeded without consuming input"
            ),
            hint=(
                "Element parsers must consume at least one character on success; "
                "do not repeat optional_p() or many() directly"
            ),
        )

    @staticmethod
    def unknown_command(name: str) -> Diagnostic:
        """Token is neither an integer nor a registered command.

        Args:
            name: The token as written

        Returns:
            Diagnostic for UNKNOWN_COMMAND
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_COMMAND,
            message=f"Unknown command '{name}'",
        )

    @staticmethod
    def stack_underflow(command: str, required: int, available: int) -> Diagnostic:
        """Command needs more values than the stack holds.

        Args:
            command: Command name
            required: Number of values the command pops
            available: Number of values currently on the stack

        Returns:
            Diagnostic for STACK_UNDERFLOW
        """
        noun = "value" if required == 1 else "values"
        return Diagnostic(
            code=DiagnosticCode.STACK_UNDERFLOW,
            message=(
                f"{command} requires at least {required} {noun} on the stack, "
                f"found {available}"
            ),
        )

    @staticmethod
    def line_too_long(length: int, max_length: int) -> Diagnostic:
        """Interpreter input line exceeds the configured limit.

        Args:
            length: Actual line length in characters
            max_length: Configured maximum

        Returns:
            Diagnostic for LINE_TOO_LONG
        """
        return Diagnostic(
            code=DiagnosticCode.LINE_TOO_LONG,
            message=(
                f"Line length ({length:,} characters) exceeds maximum "
                f"({max_length:,} characters)"
            ),
            hint="Configure max_line_length in the Interpreter constructor to increase limit",
        )
