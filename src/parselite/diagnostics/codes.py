"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by exceptions
and produced by error templates.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Parse failures (primitives and combinators)
        2000-2999: Grammar errors (misbehaving parsers)
        3000-3999: Interpreter errors (commands and stack)
    """

    # Parse failures (1000-1999)
    UNEXPECTED_EOF = 1001
    UNEXPECTED_CHARACTER = 1002
    UNEXPECTED_TEXT = 1003
    NO_ALTERNATIVES = 1004
    TOO_FEW_OCCURRENCES = 1005
    TRAILING_INPUT = 1006
    INTEGER_OVERFLOW = 1007

    # Grammar errors (2000-2999)
    NO_PROGRESS = 2001

    # Interpreter errors (3000-3999)
    UNKNOWN_COMMAND = 3001
    STACK_UNDERFLOW = 3002
    LINE_TOO_LONG = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Parse failures only ever surface ``message``; the code and hint exist
    for exceptions and tooling that want more than a string.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its code name and optional hint.

        Example output:
            error[NO_PROGRESS]: many() element parser 'p' succeeded without consuming input
              = help: Element parsers must consume at least one character

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
