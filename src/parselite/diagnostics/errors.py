"""parselite exception hierarchy with structured diagnostics.

Ordinary parse failure is a value (``Failure``), never an exception.
Exceptions cover programming errors in grammars, the raising
``Parser.parse`` entry point, and interpreter errors.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ParseliteError(Exception):
    """Base exception for all parselite errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParseliteError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ParseFailedError(ParseliteError):
    """Raised by ``Parser.parse`` when input does not match.

    The exception text is the failure message, unmodified.

    Attributes:
        input_text: The text that failed to parse
    """

    def __init__(self, message: str | Diagnostic, *, input_text: str = "") -> None:
        """Initialize ParseFailedError.

        Args:
            message: Failure message OR Diagnostic object
            input_text: The text that failed to parse
        """
        super().__init__(message)
        self.input_text = input_text


class NoProgressError(ParseliteError):
    """Repetition element parser succeeded without consuming input.

    Repeating such a parser would never terminate, so the combinator
    raises instead. This always indicates a grammar bug.
    """


class InterpreterError(ParseliteError):
    """Error raised while executing interpreter tokens."""


class UnknownCommandError(InterpreterError):
    """Token is neither an integer literal nor a registered command.

    Attributes:
        name: The unknown command name as written
    """

    def __init__(self, message: str | Diagnostic, *, name: str = "") -> None:
        """Initialize UnknownCommandError.

        Args:
            message: Error message string OR Diagnostic object
            name: The unknown command name
        """
        super().__init__(message)
        self.name = name


class StackUnderflowError(InterpreterError):
    """Command popped more values than the stack holds."""
