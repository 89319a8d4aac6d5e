"""Line interpreter: tokenizes a line and dispatches each token.

Each token is either an integer literal, pushed onto the stack, or a
command name run through the registry. Errors from individual tokens
are collected and the remaining tokens still run, mirroring the
``(result, errors)`` convention of never raising for per-item problems.
"""

import logging
from typing import TextIO

from parselite.constants import MAX_LINE_LENGTH
from parselite.diagnostics import (
    ErrorTemplate,
    InterpreterError,
    ParseFailedError,
    ParseliteError,
    UnknownCommandError,
)
from parselite.interpreter.commands import CommandRegistry, install_builtins
from parselite.interpreter.stack import StackMachine
from parselite.syntax import (
    Parser,
    Success,
    complete,
    many,
    many1,
    map,  # noqa: A004
    non_whitespace_char,
    sep_by,
    signed_integer_p,
    skip_ws,
    whitespace_char,
)

__all__ = ["Interpreter", "integer_token", "tokenizer"]

logger = logging.getLogger(__name__)

# One or more non-whitespace characters joined into a word.
word: Parser[str] = map(many1(non_whitespace_char), "".join).named("word")

# Words separated by runs of whitespace. Leading whitespace is skipped so
# indented lines are not read as empty.
tokenizer: Parser[tuple[str, ...]] = skip_ws(sep_by(word, many(whitespace_char))).named(
    "tokenizer"
)

# A token is a number only if the whole token is a signed integer.
integer_token: Parser[int] = complete(signed_integer_p)


class Interpreter:
    """Stack-machine interpreter over whitespace-separated tokens.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> interp = Interpreter(output=out)
        >>> interp.execute_line("2 3 add print")
        ()
        >>> out.getvalue()
        'Stack: 5\\n'
    """

    __slots__ = ("_max_line_length", "machine", "registry")

    def __init__(
        self,
        *,
        output: TextIO | None = None,
        locale: str | None = None,
        max_line_length: int | None = None,
        registry: CommandRegistry | None = None,
    ) -> None:
        """Initialize interpreter with a fresh stack.

        Args:
            output: Stream for command output (default: sys.stdout)
            locale: Locale code for PRINT number rendering (requires Babel)
            max_line_length: Maximum accepted line length (default: 64 KiB).
                             Set to 0 to disable the limit.
            registry: Extra commands; built-ins are installed into it,
                      overriding entries with the same names
        """
        self.machine = StackMachine(output=output, locale=locale)
        self.registry = registry if registry is not None else CommandRegistry()
        install_builtins(self.registry, self.machine)
        self._max_line_length = (
            max_line_length if max_line_length is not None else MAX_LINE_LENGTH
        )
        logger.debug(
            "Interpreter initialized (locale=%s, commands=%d)", locale, len(self.registry)
        )

    @property
    def max_line_length(self) -> int:
        """Maximum accepted line length in characters."""
        return self._max_line_length

    @property
    def stack(self) -> tuple[int, ...]:
        """Snapshot of the stack, bottom first."""
        return self.machine.values

    def tokenize(self, line: str) -> tuple[tuple[str, ...], ParseFailedError | None]:
        """Split ``line`` into tokens.

        Returns:
            Tuple of (tokens, error). On failure tokens is empty and error
            carries the parser's message unmodified.
        """
        result = tokenizer(line)
        if isinstance(result, Success):
            return result.value, None
        return (), ParseFailedError(result.message, input_text=line)

    def execute_token(self, token: str) -> None:
        """Push ``token`` if it is an integer, otherwise run it as a command.

        Raises:
            UnknownCommandError: If the token names no command
            StackUnderflowError: If the command needs more values
        """
        number = integer_token(token)
        if isinstance(number, Success):
            logger.debug("Push %d", number.value)
            self.machine.push(number.value)
            return
        action = self.registry.lookup(token)
        if action is None:
            raise UnknownCommandError(ErrorTemplate.unknown_command(token), name=token)
        logger.debug("Execute command: %s", token)
        action()

    def execute_line(self, line: str) -> tuple[ParseliteError, ...]:
        """Tokenize and execute one line.

        A tokenizer failure rejects the whole line: nothing runs and the
        failure is the only error. Otherwise every token runs in order and
        the errors of failing tokens are collected.

        Args:
            line: One input line, without its newline

        Returns:
            Errors in token order (empty on full success)

        Raises:
            ValueError: If the line exceeds max_line_length
        """
        if self._max_line_length > 0 and len(line) > self._max_line_length:
            raise ValueError(ErrorTemplate.line_too_long(len(line), self._max_line_length).message)

        tokens, parse_error = self.tokenize(line)
        if parse_error is not None:
            logger.warning("Parse error: %s", parse_error)
            return (parse_error,)

        errors: list[ParseliteError] = []
        for token in tokens:
            try:
                self.execute_token(token)
            except InterpreterError as e:
                logger.warning("Token '%s' failed: %s", token, e)
                errors.append(e)
        return tuple(errors)
