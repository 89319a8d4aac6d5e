"""Parser combinators.

Higher-order functions that take parsers and return new parsers.
Each combinator has its own consumption and failure contract:

- ``map``: reshapes the value; consumption and failures unchanged
- ``bind``: the second parser is chosen from the first parser's value
- ``sequence``: both must succeed; the first failure is returned as-is
- ``choice``: first success wins; every attempt starts from the same input
- ``many`` / ``many1`` / ``optional_p`` / ``sep_by``: repetition, swallowing
  the failure that ends the loop

Repetition and Termination:
    An element parser that succeeds without consuming input would repeat
    forever. ``many`` and ``many1`` raise NoProgressError the first time
    their element does so. ``sep_by`` raises when a whole element plus
    separator round consumes nothing. Wrapping ``optional_p`` or ``many``
    directly in a repetition combinator is the usual cause.
"""

import logging
from collections.abc import Callable, Iterable

from parselite.diagnostics import ErrorTemplate, NoProgressError
from parselite.syntax.parser import Parser
from parselite.syntax.primitives import eof
from parselite.syntax.result import Failure, Result, Success

__all__ = [
    "bind",
    "choice",
    "complete",
    "many",
    "many1",
    "map",
    "optional_p",
    "sep_by",
    "sequence",
]

logger = logging.getLogger(__name__)

# Joins branch messages in an aggregated choice() failure.
_CHOICE_SEPARATOR: str = " | "


def _ensure_progress(combinator: str, parser: Parser[object], before: str, after: str) -> None:
    """Raise NoProgressError if no input was consumed between two points."""
    if len(after) < len(before):
        return
    diagnostic = ErrorTemplate.no_progress(combinator, parser.name)
    logger.warning("%s (input: %.40r)", diagnostic.message, before)
    raise NoProgressError(diagnostic)


def map[T, U](parser: Parser[T], fn: Callable[[T], U]) -> Parser[U]:  # noqa: A001
    """Transform the success value of ``parser`` through ``fn``.

    Failures are forwarded unchanged and ``remaining`` is exactly the
    wrapped parser's.

    Example:
        >>> from parselite.syntax.primitives import digit
        >>> map(digit, int)("7x")
        Success(value=7, remaining='x')
    """

    def _map(text: str) -> Result[U]:
        result = parser(text)
        if isinstance(result, Success):
            return Success(fn(result.value), result.remaining)
        return result

    return Parser(_map, f"map({parser.name})")


def bind[T, U](parser: Parser[T], fn: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run ``parser``, then the parser ``fn`` builds from its value.

    The second parser runs on the first parser's remaining input and its
    result, success or failure, is the final result. A failure of the
    first parser short-circuits.

    Example:
        >>> from parselite.syntax.primitives import any_char, char_p
        >>> doubled = bind(any_char, char_p)
        >>> doubled("aab")
        Success(value='a', remaining='b')
        >>> doubled("abb")
        Failure(message="Expected 'a', found 'b'")
    """

    def _bind(text: str) -> Result[U]:
        result = parser(text)
        if isinstance(result, Success):
            return fn(result.value)(result.remaining)
        return result

    return Parser(_bind, f"bind({parser.name})")


def sequence[T, U](first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Run ``first`` then ``second``, pairing their values.

    Fails with ``first``'s message if it fails, otherwise with
    ``second``'s message if that fails. Nothing from ``first`` is kept in
    a failure.

    Example:
        >>> from parselite.syntax.primitives import char_p
        >>> sequence(char_p("a"), char_p("b"))("abc")
        Success(value=('a', 'b'), remaining='c')
    """

    def _sequence(text: str) -> Result[tuple[T, U]]:
        first_result = first(text)
        if not isinstance(first_result, Success):
            return first_result
        second_result = second(first_result.remaining)
        if not isinstance(second_result, Success):
            return second_result
        return Success((first_result.value, second_result.value), second_result.remaining)

    return Parser(_sequence, f"sequence({first.name}, {second.name})")


def choice[T](parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Return the first success among ``parsers``, tried in order.

    Every alternative runs against the original input. When all fail,
    their messages are joined with ``" | "`` in list order. An empty list
    fails with ``"No alternatives matched"``.

    Example:
        >>> from parselite.syntax.primitives import string_p
        >>> keyword = choice([string_p("foo"), string_p("bar")])
        >>> keyword("barxyz")
        Success(value='bar', remaining='xyz')
        >>> keyword("baz")
        Failure(message='Expected "foo", found "baz" | Expected "bar", found "baz"')
    """
    alternatives = tuple(parsers)

    def _choice(text: str) -> Result[T]:
        if not alternatives:
            return Failure(ErrorTemplate.no_alternatives().message)
        messages: list[str] = []
        for alternative in alternatives:
            result = alternative(text)
            if isinstance(result, Success):
                return result
            messages.append(result.message)
        return Failure(_CHOICE_SEPARATOR.join(messages))

    names = ", ".join(alternative.name for alternative in alternatives)
    return Parser(_choice, f"choice([{names}])")


def many[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply ``parser`` zero or more times.

    Stops at the first failure, discarding that attempt entirely. Never
    fails.

    Raises:
        NoProgressError: At parse time, if ``parser`` succeeds without
            consuming input

    Example:
        >>> from parselite.syntax.primitives import digit
        >>> many(digit)("123abc")
        Success(value=('1', '2', '3'), remaining='abc')
        >>> many(digit)("abc")
        Success(value=(), remaining='abc')
    """

    def _many(text: str) -> Result[tuple[T, ...]]:
        values: list[T] = []
        remaining = text
        while True:
            result = parser(remaining)
            if not isinstance(result, Success):
                break
            _ensure_progress("many", parser, remaining, result.remaining)
            values.append(result.value)
            remaining = result.remaining
        return Success(tuple(values), remaining)

    return Parser(_many, f"many({parser.name})")


def many1[T](parser: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply ``parser`` one or more times.

    Same as ``many`` except that zero matches fails with
    ``"Expected at least one occurrence"``.
    """
    repeated = many(parser)

    def _many1(text: str) -> Result[tuple[T, ...]]:
        result = repeated(text)
        if isinstance(result, Success) and not result.value:
            return Failure(ErrorTemplate.too_few_occurrences().message)
        return result

    return Parser(_many1, f"many1({parser.name})")


def optional_p[T](parser: Parser[T]) -> Parser[T | None]:
    """Apply ``parser`` zero or one time.

    On failure, succeeds with None and the original input; the failure
    itself is never surfaced.

    Example:
        >>> from parselite.syntax.primitives import char_p
        >>> optional_p(char_p("-"))("-5")
        Success(value='-', remaining='5')
        >>> optional_p(char_p("-"))("5")
        Success(value=None, remaining='5')
    """

    def _optional(text: str) -> Result[T | None]:
        result = parser(text)
        if isinstance(result, Success):
            return result
        return Success(None, text)

    return Parser(_optional, f"optional_p({parser.name})")


def sep_by[T, S](element: Parser[T], separator: Parser[S]) -> Parser[tuple[T, ...]]:
    """Parse zero or more ``element``s separated by ``separator``.

    The loop ends when an element fails, or when the separator after an
    element fails. Neither failure is surfaced and the failed attempt
    consumes nothing. Never fails.

    A separator that succeeds but is not followed by an element is still
    consumed: ``"1,2,"`` yields ``(1, 2)`` with nothing remaining.

    Raises:
        NoProgressError: At parse time, if an element and the separator
            after it both succeed without consuming input

    Example:
        >>> from parselite.syntax.numbers import integer_p
        >>> from parselite.syntax.primitives import char_p
        >>> from parselite.syntax.whitespace import skip_ws
        >>> sep_by(integer_p, skip_ws(char_p(",")))("10, 20, 30,40")
        Success(value=(10, 20, 30, 40), remaining='')
    """

    def _sep_by(text: str) -> Result[tuple[T, ...]]:
        values: list[T] = []
        remaining = text
        while True:
            round_start = remaining
            element_result = element(remaining)
            if not isinstance(element_result, Success):
                break
            values.append(element_result.value)
            remaining = element_result.remaining
            separator_result = separator(remaining)
            if not isinstance(separator_result, Success):
                break
            remaining = separator_result.remaining
            _ensure_progress("sep_by", element, round_start, remaining)
        return Success(tuple(values), remaining)

    return Parser(_sep_by, f"sep_by({element.name}, {separator.name})")


def complete[T](parser: Parser[T]) -> Parser[T]:
    """Run ``parser`` and require that it consumed all input.

    Example:
        >>> from parselite.syntax.numbers import integer_p
        >>> complete(integer_p)("12")
        Success(value=12, remaining='')
        >>> complete(integer_p)("12a")
        Failure(message="Expected end of input, found 'a'")
    """
    return map(sequence(parser, eof), lambda pair: pair[0]).named(f"complete({parser.name})")
