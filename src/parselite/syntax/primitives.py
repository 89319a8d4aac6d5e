"""Primitive parsers.

Atomic parsers that consume at most one unit of input on success and
nothing on failure. ``string_p`` treats its whole literal as the unit.

Character classification is ASCII-only. ``str.isdigit()`` and
``str.isspace()`` accept Unicode characters (``'²'``, ``'\\u00a0'``) and are
never used here.
"""

from collections.abc import Callable

from parselite.constants import ASCII_DIGITS, ASCII_WHITESPACE
from parselite.diagnostics import ErrorTemplate
from parselite.syntax.parser import Parser, make_parser
from parselite.syntax.result import Failure, Result, Success

__all__ = [
    "any_char",
    "char_p",
    "digit",
    "eof",
    "is_ascii_digit",
    "is_ascii_whitespace",
    "non_whitespace_char",
    "satisfy",
    "string_p",
    "whitespace_char",
]


def is_ascii_digit(ch: str) -> bool:
    """Check if character is an ASCII digit 0-9."""
    return ch in ASCII_DIGITS


def is_ascii_whitespace(ch: str) -> bool:
    """Check if character is ASCII whitespace (space, \\t, \\n, \\v, \\f, \\r)."""
    return ch in ASCII_WHITESPACE


@make_parser("any_char")
def any_char(text: str) -> Result[str]:
    """Consume the first character of non-empty input."""
    if not text:
        return Failure(ErrorTemplate.unexpected_eof().message)
    return Success(text[0], text[1:])


def satisfy(predicate: Callable[[str], bool], description: str) -> Parser[str]:
    """Consume one character accepted by ``predicate``.

    Args:
        predicate: Test applied to the first character
        description: What the predicate accepts, used in failure messages

    Returns:
        Parser yielding the consumed character

    Example:
        >>> vowel = satisfy(lambda c: c in "aeiou", "vowel")
        >>> vowel("apple")
        Success(value='a', remaining='pple')
        >>> vowel("xyz")
        Failure(message="Expected vowel, found 'x'")
    """

    def _satisfy(text: str) -> Result[str]:
        if text and predicate(text[0]):
            return Success(text[0], text[1:])
        found = text[0] if text else None
        return Failure(ErrorTemplate.unexpected_character(description, found).message)

    return Parser(_satisfy, description)


def char_p(expected: str) -> Parser[str]:
    """Consume exactly the character ``expected``.

    Args:
        expected: A single character

    Raises:
        ValueError: If ``expected`` is not exactly one character

    Example:
        >>> char_p("a")("abc")
        Success(value='a', remaining='bc')
        >>> char_p("a")("xyz")
        Failure(message="Expected 'a', found 'x'")
        >>> char_p("a")("")
        Failure(message="Expected 'a', found 'EOF'")
    """
    if len(expected) != 1:
        msg = f"char_p() expects a single character, got {expected!r}"
        raise ValueError(msg)

    return satisfy(lambda ch: ch == expected, f"'{expected}'").named(f"char_p({expected!r})")


def string_p(expected: str) -> Parser[str]:
    """Consume the literal prefix ``expected``.

    On mismatch the message shows the input prefix of the same length, or
    the whole input when it is shorter than the literal. The empty literal
    always succeeds without consuming input.

    Example:
        >>> string_p("foo")("foobar")
        Success(value='foo', remaining='bar')
        >>> string_p("foo")("fo")
        Failure(message='Expected "foo", found "fo"')
    """
    size = len(expected)

    def _string_p(text: str) -> Result[str]:
        if text.startswith(expected):
            return Success(expected, text[size:])
        return Failure(ErrorTemplate.unexpected_text(expected, text[:size]).message)

    return Parser(_string_p, f"string_p({expected!r})")


digit: Parser[str] = satisfy(is_ascii_digit, "digit")

whitespace_char: Parser[str] = satisfy(is_ascii_whitespace, "whitespace")

non_whitespace_char: Parser[str] = satisfy(
    lambda ch: not is_ascii_whitespace(ch), "non-whitespace character"
)


@make_parser("eof")
def eof(text: str) -> Result[None]:
    """Succeed with None only at end of input."""
    if text:
        return Failure(ErrorTemplate.trailing_input(text[0]).message)
    return Success(None, text)
