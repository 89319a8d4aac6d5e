"""Integer parsers.

Overflow Semantics:
    Digits fold left to right (``value = value * 10 + digit``). As soon as
    the running value exceeds ``max_value`` the parser fails with an
    ``Integer overflow`` message; it never saturates or wraps. Pass
    ``max_value=None`` for Python's unbounded integers.
"""

from parselite.constants import MAX_INTEGER
from parselite.diagnostics import ErrorTemplate
from parselite.syntax.combinators import bind, many1, map, optional_p, sequence
from parselite.syntax.parser import Parser, fail, pure
from parselite.syntax.primitives import char_p, digit

__all__ = ["integer_p", "integer_parser", "signed_integer_p"]

_ZERO_ORD: int = ord("0")


def integer_parser(*, max_value: int | None = MAX_INTEGER) -> Parser[int]:
    """Build a parser for a non-negative base-10 integer literal.

    Requires one or more ASCII digits. No sign is accepted.

    Args:
        max_value: Largest accepted value, or None for no bound

    Returns:
        Parser yielding the integer value

    Example:
        >>> integer_parser()("123abc")
        Success(value=123, remaining='abc')
        >>> integer_parser(max_value=99)("123")
        Failure(message='Integer overflow: value exceeds 99')
    """

    def _fold(digits: tuple[str, ...]) -> Parser[int]:
        value = 0
        for ch in digits:
            value = value * 10 + (ord(ch) - _ZERO_ORD)
            if max_value is not None and value > max_value:
                return fail(ErrorTemplate.integer_overflow(max_value).message)
        return pure(value)

    return bind(many1(digit), _fold).named("integer")


integer_p: Parser[int] = integer_parser()

# Optional leading '-' followed by integer_p. "-" alone fails.
signed_integer_p: Parser[int] = map(
    sequence(optional_p(char_p("-")), integer_p),
    lambda pair: -pair[1] if pair[0] is not None else pair[1],
).named("signed_integer")
