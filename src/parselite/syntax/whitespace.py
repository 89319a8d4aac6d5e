"""Whitespace handling utilities.

Whitespace is the ASCII set accepted by ``whitespace_char``.
"""

from parselite.syntax.combinators import bind, many
from parselite.syntax.parser import Parser
from parselite.syntax.primitives import whitespace_char

__all__ = ["skip_ws", "whitespace"]

# Zero or more whitespace characters. Always succeeds.
whitespace: Parser[tuple[str, ...]] = many(whitespace_char).named("whitespace")


def skip_ws[T](parser: Parser[T]) -> Parser[T]:
    """Skip leading whitespace, then run ``parser``.

    The skipped whitespace never appears in the value. Whitespace after
    ``parser`` is left in place.

    Example:
        >>> from parselite.syntax.primitives import char_p
        >>> skip_ws(char_p(","))("  , 20")
        Success(value=',', remaining=' 20')
    """
    return bind(whitespace, lambda _skipped: parser).named(f"skip_ws({parser.name})")
