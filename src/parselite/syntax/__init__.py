"""Parser-combinator core.

Module Organization:
- result.py: Success / Failure result envelope
- parser.py: Parser abstraction, make_parser, pure, fail, lazy
- primitives.py: Single-character and literal parsers
- combinators.py: map, bind, sequence, choice and repetition
- whitespace.py: whitespace and skip_ws
- numbers.py: Integer literal parsers

Example:
    >>> from parselite.syntax import char_p, integer_p, sep_by, skip_ws
    >>> int_list = sep_by(integer_p, skip_ws(char_p(",")))
    >>> int_list("10, 20, 30,40").value
    (10, 20, 30, 40)
"""

from parselite.syntax.combinators import (
    bind,
    choice,
    complete,
    many,
    many1,
    map,  # noqa: A004
    optional_p,
    sep_by,
    sequence,
)
from parselite.syntax.numbers import integer_p, integer_parser, signed_integer_p
from parselite.syntax.parser import Parser, fail, lazy, make_parser, pure
from parselite.syntax.primitives import (
    any_char,
    char_p,
    digit,
    eof,
    is_ascii_digit,
    is_ascii_whitespace,
    non_whitespace_char,
    satisfy,
    string_p,
    whitespace_char,
)
from parselite.syntax.result import Failure, Result, Success
from parselite.syntax.whitespace import skip_ws, whitespace

__all__ = [
    "Failure",
    "Parser",
    "Result",
    "Success",
    "any_char",
    "bind",
    "char_p",
    "choice",
    "complete",
    "digit",
    "eof",
    "fail",
    "integer_p",
    "integer_parser",
    "is_ascii_digit",
    "is_ascii_whitespace",
    "lazy",
    "make_parser",
    "many",
    "many1",
    "map",
    "non_whitespace_char",
    "optional_p",
    "pure",
    "satisfy",
    "sep_by",
    "sequence",
    "signed_integer_p",
    "skip_ws",
    "string_p",
    "whitespace",
    "whitespace_char",
]
