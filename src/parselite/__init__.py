"""parselite - a small parser-combinator library.

Primitive parsers and higher-order combinators that compose into
recursive-descent parsers over text. Every parser returns either a
Success (value plus unconsumed suffix) or a Failure (message); ordinary
parse failure is never an exception.

Public API:
    Parser - Immutable, invokable str -> Result wrapper
    Success, Failure, Result - Result envelope
    any_char, char_p, string_p, digit, whitespace_char - Primitives
    map, bind, sequence, choice - Transformation and structure
    many, many1, optional_p, sep_by - Repetition
    skip_ws, integer_p - Convenience parsers

Exceptions:
    ParseliteError - Base exception class
    ParseFailedError - Raised by Parser.parse on failure
    NoProgressError - Repetition over a parser that consumes nothing

Submodules:
    parselite.syntax - The combinator core
    parselite.diagnostics - Diagnostic codes, templates and exceptions
    parselite.interpreter - Stack-machine line interpreter
"""

from .diagnostics import NoProgressError, ParseFailedError, ParseliteError
from .syntax import (
    Failure,
    Parser,
    Result,
    Success,
    any_char,
    bind,
    char_p,
    choice,
    complete,
    digit,
    eof,
    fail,
    integer_p,
    integer_parser,
    lazy,
    make_parser,
    many,
    many1,
    map,  # noqa: A004
    optional_p,
    pure,
    satisfy,
    sep_by,
    sequence,
    signed_integer_p,
    skip_ws,
    string_p,
    whitespace,
    whitespace_char,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parselite")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Failure",
    "NoProgressError",
    "ParseFailedError",
    "ParseliteError",
    "Parser",
    "Result",
    "Success",
    "__version__",
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
    "lazy",
    "make_parser",
    "many",
    "many1",
    "map",
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
