"""Parser abstraction.

A ``Parser[T]`` is an immutable, named, invokable value mapping input
text to a ``Result[T]``. Every combinator in this package takes parsers
and returns a new parser wrapping them; nothing is mutated after
construction, so one parser may be invoked any number of times,
including from several threads at once.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
    - funcparserlib (Python)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Never

from parselite.diagnostics import ErrorTemplate, ParseFailedError
from parselite.syntax.result import Failure, Result, Success

__all__ = ["Parser", "fail", "lazy", "make_parser", "pure"]


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Parser[T]:
    """Immutable wrapper around a ``str -> Result[T]`` function.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Identity equality - Two parsers are equal only if they are the same object
        3. Name is descriptive only - It never influences parsing

    Example:
        >>> from parselite.syntax.primitives import char_p
        >>> p = char_p("a")
        >>> p("abc")
        Success(value='a', remaining='bc')
        >>> p.name
        "char_p('a')"
    """

    fn: Callable[[str], Result[T]]
    name: str = "parser"

    def __call__(self, text: str) -> Result[T]:
        """Run the parser on ``text``.

        Returns:
            Success with value and unconsumed suffix, or Failure with message
        """
        return self.fn(text)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"

    def named(self, name: str) -> "Parser[T]":
        """Return the same parser under another name.

        Useful for readable NoProgressError messages and reprs of
        grammar rules built from anonymous combinator chains.
        """
        return Parser(self.fn, name)

    def parse(self, text: str) -> T:
        """Parse the whole of ``text`` and return the bare value.

        Unlike calling the parser, this entry point raises on failure and
        requires every character to be consumed.

        Args:
            text: Input text

        Returns:
            The parsed value

        Raises:
            ParseFailedError: If the parser fails or leaves input unconsumed

        Example:
            >>> from parselite.syntax.numbers import integer_p
            >>> integer_p.parse("42")
            42
            >>> integer_p.parse("42abc")
            Traceback (most recent call last):
            ...
            parselite.diagnostics.errors.ParseFailedError: Expected end of input, found 'a'
        """
        match self.fn(text):
            case Success(value=value, remaining=""):
                return value
            case Success(remaining=remaining):
                raise ParseFailedError(
                    ErrorTemplate.trailing_input(remaining[0]), input_text=text
                )
            case Failure(message=message):
                raise ParseFailedError(message, input_text=text)
            case _ as unreachable:
                msg = f"Parser {self.name} returned {type(unreachable).__name__}, not a Result"
                raise TypeError(msg)


def make_parser[T](name: str) -> Callable[[Callable[[str], Result[T]]], Parser[T]]:
    """Decorator turning a plain ``str -> Result`` function into a Parser.

    Example:
        >>> @make_parser("letter_x")
        ... def letter_x(text: str) -> Result[str]:
        ...     if text.startswith("x"):
        ...         return Success("x", text[1:])
        ...     return Failure("Expected x")
        >>> letter_x
        <Parser letter_x>
    """

    def decorator(fn: Callable[[str], Result[T]]) -> Parser[T]:
        return Parser(fn, name)

    return decorator


def pure[T](value: T) -> Parser[T]:
    """Parser that always succeeds with ``value`` and consumes nothing."""

    def _pure(text: str) -> Result[T]:
        return Success(value, text)

    return Parser(_pure, f"pure({value!r})")


def fail(message: str) -> Parser[Never]:
    """Parser that always fails with ``message`` and consumes nothing."""

    def _fail(text: str) -> Result[Never]:
        return Failure(message)

    return Parser(_fail, f"fail({message!r})")


def lazy[T](factory: Callable[[], Parser[T]], name: str = "lazy") -> Parser[T]:
    """Defer building a parser until it is first run.

    Lets recursive grammars refer to rules that are defined later in the
    module. The factory result is cached after the first invocation.

    Args:
        factory: Zero-argument callable returning the real parser
        name: Descriptive name for the placeholder

    Thread Safety:
        Two threads racing on the first call may both run ``factory``;
        both results are equivalent, and the first one stored wins.

    Example:
        >>> from parselite.syntax.combinators import choice, map, sequence
        >>> from parselite.syntax.primitives import char_p
        >>> nested = lazy(lambda: choice([
        ...     map(sequence(char_p("("), sequence(nested, char_p(")"))),
        ...         lambda pair: pair[1][0] + 1),
        ...     pure(0),
        ... ]))
        >>> nested("((()))").value
        3
    """
    resolved: list[Parser[T]] = []

    def _lazy(text: str) -> Result[T]:
        if not resolved:
            resolved.append(factory())
        return resolved[0](text)

    return Parser(_lazy, name)
