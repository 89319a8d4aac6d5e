"""Parse result envelope shared by every parser.

A parser returns exactly one of two variants:
    - Success: the parsed value plus the unconsumed input suffix
    - Failure: a human-readable diagnostic message

Design Philosophy:
    - Failure is a normal, expected value, not an exception
    - Both variants are frozen dataclasses (safe to share across threads)
    - Truthiness discriminates: ``if result:`` means success
    - ``remaining`` is always a suffix of the parser's input

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Literal

__all__ = ["Failure", "Result", "Success"]


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful parse.

    Type Parameters:
        T: The type of the parsed value

    Example:
        >>> result = Success("a", "bc")
        >>> result.value
        'a'
        >>> result.remaining
        'bc'
        >>> bool(result)
        True
    """

    value: T
    remaining: str

    def __bool__(self) -> Literal[True]:
        return True

    def consumed(self, source: str) -> int:
        """Number of characters consumed from ``source``.

        Args:
            source: The text that was passed to the parser

        Returns:
            ``len(source) - len(remaining)``

        Example:
            >>> Success(12, "abc").consumed("12abc")
            2
        """
        return len(source) - len(self.remaining)


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed parse.

    Carries no position; the message is the whole diagnostic.

    Example:
        >>> result = Failure("Unexpected end of input")
        >>> bool(result)
        False
    """

    message: str

    def __bool__(self) -> Literal[False]:
        return False


type Result[T] = Success[T] | Failure
