"""Type-safe assertion helpers for parse results.

Provides reusable functions that perform isinstance() checks and return
narrowed types, making test code both type-safe and readable.

These helpers solve the common pattern of:
    result = parser("abc")
    assert isinstance(result, Success)
    assert result.value == "a"

Becoming:
    success = assert_success(parser("abc"))
    assert success.value == "a"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from parselite.syntax.result import Failure, Success

if TYPE_CHECKING:
    from parselite.syntax.result import Result


def assert_success[T](result: Result[T]) -> Success[T]:
    """Assert result is Success and return with narrowed type.

    Raises:
        AssertionError: If result is a Failure (message included)
    """
    assert isinstance(result, Success), f"Expected Success, got {result!r}"
    return result


def assert_failure(result: Result[object]) -> Failure:
    """Assert result is Failure and return with narrowed type.

    Raises:
        AssertionError: If result is a Success
    """
    assert isinstance(result, Failure), f"Expected Failure, got {result!r}"
    return result
