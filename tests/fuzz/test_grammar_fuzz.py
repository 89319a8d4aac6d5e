"""Fuzz property-based tests for composed grammars.

Builds a small expression grammar from the public combinators and
checks it against Python's own arithmetic on generated inputs, then
throws arbitrary text at it to confirm it never raises.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from parselite import (
    Parser,
    Success,
    char_p,
    choice,
    complete,
    integer_parser,
    many,
    map,  # noqa: A004
    sequence,
    skip_ws,
)

pytestmark = pytest.mark.fuzz

_number = skip_ws(integer_parser(max_value=None))
_operator = skip_ws(choice([char_p("+"), char_p("-")]))

# number (('+' | '-') number)*, evaluated left to right
expression: Parser[int] = map(
    sequence(_number, many(sequence(_operator, _number))),
    lambda parts: sum(
        (value if op == "+" else -value for op, value in parts[1]),
        start=parts[0],
    ),
).named("expression")


@st.composite
def expressions(draw: st.DrawFn) -> tuple[str, int]:
    """Draw expression text with random spacing and its expected value."""
    operands = draw(st.lists(st.integers(min_value=0, max_value=10**6), min_size=1, max_size=12))
    operators = draw(st.lists(st.sampled_from("+-"), min_size=len(operands) - 1,
                              max_size=len(operands) - 1))
    space = st.text(alphabet=" \t", max_size=2)
    text = draw(space) + str(operands[0])
    expected = operands[0]
    for op, value in zip(operators, operands[1:], strict=True):
        text += f"{draw(space)}{op}{draw(space)}{value}"
        expected = expected + value if op == "+" else expected - value
    return text, expected


@pytest.mark.fuzz
class TestExpressionGrammar:
    """Composed grammar agrees with direct evaluation."""

    @given(case=expressions())
    @settings(max_examples=1000)
    def test_evaluates(self, case: tuple[str, int]) -> None:
        """Generated expressions evaluate to the expected value."""
        text, expected = case
        event(f"operators={min(text.count('+') + text.count('-'), 5)}")
        assert complete(expression)(text) == Success(expected, "")

    @given(text=st.text(alphabet="0123456789+- \t\nx", max_size=60))
    @settings(max_examples=1000)
    def test_never_raises(self, text: str) -> None:
        """Arbitrary input yields a Result, never an exception."""
        result = expression(text)
        event(f"outcome={'success' if result else 'failure'}")
        if isinstance(result, Success):
            assert text.endswith(result.remaining)
