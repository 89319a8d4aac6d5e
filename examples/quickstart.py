"""Quickstart Example - Building Parsers from Combinators.

CORE ONLY: This example works WITHOUT Babel. Install with:
    pip install parselite  (no [babel] extra needed)

Demonstrates:

1. Single-character primitives and their failure messages
2. An "integer + integer" expression with whitespace skipping
3. A comma-separated list of integers
4. Keyword alternatives with aggregated failures
5. A recursive grammar through lazy()
6. The raising parse() entry point

Python 3.13+.
"""

from __future__ import annotations


def example_1_primitives() -> None:
    """Run primitives on matching and non-matching input."""
    from parselite import Failure, Success, char_p, integer_p

    print("=" * 60)
    print("Example 1: Primitives")
    print("=" * 60)

    for parser, text in ((char_p("a"), "abc"), (char_p("a"), "xyz"), (integer_p, "123abc")):
        match parser(text):
            case Success(value=value, remaining=remaining):
                print(f"  {parser.name}({text!r}) -> value={value!r}, remaining={remaining!r}")
            case Failure(message=message):
                print(f"  {parser.name}({text!r}) -> error: {message}")

    print()


def example_2_expression() -> None:
    """Sum two integers separated by '+'."""
    from parselite import Success, char_p, integer_p, map, sequence, skip_ws

    print("=" * 60)
    print("Example 2: integer + integer")
    print("=" * 60)

    operand = skip_ws(integer_p)
    plus = skip_ws(char_p("+"))
    expr = map(
        sequence(operand, sequence(plus, operand)),
        lambda parts: parts[0] + parts[1][1],
    )

    for text in ("123+456", "  789 +  10 ", "42+", "+100"):
        result = expr(text)
        if isinstance(result, Success):
            print(f"  {text!r} = {result.value} (remaining {result.remaining!r})")
        else:
            print(f"  {text!r}: Parse error: {result.message}")

    print()


def example_3_separated_list() -> None:
    """Parse a whitespace-tolerant comma list."""
    from parselite import char_p, integer_p, sep_by, skip_ws

    print("=" * 60)
    print("Example 3: Comma-Separated Integers")
    print("=" * 60)

    comma = skip_ws(char_p(","))
    int_list = sep_by(integer_p, comma)

    result = int_list("10, 20, 30,40")
    print(f"  Parsed integers: {list(result.value) if result else result}")

    print()


def example_4_choice() -> None:
    """Pick between keywords; show the aggregated failure."""
    from parselite import choice, string_p

    print("=" * 60)
    print("Example 4: Alternatives")
    print("=" * 60)

    keyword = choice([string_p("foo"), string_p("bar")])
    print(f"  'barxyz' -> {keyword('barxyz')}")
    print(f"  'baz'    -> {keyword('baz')}")

    print()


def example_5_recursion() -> None:
    """Count nesting depth of balanced parentheses."""
    from parselite import Parser, char_p, choice, lazy, map, pure, sequence

    print("=" * 60)
    print("Example 5: Recursive Grammar")
    print("=" * 60)

    nested: Parser[int] = lazy(
        lambda: choice([
            map(
                sequence(char_p("("), sequence(nested, char_p(")"))),
                lambda pair: pair[1][0] + 1,
            ),
            pure(0),
        ]),
        name="nested",
    )

    for text in ("", "()", "((()))"):
        print(f"  depth({text!r}) = {nested.parse(text)}")

    print()


def example_6_parse() -> None:
    """parse() returns the bare value or raises."""
    from parselite import ParseFailedError, integer_p

    print("=" * 60)
    print("Example 6: Raising Entry Point")
    print("=" * 60)

    print(f"  integer_p.parse('42') = {integer_p.parse('42')}")
    try:
        integer_p.parse("42abc")
    except ParseFailedError as e:
        print(f"  integer_p.parse('42abc') raised: {e}")

    print()


if __name__ == "__main__":
    example_1_primitives()
    example_2_expression()
    example_3_separated_list()
    example_4_choice()
    example_5_recursion()
    example_6_parse()

    print("=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
