"""Stack Interpreter Example - Driving the Line Interpreter from Code.

Shows the interpreter built on the combinator core: integers are
pushed, words run commands, and per-token errors are collected rather
than raised.

The locale example needs Babel:
    pip install parselite[babel]

Python 3.13+.
"""

from __future__ import annotations

import io


def example_1_scripted_session() -> None:
    """Run a few lines and show output and collected errors."""
    from parselite.interpreter import Interpreter

    print("=" * 60)
    print("Example 1: Scripted Session")
    print("=" * 60)

    output = io.StringIO()
    interpreter = Interpreter(output=output)

    for line in ("10 20 ADD PRINT", "5 -3 - print", "1 FOO DROP DROP DROP DROP"):
        errors = interpreter.execute_line(line)
        for error in errors:
            print(f"  {line!r}: Error: {error}")

    print(output.getvalue(), end="")
    print(f"  Final stack: {interpreter.stack}")
    print()


def example_2_custom_command() -> None:
    """Register a command that uses the interpreter's own stack."""
    from parselite.interpreter import CommandRegistry, Interpreter

    print("=" * 60)
    print("Example 2: Custom Command")
    print("=" * 60)

    registry = CommandRegistry()
    interpreter = Interpreter(output=io.StringIO(), registry=registry)
    machine = interpreter.machine

    def square() -> None:
        value = machine.pop("SQUARE")
        machine.push(value * value)

    registry.register("SQUARE", square)
    registry.alias("SQUARE", "SQ")

    interpreter.execute_line("7 sq 3 square ADD")
    print(f"  7 sq 3 square ADD -> {interpreter.stack}")
    print()


def example_3_locale_output() -> None:
    """Render PRINT output with locale-aware digit grouping."""
    from parselite.core import is_babel_available
    from parselite.interpreter import Interpreter

    print("=" * 60)
    print("Example 3: Locale-Aware PRINT")
    print("=" * 60)

    if not is_babel_available():
        print("  Babel not installed; skipping.")
        print()
        return

    for locale in ("en_US", "de_DE", "fr_FR"):
        output = io.StringIO()
        Interpreter(output=output, locale=locale).execute_line("1234567 -89012 PRINT")
        print(f"  {locale}: {output.getvalue().rstrip()}")

    print()


def example_4_repl_from_stream() -> None:
    """Feed the REPL loop from an in-memory stream."""
    from parselite.interpreter import run_repl

    print("=" * 60)
    print("Example 4: REPL Over a Stream")
    print("=" * 60)

    script = io.StringIO("3 4 +\nDUP ADD\nPRINT\nEXIT\nPRINT\n")
    output = io.StringIO()
    run_repl(script, output, prompt="> ")
    print(output.getvalue())


if __name__ == "__main__":
    example_1_scripted_session()
    example_2_custom_command()
    example_3_locale_output()
    example_4_repl_from_stream()

    print("=" * 60)
    print("[SUCCESS] All examples completed successfully!")
    print("=" * 60)
