"""Read-eval-print loop for the stack interpreter."""

import logging
import sys
from typing import TextIO

from parselite.constants import EXIT_KEYWORD, PROMPT
from parselite.interpreter.dispatcher import Interpreter

__all__ = ["main", "run_repl"]

logger = logging.getLogger(__name__)


def run_repl(
    input_stream: TextIO,
    output: TextIO,
    *,
    interpreter: Interpreter | None = None,
    prompt: str = PROMPT,
) -> Interpreter:
    """Read lines from ``input_stream`` and execute them until EXIT or EOF.

    Errors are written as ``Error: <message>``, one per line.

    Args:
        input_stream: Source of input lines
        output: Stream for prompts, command output and errors
        interpreter: Interpreter to drive (default: a new one writing to ``output``)
        prompt: Text written before each line is read

    Returns:
        The interpreter, so callers can inspect the final stack
    """
    if interpreter is None:
        interpreter = Interpreter(output=output)

    while True:
        output.write(prompt)
        output.flush()
        raw = input_stream.readline()
        if not raw:
            logger.debug("End of input reached")
            break
        line = raw.rstrip("\r\n")
        if line == EXIT_KEYWORD:
            output.write("Goodbye!\n")
            break
        try:
            errors = interpreter.execute_line(line)
        except ValueError as e:
            output.write(f"Error: {e}\n")
            continue
        for error in errors:
            output.write(f"Error: {error}\n")

    return interpreter


def main() -> int:
    """Run the REPL on stdin/stdout."""
    print(f"Type '{EXIT_KEYWORD}' to quit or 'PRINT' to see the stack.")
    run_repl(sys.stdin, sys.stdout)
    return 0
