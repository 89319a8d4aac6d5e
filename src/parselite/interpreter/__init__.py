"""Stack-machine line interpreter built on the combinator core.

Module Organization:
- stack.py: StackMachine context (values, output stream, locale)
- commands.py: Case-insensitive CommandRegistry and built-in words
- dispatcher.py: Tokenizer and Interpreter (integer/command dispatch)
- repl.py: Line-reading loop

Run interactively with: python -m parselite.interpreter
"""

from parselite.interpreter.commands import CommandRegistry, install_builtins
from parselite.interpreter.dispatcher import Interpreter, integer_token, tokenizer
from parselite.interpreter.repl import run_repl
from parselite.interpreter.stack import StackMachine

__all__ = [
    "CommandRegistry",
    "Interpreter",
    "StackMachine",
    "install_builtins",
    "integer_token",
    "run_repl",
    "tokenizer",
]
