"""Command registry and built-in stack words.

Command names are case-insensitive: ``print``, ``PRINT`` and ``Print``
resolve to the same action. Actions take no arguments; built-in words
are bound to the machine they operate on when installed.
"""

import logging
from collections.abc import Callable, Iterator
from functools import partial

from parselite.diagnostics import ErrorTemplate, UnknownCommandError
from parselite.interpreter.stack import StackMachine

__all__ = [
    "BUILTIN_ALIASES",
    "BUILTIN_WORDS",
    "Command",
    "CommandRegistry",
    "install_builtins",
]

logger = logging.getLogger(__name__)

type Command = Callable[[], None]


class CommandRegistry:
    """Case-insensitive mapping of command names to zero-argument actions.

    Supports dict-like introspection:
        - __iter__: Iterate over registered names (case-folded)
        - __len__: Count registered names, aliases included
        - __contains__: Check if a name resolves (any case)

    Example:
        >>> registry = CommandRegistry()
        >>> registry.register("Hello", lambda: None)
        >>> "HELLO" in registry
        True
        >>> registry.alias("hello", "hi")
        >>> sorted(registry)
        ['hello', 'hi']
    """

    __slots__ = ("_commands",)

    def __init__(self) -> None:
        """Initialize empty command registry."""
        self._commands: dict[str, Command] = {}

    @staticmethod
    def _key(name: str) -> str:
        return name.casefold()

    def register(self, name: str, action: Command) -> None:
        """Register ``action`` under ``name``, replacing any previous entry."""
        self._commands[self._key(name)] = action
        logger.debug("Registered command: %s", name)

    def alias(self, existing: str, alias_name: str) -> None:
        """Make ``alias_name`` run the same action as ``existing``.

        Raises:
            UnknownCommandError: If ``existing`` is not registered
        """
        action = self.lookup(existing)
        if action is None:
            raise UnknownCommandError(ErrorTemplate.unknown_command(existing), name=existing)
        self._commands[self._key(alias_name)] = action
        logger.debug("Registered alias: %s -> %s", alias_name, existing)

    def lookup(self, name: str) -> Command | None:
        """Return the action for ``name`` (any case), or None."""
        return self._commands.get(self._key(name))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._commands

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)


# ============================================================================
# BUILT-IN WORDS
# ============================================================================


def print_stack(machine: StackMachine) -> None:
    """PRINT: write the stack, bottom first."""
    machine.write_line(machine.render())


def add(machine: StackMachine) -> None:
    """ADD: pop b, pop a, push a + b."""
    machine.require("ADD", 2)
    b = machine.pop()
    a = machine.pop()
    machine.push(a + b)


def subtract(machine: StackMachine) -> None:
    """SUB: pop b, pop a, push a - b."""
    machine.require("SUB", 2)
    b = machine.pop()
    a = machine.pop()
    machine.push(a - b)


def duplicate(machine: StackMachine) -> None:
    """DUP: push a copy of the top value."""
    machine.push(machine.peek("DUP"))


def drop(machine: StackMachine) -> None:
    """DROP: discard the top value."""
    machine.pop("DROP")


def swap(machine: StackMachine) -> None:
    """SWAP: exchange the two top values."""
    machine.require("SWAP", 2)
    b = machine.pop()
    a = machine.pop()
    machine.push(b)
    machine.push(a)


def clear(machine: StackMachine) -> None:
    """CLEAR: empty the stack."""
    machine.clear()


BUILTIN_WORDS: dict[str, Callable[[StackMachine], None]] = {
    "PRINT": print_stack,
    "ADD": add,
    "SUB": subtract,
    "DUP": duplicate,
    "DROP": drop,
    "SWAP": swap,
    "CLEAR": clear,
}

BUILTIN_ALIASES: dict[str, str] = {
    "P": "PRINT",
    "+": "ADD",
    "-": "SUB",
}


def install_builtins(registry: CommandRegistry, machine: StackMachine) -> None:
    """Register every built-in word and alias, bound to ``machine``."""
    for name, word in BUILTIN_WORDS.items():
        registry.register(name, partial(word, machine))
    for alias_name, existing in BUILTIN_ALIASES.items():
        registry.alias(existing, alias_name)
