"""Stack machine state for the line interpreter.

The machine is an explicit context object: every interpreter owns its
own stack and output stream, and commands receive the machine they act
on. Nothing here is module-global.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from parselite.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
)
from parselite.diagnostics import ErrorTemplate, StackUnderflowError

if TYPE_CHECKING:
    from babel import Locale

__all__ = ["StackMachine"]

logger = logging.getLogger(__name__)

_FALLBACK_LOCALE: str = "en_US"


def _resolve_locale(locale_code: str) -> Locale:
    """Parse a locale code, falling back to en_US with a warning."""
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        return locale_class.parse(locale_code)
    except unknown_locale_error as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, _FALLBACK_LOCALE)
    except ValueError as e:
        logger.warning(
            "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, _FALLBACK_LOCALE
        )
    return locale_class.parse(_FALLBACK_LOCALE)


class StackMachine:
    """Integer stack plus the stream that commands write to.

    Attributes:
        output: Stream receiving PRINT output
        locale_code: Locale used to render numbers, or None for plain str()

    Example:
        >>> import io
        >>> machine = StackMachine(output=io.StringIO())
        >>> machine.push(1)
        >>> machine.push(2)
        >>> machine.values
        (1, 2)
        >>> machine.render()
        'Stack: 1 2'
    """

    __slots__ = ("_babel_locale", "_values", "locale_code", "output")

    def __init__(self, *, output: TextIO | None = None, locale: str | None = None) -> None:
        """Initialize an empty machine.

        Args:
            output: Stream for command output (default: sys.stdout)
            locale: Locale code for number rendering (requires Babel).
                    Unknown locales fall back to en_US with a warning.

        Raises:
            BabelImportError: If ``locale`` is given and Babel is not installed
        """
        self._values: list[int] = []
        self.output: TextIO = output if output is not None else sys.stdout
        self.locale_code = locale
        self._babel_locale: Locale | None = _resolve_locale(locale) if locale else None

    def __len__(self) -> int:
        return len(self._values)

    @property
    def values(self) -> tuple[int, ...]:
        """Snapshot of the stack, bottom first."""
        return tuple(self._values)

    def push(self, value: int) -> None:
        """Push ``value`` on top of the stack."""
        self._values.append(value)

    def require(self, command: str, count: int) -> None:
        """Check that at least ``count`` values are present.

        Raises:
            StackUnderflowError: If fewer than ``count`` values are present
        """
        if len(self._values) < count:
            raise StackUnderflowError(
                ErrorTemplate.stack_underflow(command, count, len(self._values))
            )

    def pop(self, command: str = "POP") -> int:
        """Remove and return the top value.

        Args:
            command: Name reported if the stack is empty

        Raises:
            StackUnderflowError: If the stack is empty
        """
        self.require(command, 1)
        return self._values.pop()

    def peek(self, command: str = "PEEK") -> int:
        """Return the top value without removing it.

        Raises:
            StackUnderflowError: If the stack is empty
        """
        self.require(command, 1)
        return self._values[-1]

    def clear(self) -> None:
        """Remove every value."""
        self._values.clear()

    def format_value(self, value: int) -> str:
        """Render one value, locale-aware when a locale is configured."""
        if self._babel_locale is None:
            return str(value)
        return get_babel_numbers().format_decimal(value, locale=self._babel_locale)

    def render(self) -> str:
        """Render the stack as ``Stack: v1 v2 ...`` (bottom first)."""
        rendered = " ".join(self.format_value(value) for value in self._values)
        return f"Stack: {rendered}".rstrip()

    def write_line(self, text: str) -> None:
        """Write ``text`` and a newline to the output stream."""
        self.output.write(text + "\n")
