"""Shared constants for parselite.

Centralized configuration constants used across the syntax and
interpreter packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Character classes: ASCII-only classification for primitives
- Numeric limits: Overflow bound for integer parsing
- Input limits: Size constraints for interpreter input lines
- Interpreter: REPL keywords and prompt

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Character classes
    "ASCII_DIGITS",
    "ASCII_WHITESPACE",
    # Numeric limits
    "MAX_INTEGER",
    # Input limits
    "MAX_LINE_LENGTH",
    # Interpreter
    "EXIT_KEYWORD",
    "PROMPT",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# ASCII digits only. str.isdigit() is True for characters like '²' that
# int() cannot convert, so classification never goes through str methods.
ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

# The C isspace() set in the "C" locale: space, \t, \n, \v, \f, \r.
# str.isspace() also accepts Unicode separators (U+00A0, U+2028, ...).
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\v\f\r")

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Default upper bound for integer_p (signed 32-bit maximum).
# Literals folding past this bound fail with an overflow diagnostic
# instead of silently growing or wrapping.
MAX_INTEGER: int = 2**31 - 1

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum interpreter line length in characters.
MAX_LINE_LENGTH: int = 64 * 1024

# ============================================================================
# INTERPRETER
# ============================================================================

# Line that terminates the REPL (exact match, case-sensitive).
EXIT_KEYWORD: str = "EXIT"

PROMPT: str = "stack> "
