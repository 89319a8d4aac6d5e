"""Diagnostic system for parselite errors.

Provides diagnostic codes, centralized message templates and the
exception hierarchy.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InterpreterError,
    NoProgressError,
    ParseFailedError,
    ParseliteError,
    StackUnderflowError,
    UnknownCommandError,
)
from .templates import EOF_MARKER, ErrorTemplate

__all__ = [
    "EOF_MARKER",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "InterpreterError",
    "NoProgressError",
    "ParseFailedError",
    "ParseliteError",
    "StackUnderflowError",
    "UnknownCommandError",
]
