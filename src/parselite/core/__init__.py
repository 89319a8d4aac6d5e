"""Core utilities shared across the syntax and interpreter layers.

Exports:
    BabelImportError: Raised when a locale-aware feature runs without Babel
    is_babel_available: Check whether the optional Babel extra is installed
    require_babel: Fail fast with a helpful message when Babel is missing

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
