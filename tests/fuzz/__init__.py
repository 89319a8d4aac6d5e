"""Fuzz testing infrastructure for parselite.

This package contains:
- test_interpreter_oracle: State machine fuzzer comparing the interpreter
  against a plain list model
- test_grammar_fuzz: High-volume property runs over composed grammars

Python 3.13+.
"""
