"""Core conversion engine: IR, digit alphabet, radix conversion, escapes.

WHY: The core package holds the two algorithmically interesting pieces,
the arbitrary-base converter and the escape-sequence codec, plus the IR
records and error taxonomy every codec shares.

HOW: ir.py defines the pivot records, errors.py the exception tree,
digits.py and radix.py the numeral machinery, escape.py the escape lexer
and codec built on top of it.

RULES:
- Pure functions over owned buffers, no I/O and no shared mutable state
- Nothing in core imports from codecs/ at runtime
"""
