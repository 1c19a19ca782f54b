"""Anchored, priority-ordered scanner for the analiser pseudocode language.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ScanState, results
├── core.py              # Scanner class (mixin composition + anchored matching)
├── cursor.py            # CursorState and position-update rules
├── modes.py             # ScanState enum
├── patterns.py          # PatternTable, RESERVED_WORDS, SYMBOLS
├── results.py           # EndOfInput, UnrecognizedCharacter
├── classifiers/         # Token-kind mixins
│   ├── words.py         # Reserved words, identifiers
│   ├── numbers.py       # Reals, integers (bin, oct, hex, dec)
│   └── literals.py      # Symbols, strings
└── scanners/
    └── trivia.py        # Whitespace and comment skipping

Usage:
    >>> from analiser.lexer import Scanner
    >>> for token in Scanner("x := 0x1F").tokenize():
    ...     print(repr(token))
Token(T_IDENTIFIER, 'x', 1:1)
Token(T_SYMBOL, ':=', 1:3)
Token(T_INTEGER_HEX, '0x1F', 1:6)

"""

from analiser.lexer.core import Scanner
from analiser.lexer.cursor import CursorState
from analiser.lexer.modes import ScanState
from analiser.lexer.patterns import DEFAULT_PATTERNS, RESERVED_WORDS, SYMBOLS, PatternTable
from analiser.lexer.results import EndOfInput, ScanResult, UnrecognizedCharacter

__all__ = [
    "DEFAULT_PATTERNS",
    "RESERVED_WORDS",
    "SYMBOLS",
    "CursorState",
    "EndOfInput",
    "PatternTable",
    "ScanResult",
    "ScanState",
    "Scanner",
    "UnrecognizedCharacter",
]
