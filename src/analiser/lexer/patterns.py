"""Pattern table: one compiled matcher per token and trivia kind.

The table is built from ordered data. Alternations are first-match-wins, not
longest-match, so the relative order inside RESERVED_WORDS and SYMBOLS and
the INTEGER_KINDS dispatch order decide ambiguous input:

- ``:=``, ``&&``, ``||``, ``..`` precede ``:``, ``&``, ``|``, ``.``
- ``<>``, ``>=``, ``<=`` precede ``>`` and ``<``
- ``fim-var``, ``fim-se`` and the other closers precede ``fim``

Never sort these sequences.

Thread Safety:
PatternTable is immutable and compiled patterns are safe to share, so the
default table is built once at import and shared by every scanner.

"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from analiser.tokens import TokenKind, TriviaKind

# Program flow, declarations, literals, logic, I/O, control flow
RESERVED_WORDS: tuple[str, ...] = (
    "programa", "inicio",
    "fim-var", "fim-enquanto", "fim-se", "fim-para", "fim-funcao", "fim",
    "var", "real", "inteiro", "literal", "logico", "matriz",
    "verdadeiro", "falso",
    "ou", "e", "xou", "nao",
    "le", "escreve",
    "enquanto", "faca",
    "se", "entao", "senao",
    "para", "de", "ate", "passo",
    "funcao", "retorne",
)  # fmt: skip

SYMBOLS: tuple[str, ...] = (
    # Assignment
    ":=",
    # Logical
    "||", "|", "&&", "&", "^", "~",
    # Comparison
    "=", "<>", ">=", "<=", ">", "<",
    # Arithmetic
    "+", "-", "*", "/", "%",
    # Indexing, grouping, calls
    "[", "]", "(", ")",
    # Declarations and ranges
    ":", ",", "..", ".", ";",
)  # fmt: skip

REAL_PATTERN = r"[0-9]*\.[0-9]+"
INTEGER_BIN_PATTERN = r"0[bB][01]+"
INTEGER_OCT_PATTERN = r"0[0-7]+"
INTEGER_HEX_PATTERN = r"0[xX][0-9a-fA-F]+"
INTEGER_DEC_PATTERN = r"[0-9]+"
STRING_PATTERN = r'"[^"\n]*"'
IDENTIFIER_PATTERN = r"[a-zA-Z_][a-zA-Z0-9_]*"
SHORT_COMMENT_PATTERN = r"//[^\n]*"
COMMENT_PATTERN = r"/\*.*?\*/"
WHITESPACE_PATTERN = r"[ \t\n\r]+"

PatternKind = TokenKind | TriviaKind


def alternation(terms: Iterable[str], delimiter: str = "") -> str:
    """Join escaped terms into an ordered regex alternation.

    Args:
        terms: Literal terms, in priority order
        delimiter: Regex placed around every term (``\\b`` for keywords)

    Returns:
        Pattern source like ``(?:\\bse\\b|\\bate\\b)``
    """
    return "(?:" + "|".join(f"{delimiter}{re.escape(t)}{delimiter}" for t in terms) + ")"


class PatternTable(Mapping[PatternKind, re.Pattern[str]]):
    """Immutable mapping from kind to its compiled pattern.

    Usage:
        >>> table = PatternTable.build()
        >>> table[TokenKind.SYMBOL].match(":=").group()
        ':='

    """

    __slots__ = ("_patterns", "reserved_words", "symbols")

    def __init__(
        self,
        patterns: Mapping[PatternKind, re.Pattern[str]],
        reserved_words: tuple[str, ...],
        symbols: tuple[str, ...],
    ) -> None:
        self._patterns = MappingProxyType(dict(patterns))
        self.reserved_words = reserved_words
        self.symbols = symbols

    @classmethod
    def build(
        cls,
        reserved_words: Iterable[str] = RESERVED_WORDS,
        symbols: Iterable[str] = SYMBOLS,
    ) -> PatternTable:
        """Compile every pattern once.

        Args:
            reserved_words: Keywords in priority order
            symbols: Operators and punctuation in priority order

        Returns:
            A new PatternTable
        """
        words = tuple(reserved_words)
        syms = tuple(symbols)
        if not words or not syms:
            raise ValueError("reserved_words and symbols must not be empty")
        sources: dict[PatternKind, tuple[str, int]] = {
            TokenKind.RESERVED_WORD: (alternation(words, r"\b"), re.ASCII),
            TokenKind.SYMBOL: (alternation(syms), 0),
            TokenKind.REAL: (REAL_PATTERN, 0),
            TokenKind.INTEGER_BIN: (INTEGER_BIN_PATTERN, 0),
            TokenKind.INTEGER_OCT: (INTEGER_OCT_PATTERN, 0),
            TokenKind.INTEGER_HEX: (INTEGER_HEX_PATTERN, 0),
            TokenKind.INTEGER_DEC: (INTEGER_DEC_PATTERN, 0),
            TokenKind.STRING: (STRING_PATTERN, 0),
            TokenKind.IDENTIFIER: (IDENTIFIER_PATTERN, 0),
            TriviaKind.SHORT_COMMENT: (SHORT_COMMENT_PATTERN, 0),
            TriviaKind.COMMENT: (COMMENT_PATTERN, re.DOTALL),
            TriviaKind.WHITESPACE: (WHITESPACE_PATTERN, 0),
        }
        patterns = {kind: re.compile(src, flags) for kind, (src, flags) in sources.items()}
        return cls(patterns, words, syms)

    def __getitem__(self, kind: PatternKind) -> re.Pattern[str]:
        return self._patterns[kind]

    def __iter__(self) -> Iterator[PatternKind]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternTable({len(self.reserved_words)} words, {len(self.symbols)} symbols)"


DEFAULT_PATTERNS: PatternTable = PatternTable.build()
