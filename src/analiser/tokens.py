"""Token and TokenKind definitions for the analiser scanner.

The scanner produces a stream of Token objects. Each Token has a kind,
the exact lexeme consumed from the source, and the position the cursor
held before consuming it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind and TriviaKind are enums (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from analiser.location import SourceLocation


class TokenKind(Enum):
    """Token kinds surfaced by the scanner.

    Values are the tags printed by the command-line driver.

    """

    RESERVED_WORD = "T_RES_WORD"  # se, enquanto, fim-para
    SYMBOL = "T_SYMBOL"  # :=, <>, ..
    REAL = "T_REAL"  # 3.4, .5
    INTEGER_BIN = "T_INTEGER_BIN"  # 0b101
    INTEGER_OCT = "T_INTEGER_OCT"  # 017
    INTEGER_DEC = "T_INTEGER_DEC"  # 10
    INTEGER_HEX = "T_INTEGER_HEX"  # 0x1F
    STRING = "T_STRING"  # "abc"
    IDENTIFIER = "T_IDENTIFIER"  # seuNome


class TriviaKind(Enum):
    """Spans consumed between tokens but never emitted."""

    SHORT_COMMENT = "T_SHORT_COMMENT"  # // ...
    COMMENT = "T_COMMENT"  # /* ... */
    WHITESPACE = "T_WHITESPACE"


INTEGER_KINDS: tuple[TokenKind, ...] = (
    TokenKind.INTEGER_BIN,
    TokenKind.INTEGER_OCT,
    TokenKind.INTEGER_HEX,
    TokenKind.INTEGER_DEC,
)


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its source position.

    Attributes:
        lexeme: Exactly the substring consumed from the source
        kind: The token kind
        line: Line before consumption (1-indexed)
        col: Column before consumption (1-indexed, tab-aware)
        offset: Absolute offset of the first character
        source_file: Optional source file path

    Performance:
        SourceLocation is created lazily on first access to `.location`.

    """

    lexeme: str
    kind: TokenKind
    line: int
    col: int
    offset: int = 0
    source_file: str | None = field(default=None, compare=False)
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from analiser.location import SourceLocation

        loc = SourceLocation(
            lineno=self.line,
            col_offset=self.col,
            offset=self.offset,
            end_offset=self.offset + len(self.lexeme),
            end_lineno=self.line,
            end_col_offset=self.col + len(self.lexeme),
            source_file=self.source_file,
        )
        # Idempotent write to the cache field of a frozen dataclass
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def end_offset(self) -> int:
        """Offset just past the last consumed character."""
        return self.offset + len(self.lexeme)

    def __str__(self) -> str:
        """Driver format: ``<lexeme> - <KIND>``."""
        return f"{self.lexeme} - {self.kind.value}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.lexeme
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.value}, {val!r}, {self.line}:{self.col})"
