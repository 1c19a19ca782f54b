"""Non-token outcomes of ``Scanner.next_token()``.

``next_token()`` returns a tagged variant instead of raising for the two
expected conditions, so callers branch with ``isinstance`` or ``match``:

    >>> match scanner.next_token():
    ...     case Token() as tok:
    ...         print(tok)
    ...     case UnrecognizedCharacter() as bad:
    ...         print(bad.message)
    ...     case EndOfInput():
    ...         pass

"""

from __future__ import annotations

from dataclasses import dataclass

from analiser.errors import LexicalError
from analiser.tokens import Token


@dataclass(frozen=True, slots=True)
class EndOfInput:
    """No tokens remain; the cursor is at the end of the trimmed program."""

    line: int
    col: int
    offset: int

    @property
    def message(self) -> str:
        return "Reached end of source-program"

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class UnrecognizedCharacter:
    """No token kind matched at the cursor.

    The scanner has already stepped past ``char``; ``line``, ``col`` and
    ``offset`` are where it was found.

    """

    char: str
    line: int
    col: int
    offset: int

    @property
    def message(self) -> str:
        return f"Unrecognized character {self.char} at l:{self.line}#c:{self.col}"

    def to_error(self, source_file: str | None = None) -> LexicalError:
        """Build the LexicalError strict tokenization raises for this result."""
        return LexicalError(
            f"Unrecognized character {self.char!r}",
            lineno=self.line,
            col_offset=self.col,
            source_file=source_file,
        )

    def __str__(self) -> str:
        return self.message


ScanResult = Token | EndOfInput | UnrecognizedCharacter

__all__ = ["EndOfInput", "ScanResult", "UnrecognizedCharacter"]
