"""Cursor state and the position-update rules.

Line and column are recomputed only from the lexeme just consumed:

- whitespace: newlines bump the line and reset the column to 1; tabs after
  the last newline (or in the whole run, if it has none) add ``tab_size``
  each, spaces add 1 each
- anything else, block comments included: the column moves by the lexeme
  length and the line stays put

With ``track_comment_lines`` set, a lexeme holding newlines (only a block
comment can) moves the line instead and the column restarts after its last
newline.

Offsets only grow.
"""

from __future__ import annotations

from dataclasses import dataclass

from analiser.config import DEFAULT_TAB_SIZE, validate_tab_size


@dataclass(slots=True)
class CursorState:
    """Mutable scan position.

    Attributes:
        offset: Absolute index into the program text (0-based)
        line: Current line (1-indexed)
        col: Current column (1-indexed, tab-aware)
        tab_size: Columns per tab character (> 0)
        track_comment_lines: Count newlines inside block comments

    """

    offset: int = 0
    line: int = 1
    col: int = 1
    tab_size: int = DEFAULT_TAB_SIZE
    track_comment_lines: bool = False

    def __post_init__(self) -> None:
        validate_tab_size(self.tab_size)

    def advance(self, lexeme: str) -> None:
        """Consume a token or comment lexeme."""
        newlines = lexeme.count("\n") if self.track_comment_lines else 0
        if newlines:
            self.line += newlines
            self.col = 1 + self._columns(lexeme[lexeme.rfind("\n") + 1 :], all_chars=True)
        else:
            self.col += len(lexeme)
        self.offset += len(lexeme)

    def advance_whitespace(self, lexeme: str) -> None:
        """Consume a whitespace run with tab-aware column arithmetic."""
        newlines = lexeme.count("\n")
        if newlines:
            self.line += newlines
            self.col = 1
            tail = lexeme[lexeme.rfind("\n") + 1 :]
        else:
            tail = lexeme
        self.col += self._columns(tail)
        self.offset += len(lexeme)

    def skip_char(self) -> None:
        """Step over one character without newline handling."""
        self.offset += 1
        self.col += 1

    def _columns(self, text: str, *, all_chars: bool = False) -> int:
        tabs = text.count("\t")
        if all_chars:
            return self.tab_size * tabs + len(text) - tabs
        return self.tab_size * tabs + text.count(" ")
