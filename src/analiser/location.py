"""Source location tracking for diagnostics.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of source text covered by a token.

    All line and column positions are 1-indexed. Offsets are 0-based
    indices into the right-trimmed program text.

    Attributes:
        lineno: Starting line number
        col_offset: Starting column (tab-aware)
        offset: Absolute start offset
        end_offset: Absolute end offset (exclusive)
        end_lineno: Line number after the token was consumed
        end_col_offset: Column after the token was consumed
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5)
            >>> str(loc)
            '2:5'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "prog.txt:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

