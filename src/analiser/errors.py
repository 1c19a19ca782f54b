"""Exception classes for analiser.

Expected scanning outcomes (end of input, an unrecognized character) are
returned as result values by the scanner, not raised. The exceptions here
cover caller mistakes and the strict tokenization mode.
"""

from __future__ import annotations


class AnaliserError(Exception):
    """Base exception for all analiser errors.

    Subclass this for specific error categories.
    """

    pass


class LexicalError(AnaliserError):
    """Error raised when source text cannot be tokenized.

    Raised by strict tokenization when no token kind matches at the cursor.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            lineno: Line number where error occurred (1-indexed)
            col_offset: Column where error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class InvalidTabSizeError(AnaliserError, ValueError):
    """Tab size must be a positive integer."""

    def __init__(self, tab_size: object) -> None:
        self.tab_size = tab_size
        super().__init__(f"Tab size must be > 0, {tab_size!r} given.")


class ConfigError(AnaliserError):
    """Invalid scan configuration value."""

    pass
