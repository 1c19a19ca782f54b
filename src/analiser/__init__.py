"""analiser: lexical scanner for a structured Portuguese pseudocode.

Turns program text into classified, position-tagged tokens. Token kinds are
tried in a fixed priority order and every match must start exactly at the
cursor; whitespace and comments are skipped but still move the line/column
counters, with tabs counted as ``tab_size`` columns.

Quick Start:
    >>> from analiser import tokenize
    >>> [str(t) for t in tokenize("se seuNome <> 3.4")]
    ['se - T_RES_WORD', 'seuNome - T_IDENTIFIER', '<> - T_SYMBOL', '3.4 - T_REAL']

    >>> # Step by step, with explicit outcomes
    >>> from analiser import Scanner, UnrecognizedCharacter
    >>> scanner = Scanner("@")
    >>> result = scanner.next_token()
    >>> isinstance(result, UnrecognizedCharacter), result.line, result.col
    (True, 1, 1)

Command line:
    analiser program.txt          # or: python -m analiser < program.txt
"""

from analiser.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from analiser.errors import AnaliserError, ConfigError, InvalidTabSizeError, LexicalError
from analiser.lexer import (
    EndOfInput,
    PatternTable,
    Scanner,
    ScanResult,
    ScanState,
    UnrecognizedCharacter,
)
from analiser.location import SourceLocation
from analiser.tokens import Token, TokenKind, TriviaKind

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    tab_size: int | None = None,
    strict: bool | None = None,
    source_file: str | None = None,
    track_comment_lines: bool | None = None,
) -> list[Token]:
    """Scan a whole program into a list of tokens.

    Args:
        source: Program text
        tab_size: Columns per tab (defaults to the active ScanConfig)
        strict: Raise on unrecognized characters instead of skipping them
            (defaults to the active ScanConfig)
        source_file: Optional source path for locations and errors
        track_comment_lines: Count newlines inside block comments
            (defaults to the active ScanConfig)

    Returns:
        Tokens in source order, trivia excluded.

    Raises:
        LexicalError: In strict mode, on the first unrecognized character.
        InvalidTabSizeError: If tab_size is not a positive int.
    """
    scanner = Scanner(
        source,
        tab_size=tab_size,
        source_file=source_file,
        track_comment_lines=track_comment_lines,
    )
    return list(scanner.tokenize(strict=strict))


__all__ = [
    "AnaliserError",
    "ConfigError",
    "EndOfInput",
    "InvalidTabSizeError",
    "LexicalError",
    "PatternTable",
    "ScanConfig",
    "ScanResult",
    "ScanState",
    "Scanner",
    "SourceLocation",
    "Token",
    "TokenKind",
    "TriviaKind",
    "UnrecognizedCharacter",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
