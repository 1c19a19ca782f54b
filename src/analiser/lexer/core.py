"""Priority-ordered, anchored scanner for the pseudocode language.

Each call to ``next_token()``:
1. Skips trivia (block comments, line comments, whitespace) in a loop
2. Tries token kinds in fixed priority order, accepting a match only if it
   starts exactly at the cursor
3. Commits the cursor (always advances, even on an unrecognized character)

Ambiguity is settled by that order and by the order of alternatives inside
each pattern, not by longest match.

Thread Safety:
Scanner instances are single-use. Create one per source string and call it
from one thread at a time. The pattern table is shared and read-only.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from analiser.config import get_scan_config, validate_tab_size
from analiser.lexer.classifiers import (
    LiteralClassifierMixin,
    NumberClassifierMixin,
    WordClassifierMixin,
)
from analiser.lexer.cursor import CursorState
from analiser.lexer.modes import ScanState
from analiser.lexer.patterns import DEFAULT_PATTERNS, PatternTable
from analiser.lexer.results import EndOfInput, ScanResult, UnrecognizedCharacter
from analiser.lexer.scanners import TriviaScannerMixin
from analiser.tokens import Token, TokenKind, TriviaKind
from analiser.utils.logger import get_logger

logger = get_logger(__name__)

# Characters removed from the end of the program before scanning
TRAILING_WHITESPACE = " \t\n\r\0\x0b"


class Scanner(
    # Classifiers (one family of token kinds each)
    WordClassifierMixin,
    LiteralClassifierMixin,
    NumberClassifierMixin,
    # Trivia
    TriviaScannerMixin,
):
    """Anchored, first-match-wins scanner.

    Usage:
            >>> scanner = Scanner("se x := 3.4")
            >>> while not scanner.is_at_end():
            ...     print(scanner.next_token())
        se - T_RES_WORD
        x - T_IDENTIFIER
        := - T_SYMBOL
        3.4 - T_REAL

    Thread Safety:
        Scanner instances are single-use. Create one per source string.
        All mutable state is instance-local.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_cursor",
        "_patterns",
        "_tokens",
        "_state",
        "_strict",
    )

    def __init__(
        self,
        source: str,
        *,
        tab_size: int | None = None,
        source_file: str | None = None,
        patterns: PatternTable | None = None,
        track_comment_lines: bool | None = None,
    ) -> None:
        """Initialize scanner with program text.

        Args:
            source: Program text; trailing whitespace is removed
            tab_size: Columns per tab (defaults to the active ScanConfig)
            source_file: Optional source path for locations and errors
            patterns: Pattern table (defaults to the shared table)
            track_comment_lines: Count newlines inside block comments
                (defaults to the active ScanConfig)
        """
        config = get_scan_config()
        self._source = source.rstrip(TRAILING_WHITESPACE)
        self._source_len = len(self._source)
        self._source_file = source_file
        if track_comment_lines is None:
            track_comment_lines = config.track_comment_lines
        self._cursor = CursorState(
            tab_size=config.tab_size if tab_size is None else validate_tab_size(tab_size),
            track_comment_lines=track_comment_lines,
        )
        self._patterns = patterns if patterns is not None else DEFAULT_PATTERNS
        self._tokens: list[Token] = []
        self._state = ScanState.AT_END if self._source_len == 0 else ScanState.SCANNING
        self._strict = config.strict

    # =========================================================================
    # Public API
    # =========================================================================

    @property
    def source(self) -> str:
        """The right-trimmed program text."""
        return self._source

    @property
    def source_file(self) -> str | None:
        return self._source_file

    @property
    def state(self) -> ScanState:
        return self._state

    @property
    def tab_size(self) -> int:
        return self._cursor.tab_size

    @tab_size.setter
    def tab_size(self, value: int) -> None:
        self._cursor.tab_size = validate_tab_size(value)

    @property
    def line(self) -> int:
        """Current line (1-indexed)."""
        return self._cursor.line

    @property
    def column(self) -> int:
        """Current column (1-indexed, tab-aware)."""
        return self._cursor.col

    @property
    def offset(self) -> int:
        """Current absolute offset into the trimmed program."""
        return self._cursor.offset

    @property
    def token_count(self) -> int:
        return len(self._tokens)

    def tokens_so_far(self) -> tuple[Token, ...]:
        """Tokens produced by earlier ``next_token()`` calls, in order."""
        return tuple(self._tokens)

    def is_at_end(self) -> bool:
        """Check whether the cursor reached the end of the trimmed program."""
        return self._cursor.offset >= self._source_len

    def next_token(self) -> ScanResult:
        """Scan the next token.

        Returns:
            The next Token; EndOfInput when nothing but trivia remains;
            UnrecognizedCharacter when no kind matches, after stepping
            over the offending character.
        """
        if self.is_at_end():
            return self._end_of_input()

        self._skip_trivia()
        if self.is_at_end():
            return self._end_of_input()

        token = self._classify()
        if token is not None:
            self._tokens.append(token)
            self._state = ScanState.SCANNING
            return token

        return self._unrecognized()

    def results(self) -> Iterator[Token | UnrecognizedCharacter]:
        """Yield every result until the end of input.

        Mirrors the command-line driver loop: unrecognized characters are
        yielded and scanning continues past them.
        """
        while not self.is_at_end():
            result = self.next_token()
            if isinstance(result, EndOfInput):
                return
            yield result

    def tokenize(self, *, strict: bool | None = None) -> Iterator[Token]:
        """Yield tokens until the end of input.

        Args:
            strict: Raise LexicalError on an unrecognized character instead
                of logging and skipping it (defaults to the active ScanConfig)

        Raises:
            LexicalError: In strict mode, on the first unrecognized character.
        """
        strict = self._strict if strict is None else strict
        for result in self.results():
            if isinstance(result, UnrecognizedCharacter):
                if strict:
                    raise result.to_error(self._source_file)
                logger.warning("%s", result.message)
                continue
            yield result

    # =========================================================================
    # Classification
    # =========================================================================

    def _classify(self) -> Token | None:
        """Try token kinds in priority order; first success wins.

        Reserved word > symbol > real > integer > string > identifier.
        """
        tries: tuple[Callable[[], Token | None], ...] = (
            self._try_reserved_word,
            self._try_symbol,
            self._try_real,
            self._try_integer,
            self._try_string,
            self._try_identifier,
        )
        for attempt in tries:
            token = attempt()
            if token is not None:
                return token
        return None

    # =========================================================================
    # Anchored matching
    # =========================================================================

    def _match_anchored(self, kind: TokenKind) -> Token | None:
        """Match kind at the start of the remaining text and commit on success.

        The pattern sees only the text from the cursor on, so a leading
        ``\\b`` holds at the cursor whatever precedes it: ``1se`` scans as
        ``1`` followed by the keyword ``se``.

        Returns:
            Token with the pre-consumption position, or None.
        """
        m = self._patterns[kind].match(self._remainder())
        if m is None or m.end() == 0:
            return None

        lexeme = m.group()
        cursor = self._cursor
        token = Token(
            lexeme=lexeme,
            kind=kind,
            line=cursor.line,
            col=cursor.col,
            offset=cursor.offset,
            source_file=self._source_file,
        )
        cursor.advance(lexeme)
        return token

    def _consume_trivia(self, kind: TriviaKind) -> str | None:
        """Match one trivia span at the cursor and commit on success."""
        m = self._patterns[kind].match(self._remainder())
        if m is None or m.end() == 0:
            return None

        lexeme = m.group()
        if kind is TriviaKind.WHITESPACE:
            self._cursor.advance_whitespace(lexeme)
        else:
            self._cursor.advance(lexeme)
        return lexeme

    def _remainder(self) -> str:
        # Never match on (source, pos): \b would look behind the cursor
        return self._source[self._cursor.offset :]

    # =========================================================================
    # Terminal outcomes
    # =========================================================================

    def _end_of_input(self) -> EndOfInput:
        self._state = ScanState.AT_END
        cursor = self._cursor
        return EndOfInput(line=cursor.line, col=cursor.col, offset=cursor.offset)

    def _unrecognized(self) -> UnrecognizedCharacter:
        """Step over one character and report it."""
        cursor = self._cursor
        result = UnrecognizedCharacter(
            char=self._source[cursor.offset],
            line=cursor.line,
            col=cursor.col,
            offset=cursor.offset,
        )
        cursor.skip_char()
        self._state = ScanState.ERROR
        logger.debug("%s", result.message)
        return result
