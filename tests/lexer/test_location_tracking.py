"""Tests for line, column and offset tracking.

Positions are recorded before a lexeme is consumed. Whitespace moves the
column tab-aware; every other lexeme, block comments included, moves it by
its length unless comment line tracking is switched on.
"""

from analiser import Scanner, tokenize
from analiser.lexer import CursorState


class TestSingleLinePositions:
    """Columns on a single line."""

    def test_first_token_at_origin(self) -> None:
        token = tokenize("x")[0]
        assert (token.line, token.col, token.offset) == (1, 1, 0)

    def test_columns_advance_by_lexeme_length(self) -> None:
        tokens = tokenize("abc:=12")
        assert [(t.lexeme, t.col) for t in tokens] == [("abc", 1), (":=", 4), ("12", 6)]

    def test_spaces_count_one_column_each(self) -> None:
        tokens = tokenize("a   b")
        assert tokens[1].col == 5

    def test_tab_without_newline_uses_tab_size(self) -> None:
        tokens = tokenize("a\tb")
        assert tokens[1].col == 1 + 1 + 4

    def test_mixed_tabs_and_spaces_without_newline(self) -> None:
        tokens = tokenize("a \t b", tab_size=2)
        assert tokens[1].col == 2 + 1 + 2 + 1


class TestMultilinePositions:
    """Newlines bump the line and reset the column."""

    def test_comment_elision_keeps_position(self) -> None:
        tokens = tokenize("// nota\nx")
        assert len(tokens) == 1
        assert (tokens[0].lexeme, tokens[0].line, tokens[0].col) == ("x", 2, 1)

    def test_tabs_after_newline(self) -> None:
        """Two tabs and a space on a fresh line start at column 1 + 2*4 + 1."""
        tokens = tokenize("x\n\t\t y")
        assert (tokens[1].line, tokens[1].col) == (2, 10)

    def test_only_indentation_after_last_newline_counts(self) -> None:
        tokens = tokenize("x\t\t\n\n  y")
        assert (tokens[1].line, tokens[1].col) == (3, 3)

    def test_custom_tab_size(self) -> None:
        tokens = tokenize("x\n\ty", tab_size=8)
        assert tokens[1].col == 9

    def test_crlf_line_endings(self) -> None:
        tokens = tokenize("a\r\nb\r\nc")
        assert [(t.lexeme, t.line, t.col) for t in tokens] == [
            ("a", 1, 1),
            ("b", 2, 1),
            ("c", 3, 1),
        ]

    def test_block_comment_spanning_lines_moves_column_only(self) -> None:
        """Newlines inside a block comment count as one column each."""
        tokens = tokenize("/* a\nb */x")
        assert (tokens[0].line, tokens[0].col, tokens[0].offset) == (1, 10, 9)

    def test_line_after_multiline_comment_comes_from_whitespace_only(self) -> None:
        tokens = tokenize("/*\n\n*/ x\ny")
        assert [(t.lexeme, t.line, t.col) for t in tokens] == [("x", 1, 8), ("y", 2, 1)]

    def test_tracked_block_comment_spanning_lines(self) -> None:
        tokens = tokenize("/* a\n  b */x", track_comment_lines=True)
        assert (tokens[0].line, tokens[0].col) == (2, 7)

    def test_tracked_block_comment_tail_uses_tab_size(self) -> None:
        tokens = tokenize("/*\n\t*/x", track_comment_lines=True, tab_size=2)
        assert (tokens[0].line, tokens[0].col) == (2, 5)

    def test_block_comment_on_one_line_moves_column(self) -> None:
        tokens = tokenize("/* c */x")
        assert (tokens[0].line, tokens[0].col) == (1, 8)


class TestOffsets:
    """Absolute offsets into the trimmed program."""

    def test_lexeme_matches_source_slice(self) -> None:
        scanner = Scanner("se x\n\t:= 0x1F // fim")
        for token in scanner.tokenize():
            assert scanner.source[token.offset : token.end_offset] == token.lexeme

    def test_scanner_offset_after_last_token(self) -> None:
        scanner = Scanner("ab cd")
        scanner.next_token()
        assert scanner.offset == 2
        scanner.next_token()
        assert scanner.offset == 5
        assert scanner.is_at_end()

    def test_scanner_line_and_column(self) -> None:
        scanner = Scanner("a\n  bc")
        scanner.next_token()
        scanner.next_token()
        assert (scanner.line, scanner.column) == (2, 5)


class TestSourceLocation:
    """Lazily built SourceLocation on tokens."""

    def test_location_fields(self) -> None:
        token = tokenize("x\n  abc")[1]
        loc = token.location
        assert (loc.lineno, loc.col_offset) == (2, 3)
        assert (loc.offset, loc.end_offset) == (4, 7)
        assert loc.end_col_offset == 6

    def test_location_is_cached(self) -> None:
        token = tokenize("x")[0]
        assert token.location is token.location

    def test_location_str_with_source_file(self) -> None:
        token = tokenize("\nx", source_file="prog.txt")[0]
        assert str(token.location) == "prog.txt:2:1"

    def test_location_str_without_source_file(self) -> None:
        assert str(tokenize("  x")[0].location) == "1:3"


class TestCursorState:
    """Position-update rules in isolation."""

    def test_advance_plain_lexeme(self) -> None:
        cursor = CursorState()
        cursor.advance("abc")
        assert (cursor.offset, cursor.line, cursor.col) == (3, 1, 4)

    def test_advance_whitespace_with_newlines(self) -> None:
        cursor = CursorState(offset=5, line=1, col=6)
        cursor.advance_whitespace(" \n\n\t ")
        assert (cursor.offset, cursor.line, cursor.col) == (10, 3, 6)

    def test_carriage_return_adds_no_column(self) -> None:
        cursor = CursorState()
        cursor.advance_whitespace("\r")
        assert cursor.col == 1

    def test_skip_char(self) -> None:
        cursor = CursorState()
        cursor.skip_char()
        assert (cursor.offset, cursor.line, cursor.col) == (1, 1, 2)

    def test_advance_keeps_line_across_comment_newlines(self) -> None:
        cursor = CursorState()
        cursor.advance("/*\n*/")
        assert (cursor.offset, cursor.line, cursor.col) == (5, 1, 6)

    def test_advance_tracks_comment_newlines_when_enabled(self) -> None:
        cursor = CursorState(track_comment_lines=True)
        cursor.advance("/* x\n\n y */")
        assert (cursor.offset, cursor.line, cursor.col) == (11, 3, 6)
