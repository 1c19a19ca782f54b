"""Command-line driver for the analiser scanner.

Reads a whole program from a file or standard input and prints one line per
scan result:

    $ echo 'se x >= 10' | analiser
    se - T_RES_WORD
    x - T_IDENTIFIER
    >= - T_SYMBOL
    10 - T_INTEGER_DEC

Failures print their description and scanning continues, unless
``--strict`` is given.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from analiser import __version__
from analiser.errors import AnaliserError
from analiser.lexer import Scanner, UnrecognizedCharacter
from analiser.serialization import to_json
from analiser.tokens import Token
from analiser.utils.logger import configure_cli_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="analiser",
        description="Tokenize a pseudocode program and print '<lexeme> - <KIND>' lines",
    )
    parser.add_argument("file", nargs="?", help="Program file (reads stdin when omitted)")
    parser.add_argument(
        "--tab-size",
        type=int,
        default=None,
        help="Columns per tab when reporting positions (default: the active ScanConfig, 4)",
    )
    parser.add_argument(
        "--track-comment-lines",
        action="store_true",
        default=None,
        help="Advance the line across newlines inside block comments",
    )
    parser.add_argument("--positions", action="store_true", help="Prefix lines with line:col")
    parser.add_argument("--json", action="store_true", help="Print tokens as a JSON array")
    parser.add_argument(
        "--strict", action="store_true", help="Stop at the first unrecognized character"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def read_program(path: str | None, stdin: TextIO) -> str:
    """Read the whole program text at once."""
    if path is None or path == "-":
        return stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def format_token(token: Token, *, positions: bool = False) -> str:
    if positions:
        return f"{token.line}:{token.col} {token}"
    return str(token)


def run(
    source: str,
    *,
    tab_size: int | None = None,
    track_comment_lines: bool | None = None,
    positions: bool = False,
    as_json: bool = False,
    strict: bool = False,
    source_file: str | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> int:
    """Scan source and write the driver output.

    Returns:
        Process exit status: 0, or 1 when strict scanning hit a bad character.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    scanner = Scanner(
        source,
        tab_size=tab_size,
        source_file=source_file,
        track_comment_lines=track_comment_lines,
    )
    tokens: list[Token] = []

    while not scanner.is_at_end():
        result = scanner.next_token()
        if isinstance(result, Token):
            tokens.append(result)
            if not as_json:
                print(format_token(result, positions=positions), file=out)
            continue
        if isinstance(result, UnrecognizedCharacter) and strict:
            print(result.to_error(source_file), file=err)
            return 1
        print(result.message, file=err if as_json else out)

    if as_json:
        print(to_json(tokens, indent=2), file=out)
    logger.debug("scanned %d tokens", len(tokens))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_cli_logging(verbose=args.verbose, stream=sys.stderr)

    try:
        source = read_program(args.file, sys.stdin)
    except OSError as e:
        print(f"analiser: cannot read {args.file}: {e.strerror}", file=sys.stderr)
        return 2

    try:
        return run(
            source,
            tab_size=args.tab_size,
            track_comment_lines=args.track_comment_lines,
            positions=args.positions,
            as_json=args.json,
            strict=args.strict,
            source_file=args.file,
        )
    except AnaliserError as e:
        print(f"analiser: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
