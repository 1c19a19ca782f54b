"""Token serialization: JSON round-trip for scanner output.

Converts tokens to/from JSON-compatible dicts. Used by the command-line
driver's ``--json`` output and handy for golden-file tests.

All output is deterministic (sorted keys).

Example:
    from analiser import tokenize
    from analiser.serialization import to_json, from_json

    tokens = tokenize("se x > 0")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure, safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from analiser.tokens import Token, TokenKind


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    return {
        "lexeme": token.lexeme,
        "kind": token.kind.value,
        "line": token.line,
        "col": token.col,
        "offset": token.offset,
    }


def token_from_dict(data: dict[str, Any]) -> Token:
    """Rebuild a token from ``token_to_dict`` output.

    Raises:
        ValueError: If ``kind`` is not a known tag.
        KeyError: If a required field is missing.
    """
    return Token(
        lexeme=data["lexeme"],
        kind=TokenKind(data["kind"]),
        line=data["line"],
        col=data["col"],
        offset=data.get("offset", 0),
    )


def to_json(tokens: Iterable[Token], *, indent: int | None = None) -> str:
    """Serialize tokens to a JSON array string."""
    return json.dumps([token_to_dict(t) for t in tokens], sort_keys=True, indent=indent)


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array produced by ``to_json``."""
    return [token_from_dict(item) for item in json.loads(json_str)]
