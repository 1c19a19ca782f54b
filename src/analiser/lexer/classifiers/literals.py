"""Symbol and string literal classifier mixin."""

from __future__ import annotations

from analiser.tokens import Token, TokenKind


class LiteralClassifierMixin:
    """Mixin providing symbol and string classification."""

    def _match_anchored(self, kind: TokenKind) -> Token | None:
        """Match kind at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _try_symbol(self) -> Token | None:
        """Try operators and punctuation.

        Multi-character symbols precede their one-character prefixes in the
        pattern, so ``:=`` wins over ``:`` and ``..`` over ``.``.
        """
        return self._match_anchored(TokenKind.SYMBOL)

    def _try_string(self) -> Token | None:
        """Try a double-quoted string on a single line (no escapes)."""
        return self._match_anchored(TokenKind.STRING)
