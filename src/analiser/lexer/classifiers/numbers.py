"""Numeric literal classifier mixin."""

from __future__ import annotations

from analiser.tokens import INTEGER_KINDS, Token, TokenKind


class NumberClassifierMixin:
    """Mixin providing real and integer classification.

    Reals must be tried before integers: an integer pattern alone would
    split ``3.4`` into ``3``, ``.`` and ``4``.

    """

    def _match_anchored(self, kind: TokenKind) -> Token | None:
        """Match kind at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _try_real(self) -> Token | None:
        return self._match_anchored(TokenKind.REAL)

    def _try_integer(self) -> Token | None:
        """Try each integer base in dispatch order.

        Binary, octal and hexadecimal all start with ``0``; decimal is
        last so a prefixed literal is never read as a plain ``0``.

        Returns:
            Token of the first base that matches, None otherwise.
        """
        for kind in INTEGER_KINDS:
            token = self._match_anchored(kind)
            if token is not None:
                return token
        return None
