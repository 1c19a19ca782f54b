"""Reserved word and identifier classifier mixin."""

from __future__ import annotations

from analiser.tokens import Token, TokenKind


class WordClassifierMixin:
    """Mixin providing keyword and identifier classification.

    Keywords are a subset of the identifier grammar, so the dispatcher must
    try ``_try_reserved_word`` before ``_try_identifier``. The keyword
    pattern is boundary-delimited, which keeps ``seuNome`` from splitting
    into ``se`` + ``uNome``.

    """

    def _match_anchored(self, kind: TokenKind) -> Token | None:
        """Match kind at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _try_reserved_word(self) -> Token | None:
        return self._match_anchored(TokenKind.RESERVED_WORD)

    def _try_identifier(self) -> Token | None:
        return self._match_anchored(TokenKind.IDENTIFIER)
