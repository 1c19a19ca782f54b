"""Trivia scanner mixin."""

from __future__ import annotations

from analiser.tokens import TriviaKind
from analiser.utils.logger import get_logger

logger = get_logger(__name__)

# Block comments first so "/*" is never read as a line comment or symbols
TRIVIA_ORDER: tuple[TriviaKind, ...] = (
    TriviaKind.COMMENT,
    TriviaKind.SHORT_COMMENT,
    TriviaKind.WHITESPACE,
)


class TriviaScannerMixin:
    """Mixin consuming whitespace and comments ahead of the next token.

    Trivia updates the cursor exactly like a token would but is never
    emitted.

    """

    def _consume_trivia(self, kind: TriviaKind) -> str | None:
        """Consume one trivia span of kind at the cursor. Implemented by Scanner."""
        raise NotImplementedError

    def _skip_trivia(self) -> int:
        """Consume trivia until a full pass matches nothing.

        Terminates because every accepted span advances the offset.

        Returns:
            Number of trivia spans consumed.
        """
        skipped = 0
        progressed = True
        while progressed:
            progressed = False
            for kind in TRIVIA_ORDER:
                lexeme = self._consume_trivia(kind)
                if lexeme is not None:
                    logger.debug("skipped %s (%d chars)", kind.name, len(lexeme))
                    skipped += 1
                    progressed = True
        return skipped
