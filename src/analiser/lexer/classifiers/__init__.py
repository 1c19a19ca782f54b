"""Token-kind classifiers for the analiser scanner.

Each classifier is a mixin that tries one family of token kinds at the
cursor. The scanner calls them in priority order; see
``Scanner._classify``.
"""

from analiser.lexer.classifiers.literals import (
    LiteralClassifierMixin,
)
from analiser.lexer.classifiers.numbers import (
    NumberClassifierMixin,
)
from analiser.lexer.classifiers.words import (
    WordClassifierMixin,
)

__all__ = [
    "LiteralClassifierMixin",
    "NumberClassifierMixin",
    "WordClassifierMixin",
]
