"""Trivia scanning for the analiser scanner."""

from __future__ import annotations

from analiser.lexer.scanners.trivia import TriviaScannerMixin

__all__ = ["TriviaScannerMixin"]
