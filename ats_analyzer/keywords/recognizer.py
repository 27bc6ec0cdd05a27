from __future__ import annotations

from typing import Protocol


class NounRecognizer(Protocol):
    def nouns(self, text: str) -> list[str]:
        """Return raw nouns and noun phrases detected in text, in document order."""


class NoNounRecognizer(NounRecognizer):
    """Stand-in when no NLP pipeline is available; extraction falls back to vocabulary terms only."""

    def nouns(self, text: str) -> list[str]:
        return []
