from __future__ import annotations


class AnalyzerError(RuntimeError):
    """Base class for errors surfaced to callers of the analyzer."""


class ScoringConfigError(AnalyzerError):
    """Raised when config/scoring.yaml is missing or malformed."""


class InputTooThinError(AnalyzerError):
    """Raised before scoring when a text is too short to analyze."""

    def __init__(self, message: str, *, field: str, min_chars: int):
        super().__init__(message)
        self.field = field
        self.min_chars = min_chars
