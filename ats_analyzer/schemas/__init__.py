from .analysis import AnalysisReport, AnalysisRequest
from .scoring import Breakdown, Insight, Priority, ScoreResult, Suggestion, SuggestionCategory

__all__ = [
    "AnalysisRequest",
    "AnalysisReport",
    "Breakdown",
    "ScoreResult",
    "Insight",
    "Suggestion",
    "SuggestionCategory",
    "Priority",
]
