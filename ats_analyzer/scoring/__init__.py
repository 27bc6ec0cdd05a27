from .aggregator import SCORE_WEIGHTS, compute_score, compute_sub_scores, round_half_up
from .insights import compute_insights
from .subscores import (
    formatting_score,
    keyword_balance_score,
    keyword_density,
    keyword_match_score,
    readability_score,
    structure_score,
)

__all__ = [
    "SCORE_WEIGHTS",
    "compute_score",
    "compute_sub_scores",
    "compute_insights",
    "round_half_up",
    "keyword_match_score",
    "formatting_score",
    "readability_score",
    "structure_score",
    "keyword_density",
    "keyword_balance_score",
]
