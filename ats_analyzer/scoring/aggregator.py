from __future__ import annotations

import logging
import math

from ats_analyzer.keywords import KeywordExtractor, get_default_keyword_extractor
from ats_analyzer.schemas import Breakdown, ScoreResult

from .subscores import (
    formatting_score,
    keyword_balance_score,
    keyword_match_score,
    readability_score,
    structure_score,
)

logger = logging.getLogger(__name__)

SCORE_WEIGHTS: dict[str, float] = {
    "keyword_match": 0.40,
    "formatting": 0.20,
    "readability": 0.15,
    "structure": 0.15,
    "keyword_balance": 0.10,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _to_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


def compute_sub_scores(resume_text: str, job_text: str, *, extractor: KeywordExtractor) -> dict[str, float]:
    """Unrounded sub-scores keyed by breakdown field name."""
    return {
        "keyword_match": keyword_match_score(resume_text, job_text, extractor=extractor),
        "formatting": formatting_score(resume_text),
        "readability": readability_score(resume_text),
        "structure": structure_score(resume_text),
        "keyword_balance": keyword_balance_score(resume_text, job_text, extractor=extractor),
    }


def compute_score(
    resume_text: str,
    job_description_text: str,
    *,
    extractor: KeywordExtractor | None = None,
) -> ScoreResult:
    """Weighted ATS score for a resume against a job description.

    Never raises: any failure is logged and a zeroed result is returned, which
    callers should present as "analysis unavailable" rather than a real score.
    The total uses the unrounded sub-scores; the breakdown reports each one
    rounded on its own.
    """
    try:
        if extractor is None:
            extractor = get_default_keyword_extractor()
        sub_scores = compute_sub_scores(resume_text, job_description_text, extractor=extractor)
        total = sum(sub_scores[name] * weight for name, weight in SCORE_WEIGHTS.items())
        breakdown = Breakdown(**{name: _to_score(value) for name, value in sub_scores.items()})
        return ScoreResult(total_score=_to_score(total), breakdown=breakdown)
    except Exception:
        logger.exception(
            "ats_score_failed resume_chars=%s jd_chars=%s",
            len(resume_text or ""),
            len(job_description_text or ""),
        )
        return ScoreResult.zeroed()
