from __future__ import annotations

import hashlib
import json
import logging
import time
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from ats_analyzer.core.config import get_scoring_int, settings
from ats_analyzer.core.errors import InputTooThinError
from ats_analyzer.features import word_count
from ats_analyzer.keywords import KeywordExtractor
from ats_analyzer.schemas import AnalysisReport, AnalysisRequest
from ats_analyzer.scoring import compute_insights, compute_score
from ats_analyzer.suggestions import SuggestionStrategy, generate_suggestions

logger = logging.getLogger("ats_analyzer.analysis")

ProgressCallback = Callable[[dict[str, Any]], None]


def _short_hash(value: str | None) -> str:
    normalized = (value or "").strip()
    if not normalized:
        return ""
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()[:12]


def _preview(text: str) -> str | None:
    limit = settings.log_text_preview_chars
    if limit <= 0:
        return None
    return " ".join(text.split())[:limit]


def _emit_progress(
    progress_callback: ProgressCallback | None,
    *,
    stage: str,
    label: str,
    percent: int,
    detail: str = "",
) -> None:
    if not progress_callback:
        return
    progress_callback(
        {
            "stage": stage,
            "label": label,
            "percent": max(0, min(100, int(percent))),
            "detail": detail[:240],
            "emitted_at": datetime.now(timezone.utc).isoformat(),
        }
    )


def validate_request(request: AnalysisRequest) -> None:
    """Reject texts too short to analyze meaningfully. Lengths are measured after stripping."""
    min_resume = get_scoring_int("input.min_resume_chars", 100, min_value=1, max_value=10000)
    min_jd = get_scoring_int("input.min_job_description_chars", 50, min_value=1, max_value=10000)

    if len(request.job_description_text.strip()) < min_jd:
        raise InputTooThinError(
            f"Job description must be at least {min_jd} characters.",
            field="job_description_text",
            min_chars=min_jd,
        )
    if len(request.resume_text.strip()) < min_resume:
        raise InputTooThinError(
            f"Resume text must be at least {min_resume} characters.",
            field="resume_text",
            min_chars=min_resume,
        )


def run_analysis(
    request: AnalysisRequest,
    *,
    extractor: KeywordExtractor | None = None,
    suggestion_strategy: SuggestionStrategy | None = None,
    progress_callback: ProgressCallback | None = None,
) -> AnalysisReport:
    started_at = time.perf_counter()
    resume_text = request.resume_text
    job_text = request.job_description_text

    _emit_progress(progress_callback, stage="validating_input", label="Validating input", percent=5)
    try:
        validate_request(request)
    except InputTooThinError as exc:
        logger.info(
            json.dumps(
                {
                    "event": "analysis_rejected",
                    "field": exc.field,
                    "min_chars": exc.min_chars,
                    "resume_len": len(resume_text),
                    "jd_len": len(job_text),
                }
            )
        )
        raise

    logger.info(
        json.dumps(
            {
                "event": "analysis_request",
                "resume_len": len(resume_text),
                "resume_hash": _short_hash(resume_text),
                "resume_preview": _preview(resume_text),
                "jd_len": len(job_text),
                "jd_hash": _short_hash(job_text),
                "custom_strategy": suggestion_strategy is not None,
            }
        )
    )

    _emit_progress(progress_callback, stage="scoring", label="Scoring resume", percent=25)
    score = compute_score(resume_text, job_text, extractor=extractor)

    _emit_progress(progress_callback, stage="generating_insights", label="Generating insights", percent=55)
    insight = compute_insights(score.breakdown, resume_text, job_text)

    _emit_progress(progress_callback, stage="generating_suggestions", label="Generating suggestions", percent=75)
    # Both core calls resolve the default extractor themselves and degrade instead of raising.
    suggestions = generate_suggestions(
        resume_text,
        job_text,
        score.breakdown,
        extractor=extractor,
        strategy=suggestion_strategy,
    )

    report = AnalysisReport(
        ats_score=score.total_score,
        breakdown=score.breakdown,
        strengths=insight.strengths,
        weaknesses=insight.weaknesses,
        suggestions=suggestions,
        resume_word_count=word_count(resume_text),
        analyzed_at=datetime.now(timezone.utc),
    )

    _emit_progress(
        progress_callback,
        stage="completed",
        label="Analysis complete",
        percent=100,
        detail=f"ATS score {report.ats_score}",
    )
    logger.info(
        json.dumps(
            {
                "event": "analysis_complete",
                "ats_score": report.ats_score,
                "breakdown": report.breakdown.model_dump(),
                "suggestion_count": len(report.suggestions),
                "duration_ms": int((time.perf_counter() - started_at) * 1000),
            }
        )
    )
    return report
