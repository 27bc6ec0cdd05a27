from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from ats_analyzer.core.config import get_scoring_int
from ats_analyzer.keywords import KeywordExtractor, get_default_keyword_extractor, safe_extract
from ats_analyzer.schemas import Breakdown, Suggestion

from .rules import DEFAULT_RULES, Rule, RuleContext

logger = logging.getLogger(__name__)


class SuggestionStrategy(Protocol):
    def suggest(self, resume_text: str, job_text: str, breakdown: Breakdown) -> list[Suggestion]:
        """Return suggestions in the order they should be shown."""


class RuleBasedSuggestionStrategy(SuggestionStrategy):
    """Deterministic heuristic rules, evaluated in a fixed order."""

    def __init__(
        self,
        extractor: KeywordExtractor,
        *,
        rules: Sequence[Rule] = DEFAULT_RULES,
        missing_keywords_shown: int = 5,
    ) -> None:
        self._extractor = extractor
        self._rules = tuple(rules)
        self._missing_keywords_shown = missing_keywords_shown

    def suggest(self, resume_text: str, job_text: str, breakdown: Breakdown) -> list[Suggestion]:
        ctx = RuleContext(
            resume_text=resume_text or "",
            job_text=job_text or "",
            breakdown=breakdown,
            job_keywords=safe_extract(self._extractor.extract_job_keywords, job_text or ""),
            missing_keywords_shown=self._missing_keywords_shown,
        )
        output: list[Suggestion] = []
        for rule in self._rules:
            output.extend(rule(ctx))
        return output


class CompositeSuggestionStrategy(SuggestionStrategy):
    """Concatenates the output of several strategies in order, dropping repeated (category, message) pairs.

    A failing member is logged and contributes nothing; the others still run.
    """

    def __init__(self, strategies: Sequence[SuggestionStrategy]) -> None:
        self._strategies = tuple(strategies)

    def suggest(self, resume_text: str, job_text: str, breakdown: Breakdown) -> list[Suggestion]:
        output: list[Suggestion] = []
        for strategy in self._strategies:
            output.extend(_run_strategy(strategy, resume_text, job_text, breakdown))
        return _dedupe(output)


def _run_strategy(
    strategy: SuggestionStrategy,
    resume_text: str,
    job_text: str,
    breakdown: Breakdown,
) -> list[Suggestion]:
    try:
        return list(strategy.suggest(resume_text, job_text, breakdown))
    except Exception:
        logger.exception("suggestion_strategy_failed strategy=%s", type(strategy).__name__)
        return []


def _dedupe(suggestions: list[Suggestion]) -> list[Suggestion]:
    seen: set[tuple[str, str]] = set()
    output: list[Suggestion] = []
    for item in suggestions:
        key = (item.category, item.message)
        if key in seen:
            continue
        seen.add(key)
        output.append(item)
    return output


def build_default_strategy(extractor: KeywordExtractor | None = None) -> RuleBasedSuggestionStrategy:
    return RuleBasedSuggestionStrategy(
        extractor if extractor is not None else get_default_keyword_extractor(),
        missing_keywords_shown=get_scoring_int("suggestions.missing_keywords_shown", 5, min_value=1, max_value=30),
    )


def generate_suggestions(
    resume_text: str,
    job_description_text: str,
    breakdown: Breakdown,
    *,
    extractor: KeywordExtractor | None = None,
    strategy: SuggestionStrategy | None = None,
) -> list[Suggestion]:
    """Improvement suggestions, deduplicated by (category, message) and truncated to the configured maximum.

    Truncation keeps generation order; suggestions are not re-sorted by
    priority, so a high-priority item late in the order can be dropped.
    """
    try:
        if strategy is None:
            strategy = build_default_strategy(extractor)
        max_items = get_scoring_int("suggestions.max_items", 10, min_value=1, max_value=10)
    except Exception:
        logger.exception("suggestion_setup_failed")
        return []

    suggestions = _dedupe(_run_strategy(strategy, resume_text or "", job_description_text or "", breakdown))
    if len(suggestions) > max_items:
        logger.debug("suggestions_truncated generated=%s kept=%s", len(suggestions), max_items)
    return suggestions[:max_items]
