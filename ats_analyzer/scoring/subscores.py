"""The five independent sub-score calculators.

Every calculator is a pure function of its input texts returning a float in
[0, 100]. Keyword-based calculators take the extractor explicitly and treat an
extraction failure as an empty keyword set.
"""
from __future__ import annotations

from ats_analyzer.features import (
    SECTION_PATTERNS,
    count_action_verbs,
    count_dates,
    count_pronouns,
    count_tabs,
    has_decorative_glyphs,
    sentences,
    word_count,
)
from ats_analyzer.keywords import KeywordExtractor, safe_extract
from ats_analyzer.keywords.matching import count_term_occurrences


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


def keyword_match_score(resume_text: str, job_text: str, *, extractor: KeywordExtractor) -> float:
    jd_keywords = safe_extract(extractor.extract, job_text)
    resume_keywords = safe_extract(extractor.extract, resume_text)
    if not jd_keywords:
        return 0.0
    matched = sum(1 for keyword in jd_keywords if keyword in resume_keywords)
    return _clamp(100.0 * matched / len(jd_keywords))


def formatting_score(resume_text: str) -> float:
    score = 0.0
    for pattern in SECTION_PATTERNS.values():
        if pattern.search(resume_text):
            score += 20

    words = word_count(resume_text)
    if 300 <= words <= 800:
        score += 20
    elif words > 200:
        score += 10
    return _clamp(score)


def readability_score(resume_text: str) -> float:
    score = 100.0
    words = word_count(resume_text)

    pronoun_ratio = count_pronouns(resume_text) / words if words else 0.0
    if pronoun_ratio > 0.05:
        score -= 30
    elif pronoun_ratio > 0.02:
        score -= 15

    average_sentence_length = words / max(len(sentences(resume_text)), 1)
    if average_sentence_length > 25:
        score -= 20  # too complex
    elif average_sentence_length < 10:
        score -= 10  # too simple

    action_verbs = count_action_verbs(resume_text)
    if action_verbs >= 5:
        score += 20
    elif action_verbs >= 3:
        score += 10
    return _clamp(score)


def structure_score(resume_text: str) -> float:
    score = 100.0
    if has_decorative_glyphs(resume_text):
        score -= 30
    # Many tabs usually means a table or multi-column layout.
    if count_tabs(resume_text) > 10:
        score -= 20
    if count_dates(resume_text) >= 2:
        score += 10
    return _clamp(score)


def keyword_density(resume_text: str, job_text: str, *, extractor: KeywordExtractor) -> float:
    words = word_count(resume_text)
    if not words:
        return 0.0
    jd_keywords = safe_extract(extractor.extract, job_text)
    frequency = sum(count_term_occurrences(resume_text, keyword) for keyword in jd_keywords)
    return 100.0 * frequency / words


def keyword_balance_score(resume_text: str, job_text: str, *, extractor: KeywordExtractor) -> float:
    density = keyword_density(resume_text, job_text, extractor=extractor)
    if density < 1:
        score = 50.0
    elif density <= 3:
        score = 100.0
    elif density > 5:
        score = 40.0  # keyword stuffing
    else:
        score = 70.0

    words = word_count(resume_text)
    if words < 250:
        score -= 30
    elif words > 1000:
        score -= 20
    return max(0.0, score)
