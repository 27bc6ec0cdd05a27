from __future__ import annotations

import re

from ats_analyzer.keywords.matching import whole_word_pattern
from ats_analyzer.keywords.vocabulary import (
    ACTION_VERBS,
    DECORATIVE_GLYPHS,
    FIRST_PERSON_PRONOUNS,
    LEADING_ACTION_VERBS,
    MONTH_ABBREVIATIONS,
)

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PRONOUN_RE = whole_word_pattern(FIRST_PERSON_PRONOUNS)
_ACTION_VERB_RE = whole_word_pattern(ACTION_VERBS)
_LEADING_ACTION_VERB_RE = whole_word_pattern(LEADING_ACTION_VERBS)
_GLYPH_RE = re.compile(f"[{re.escape(DECORATIVE_GLYPHS)}]")
_DATE_RE = re.compile(
    r"\b\d{4}\b|\b\d{1,2}/\d{4}\b|\b(?:" + "|".join(MONTH_ABBREVIATIONS) + r")\s+\d{4}\b",
    re.IGNORECASE,
)
_QUANTIFIED_RE = re.compile(
    r"\d+%|\d+\+|increased by \d+|reduced \d+|saved \d+|\$\d+",
    re.IGNORECASE,
)
_EMAIL_RE = re.compile(r"\b[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}\b", re.IGNORECASE)
_PHONE_RE = re.compile(r"\b\d{3}[-.\s]?\d{3}[-.\s]?\d{4}\b|\(\d{3}\)\s?\d{3}[-.\s]?\d{4}\b")

SECTION_PATTERNS: dict[str, re.Pattern[str]] = {
    "contact": re.compile(r"contact|email|phone", re.IGNORECASE),
    "summary": re.compile(r"summary|objective|profile", re.IGNORECASE),
    "experience": re.compile(r"experience|work history|employment", re.IGNORECASE),
    "education": re.compile(r"education|academic|degree", re.IGNORECASE),
    "skills": re.compile(r"skills|technical skills|competencies", re.IGNORECASE),
}


def words(text: str) -> list[str]:
    return (text or "").split()


def word_count(text: str) -> int:
    return len(words(text))


def sentences(text: str) -> list[str]:
    return [part for part in _SENTENCE_SPLIT_RE.split(text or "") if part.strip()]


def count_pronouns(text: str) -> int:
    return len(_PRONOUN_RE.findall(text or ""))


def count_action_verbs(text: str, *, leading_only: bool = False) -> int:
    pattern = _LEADING_ACTION_VERB_RE if leading_only else _ACTION_VERB_RE
    return len(pattern.findall(text or ""))


def has_decorative_glyphs(text: str) -> bool:
    return bool(_GLYPH_RE.search(text or ""))


def count_tabs(text: str) -> int:
    return (text or "").count("\t")


def count_dates(text: str) -> int:
    return sum(1 for _ in _DATE_RE.finditer(text or ""))


def count_quantified_achievements(text: str) -> int:
    return len(_QUANTIFIED_RE.findall(text or ""))


def has_email(text: str) -> bool:
    return bool(_EMAIL_RE.search(text or ""))


def has_phone(text: str) -> bool:
    return bool(_PHONE_RE.search(text or ""))
