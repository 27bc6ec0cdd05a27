from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ats_analyzer.features import (
    count_action_verbs,
    count_pronouns,
    count_quantified_achievements,
    has_decorative_glyphs,
    has_email,
    has_phone,
    word_count,
)
from ats_analyzer.keywords import KeywordSet
from ats_analyzer.schemas import Breakdown, Suggestion

MESSAGES: dict[str, str] = {
    "missing_keywords": "Add these important keywords from job description: {terms}",
    "section_experience": 'Add a clear "Work Experience" or "Professional Experience" section',
    "section_skills": 'Include a dedicated "Skills" section with relevant technical skills',
    "section_education": 'Add an "Education" section with your academic qualifications',
    "action_verbs": 'Start bullet points with strong action verbs (e.g., "Developed", "Led", "Implemented", "Optimized")',
    "quantified": 'Add quantifiable achievements (e.g., "Increased sales by 25%", "Reduced load time by 40%")',
    "glyphs": "Remove special characters, bullets, and symbols - use simple text only",
    "pronouns": "Avoid personal pronouns (I, me, my) - use direct action statements instead",
    "too_short": "Resume is too short - aim for 400-700 words to showcase your experience",
    "too_long": "Resume is too long - condense to 1-2 pages (500-800 words) for better readability",
    "summary": "Add a Professional Summary at the top highlighting your key qualifications",
    "email": "Ensure your email address is clearly visible at the top",
    "phone": "Include a phone number in your contact information",
    "keyword_density": "Maintain 1-3% keyword density - naturally incorporate job-related terms throughout",
    "skill_gap": "Job requires {skill} - add this skill if you have experience with it",
    "skill_gap_cloud": "Job requires {skill} - add cloud experience if you have it",
    "certifications": "Add relevant certifications if you have any",
}

# (needle, display name, message key)
HIGH_VALUE_SKILLS: tuple[tuple[str, str, str], ...] = (
    ("react", "React", "skill_gap"),
    ("python", "Python", "skill_gap"),
    ("aws", "AWS", "skill_gap_cloud"),
)

_EXPERIENCE_HEADER_RE = re.compile(r"experience|work history", re.IGNORECASE)
_SKILLS_HEADER_RE = re.compile(r"skills|technical skills", re.IGNORECASE)
_EDUCATION_HEADER_RE = re.compile(r"education", re.IGNORECASE)
_SUMMARY_HEADER_RE = re.compile(r"summary|objective", re.IGNORECASE)

_SECTION_CHECK_BELOW = 70
_MIN_LEADING_ACTION_VERBS = 3
_MIN_QUANTIFIED_ACHIEVEMENTS = 2
_MAX_PRONOUNS = 5
_MIN_WORDS = 250
_MAX_WORDS = 1000
_KEYWORD_BALANCE_CHECK_BELOW = 50


def _msg(key: str, **kwargs: Any) -> str:
    return MESSAGES[key].format(**kwargs)


@dataclass(frozen=True, slots=True)
class RuleContext:
    resume_text: str
    job_text: str
    breakdown: Breakdown
    job_keywords: KeywordSet
    missing_keywords_shown: int = 5

    @property
    def resume_lower(self) -> str:
        return self.resume_text.lower()

    @property
    def job_lower(self) -> str:
        return self.job_text.lower()


Rule = Callable[[RuleContext], list[Suggestion]]


def missing_keywords_rule(ctx: RuleContext) -> list[Suggestion]:
    resume_lower = ctx.resume_lower
    # Substring containment, not whole-word: "java" is satisfied by "javascript".
    missing = [term for term in ctx.job_keywords if term not in resume_lower]
    missing = missing[: ctx.missing_keywords_shown]
    if not missing:
        return []
    return [Suggestion(category="Keywords", message=_msg("missing_keywords", terms=", ".join(missing)), priority="high")]


def missing_sections_rule(ctx: RuleContext) -> list[Suggestion]:
    if ctx.breakdown.formatting >= _SECTION_CHECK_BELOW:
        return []
    output: list[Suggestion] = []
    if not _EXPERIENCE_HEADER_RE.search(ctx.resume_text):
        output.append(Suggestion(category="Structure", message=_msg("section_experience"), priority="high"))
    if not _SKILLS_HEADER_RE.search(ctx.resume_text):
        output.append(Suggestion(category="Structure", message=_msg("section_skills"), priority="high"))
    if not _EDUCATION_HEADER_RE.search(ctx.resume_text):
        output.append(Suggestion(category="Structure", message=_msg("section_education"), priority="medium"))
    return output


def action_verbs_rule(ctx: RuleContext) -> list[Suggestion]:
    if count_action_verbs(ctx.resume_text, leading_only=True) >= _MIN_LEADING_ACTION_VERBS:
        return []
    return [Suggestion(category="Content", message=_msg("action_verbs"), priority="medium")]


def quantified_achievements_rule(ctx: RuleContext) -> list[Suggestion]:
    if count_quantified_achievements(ctx.resume_text) >= _MIN_QUANTIFIED_ACHIEVEMENTS:
        return []
    return [Suggestion(category="Content", message=_msg("quantified"), priority="high")]


def decorative_glyphs_rule(ctx: RuleContext) -> list[Suggestion]:
    if not has_decorative_glyphs(ctx.resume_text):
        return []
    return [Suggestion(category="Formatting", message=_msg("glyphs"), priority="high")]


def pronouns_rule(ctx: RuleContext) -> list[Suggestion]:
    if count_pronouns(ctx.resume_text) <= _MAX_PRONOUNS:
        return []
    return [Suggestion(category="Writing Style", message=_msg("pronouns"), priority="medium")]


def resume_length_rule(ctx: RuleContext) -> list[Suggestion]:
    words = word_count(ctx.resume_text)
    if words < _MIN_WORDS:
        return [Suggestion(category="Content", message=_msg("too_short"), priority="medium")]
    if words > _MAX_WORDS:
        return [Suggestion(category="Content", message=_msg("too_long"), priority="medium")]
    return []


def summary_section_rule(ctx: RuleContext) -> list[Suggestion]:
    if _SUMMARY_HEADER_RE.search(ctx.resume_text):
        return []
    return [Suggestion(category="Structure", message=_msg("summary"), priority="medium")]


def email_rule(ctx: RuleContext) -> list[Suggestion]:
    if has_email(ctx.resume_text):
        return []
    return [Suggestion(category="Contact", message=_msg("email"), priority="high")]


def phone_rule(ctx: RuleContext) -> list[Suggestion]:
    if has_phone(ctx.resume_text):
        return []
    return [Suggestion(category="Contact", message=_msg("phone"), priority="medium")]


def keyword_density_rule(ctx: RuleContext) -> list[Suggestion]:
    if ctx.breakdown.keyword_balance >= _KEYWORD_BALANCE_CHECK_BELOW:
        return []
    return [Suggestion(category="Keywords", message=_msg("keyword_density"), priority="medium")]


def skill_gaps_rule(ctx: RuleContext) -> list[Suggestion]:
    job_lower = ctx.job_lower
    resume_lower = ctx.resume_lower
    output: list[Suggestion] = []
    for needle, display, key in HIGH_VALUE_SKILLS:
        if needle in job_lower and needle not in resume_lower:
            output.append(Suggestion(category="Skills", message=_msg(key, skill=display), priority="high"))
    return output


def certifications_rule(ctx: RuleContext) -> list[Suggestion]:
    if "certified" in ctx.job_lower and "certification" not in ctx.resume_lower:
        return [Suggestion(category="Certifications", message=_msg("certifications"), priority="low")]
    return []


DEFAULT_RULES: tuple[Rule, ...] = (
    missing_keywords_rule,
    missing_sections_rule,
    action_verbs_rule,
    quantified_achievements_rule,
    decorative_glyphs_rule,
    pronouns_rule,
    resume_length_rule,
    summary_section_rule,
    email_rule,
    phone_rule,
    keyword_density_rule,
    skill_gaps_rule,
    certifications_rule,
)
