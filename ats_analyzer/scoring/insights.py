from __future__ import annotations

from dataclasses import dataclass

from ats_analyzer.schemas import Breakdown, Insight


@dataclass(frozen=True, slots=True)
class _InsightRule:
    field: str
    strong_at: int
    weak_below: int
    strength: str
    weakness: str


_INSIGHT_RULES: tuple[_InsightRule, ...] = (
    _InsightRule(
        field="keyword_match",
        strong_at=70,
        weak_below=50,
        strength="Excellent keyword alignment with job description",
        weakness="Low keyword match - add more relevant skills and terms from job description",
    ),
    _InsightRule(
        field="formatting",
        strong_at=80,
        weak_below=60,
        strength="Well-structured resume with all essential sections",
        weakness="Missing key sections like Summary, Experience, or Skills",
    ),
    _InsightRule(
        field="readability",
        strong_at=75,
        weak_below=60,
        strength="Clear and professional writing style with strong action verbs",
        weakness="Improve sentence structure and use more action verbs",
    ),
    _InsightRule(
        field="structure",
        strong_at=80,
        weak_below=60,
        strength="ATS-friendly format without complex tables or special characters",
        weakness="Avoid using tables, graphics, or special symbols",
    ),
    _InsightRule(
        field="keyword_balance",
        strong_at=70,
        weak_below=50,
        strength="Optimal keyword density and resume length",
        weakness="Adjust keyword usage - either too sparse or stuffed",
    ),
)


def compute_insights(breakdown: Breakdown, resume_text: str, job_description_text: str) -> Insight:
    strengths: list[str] = []
    weaknesses: list[str] = []
    for rule in _INSIGHT_RULES:
        value = getattr(breakdown, rule.field)
        if value >= rule.strong_at:
            strengths.append(rule.strength)
        elif value < rule.weak_below:
            weaknesses.append(rule.weakness)
    return Insight(strengths=strengths, weaknesses=weaknesses)
