from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Priority = Literal["high", "medium", "low"]
SuggestionCategory = Literal[
    "Keywords",
    "Structure",
    "Content",
    "Formatting",
    "Writing Style",
    "Contact",
    "Skills",
    "Certifications",
    "Insight",
]


class Breakdown(BaseModel):
    keyword_match: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    structure: int = Field(ge=0, le=100)
    keyword_balance: int = Field(ge=0, le=100)

    @classmethod
    def zeroed(cls) -> Breakdown:
        return cls(keyword_match=0, formatting=0, readability=0, structure=0, keyword_balance=0)


class ScoreResult(BaseModel):
    total_score: int = Field(ge=0, le=100)
    breakdown: Breakdown

    @classmethod
    def zeroed(cls) -> ScoreResult:
        """All-zero result; callers should present it as "analysis unavailable"."""
        return cls(total_score=0, breakdown=Breakdown.zeroed())


class Insight(BaseModel):
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)


class Suggestion(BaseModel):
    category: SuggestionCategory
    message: str = Field(min_length=1)
    priority: Priority
