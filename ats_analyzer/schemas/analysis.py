from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .scoring import Breakdown, Suggestion


class AnalysisRequest(BaseModel):
    resume_text: str = Field(default="", max_length=100000)
    job_description_text: str = Field(default="", max_length=50000)


class AnalysisReport(BaseModel):
    ats_score: int = Field(ge=0, le=100)
    breakdown: Breakdown
    strengths: list[str] = Field(default_factory=list)
    weaknesses: list[str] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list, max_length=10)
    resume_word_count: int = Field(ge=0)
    analyzed_at: datetime
