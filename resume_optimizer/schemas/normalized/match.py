from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

Importance = Literal["high", "medium", "low"]


class KeywordMatch(BaseModel):
    skill: str
    found: bool
    importance: Importance


class Improvement(BaseModel):
    section: str
    suggestion: str
    impact: Importance


class ATSAnalysis(BaseModel):
    score: int = Field(ge=0, le=100)
    matches: list[KeywordMatch] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    improvements: list[Improvement] = Field(default_factory=list)
