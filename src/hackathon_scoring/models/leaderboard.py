"""Derived leaderboard records. Computed on request, never stored."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JudgeComment(BaseModel):
    """A non-empty comment left by a judge on an evaluation."""

    model_config = ConfigDict(frozen=True)

    judge_id: int
    judge_name: str | None = None
    text: str


class LeaderboardEntry(BaseModel):
    """Display-ready summary of one ranked participant."""

    model_config = ConfigDict(frozen=True)

    participant_id: int
    participant_code: str
    name: str
    project: str
    project_design: float
    functionality: float
    presentation: float
    web_design: float
    impact: float
    total: float
    rank: int
    comments: list[JudgeComment] = Field(default_factory=list)
