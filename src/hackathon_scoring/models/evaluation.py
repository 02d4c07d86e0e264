"""Evaluation records submitted by judges."""

from datetime import UTC, datetime

from pydantic import BaseModel
from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Evaluation(SQLModel, table=True):
    """One judge's scores for one participant.

    A judge evaluates a participant at most once; resubmissions update the
    existing row in place.
    """

    __table_args__ = (UniqueConstraint("participant_id", "judge_id", name="uq_participant_judge"),)

    id: int | None = Field(default=None, primary_key=True)
    participant_id: int = Field(index=True, foreign_key="participant.id")
    judge_id: int = Field(index=True, foreign_key="judge.id")
    project_design: float
    functionality: float
    presentation: float
    web_design: float
    impact: float
    comments: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class EvaluationScores(BaseModel):
    """The five criterion scores a judge submits."""

    project_design: float
    functionality: float
    presentation: float
    web_design: float
    impact: float
