"""Assembly of final leaderboard entries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from hackathon_scoring.leaderboard.aggregator import ParticipantAggregate
from hackathon_scoring.models import JudgeComment, LeaderboardEntry

if TYPE_CHECKING:
    from hackathon_scoring.models import Evaluation


def collect_comments(
    evaluations: Iterable[Evaluation],
    judge_names: Mapping[int, str] | None = None,
) -> list[JudgeComment]:
    """Collect non-empty judge comments, attributed to their judge.

    Args:
        evaluations: Evaluations of a single participant.
        judge_names: Optional judge id -> display name lookup.

    Returns:
        One comment per evaluation with text; blank comments are dropped.
    """
    names = judge_names or {}
    comments = []
    for evaluation in evaluations:
        text = (evaluation.comments or "").strip()
        if not text:
            continue
        comments.append(
            JudgeComment(
                judge_id=evaluation.judge_id,
                judge_name=names.get(evaluation.judge_id),
                text=text,
            )
        )
    return comments


def build_entry(
    rank: int,
    aggregate: ParticipantAggregate,
    judge_names: Mapping[int, str] | None = None,
) -> LeaderboardEntry:
    """Convert a ranked aggregate into a LeaderboardEntry."""
    participant = aggregate.participant
    return LeaderboardEntry(
        participant_id=participant.id,
        participant_code=participant.participant_code,
        name=participant.name,
        project=participant.project,
        **aggregate.scores.as_dict(),
        total=aggregate.total,
        rank=rank,
        comments=collect_comments(aggregate.evaluations, judge_names),
    )
