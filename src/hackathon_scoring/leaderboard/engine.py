"""Leaderboard computation: aggregate, weight, rank, build."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import structlog

from hackathon_scoring.leaderboard.aggregator import aggregate
from hackathon_scoring.leaderboard.builder import build_entry
from hackathon_scoring.leaderboard.ranker import rank_aggregates
from hackathon_scoring.leaderboard.weights import resolve_weights

if TYPE_CHECKING:
    from hackathon_scoring.models import (
        Criterion,
        Evaluation,
        Judge,
        LeaderboardEntry,
        Participant,
    )

logger = structlog.get_logger()


def compute_leaderboard(
    participants: Iterable[Participant],
    evaluations: Iterable[Evaluation],
    criteria: Iterable[Criterion],
    judges: Iterable[Judge] | None = None,
) -> list[LeaderboardEntry]:
    """Compute the ranked leaderboard from a data snapshot.

    Pure function of its inputs: nothing is read from or written to storage,
    and the inputs are not modified.

    Args:
        participants: All participants.
        evaluations: All evaluations across all judges.
        criteria: Criteria with current weights. Missing names use defaults.
        judges: Optional judges, used to attach names to comments.

    Returns:
        Entries ordered by rank ascending (rank 1 first). Participants without
        evaluations are omitted.
    """
    weights = resolve_weights(criteria)
    judge_names = {j.id: j.name for j in judges} if judges is not None else None

    aggregates = aggregate(participants, evaluations, weights)
    entries = [
        build_entry(rank, agg, judge_names) for rank, agg in rank_aggregates(aggregates)
    ]

    logger.debug("leaderboard_computed", entries=len(entries))
    return entries
