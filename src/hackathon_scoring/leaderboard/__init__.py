"""Leaderboard computation engine.

Turns raw judge evaluations into weighted, ranked leaderboard entries.
"""

from hackathon_scoring.leaderboard.aggregator import (
    CriterionScores,
    ParticipantAggregate,
    aggregate,
    average_scores,
    group_by_participant,
    weighted_total,
)
from hackathon_scoring.leaderboard.base import LeaderboardSource
from hackathon_scoring.leaderboard.builder import build_entry, collect_comments
from hackathon_scoring.leaderboard.engine import compute_leaderboard
from hackathon_scoring.leaderboard.ranker import rank_aggregates
from hackathon_scoring.leaderboard.rounding import round_score
from hackathon_scoring.leaderboard.weights import (
    CRITERION_FIELDS,
    CRITERION_NAMES,
    DEFAULT_WEIGHTS,
    resolve_weights,
)
from hackathon_scoring.models import LeaderboardEntry


async def compute_from_source(source: LeaderboardSource) -> list[LeaderboardEntry]:
    """Read a snapshot from a LeaderboardSource and compute the leaderboard."""
    participants = await source.list_participants()
    evaluations = await source.list_evaluations()
    criteria = await source.list_criteria()
    judges = await source.list_judges()
    return compute_leaderboard(participants, evaluations, criteria, judges)


__all__ = [
    "CRITERION_FIELDS",
    "CRITERION_NAMES",
    "DEFAULT_WEIGHTS",
    "CriterionScores",
    "LeaderboardSource",
    "ParticipantAggregate",
    "aggregate",
    "average_scores",
    "build_entry",
    "collect_comments",
    "compute_from_source",
    "compute_leaderboard",
    "group_by_participant",
    "rank_aggregates",
    "resolve_weights",
    "round_score",
    "weighted_total",
]
