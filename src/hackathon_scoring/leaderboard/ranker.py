"""Ranking of aggregated participants."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from hackathon_scoring.leaderboard.aggregator import ParticipantAggregate

A = TypeVar("A", bound=ParticipantAggregate)


def rank_aggregates(aggregates: Sequence[A]) -> list[tuple[int, A]]:
    """Sort by total descending and number positions from 1.

    The sort is stable and equal totals are not collapsed: two tied
    participants get consecutive ranks in their input order.

    Args:
        aggregates: Unranked aggregates, in a deterministic order.

    Returns:
        List of (rank, aggregate) tuples, rank 1 first.
    """
    ordered = sorted(aggregates, key=lambda a: a.total, reverse=True)
    return [(position, aggregate) for position, aggregate in enumerate(ordered, 1)]
