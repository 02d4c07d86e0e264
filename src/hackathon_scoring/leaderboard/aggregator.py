"""Evaluation aggregation: per-criterion averages and weighted totals."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hackathon_scoring.leaderboard.rounding import round_score
from hackathon_scoring.leaderboard.weights import CRITERION_FIELDS

if TYPE_CHECKING:
    from hackathon_scoring.models import Evaluation, Participant


@dataclass(frozen=True)
class CriterionScores:
    """Rounded per-criterion averages for one participant."""

    project_design: float
    functionality: float
    presentation: float
    web_design: float
    impact: float

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in CRITERION_FIELDS}


@dataclass
class ParticipantAggregate:
    """A participant with averaged scores and composite total, not yet ranked.

    Attributes:
        participant: Source participant record.
        scores: Rounded per-criterion averages.
        total: Weighted composite score, rounded to one decimal.
        evaluations: Evaluations that contributed, in input order.
    """

    participant: Participant
    scores: CriterionScores
    total: float
    evaluations: list[Evaluation] = field(default_factory=list)


def group_by_participant(evaluations: Iterable[Evaluation]) -> dict[int, list[Evaluation]]:
    """Bucket evaluations by participant id, keeping input order."""
    grouped: dict[int, list[Evaluation]] = defaultdict(list)
    for evaluation in evaluations:
        grouped[evaluation.participant_id].append(evaluation)
    return grouped


def average_scores(evaluations: Sequence[Evaluation]) -> CriterionScores:
    """Average each criterion across judges.

    Each average is rounded to one decimal independently, before any weighting.

    Args:
        evaluations: At least one evaluation of the same participant.

    Returns:
        Rounded per-criterion averages.

    Raises:
        ValueError: If evaluations is empty.
    """
    if not evaluations:
        msg = "Cannot average an empty evaluation list"
        raise ValueError(msg)

    count = len(evaluations)
    averages = {
        name: round_score(sum(getattr(e, name) for e in evaluations) / count)
        for name in CRITERION_FIELDS
    }
    return CriterionScores(**averages)


def weighted_total(scores: CriterionScores, weights: Mapping[str, float]) -> float:
    """Combine rounded averages into one composite score.

    total = sum(average * weight / 100), rounded to one decimal.

    Args:
        scores: Rounded per-criterion averages.
        weights: Field name -> percentage weight (see resolve_weights).

    Returns:
        Composite score.
    """
    total = sum(getattr(scores, name) * weights[name] / 100 for name in CRITERION_FIELDS)
    return round_score(total)


def aggregate(
    participants: Iterable[Participant],
    evaluations: Iterable[Evaluation],
    weights: Mapping[str, float],
) -> list[ParticipantAggregate]:
    """Aggregate evaluations for every participant that has at least one.

    Participants are visited in ascending id order. Participants without
    evaluations are skipped; evaluations for unknown participants are ignored.

    Args:
        participants: Participant records.
        evaluations: All evaluations.
        weights: Resolved criterion weights.

    Returns:
        Unranked aggregates in ascending participant id order.
    """
    grouped = group_by_participant(evaluations)
    aggregates = []

    for participant in sorted(participants, key=lambda p: p.id):
        participant_evals = grouped.get(participant.id)
        if not participant_evals:
            continue

        scores = average_scores(participant_evals)
        aggregates.append(
            ParticipantAggregate(
                participant=participant,
                scores=scores,
                total=weighted_total(scores, weights),
                evaluations=participant_evals,
            )
        )

    return aggregates
