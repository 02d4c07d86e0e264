"""In-memory data snapshots loaded from YAML or JSON files."""

from __future__ import annotations

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pydantic
import yaml

from hackathon_scoring.core.config import DEFAULT_CRITERIA, CriterionConfig
from hackathon_scoring.core.errors import SnapshotError
from hackathon_scoring.models import Criterion, Evaluation, Judge, Participant


@dataclass
class DataSnapshot:
    """Immutable-by-convention copy of participants, evaluations and criteria.

    Satisfies the LeaderboardSource protocol, so a snapshot file can stand in
    for the database when computing a leaderboard.
    """

    participants: list[Participant] = field(default_factory=list)
    evaluations: list[Evaluation] = field(default_factory=list)
    criteria: list[Criterion] = field(default_factory=list)
    judges: list[Judge] = field(default_factory=list)
    source: str = "<snapshot>"

    async def list_participants(self) -> list[Participant]:
        return list(self.participants)

    async def list_evaluations(self) -> list[Evaluation]:
        return list(self.evaluations)

    async def list_criteria(self) -> list[Criterion]:
        return list(self.criteria)

    async def list_judges(self) -> list[Judge]:
        return list(self.judges)


def _criteria_from_config(criteria: Iterable[CriterionConfig]) -> list[Criterion]:
    return [
        Criterion(name=c.name, description=c.description, weight=c.weight) for c in criteria
    ]


def parse_snapshot(
    data: dict[str, Any],
    default_criteria: Iterable[CriterionConfig] = DEFAULT_CRITERIA,
    source: str = "<snapshot>",
) -> DataSnapshot:
    """Build a DataSnapshot from a decoded document.

    Args:
        data: Mapping with participants, evaluations, and optional criteria/judges.
        default_criteria: Criteria to use when the document has none.
        source: Label used in error messages.

    Returns:
        Parsed snapshot.

    Raises:
        SnapshotError: If a record is malformed, a participant has no id, or a
            judge evaluated the same participant twice.
    """
    if not isinstance(data, dict):
        raise SnapshotError(source, "top level must be a mapping")

    try:
        participants = [Participant.model_validate(p) for p in data.get("participants") or []]
        evaluations = [Evaluation.model_validate(e) for e in data.get("evaluations") or []]
        judges = [Judge.model_validate(j) for j in data.get("judges") or []]
        raw_criteria = data.get("criteria")
        if raw_criteria:
            criteria = [Criterion.model_validate(c) for c in raw_criteria]
        else:
            criteria = _criteria_from_config(default_criteria)
    except pydantic.ValidationError as e:
        raise SnapshotError(source, str(e)) from e

    for participant in participants:
        if participant.id is None:
            raise SnapshotError(
                source, f"participant {participant.participant_code!r} has no id"
            )

    seen_pairs: set[tuple[int, int]] = set()
    for evaluation in evaluations:
        pair = (evaluation.participant_id, evaluation.judge_id)
        if pair in seen_pairs:
            raise SnapshotError(
                source,
                f"duplicate evaluation for participant {pair[0]} / judge {pair[1]}",
            )
        seen_pairs.add(pair)

    return DataSnapshot(
        participants=participants,
        evaluations=evaluations,
        criteria=criteria,
        judges=judges,
        source=source,
    )


def load_snapshot_file(
    path: str | Path,
    default_criteria: Iterable[CriterionConfig] = DEFAULT_CRITERIA,
) -> DataSnapshot:
    """Load a snapshot from a .json, .yaml or .yml file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SnapshotError: If the content is invalid.
    """
    snapshot_path = Path(path)
    if not snapshot_path.exists():
        msg = f"Snapshot file not found: {snapshot_path}"
        raise FileNotFoundError(msg)

    text = snapshot_path.read_text(encoding="utf-8")
    try:
        if snapshot_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SnapshotError(str(snapshot_path), str(e)) from e

    return parse_snapshot(data or {}, default_criteria, source=str(snapshot_path))
