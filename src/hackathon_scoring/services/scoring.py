"""Write-path service: participants, judges, evaluations, weights and settings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from hackathon_scoring.core.config import ScoringConfig, SettingsConfig
from hackathon_scoring.core.errors import (
    DuplicateError,
    EditNotAllowedError,
    MissingCommentsError,
    NotFoundError,
    ScoreRangeError,
    ScoringError,
    UnknownCriterionError,
    WeightSumError,
)
from hackathon_scoring.leaderboard import CRITERION_FIELDS
from hackathon_scoring.models import (
    AppSettings,
    Criterion,
    Evaluation,
    EvaluationScores,
    Judge,
    Participant,
)
from hackathon_scoring.services.storage import ScoringStore

logger = structlog.get_logger()

SETTINGS_FIELDS = frozenset(SettingsConfig.model_fields)


class ScoringService:
    """Validates administrator and judge actions before they reach storage.

    The leaderboard engine trusts whatever is stored; every rule about what may
    be stored (score range, one evaluation per judge, weights summing to 100)
    lives here.
    """

    def __init__(self, store: ScoringStore, config: ScoringConfig) -> None:
        """Initialize scoring service."""
        self.store = store
        self.config = config

    # ==================== Participants & judges ====================

    async def register_participant(self, code: str, name: str, project: str) -> Participant:
        """Create a participant with a unique external code."""
        code = code.strip()
        if await self.store.participants.get_by_code(code):
            raise DuplicateError("Participant", code)

        participant = await self.store.participants.create(
            Participant(participant_code=code, name=name, project=project)
        )
        logger.info("participant_registered", participant_id=participant.id, code=code)
        return participant

    async def remove_participant(self, participant_id: int) -> None:
        """Delete a participant and its evaluations."""
        if not await self.store.participants.delete(participant_id):
            raise NotFoundError("Participant", participant_id)

    async def register_judge(self, username: str, name: str) -> Judge:
        username = username.strip()
        if await self.store.judges.get_by_username(username):
            raise DuplicateError("Judge", username)

        judge = await self.store.judges.create(Judge(username=username, name=name))
        logger.info("judge_registered", judge_id=judge.id, username=username)
        return judge

    async def remove_judge(self, judge_id: int) -> None:
        if not await self.store.judges.delete(judge_id):
            raise NotFoundError("Judge", judge_id)

    # ==================== Evaluations ====================

    def _validate_scores(self, scores: EvaluationScores) -> None:
        for name in CRITERION_FIELDS:
            value = getattr(scores, name)
            if not self.config.min_score <= value <= self.config.max_score:
                raise ScoreRangeError(name, value, self.config.min_score, self.config.max_score)

    async def submit_evaluation(
        self,
        judge_id: int,
        participant_id: int,
        scores: EvaluationScores,
        comments: str | None = None,
    ) -> tuple[Evaluation, bool]:
        """Create or update a judge's evaluation of a participant.

        Args:
            judge_id: Submitting judge.
            participant_id: Evaluated participant.
            scores: The five criterion scores.
            comments: Optional free-text feedback.

        Returns:
            Tuple of (evaluation, created). created is False when an existing
            evaluation for the same pair was updated in place.

        Raises:
            NotFoundError: If the participant or judge doesn't exist.
            ScoreRangeError: If a score is outside the configured scale.
            MissingCommentsError: If comments are required and missing.
            EditNotAllowedError: If the pair was already evaluated and editing is off.
        """
        if await self.store.participants.get(participant_id) is None:
            raise NotFoundError("Participant", participant_id)
        if await self.store.judges.get(judge_id) is None:
            raise NotFoundError("Judge", judge_id)

        self._validate_scores(scores)

        settings = await self.store.settings.get()
        comments = (comments or "").strip() or None
        if settings.require_comments and comments is None:
            raise MissingCommentsError()

        existing = await self.store.evaluations.get_for_pair(participant_id, judge_id)
        if existing is not None:
            if not settings.allow_edit_evaluations:
                raise EditNotAllowedError()
            changes = {**scores.model_dump(), "comments": comments}
            updated = await self.store.evaluations.update(existing.id, changes)
            logger.info(
                "evaluation_updated",
                evaluation_id=existing.id,
                participant_id=participant_id,
                judge_id=judge_id,
            )
            return updated, False

        evaluation = await self.store.evaluations.create(
            Evaluation(
                participant_id=participant_id,
                judge_id=judge_id,
                comments=comments,
                **scores.model_dump(),
            )
        )
        logger.info(
            "evaluation_submitted",
            evaluation_id=evaluation.id,
            participant_id=participant_id,
            judge_id=judge_id,
        )
        return evaluation, True

    # ==================== Criteria ====================

    async def update_criteria_weights(self, weights: Mapping[str, float]) -> list[Criterion]:
        """Reweight criteria by name.

        Criteria not named keep their current weight. The resulting weights
        must sum to 100 within the configured tolerance.

        Raises:
            UnknownCriterionError: If a name doesn't match a stored criterion.
            WeightSumError: If the weights don't add up to 100.
            ScoringError: If a weight is outside [0, 100].
        """
        current = await self.store.criteria.list_all()
        by_name = {c.name: c for c in current}

        for name, weight in weights.items():
            if name not in by_name:
                raise UnknownCriterionError(name)
            if not 0.0 <= weight <= 100.0:
                raise ScoringError(f"Weight for '{name}' must be between 0 and 100")

        total = sum(weights.get(c.name, c.weight) for c in current)
        if abs(total - 100.0) > self.config.weight_tolerance:
            raise WeightSumError(total)

        updated = await self.store.criteria.update_weights(
            {by_name[name].id: float(weight) for name, weight in weights.items()}
        )
        logger.info("criteria_reweighted", weights={c.name: c.weight for c in updated})
        return updated

    # ==================== Settings ====================

    async def update_settings(self, **changes: Any) -> AppSettings:
        """Update one or more settings switches.

        Values are coerced the way the config file is, so "false" and "no" turn
        a switch off.

        Raises:
            ValueError: On an unknown name or a value that isn't a boolean.
        """
        unknown = set(changes) - SETTINGS_FIELDS
        if unknown:
            msg = f"Unknown settings: {', '.join(sorted(unknown))}"
            raise ValueError(msg)

        validated = SettingsConfig.model_validate(changes)
        values = {name: getattr(validated, name) for name in changes}
        settings = await self.store.settings.update(values)
        logger.info("settings_updated", **values)
        return settings
