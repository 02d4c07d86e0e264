"""Tests for write-path validation in ScoringService."""

import pydantic
import pytest

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
from hackathon_scoring.models import EvaluationScores
from hackathon_scoring.services.scoring import ScoringService


def _scores(pd=80, fn=70, pr=60, wd=50, im=40) -> EvaluationScores:
    return EvaluationScores(
        project_design=pd, functionality=fn, presentation=pr, web_design=wd, impact=im
    )


@pytest.fixture
def service(store, config) -> ScoringService:
    return ScoringService(store, config)


@pytest.fixture
async def team(service):
    return await service.register_participant("ARDC-001", "Team One", "Water Tracker")


@pytest.fixture
async def judge(service):
    return await service.register_judge("ada", "Ada Lovelace")


class TestParticipantsAndJudges:
    """Tests for registration and removal."""

    async def test_register_participant(self, service, store):
        """Test a participant is stored with its code."""
        participant = await service.register_participant(" ARDC-002 ", "Team", "App")
        assert participant.id is not None
        assert participant.participant_code == "ARDC-002"
        assert len(await store.list_participants()) == 1

    async def test_duplicate_code_rejected(self, service, team):
        """Test participant codes are unique."""
        with pytest.raises(DuplicateError, match="ARDC-001"):
            await service.register_participant("ARDC-001", "Other", "Other App")

    async def test_remove_unknown_participant(self, service):
        """Test removing a missing participant raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await service.remove_participant(123)

    async def test_remove_participant_drops_from_leaderboard(self, service, store, team, judge):
        """Test a removed participant and its evaluations disappear."""
        await service.submit_evaluation(judge.id, team.id, _scores(), "ok")
        await service.remove_participant(team.id)

        assert await store.get_leaderboard() == []
        assert await store.list_evaluations() == []

    async def test_duplicate_judge_rejected(self, service, judge):
        """Test judge usernames are unique."""
        with pytest.raises(DuplicateError):
            await service.register_judge("ada", "Another Ada")

    async def test_remove_judge(self, service, store, judge):
        """Test judges can be removed and unknown ids rejected."""
        await service.remove_judge(judge.id)
        assert await store.list_judges() == []
        with pytest.raises(NotFoundError):
            await service.remove_judge(judge.id)


class TestSubmitEvaluation:
    """Tests for evaluation submission rules."""

    async def test_create(self, service, team, judge):
        """Test a first submission creates an evaluation."""
        evaluation, created = await service.submit_evaluation(
            judge.id, team.id, _scores(), "Clean code"
        )
        assert created is True
        assert evaluation.id is not None
        assert evaluation.comments == "Clean code"

    async def test_resubmission_updates_in_place(self, service, store, team, judge):
        """Test a second submission by the same judge updates the same row."""
        first, _ = await service.submit_evaluation(judge.id, team.id, _scores(), "v1")
        second, created = await service.submit_evaluation(
            judge.id, team.id, _scores(pd=95), "v2"
        )

        assert created is False
        assert second.id == first.id
        assert second.project_design == 95
        assert second.comments == "v2"
        assert len(await store.list_evaluations()) == 1

    async def test_resubmission_blocked_when_editing_disabled(self, service, team, judge):
        """Test resubmission fails when allow_edit_evaluations is off."""
        await service.submit_evaluation(judge.id, team.id, _scores(), "v1")
        await service.update_settings(allow_edit_evaluations=False)

        with pytest.raises(EditNotAllowedError):
            await service.submit_evaluation(judge.id, team.id, _scores(pd=95), "v2")

    async def test_two_judges_two_rows(self, service, store, team, judge):
        """Test different judges each get their own evaluation."""
        other = await service.register_judge("linus", "Linus")
        await service.submit_evaluation(judge.id, team.id, _scores(pd=80), "a")
        await service.submit_evaluation(other.id, team.id, _scores(pd=90), "b")

        assert len(await store.list_evaluations()) == 2
        [entry] = await store.get_leaderboard()
        assert entry.project_design == 85.0

    async def test_unknown_participant(self, service, judge):
        """Test evaluations for missing participants are rejected."""
        with pytest.raises(NotFoundError, match="Participant"):
            await service.submit_evaluation(judge.id, 999, _scores(), "x")

    async def test_unknown_judge(self, service, team):
        """Test evaluations from missing judges are rejected."""
        with pytest.raises(NotFoundError, match="Judge"):
            await service.submit_evaluation(999, team.id, _scores(), "x")

    @pytest.mark.parametrize("bad", [0, 100.5, -5])
    async def test_score_out_of_range(self, service, team, judge, bad):
        """Test scores outside 1-100 are rejected."""
        with pytest.raises(ScoreRangeError, match="web_design"):
            await service.submit_evaluation(judge.id, team.id, _scores(wd=bad), "x")

    async def test_boundary_scores_accepted(self, service, team, judge):
        """Test 1 and 100 are valid scores."""
        _, created = await service.submit_evaluation(
            judge.id, team.id, _scores(pd=1, fn=100), "edges"
        )
        assert created is True

    async def test_comments_required(self, service, team, judge):
        """Test blank comments are rejected when required."""
        with pytest.raises(MissingCommentsError):
            await service.submit_evaluation(judge.id, team.id, _scores(), "   ")

    async def test_comments_optional(self, service, team, judge):
        """Test comments can be omitted once the requirement is switched off."""
        await service.update_settings(require_comments=False)
        evaluation, _ = await service.submit_evaluation(judge.id, team.id, _scores())
        assert evaluation.comments is None


class TestCriteriaWeights:
    """Tests for reweighting criteria."""

    async def test_valid_update(self, service, store):
        """Test weights are updated when they still sum to 100."""
        updated = await service.update_criteria_weights(
            {"Project Design": 20.0, "Functionality": 35.0}
        )
        weights = {c.name: c.weight for c in updated}
        assert weights["Project Design"] == 20.0
        assert weights["Functionality"] == 35.0
        assert weights["Impact"] == 15.0

    async def test_sum_not_100_rejected(self, service, store):
        """Test updates leaving the total off 100 are rejected and not stored."""
        with pytest.raises(WeightSumError):
            await service.update_criteria_weights({"Impact": 20.0})

        weights = {c.name: c.weight for c in await store.list_criteria()}
        assert weights["Impact"] == 15.0

    async def test_within_tolerance_accepted(self, service):
        """Test small floating point drift is tolerated."""
        await service.update_criteria_weights({"Project Design": 25.005})

    async def test_unknown_criterion(self, service):
        """Test unknown criterion names are rejected."""
        with pytest.raises(UnknownCriterionError):
            await service.update_criteria_weights({"Originality": 10.0})

    async def test_negative_weight(self, service):
        """Test weights outside 0-100 are rejected."""
        with pytest.raises(ScoringError, match="between 0 and 100"):
            await service.update_criteria_weights({"Impact": -5.0, "Functionality": 50.0})


class TestSettings:
    """Tests for settings updates."""

    async def test_update(self, service, store):
        """Test settings switches persist."""
        await service.update_settings(show_scores_to_participants=True, auto_logout=True)
        settings = await store.settings.get()
        assert settings.show_scores_to_participants is True
        assert settings.auto_logout is True
        assert settings.allow_edit_evaluations is True

    async def test_unknown_setting(self, service):
        """Test unknown setting names are rejected."""
        with pytest.raises(ValueError, match="Unknown settings"):
            await service.update_settings(dark_mode=True)

    async def test_string_values_coerced(self, service, store):
        """Test textual booleans are parsed rather than treated as truthy."""
        await service.update_settings(require_comments="false", auto_logout="yes")
        settings = await store.settings.get()
        assert settings.require_comments is False
        assert settings.auto_logout is True

    async def test_non_boolean_rejected(self, service, store):
        """Test values that aren't booleans are rejected and nothing is stored."""
        with pytest.raises(pydantic.ValidationError):
            await service.update_settings(require_comments="sometimes")
        settings = await store.settings.get()
        assert settings.require_comments is True
