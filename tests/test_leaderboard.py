"""Tests for the leaderboard computation engine."""

import pytest
from factories import make_criteria, make_evaluation, make_judge, make_participant

from hackathon_scoring.leaderboard import (
    aggregate,
    average_scores,
    compute_leaderboard,
    rank_aggregates,
    resolve_weights,
    weighted_total,
)
from hackathon_scoring.leaderboard.weights import DEFAULT_WEIGHTS


class TestResolveWeights:
    """Tests for criterion weight lookup."""

    def test_default_criteria(self):
        """Test stored defaults map onto scoring fields."""
        weights = resolve_weights(make_criteria())
        assert weights == DEFAULT_WEIGHTS

    def test_missing_criterion_uses_fallback(self):
        """Test a missing name falls back to its hardcoded weight."""
        weights = resolve_weights(make_criteria({"Functionality": 50.0}, omit=("Impact",)))
        assert weights["impact"] == 15.0
        assert weights["functionality"] == 50.0

    def test_empty_criteria_uses_all_fallbacks(self):
        """Test an empty weight table never blocks computation."""
        assert resolve_weights([]) == DEFAULT_WEIGHTS

    def test_zero_weight_is_kept(self):
        """Test an explicit zero weight is honoured, not replaced by the default."""
        weights = resolve_weights(make_criteria({"Presentation": 0.0}))
        assert weights["presentation"] == 0.0

    def test_unrelated_criteria_ignored(self):
        """Test criteria with other names don't affect the five fields."""
        criteria = make_criteria()
        criteria[0].name = "Originality"
        weights = resolve_weights(criteria)
        assert weights["project_design"] == 25.0


class TestAverageScores:
    """Tests for per-criterion averaging."""

    def test_two_judges_average(self):
        """Test 80 and 90 average to exactly 85.0."""
        scores = average_scores(
            [
                make_evaluation(1, 1, (80, 70, 60, 50, 40)),
                make_evaluation(1, 2, (90, 70, 60, 50, 40)),
            ]
        )
        assert scores.project_design == 85.0
        assert scores.functionality == 70.0

    def test_average_rounded_to_one_decimal(self):
        """Test thirds are rounded, not truncated."""
        scores = average_scores(
            [
                make_evaluation(1, 1, (80, 80, 80, 80, 80)),
                make_evaluation(1, 2, (81, 80, 80, 80, 80)),
                make_evaluation(1, 3, (81, 81, 80, 80, 80)),
            ]
        )
        assert scores.project_design == 80.7
        assert scores.functionality == 80.3

    def test_half_rounds_up(self):
        """Test an average ending in .x5 rounds away from zero."""
        evaluations = [make_evaluation(1, j, (80, 80, 80, 80, 80)) for j in range(1, 4)]
        evaluations.append(make_evaluation(1, 4, (81, 80, 80, 80, 80)))
        assert average_scores(evaluations).project_design == 80.3

    def test_empty_raises(self):
        """Test averaging nothing is a programming error."""
        with pytest.raises(ValueError, match="empty"):
            average_scores([])


class TestWeightedTotal:
    """Tests for composite score calculation."""

    def test_single_evaluation_passthrough(self):
        """Test 80/70/60/50/40 under default weights totals 63.5."""
        scores = average_scores([make_evaluation(1, 1, (80, 70, 60, 50, 40))])
        assert weighted_total(scores, DEFAULT_WEIGHTS) == 63.5

    def test_no_renormalization(self):
        """Test weights summing to 50 halve the total instead of being rescaled."""
        weights = {name: 10.0 for name in DEFAULT_WEIGHTS}
        scores = average_scores([make_evaluation(1, 1, (80, 80, 80, 80, 80))])
        assert weighted_total(scores, weights) == 40.0

    def test_rounds_averages_before_weighting(self):
        """Test the total is computed from rounded averages.

        Raw averages would give 80.25 * 0.9 + 80 * 0.1 = 80.225 -> 80.2.
        Rounded first: 80.3 * 0.9 + 80 * 0.1 = 80.27 -> 80.3.
        """
        evaluations = [make_evaluation(1, j, (80, 80, 80, 80, 80)) for j in range(1, 4)]
        evaluations.append(make_evaluation(1, 4, (81, 80, 80, 80, 80)))
        criteria = make_criteria(
            {
                "Project Design": 90.0,
                "Functionality": 10.0,
                "Presentation": 0.0,
                "Web Design": 0.0,
                "Impact": 0.0,
            }
        )

        [entry] = compute_leaderboard([make_participant(1)], evaluations, criteria)

        assert entry.project_design == 80.3
        assert entry.total == 80.3


class TestRankAggregates:
    """Tests for ranking."""

    def test_empty(self):
        """Test empty input yields an empty list."""
        assert rank_aggregates([]) == []

    def test_ranks_follow_total_descending(self):
        """Test ranks are 1..N with rank 1 on the highest total."""
        participants = [make_participant(i) for i in range(1, 5)]
        evaluations = [
            make_evaluation(1, 1, (50, 50, 50, 50, 50)),
            make_evaluation(2, 1, (90, 90, 90, 90, 90)),
            make_evaluation(3, 1, (70, 70, 70, 70, 70)),
            make_evaluation(4, 1, (60, 60, 60, 60, 60)),
        ]
        ranked = rank_aggregates(aggregate(participants, evaluations, DEFAULT_WEIGHTS))

        assert [rank for rank, _ in ranked] == [1, 2, 3, 4]
        assert [agg.participant.id for _, agg in ranked] == [2, 3, 4, 1]


class TestComputeLeaderboard:
    """Tests for the full leaderboard pipeline."""

    def test_empty_inputs(self):
        """Test empty collections produce an empty leaderboard."""
        assert compute_leaderboard([], [], []) == []

    def test_unevaluated_participant_omitted(self):
        """Test participants with zero evaluations get no entry."""
        participants = [make_participant(i) for i in range(1, 6)]
        evaluations = [make_evaluation(2, 1, (80, 80, 80, 80, 80))]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert [e.participant_id for e in entries] == [2]

    def test_unknown_participant_evaluation_ignored(self):
        """Test an evaluation for a missing participant contributes nothing."""
        participants = [make_participant(1)]
        evaluations = [
            make_evaluation(1, 1, (80, 80, 80, 80, 80)),
            make_evaluation(99, 1, (10, 10, 10, 10, 10)),
        ]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert len(entries) == 1
        assert entries[0].total == 80.0

    def test_single_evaluation_total(self):
        """Test a single evaluation passes straight through."""
        entries = compute_leaderboard(
            [make_participant(1)],
            [make_evaluation(1, 1, (80, 70, 60, 50, 40))],
            make_criteria(),
        )
        entry = entries[0]
        assert entry.total == 63.5
        assert entry.rank == 1
        assert (
            entry.project_design,
            entry.functionality,
            entry.presentation,
            entry.web_design,
            entry.impact,
        ) == (80.0, 70.0, 60.0, 50.0, 40.0)

    def test_distinct_totals_dense_ranks(self):
        """Test N participants with distinct totals get ranks 1..N."""
        participants = [make_participant(i) for i in range(1, 7)]
        evaluations = [
            make_evaluation(i, 1, (10 * i, 10 * i, 10 * i, 10 * i, 10 * i)) for i in range(1, 7)
        ]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert [e.rank for e in entries] == [1, 2, 3, 4, 5, 6]
        assert entries[0].participant_id == 6
        assert entries[0].total == max(e.total for e in entries)

    def test_ties_get_consecutive_ranks(self):
        """Test equal totals are not collapsed into a shared rank."""
        participants = [make_participant(i) for i in range(1, 5)]
        evaluations = [
            make_evaluation(1, 1, (95, 95, 95, 95, 95)),
            make_evaluation(2, 1, (90, 90, 90, 90, 90)),
            make_evaluation(3, 1, (70, 70, 70, 70, 70)),
            make_evaluation(4, 1, (70, 70, 70, 70, 70)),
        ]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert entries[2].total == entries[3].total
        assert (entries[2].rank, entries[3].rank) == (3, 4)

    def test_ties_ordered_by_participant_id(self):
        """Test tie order doesn't depend on the order participants are supplied."""
        participants = [make_participant(i) for i in (4, 3, 2, 1)]
        evaluations = [make_evaluation(i, 1, (70, 70, 70, 70, 70)) for i in (2, 4, 1, 3)]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert [e.participant_id for e in entries] == [1, 2, 3, 4]
        assert [e.rank for e in entries] == [1, 2, 3, 4]

    def test_missing_impact_weight_falls_back(self):
        """Test omitting Impact uses 15% instead of 0% or failing."""
        entries = compute_leaderboard(
            [make_participant(1)],
            [make_evaluation(1, 1, (80, 80, 80, 80, 40))],
            make_criteria(omit=("Impact",)),
        )
        # 80 * 0.85 + 40 * 0.15; treating impact as 0% would give 68.0
        assert entries[0].total == 74.0

    def test_idempotent(self):
        """Test repeated calls on unchanged inputs give identical output."""
        participants = [make_participant(i) for i in range(1, 4)]
        evaluations = [
            make_evaluation(1, 1, (70, 70, 70, 70, 70), "Good"),
            make_evaluation(2, 1, (70, 70, 70, 70, 70)),
            make_evaluation(3, 2, (81, 77, 64, 59, 92), "Great pitch"),
            make_evaluation(3, 1, (66, 71, 80, 90, 55)),
        ]
        criteria = make_criteria()

        first = compute_leaderboard(participants, evaluations, criteria)
        second = compute_leaderboard(participants, evaluations, criteria)

        assert [e.model_dump_json() for e in first] == [e.model_dump_json() for e in second]

    def test_inputs_not_mutated(self):
        """Test the computation leaves its inputs untouched."""
        participants = [make_participant(i) for i in (2, 1)]
        evaluations = [make_evaluation(1, 1, (70, 70, 70, 70, 70))]
        criteria = make_criteria()

        compute_leaderboard(participants, evaluations, criteria)

        assert [p.id for p in participants] == [2, 1]
        assert evaluations[0].project_design == 70
        assert len(criteria) == 5

    def test_end_to_end_two_judges(self):
        """Test the three-participant, two-judge scenario."""
        participants = [
            make_participant(1, code="X"),
            make_participant(2, code="Y"),
            make_participant(3, code="Z"),
        ]
        evaluations = [
            make_evaluation(1, 1, (90, 85, 80, 75, 70)),
            make_evaluation(1, 2, (70, 75, 80, 85, 90)),
            make_evaluation(2, 1, (100, 100, 100, 100, 100)),
        ]

        entries = compute_leaderboard(participants, evaluations, make_criteria())

        assert [e.participant_code for e in entries] == ["Y", "X"]
        y, x = entries
        assert y.total == 100.0
        assert y.rank == 1
        assert x.rank == 2
        assert x.total == 80.0
        assert (x.project_design, x.functionality, x.presentation, x.web_design, x.impact) == (
            80.0,
            80.0,
            80.0,
            80.0,
            80.0,
        )


class TestComments:
    """Tests for judge comments on entries."""

    def test_only_non_empty_comments(self):
        """Test blank and missing comments are dropped."""
        evaluations = [
            make_evaluation(1, 1, (80, 80, 80, 80, 80), "Strong backend"),
            make_evaluation(1, 2, (80, 80, 80, 80, 80), ""),
            make_evaluation(1, 3, (80, 80, 80, 80, 80), "   "),
            make_evaluation(1, 4, (80, 80, 80, 80, 80), None),
        ]

        [entry] = compute_leaderboard([make_participant(1)], evaluations, make_criteria())

        assert len(entry.comments) == 1
        assert entry.comments[0].judge_id == 1
        assert entry.comments[0].text == "Strong backend"
        assert entry.comments[0].judge_name is None

    def test_judge_names_attached(self):
        """Test judges supplied to the engine attribute comments by name."""
        evaluations = [
            make_evaluation(1, 1, (80, 80, 80, 80, 80), "Nice UI"),
            make_evaluation(1, 2, (60, 60, 60, 60, 60), "Needs tests"),
        ]
        judges = [make_judge(1, "Ada"), make_judge(2, "Linus")]

        [entry] = compute_leaderboard(
            [make_participant(1)], evaluations, make_criteria(), judges
        )

        assert [(c.judge_name, c.text) for c in entry.comments] == [
            ("Ada", "Nice UI"),
            ("Linus", "Needs tests"),
        ]

    def test_no_comments_empty_list(self):
        """Test entries without comments carry an empty list."""
        [entry] = compute_leaderboard(
            [make_participant(1)],
            [make_evaluation(1, 1, (80, 80, 80, 80, 80))],
            make_criteria(),
        )
        assert entry.comments == []
