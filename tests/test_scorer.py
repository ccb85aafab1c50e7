"""Tests for score assignment."""

import pytest

from fitspec.models.assessment import LevelThresholds
from fitspec.models.categories import FlexibilityGrade
from fitspec.scoring.scorer import assign, assign_ordinal

SQUAT = LevelThresholds(4, "kg", (52.5, 70.0, 105.0, 140.0, 175.0))
PUSH_UP = LevelThresholds(8, "reps", (5, 15, 25, 35, 45))


class TestAssign:
    """Tests for numeric scoring."""

    def test_between_levels(self):
        result = assign(120, SQUAT)
        assert result.score == 3
        assert result.level_name == "Intermediate"
        assert result.next_level_name == "Advanced"
        assert result.next_level_target == 140.0
        assert result.remaining == 20.0

    def test_exactly_on_threshold(self):
        """Test reaching a threshold counts as that level."""
        assert assign(105, SQUAT).score == 3
        assert assign(104.9, SQUAT).score == 2

    def test_below_beginner_scores_one(self):
        result = assign(40, SQUAT)
        assert result.score == 1
        assert result.level_name == "Beginner"
        assert result.next_level_name == "Novice"
        assert result.next_level_target == 70.0
        assert result.remaining == 30.0

    def test_zero_value(self):
        assert assign(0, PUSH_UP).score == 1

    def test_elite(self):
        """Test elite has no next level and nothing remaining."""
        result = assign(200, SQUAT)
        assert result.score == 5
        assert result.level_name == "Elite"
        assert result.next_level_name is None
        assert result.next_level_target == 175.0
        assert result.remaining == 0

    def test_kg_remaining_is_rounded(self):
        """Test kg deltas stay on the one-decimal grid."""
        assert assign(104.7, SQUAT).remaining == 0.3

    def test_reps_remaining(self):
        result = assign(30, PUSH_UP)
        assert result.score == 3
        assert result.next_level_target == 35
        assert result.remaining == 5

    @pytest.mark.parametrize("value", [0, 5, 14, 15, 25, 44, 45, 100])
    def test_score_in_range(self, value):
        assert 1 <= assign(value, PUSH_UP).score <= 5


class TestAssignOrdinal:
    """Tests for flexibility grade scoring."""

    @pytest.mark.parametrize(
        "grade,score,level",
        [
            (FlexibilityGrade.VERY_POOR, 1, "Beginner"),
            (FlexibilityGrade.POOR, 2, "Novice"),
            (FlexibilityGrade.NORMAL, 3, "Intermediate"),
            (FlexibilityGrade.GOOD, 4, "Advanced"),
            (FlexibilityGrade.EXCELLENT, 5, "Elite"),
        ],
    )
    def test_grade_rank_is_score(self, grade, score, level):
        result = assign_ordinal(grade)
        assert result.score == score
        assert result.level_name == level

    def test_next_level(self):
        result = assign_ordinal(FlexibilityGrade.GOOD)
        assert result.next_level_name == "Elite"
        assert result.next_level_target == 5
        assert result.remaining == 1

    def test_excellent_is_top(self):
        result = assign_ordinal(FlexibilityGrade.EXCELLENT)
        assert result.next_level_name is None
        assert result.next_level_target == 5
        assert result.remaining == 0

    def test_accepts_alias(self):
        assert assign_ordinal("low").score == 2
