"""Tests for the assessment pipeline."""

import math

import pytest

from fitspec.errors import (
    AssessmentError,
    DuplicateCategoryInBatch,
    EmptyResultSet,
    FlagsMismatch,
    InvalidMeasurementValue,
    InvalidMemberProfile,
    UnknownCategory,
)
from fitspec.models.assessment import RawMeasurement
from fitspec.models.categories import ExerciseType, FlexibilityGrade, get_category
from fitspec.models.flags import SquatFlags
from fitspec.scoring.engine import assess, normalize_value, parse_request
from fitspec.scoring.issues import KNEE_RISK_ISSUE


class TestNormalizeValue:
    """Tests for raw value validation."""

    def test_weight_value(self):
        assert normalize_value(get_category(4), 120.5) == 120.5

    def test_whole_float_repetitions(self):
        value = normalize_value(get_category(8), 30.0)
        assert value == 30
        assert isinstance(value, int)

    def test_grade_value(self):
        assert normalize_value(get_category(13), "Very Poor") == FlexibilityGrade.VERY_POOR

    @pytest.mark.parametrize(
        "category_id,value",
        [
            (4, -1),
            (4, "120"),
            (4, True),
            (4, math.nan),
            (4, math.inf),
            (8, 12.5),
            (8, -3),
            (13, "great"),
            (13, 7),
            (8, 10**400),
            (4, -(10**400)),
        ],
    )
    def test_invalid_values(self, category_id, value):
        with pytest.raises(InvalidMeasurementValue) as exc_info:
            normalize_value(get_category(category_id), value)
        assert exc_info.value.category_id == category_id


class TestAssess:
    """Tests for assess."""

    def test_scores_each_measurement(self, male_profile):
        measurements = [RawMeasurement(4, 120), RawMeasurement(8, 30), RawMeasurement(13, "good")]
        assessment = assess(male_profile, measurements)

        assert [r.category_id for r in assessment.results] == [4, 8, 13]
        assert [r.score for r in assessment.results] == [3, 3, 4]
        assert assessment.results[2].raw_value == FlexibilityGrade.GOOD
        assert assessment.summary.average_score == 3.3
        assert assessment.summary.overall_level == "Intermediate"

    def test_results_keep_input_order(self, male_profile):
        measurements = [RawMeasurement(13, 3), RawMeasurement(1, 80), RawMeasurement(2, 10)]
        assessment = assess(male_profile, measurements)
        assert [r.category_id for r in assessment.results] == [13, 1, 2]

    def test_flags_produce_issues(self, knee_profile):
        assessment = assess(
            knee_profile,
            [RawMeasurement(4, 90)],
            {4: {"depth_limited": True}},
        )
        assert assessment.results[0].issues == (
            "Squat depth limited above parallel",
            KNEE_RISK_ISSUE,
        )

    def test_flag_records_accepted(self, male_profile):
        assessment = assess(male_profile, [RawMeasurement(9, 40)], {9: SquatFlags(knee_pain=True)})
        assert assessment.results[0].issues == ("Knee pain during the movement",)

    def test_string_flag_keys(self, male_profile):
        assessment = assess(male_profile, [RawMeasurement(4, 90)], {"4": {"lower_back_strain": True}})
        assert assessment.results[0].issues == ("Lower back strain",)

    def test_flags_for_unmeasured_category_ignored(self, male_profile):
        assessment = assess(male_profile, [RawMeasurement(4, 90)], {7: {"grip_failure": True}})
        assert assessment.results[0].issues == ()

    def test_empty_batch(self, male_profile):
        with pytest.raises(EmptyResultSet):
            assess(male_profile, [])

    def test_unknown_category_rejects_batch(self, male_profile):
        with pytest.raises(UnknownCategory):
            assess(male_profile, [RawMeasurement(4, 90), RawMeasurement(99, 1)])

    def test_duplicate_category(self, male_profile):
        with pytest.raises(DuplicateCategoryInBatch) as exc_info:
            assess(male_profile, [RawMeasurement(4, 90), RawMeasurement(4, 100)])
        assert exc_info.value.category_id == 4

    def test_invalid_value_rejects_batch(self, male_profile):
        with pytest.raises(InvalidMeasurementValue):
            assess(male_profile, [RawMeasurement(4, 90), RawMeasurement(8, -1)])

    def test_skip_invalid(self, male_profile):
        """Test invalid values can be dropped and reported instead."""
        assessment = assess(
            male_profile,
            [RawMeasurement(4, 90), RawMeasurement(8, -1)],
            skip_invalid=True,
        )
        assert [r.category_id for r in assessment.results] == [4]
        assert len(assessment.rejected) == 1
        assert assessment.rejected[0].category_id == 8
        assert assessment.rejected[0].reason == "must not be negative"

    def test_skip_invalid_still_needs_one_result(self, male_profile):
        with pytest.raises(EmptyResultSet):
            assess(male_profile, [RawMeasurement(8, -1)], skip_invalid=True)

    def test_skip_invalid_keeps_structural_errors(self, male_profile):
        with pytest.raises(DuplicateCategoryInBatch):
            assess(male_profile, [RawMeasurement(8, 5), RawMeasurement(8, 6)], skip_invalid=True)

    def test_mismatched_flags(self, male_profile):
        with pytest.raises(FlagsMismatch):
            assess(male_profile, [RawMeasurement(13, "good")], {13: {"depth_limited": True}})

    def test_thresholds_scale_with_profile(self, male_profile, female_profile):
        """Test the same lift scores higher for a member with lower standards."""
        male = assess(male_profile, [RawMeasurement(4, 70)])
        female = assess(female_profile, [RawMeasurement(4, 70)])
        assert male.results[0].score == 2
        assert female.results[0].score == 3

    def test_exercise_types_and_charts(self, male_profile):
        assessment = assess(male_profile, [RawMeasurement(13, "good"), RawMeasurement(4, 120)])
        assert assessment.exercise_types() == [ExerciseType.WEIGHT, ExerciseType.FLEXIBILITY]
        assert set(assessment.charts()) == {"weight", "flexibility"}

    def test_repeated_calls_are_identical(self, knee_profile):
        """Test scoring the same batch twice gives the same outcome."""
        measurements = [
            RawMeasurement(4, 95),
            RawMeasurement(7, 130.5),
            RawMeasurement(10, 22),
            RawMeasurement(2, 6),
            RawMeasurement(14, "normal"),
            RawMeasurement(15, "low"),
        ]
        flags = {"4": {"depth_limited": True, "knee_pain": True}, 10: {"early_fatigue": True}}

        first = assess(knee_profile, measurements, flags)
        second = assess(knee_profile, measurements, flags)

        assert first.results == second.results
        assert first.summary == second.summary
        assert first.to_dict() == second.to_dict()
        assert KNEE_RISK_ISSUE in first.results[0].issues

    def test_to_dict(self, male_profile):
        data = assess(male_profile, [RawMeasurement(13, "low")]).to_dict()
        assert data["results"][0]["raw_value"] == "poor"
        assert data["results"][0]["level"] == "Novice"
        assert data["exercise_types"] == ["flexibility"]
        assert data["rejected"] == []


class TestParseRequest:
    """Tests for parse_request."""

    def test_parse(self, sample_request):
        profile, measurements, flags = parse_request(sample_request)
        assert profile.member_id == "m-001"
        assert measurements[0] == RawMeasurement(4, 120)
        assert flags == {"4": {"depth_limited": True}}

    def test_missing_flags(self, sample_request):
        del sample_request["flags"]
        assert parse_request(sample_request)[2] == {}

    def test_missing_profile(self):
        with pytest.raises(InvalidMemberProfile):
            parse_request({"measurements": [{"category_id": 4, "value": 100}]})

    @pytest.mark.parametrize(
        "data",
        [
            [],
            "measurements",
            {"profile": {"age": 28, "bodyweight": 70, "gender": "male"}, "measurements": {"4": 100}},
            {"profile": {"age": 28, "bodyweight": 70, "gender": "male"}, "flags": ["4"]},
        ],
    )
    def test_malformed_request(self, data):
        with pytest.raises(AssessmentError):
            parse_request(data)
