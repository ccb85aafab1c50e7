"""Data models for fitspec."""

from .assessment import (
    EMPTY_REPRESENTATIVE,
    LEVEL_NAMES,
    CategoryResult,
    ChartProjection,
    LevelThresholds,
    OverallSummary,
    RawMeasurement,
    RepresentativeExercise,
)
from .categories import (
    BodyRegion,
    ExerciseCategory,
    ExerciseType,
    FlexibilityGrade,
    UnitKind,
    categories_for_type,
    get_category,
    list_categories,
)
from .member import Gender, MemberProfile

__all__ = [
    "BodyRegion",
    "CategoryResult",
    "ChartProjection",
    "EMPTY_REPRESENTATIVE",
    "ExerciseCategory",
    "ExerciseType",
    "FlexibilityGrade",
    "Gender",
    "LEVEL_NAMES",
    "LevelThresholds",
    "MemberProfile",
    "OverallSummary",
    "RawMeasurement",
    "RepresentativeExercise",
    "UnitKind",
    "categories_for_type",
    "get_category",
    "list_categories",
]
