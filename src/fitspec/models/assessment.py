"""Assessment inputs and outputs."""

from dataclasses import dataclass, field

from ..errors import InvalidMeasurementValue, UnknownCategory
from .categories import ExerciseType, FlexibilityGrade

LEVEL_NAMES: tuple[str, ...] = ("Beginner", "Novice", "Intermediate", "Advanced", "Elite")


def level_name(score: int) -> str:
    """Level name for a 1-5 score."""
    return LEVEL_NAMES[score - 1]


def _plain(value):
    """JSON-friendly form of a raw value."""
    if isinstance(value, FlexibilityGrade):
        return value.value
    return value


@dataclass(frozen=True)
class RawMeasurement:
    """One measured value for one category."""

    category_id: int
    value: float | int | FlexibilityGrade | str

    def to_dict(self) -> dict:
        return {"category_id": self.category_id, "value": _plain(self.value)}

    @classmethod
    def from_dict(cls, data: dict) -> "RawMeasurement":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise InvalidMeasurementValue(None, data, "expected an object with category_id and value")
        if "category_id" not in data:
            raise UnknownCategory(None)
        if data.get("value") is None:
            raise InvalidMeasurementValue(data["category_id"], None, "value is required")
        return cls(category_id=data["category_id"], value=data["value"])


@dataclass(frozen=True)
class LevelThresholds:
    """Minimum raw values for beginner, novice, intermediate, advanced, elite."""

    category_id: int
    unit: str
    values: tuple[float, float, float, float, float]

    @property
    def beginner(self) -> float:
        return self.values[0]

    @property
    def novice(self) -> float:
        return self.values[1]

    @property
    def intermediate(self) -> float:
        return self.values[2]

    @property
    def advanced(self) -> float:
        return self.values[3]

    @property
    def elite(self) -> float:
        return self.values[4]

    def to_dict(self) -> dict:
        return {
            "category_id": self.category_id,
            "unit": self.unit,
            "levels": [
                {"level": name, "score": i + 1, "value": value}
                for i, (name, value) in enumerate(zip(LEVEL_NAMES, self.values))
            ],
        }


@dataclass(frozen=True)
class CategoryResult:
    """Scored outcome for one measured category."""

    category_id: int
    name: str
    raw_value: float | int | FlexibilityGrade
    unit: str
    score: int
    level_name: str
    next_level_name: str | None
    next_level_target: float
    remaining: float
    issues: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "category_id": self.category_id,
            "name": self.name,
            "raw_value": _plain(self.raw_value),
            "unit": self.unit,
            "score": self.score,
            "level": self.level_name,
            "next_level": self.next_level_name,
            "next_level_target": self.next_level_target,
            "remaining": self.remaining,
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class OverallSummary:
    """Aggregate of all category results in one assessment."""

    average_score: float  # one decimal place
    overall_level: str
    description: str
    result_count: int

    def to_dict(self) -> dict:
        return {
            "average_score": self.average_score,
            "overall_level": self.overall_level,
            "description": self.description,
            "result_count": self.result_count,
        }


@dataclass(frozen=True)
class RepresentativeExercise:
    """The exercise shown for a chart region."""

    category_id: int | None
    exercise_name: str
    raw_value: float | int | FlexibilityGrade | None
    unit: str

    @property
    def is_empty(self) -> bool:
        return self.category_id is None

    def to_dict(self) -> dict:
        return {
            "category_id": self.category_id,
            "exercise_name": self.exercise_name,
            "raw_value": _plain(self.raw_value),
            "unit": self.unit,
        }


# Marker for regions with nothing measured
EMPTY_REPRESENTATIVE = RepresentativeExercise(
    category_id=None, exercise_name="", raw_value=None, unit=""
)


@dataclass(frozen=True)
class ChartProjection:
    """Radar-chart data for one exercise group."""

    exercise_type: ExerciseType
    labels: tuple[str, ...]
    scores: tuple[float, ...]
    representatives: dict[str, RepresentativeExercise] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "exercise_type": self.exercise_type.value,
            "labels": list(self.labels),
            "scores": list(self.scores),
            "representative_exercise": {
                region: rep.to_dict() for region, rep in self.representatives.items()
            },
        }
