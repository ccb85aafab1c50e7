"""Exercise category registry."""

from dataclasses import dataclass
from enum import Enum

from ..errors import UnknownCategory


class UnitKind(str, Enum):
    """How a category's raw value is measured."""

    WEIGHT_KG = "weight-kg"  # single-rep-max-equivalent load
    REPETITIONS = "repetitions"
    ORDINAL_SCALE = "ordinal-scale"  # five graded ratings


class BodyRegion(str, Enum):
    """Coarse body regions used for chart grouping."""

    CHEST = "chest"
    BACK = "back"
    SHOULDER = "shoulder"
    LEGS = "legs"
    CORE = "core"
    FULL_BODY = "full-body"


class ExerciseType(str, Enum):
    """Exercise groups a member can be assessed on."""

    WEIGHT = "weight"
    BODYWEIGHT = "bodyweight"
    FLEXIBILITY = "flexibility"


class FlexibilityGrade(str, Enum):
    """Ordinal grades for flexibility and mobility tests."""

    VERY_POOR = "very_poor"
    POOR = "poor"
    NORMAL = "normal"
    GOOD = "good"
    EXCELLENT = "excellent"

    @property
    def rank(self) -> int:
        """1-based position, very_poor=1 ... excellent=5."""
        return list(FlexibilityGrade).index(self) + 1

    @classmethod
    def from_rank(cls, rank: int) -> "FlexibilityGrade":
        return list(cls)[rank - 1]

    @classmethod
    def parse(cls, value) -> "FlexibilityGrade":
        """Parse a grade from an enum member, a name/value string or a rank.

        Raises ValueError for anything that is not one of the five grades.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Not a flexibility grade: {value!r}")
        if isinstance(value, int):
            if 1 <= value <= 5:
                return cls.from_rank(value)
            raise ValueError(f"Grade rank out of range: {value}")
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_").replace(" ", "_")
            if key in GRADE_ALIASES:
                return GRADE_ALIASES[key]
            try:
                return cls(key)
            except ValueError:
                pass
        raise ValueError(f"Not a flexibility grade: {value!r}")


# Labels emitted by the measurement capture form
GRADE_ALIASES: dict[str, FlexibilityGrade] = {
    "low": FlexibilityGrade.POOR,
}


@dataclass(frozen=True)
class ExerciseCategory:
    """A measurable exercise or mobility test."""

    id: int
    name: str
    unit_kind: UnitKind
    body_region: BodyRegion
    exercise_type: ExerciseType

    @property
    def unit(self) -> str:
        """Short unit label used in results."""
        return UNIT_LABELS[self.unit_kind]

    @property
    def is_ordinal(self) -> bool:
        return self.unit_kind == UnitKind.ORDINAL_SCALE

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "unit_kind": self.unit_kind.value,
            "unit": self.unit,
            "body_region": self.body_region.value,
            "exercise_type": self.exercise_type.value,
        }


UNIT_LABELS: dict[UnitKind, str] = {
    UnitKind.WEIGHT_KG: "kg",
    UnitKind.REPETITIONS: "reps",
    UnitKind.ORDINAL_SCALE: "grade",
}


# Fixed registry - ids are stable and shared with measurement capture
CATEGORIES: tuple[ExerciseCategory, ...] = (
    ExerciseCategory(1, "Bench Press", UnitKind.WEIGHT_KG, BodyRegion.CHEST, ExerciseType.WEIGHT),
    ExerciseCategory(2, "Pull-up", UnitKind.REPETITIONS, BodyRegion.BACK, ExerciseType.BODYWEIGHT),
    ExerciseCategory(3, "Shoulder Press", UnitKind.WEIGHT_KG, BodyRegion.SHOULDER, ExerciseType.WEIGHT),
    ExerciseCategory(4, "Barbell Squat", UnitKind.WEIGHT_KG, BodyRegion.LEGS, ExerciseType.WEIGHT),
    ExerciseCategory(5, "Sit-up", UnitKind.REPETITIONS, BodyRegion.CORE, ExerciseType.BODYWEIGHT),
    ExerciseCategory(6, "Barbell Row", UnitKind.WEIGHT_KG, BodyRegion.BACK, ExerciseType.WEIGHT),
    ExerciseCategory(7, "Deadlift", UnitKind.WEIGHT_KG, BodyRegion.FULL_BODY, ExerciseType.WEIGHT),
    ExerciseCategory(8, "Push-up", UnitKind.REPETITIONS, BodyRegion.CHEST, ExerciseType.BODYWEIGHT),
    ExerciseCategory(9, "Bodyweight Squat", UnitKind.REPETITIONS, BodyRegion.LEGS, ExerciseType.BODYWEIGHT),
    ExerciseCategory(10, "Burpee", UnitKind.REPETITIONS, BodyRegion.FULL_BODY, ExerciseType.BODYWEIGHT),
    ExerciseCategory(11, "Thoracic Mobility", UnitKind.ORDINAL_SCALE, BodyRegion.BACK, ExerciseType.FLEXIBILITY),
    ExerciseCategory(12, "Shoulder Flexibility", UnitKind.ORDINAL_SCALE, BodyRegion.SHOULDER, ExerciseType.FLEXIBILITY),
    ExerciseCategory(13, "Hamstring Flexibility", UnitKind.ORDINAL_SCALE, BodyRegion.LEGS, ExerciseType.FLEXIBILITY),
    ExerciseCategory(14, "Hip Mobility", UnitKind.ORDINAL_SCALE, BodyRegion.CORE, ExerciseType.FLEXIBILITY),
    ExerciseCategory(15, "Ankle Mobility", UnitKind.ORDINAL_SCALE, BodyRegion.LEGS, ExerciseType.FLEXIBILITY),
)

_BY_ID: dict[int, ExerciseCategory] = {c.id: c for c in CATEGORIES}


def get_category(category_id) -> ExerciseCategory:
    """Look up a category by id.

    Raises:
        UnknownCategory: If the id is not one of the registered categories.
    """
    if isinstance(category_id, bool) or not isinstance(category_id, int):
        raise UnknownCategory(category_id)
    category = _BY_ID.get(category_id)
    if category is None:
        raise UnknownCategory(category_id)
    return category


def list_categories() -> tuple[ExerciseCategory, ...]:
    """All categories in id order."""
    return CATEGORIES


def categories_for_type(exercise_type: ExerciseType) -> tuple[ExerciseCategory, ...]:
    """Categories belonging to one exercise group, in id order."""
    exercise_type = ExerciseType(exercise_type)
    return tuple(c for c in CATEGORIES if c.exercise_type == exercise_type)
