"""Level threshold calculation.

Thresholds are derived per assessment from a base reference vector for a
young adult male, scaled by age and gender. Weight categories store their base
vector as bodyweight ratios: the ratios are scaled first and only then
multiplied by the member's bodyweight.
"""

from decimal import ROUND_HALF_UP, Decimal

from ..models.assessment import LevelThresholds
from ..models.categories import ExerciseCategory, UnitKind, list_categories
from ..models.member import Gender, MemberProfile

# Absolute repetition counts per level
REPETITION_BASES: dict[int, tuple[int, int, int, int, int]] = {
    2: (1, 3, 5, 8, 12),  # Pull-up
    5: (10, 20, 30, 40, 50),  # Sit-up
    8: (5, 15, 25, 35, 45),  # Push-up
    9: (15, 25, 35, 45, 55),  # Bodyweight Squat
    10: (10, 20, 30, 40, 50),  # Burpee
}

# Load as a multiple of bodyweight per level
WEIGHT_RATIO_BASES: dict[int, tuple[float, float, float, float, float]] = {
    1: (0.50, 0.75, 1.00, 1.50, 2.00),  # Bench Press
    3: (0.35, 0.50, 0.75, 1.00, 1.25),  # Shoulder Press
    4: (0.75, 1.00, 1.50, 2.00, 2.50),  # Barbell Squat
    6: (0.50, 0.65, 0.90, 1.20, 1.50),  # Barbell Row
    7: (1.00, 1.25, 1.75, 2.25, 3.00),  # Deadlift
}

ORDINAL_THRESHOLDS: tuple[int, int, int, int, int] = (1, 2, 3, 4, 5)

GENDER_FACTORS: dict[Gender, float] = {
    Gender.MALE: 1.0,
    Gender.FEMALE: 0.75,
}


def age_factor(age: int) -> float:
    """Step-function scaling for age; no interpolation between bands."""
    if age < 30:
        return 1.0
    if age < 40:
        return 0.95
    if age < 50:
        return 0.9
    return 0.85


def gender_factor(gender: Gender) -> float:
    return GENDER_FACTORS[Gender(gender)]


def round_half_up(value: Decimal | float, places: int = 0) -> Decimal:
    """Round with ties going up, unlike the built-in banker's rounding."""
    if not isinstance(value, Decimal):
        value = Decimal(repr(value))
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def _enforce_increasing(values: list[Decimal], step: Decimal) -> list[Decimal]:
    # Rounding can collapse neighbouring levels for tiny bodyweights
    fixed = [values[0]]
    for value in values[1:]:
        fixed.append(value if value > fixed[-1] else fixed[-1] + step)
    return fixed


def calculate_thresholds(category: ExerciseCategory, profile: MemberProfile) -> LevelThresholds:
    """Compute the five level thresholds of a category for one member.

    Ordinal categories ignore the profile and use the fixed grade ranks.
    """
    if category.unit_kind == UnitKind.ORDINAL_SCALE:
        return LevelThresholds(category.id, category.unit, ORDINAL_THRESHOLDS)

    scale = Decimal(repr(age_factor(profile.age))) * Decimal(repr(gender_factor(profile.gender)))

    if category.unit_kind == UnitKind.REPETITIONS:
        bases = REPETITION_BASES[category.id]
        rounded = [round_half_up(Decimal(base) * scale) for base in bases]
        values = tuple(int(v) for v in _enforce_increasing(rounded, Decimal(1)))
    else:
        bodyweight = Decimal(repr(float(profile.bodyweight)))
        ratios = [Decimal(repr(r)) * scale for r in WEIGHT_RATIO_BASES[category.id]]
        rounded = [round_half_up(ratio * bodyweight, 1) for ratio in ratios]
        values = tuple(float(v) for v in _enforce_increasing(rounded, Decimal("0.1")))

    return LevelThresholds(category.id, category.unit, values)


def level_standards(profile: MemberProfile) -> tuple[LevelThresholds, ...]:
    """Threshold table for every category, in registry order."""
    return tuple(calculate_thresholds(c, profile) for c in list_categories())
