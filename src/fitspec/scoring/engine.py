"""Assessment pipeline: validate a batch, score it and summarize it."""

import logging
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..errors import (
    AssessmentError,
    DuplicateCategoryInBatch,
    InvalidMeasurementValue,
)
from ..models.assessment import (
    CategoryResult,
    ChartProjection,
    OverallSummary,
    RawMeasurement,
)
from ..models.categories import (
    ExerciseCategory,
    ExerciseType,
    FlexibilityGrade,
    UnitKind,
    get_category,
)
from ..models.flags import TechniqueFlags, parse_flags
from ..models.member import MemberProfile
from .aggregator import summarize
from .chart import project
from .issues import collect_issues
from .scorer import assign, assign_ordinal
from .standards import calculate_thresholds

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rejection:
    """A measurement dropped from a batch because its value was invalid."""

    category_id: int
    value: object
    reason: str

    def to_dict(self) -> dict:
        value = self.value.value if isinstance(self.value, FlexibilityGrade) else self.value
        return {"category_id": self.category_id, "value": value, "reason": self.reason}


@dataclass(frozen=True)
class Assessment:
    """Complete outcome of scoring one measurement batch."""

    profile: MemberProfile
    results: tuple[CategoryResult, ...]
    summary: OverallSummary
    rejected: tuple[Rejection, ...] = field(default_factory=tuple)

    def exercise_types(self) -> list[ExerciseType]:
        """Exercise groups with at least one result."""
        present = {get_category(r.category_id).exercise_type for r in self.results}
        return [t for t in ExerciseType if t in present]

    def chart(self, exercise_type: ExerciseType) -> ChartProjection:
        return project(self.results, exercise_type)

    def charts(self) -> dict[str, ChartProjection]:
        """Chart projections for every measured exercise group."""
        return {t.value: self.chart(t) for t in self.exercise_types()}

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "profile": self.profile.to_dict(),
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
            "rejected": [r.to_dict() for r in self.rejected],
            "exercise_types": [t.value for t in self.exercise_types()],
        }


def normalize_value(category: ExerciseCategory, value):
    """Validate a raw value for its category and return it in canonical form.

    Raises:
        InvalidMeasurementValue: If the value is unusable for the category.
    """
    if category.unit_kind == UnitKind.ORDINAL_SCALE:
        try:
            return FlexibilityGrade.parse(value)
        except ValueError:
            raise InvalidMeasurementValue(
                category.id, value, "not one of the five flexibility grades"
            ) from None

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidMeasurementValue(category.id, value, "must be a number")
    try:
        finite = math.isfinite(value)
    except OverflowError:
        raise InvalidMeasurementValue(category.id, value, "out of range") from None
    if not finite:
        raise InvalidMeasurementValue(category.id, value, "must be finite")
    if value < 0:
        raise InvalidMeasurementValue(category.id, value, "must not be negative")

    if category.unit_kind == UnitKind.REPETITIONS:
        if isinstance(value, float):
            if not value.is_integer():
                raise InvalidMeasurementValue(category.id, value, "repetitions must be a whole number")
            return int(value)
        return value
    return value


def score_measurement(
    category: ExerciseCategory,
    value,
    profile: MemberProfile,
    flags: TechniqueFlags | None = None,
) -> CategoryResult:
    """Score one already-validated value."""
    if category.is_ordinal:
        assignment = assign_ordinal(value)
    else:
        assignment = assign(value, calculate_thresholds(category, profile))

    return CategoryResult(
        category_id=category.id,
        name=category.name,
        raw_value=value,
        unit=category.unit,
        score=assignment.score,
        level_name=assignment.level_name,
        next_level_name=assignment.next_level_name,
        next_level_target=assignment.next_level_target,
        remaining=assignment.remaining,
        issues=collect_issues(category.id, flags, profile.injury_notes),
    )


def _resolve_flags(
    flags: Mapping[int, TechniqueFlags | dict] | None,
) -> dict[int, TechniqueFlags]:
    resolved: dict[int, TechniqueFlags] = {}
    for raw_id, raw_flags in (flags or {}).items():
        category_id = int(raw_id) if isinstance(raw_id, str) and raw_id.isdigit() else raw_id
        category = get_category(category_id)
        parsed = parse_flags(category.id, raw_flags)
        if parsed is not None:
            resolved[category.id] = parsed
    return resolved


def assess(
    profile: MemberProfile,
    measurements: Sequence[RawMeasurement],
    flags: Mapping[int, TechniqueFlags | dict] | None = None,
    *,
    skip_invalid: bool = False,
) -> Assessment:
    """Score a measurement batch for one member.

    Unknown or duplicated category ids reject the whole batch. Invalid values
    abort the batch unless ``skip_invalid`` is set, in which case they are
    dropped and listed in ``Assessment.rejected``.

    Raises:
        UnknownCategory: A measurement or flag record names an unknown id.
        DuplicateCategoryInBatch: A category id appears twice.
        InvalidMeasurementValue: A value is invalid and skip_invalid is off.
        FlagsMismatch: A flag record doesn't fit its category.
        EmptyResultSet: No measurement could be scored.
    """
    measurements = list(measurements)
    seen: set[int] = set()
    categories: list[ExerciseCategory] = []
    for measurement in measurements:
        category = get_category(measurement.category_id)
        if category.id in seen:
            raise DuplicateCategoryInBatch(category.id)
        seen.add(category.id)
        categories.append(category)

    resolved_flags = _resolve_flags(flags)
    unused = sorted(set(resolved_flags) - seen)
    if unused:
        logger.debug("Ignoring flags for unmeasured categories: %s", unused)

    results: list[CategoryResult] = []
    rejected: list[Rejection] = []
    for category, measurement in zip(categories, measurements):
        try:
            value = normalize_value(category, measurement.value)
        except InvalidMeasurementValue as e:
            if not skip_invalid:
                raise
            logger.warning("Dropping measurement for category %s: %s", category.id, e.reason)
            rejected.append(Rejection(category.id, measurement.value, e.reason))
            continue
        results.append(
            score_measurement(category, value, profile, resolved_flags.get(category.id))
        )

    summary = summarize(results)
    logger.debug(
        "Assessed %d categories (%d rejected), average %.1f",
        len(results),
        len(rejected),
        summary.average_score,
    )
    return Assessment(
        profile=profile,
        results=tuple(results),
        summary=summary,
        rejected=tuple(rejected),
    )


def parse_request(data: dict) -> tuple[MemberProfile, list[RawMeasurement], dict]:
    """Split a JSON assessment request into profile, measurements and flags."""
    if not isinstance(data, Mapping):
        raise AssessmentError("Assessment request must be a JSON object")
    if not isinstance(data.get("profile") or {}, Mapping):
        raise AssessmentError("profile must be an object")
    if not isinstance(data.get("measurements") or [], list):
        raise AssessmentError("measurements must be a list")
    if not isinstance(data.get("flags") or {}, Mapping):
        raise AssessmentError("flags must be an object keyed by category id")
    profile = MemberProfile.from_dict(data.get("profile") or {})
    measurements = [RawMeasurement.from_dict(m) for m in data.get("measurements") or []]
    flags = data.get("flags") or {}
    return profile, measurements, flags
