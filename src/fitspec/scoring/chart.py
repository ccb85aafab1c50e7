"""Radar-chart projection of category results by body region."""

from collections.abc import Sequence

from ..models.assessment import (
    EMPTY_REPRESENTATIVE,
    CategoryResult,
    ChartProjection,
    RepresentativeExercise,
)
from ..models.categories import BodyRegion, ExerciseType, get_category

# Per exercise group: chart axes in display order, each with the category ids
# that may represent it, highest priority first.
REGION_PRIORITIES: dict[ExerciseType, tuple[tuple[BodyRegion, tuple[int, ...]], ...]] = {
    ExerciseType.WEIGHT: (
        (BodyRegion.FULL_BODY, (7,)),
        (BodyRegion.LEGS, (4,)),
        (BodyRegion.SHOULDER, (3,)),
        (BodyRegion.BACK, (6,)),
        (BodyRegion.CHEST, (1,)),
    ),
    ExerciseType.BODYWEIGHT: (
        (BodyRegion.FULL_BODY, (10,)),
        (BodyRegion.LEGS, (9,)),
        (BodyRegion.CORE, (5,)),
        (BodyRegion.BACK, (2,)),
        (BodyRegion.CHEST, (8,)),
    ),
    ExerciseType.FLEXIBILITY: (
        (BodyRegion.FULL_BODY, ()),
        (BodyRegion.LEGS, (13, 15)),
        (BodyRegion.CORE, (14,)),
        (BodyRegion.SHOULDER, (12,)),
        (BodyRegion.BACK, (11,)),
    ),
}


def region_labels(exercise_type: ExerciseType) -> tuple[str, ...]:
    """Chart axis labels for an exercise group."""
    return tuple(region.value for region, _ in REGION_PRIORITIES[ExerciseType(exercise_type)])


def project(results: Sequence[CategoryResult], exercise_type: ExerciseType) -> ChartProjection:
    """Group one exercise type's results into chart regions.

    A region's score is the mean of its measured categories, or 0 when none
    were measured. Results from other exercise groups are ignored.
    """
    exercise_type = ExerciseType(exercise_type)

    by_region: dict[BodyRegion, list[CategoryResult]] = {}
    for result in results:
        category = get_category(result.category_id)
        if category.exercise_type != exercise_type:
            continue
        by_region.setdefault(category.body_region, []).append(result)

    labels = []
    scores = []
    representatives = {}
    for region, priority in REGION_PRIORITIES[exercise_type]:
        measured = by_region.get(region, [])
        labels.append(region.value)
        scores.append(sum(r.score for r in measured) / len(measured) if measured else 0)

        present = {r.category_id: r for r in measured}
        representative = EMPTY_REPRESENTATIVE
        for category_id in priority:
            if category_id in present:
                chosen = present[category_id]
                representative = RepresentativeExercise(
                    category_id=chosen.category_id,
                    exercise_name=chosen.name,
                    raw_value=chosen.raw_value,
                    unit=chosen.unit,
                )
                break
        representatives[region.value] = representative

    return ChartProjection(
        exercise_type=exercise_type,
        labels=tuple(labels),
        scores=tuple(scores),
        representatives=representatives,
    )
