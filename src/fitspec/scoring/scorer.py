"""Map raw values onto 1-5 level scores."""

from dataclasses import dataclass

from ..models.assessment import LEVEL_NAMES, LevelThresholds, level_name
from ..models.categories import FlexibilityGrade

MAX_SCORE = len(LEVEL_NAMES)


@dataclass(frozen=True)
class ScoreAssignment:
    """Score plus progression info for one raw value."""

    score: int
    level_name: str
    next_level_name: str | None
    next_level_target: float
    remaining: float


def _remaining(target: float, raw_value: float, unit: str) -> float:
    remaining = max(0, target - raw_value)
    # Keep kg deltas on the same one-decimal grid as the thresholds
    if unit == "kg":
        return round(remaining, 1)
    return remaining


def assign(raw_value: float, thresholds: LevelThresholds) -> ScoreAssignment:
    """Score a numeric value against the thresholds of its category.

    The score is one plus the index of the highest threshold reached. Values
    below the beginner threshold still score 1.
    """
    score = 1
    for i, threshold in enumerate(thresholds.values):
        if raw_value >= threshold:
            score = i + 1

    if score == MAX_SCORE:
        return ScoreAssignment(
            score=score,
            level_name=level_name(score),
            next_level_name=None,
            next_level_target=thresholds.elite,
            remaining=0,
        )

    target = thresholds.values[score]
    return ScoreAssignment(
        score=score,
        level_name=level_name(score),
        next_level_name=level_name(score + 1),
        next_level_target=target,
        remaining=_remaining(target, raw_value, thresholds.unit),
    )


def assign_ordinal(grade: FlexibilityGrade) -> ScoreAssignment:
    """Score an ordinal grade; the grade rank is the score."""
    score = FlexibilityGrade.parse(grade).rank
    target = min(score + 1, MAX_SCORE)
    return ScoreAssignment(
        score=score,
        level_name=level_name(score),
        next_level_name=level_name(score + 1) if score < MAX_SCORE else None,
        next_level_target=target,
        remaining=max(0, target - score),
    )
