"""Overall summary across category results."""

from collections.abc import Sequence

from ..errors import EmptyResultSet
from ..models.assessment import CategoryResult, OverallSummary, level_name
from .standards import round_half_up

EXCELLENT_DESCRIPTION = (
    "Excellent overall fitness. Maintain the current routine and add "
    "progressively harder challenges to keep improving."
)
ABOVE_AVERAGE_DESCRIPTION = (
    "Above-average fitness. Keep training consistently and target the weaker "
    "areas to move up a level."
)
FOUNDATIONAL_DESCRIPTION = (
    "Foundational fitness level. A structured program focused on movement "
    "quality and stability should come before adding load."
)


def describe(mean_score: float) -> str:
    """Narrative template for a mean score."""
    if mean_score >= 4.0:
        return EXCELLENT_DESCRIPTION
    if mean_score >= 3.0:
        return ABOVE_AVERAGE_DESCRIPTION
    return FOUNDATIONAL_DESCRIPTION


def summarize(results: Sequence[CategoryResult]) -> OverallSummary:
    """Combine per-category scores into an overall level.

    Every result counts equally. The level uses the mean rounded half-up;
    the reported average keeps one decimal. The description band is picked
    from the unrounded mean, so near a boundary they can disagree: a 3.95
    mean shows 4.0 with the above-average text.

    Raises:
        EmptyResultSet: If there are no results.
    """
    if not results:
        raise EmptyResultSet()

    mean = sum(r.score for r in results) / len(results)
    return OverallSummary(
        average_score=float(round_half_up(mean, 1)),
        overall_level=level_name(int(round_half_up(mean))),
        description=describe(mean),
        result_count=len(results),
    )
