"""Narrative evaluation of an assessment for trainers and members."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from ..models.assessment import CategoryResult
from ..models.categories import FlexibilityGrade, UnitKind, get_category
from ..models.flags import TechniqueFlags, parse_flags
from ..models.member import MemberProfile
from .engine import Assessment

# (category id, flag) -> follow-up sentence used instead of the generic one
FLAG_FOLLOW_UPS: dict[tuple[int, str], str] = {
    (4, "depth_limited"): "the limited range of motion lowers the strength that can actually be used.",
    (1, "imbalance"): "a left/right imbalance is limiting weight progression.",
    (2, "arm_dominant"): "force concentrates in the arms rather than the back muscles.",
}

MAX_SUMMARY_ISSUES = 3


@dataclass(frozen=True)
class ExerciseEvaluation:
    """Per-exercise evaluation card."""

    category_id: int
    name: str
    region: str
    raw_value: float | int | FlexibilityGrade
    unit: str
    ratio: float | None  # load relative to bodyweight, kg categories only
    ratio_text: str
    level_name: str
    score: int
    next_level_name: str | None
    next_level_target: float
    remaining: float
    issues: tuple[str, ...]
    evaluation: str

    def to_dict(self) -> dict:
        raw = self.raw_value.value if isinstance(self.raw_value, FlexibilityGrade) else self.raw_value
        return {
            "category_id": self.category_id,
            "name": self.name,
            "region": self.region,
            "raw_value": raw,
            "unit": self.unit,
            "ratio": self.ratio,
            "ratio_text": self.ratio_text,
            "level": self.level_name,
            "score": self.score,
            "next_level": self.next_level_name,
            "next_level_target": self.next_level_target,
            "remaining": self.remaining,
            "issues": list(self.issues),
            "evaluation": self.evaluation,
        }


@dataclass(frozen=True)
class EvaluationReport:
    """Full narrative for one assessment."""

    basic_info: str
    evaluations: tuple[ExerciseEvaluation, ...] = field(default_factory=tuple)
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "basic_info": self.basic_info,
            "evaluations": [e.to_dict() for e in self.evaluations],
            "summary": self.summary,
        }


def _region_label(category_id: int) -> str:
    return get_category(category_id).body_region.value.capitalize()


def evaluation_text(result: CategoryResult, flags: TechniqueFlags | None = None) -> str:
    """Short paragraph describing one result."""
    if isinstance(result.raw_value, FlexibilityGrade):
        grade = result.raw_value.value.replace("_", " ")
        return f"{result.name} is rated {grade} ({result.level_name} level)."

    if not result.issues:
        return f"{result.name} is at the {result.level_name} level."

    text = f"{result.name} is at the {result.level_name} level, but\n"
    raised = flags.raised() if flags is not None else []
    for flag_name in raised:
        follow_up = FLAG_FOLLOW_UPS.get((result.category_id, flag_name))
        if follow_up:
            return text + follow_up
    return text + f"issues such as \"{result.issues[0]}\" were observed."


def evaluate_result(
    result: CategoryResult,
    profile: MemberProfile,
    flags: TechniqueFlags | None = None,
) -> ExerciseEvaluation:
    """Build the evaluation card for one category result."""
    category = get_category(result.category_id)
    ratio = None
    ratio_text = ""
    if category.unit_kind == UnitKind.WEIGHT_KG:
        ratio = result.raw_value / profile.bodyweight
        ratio_text = f"{ratio:.2f}"

    return ExerciseEvaluation(
        category_id=result.category_id,
        name=result.name,
        region=category.body_region.value,
        raw_value=result.raw_value,
        unit=result.unit,
        ratio=ratio,
        ratio_text=ratio_text,
        level_name=result.level_name,
        score=result.score,
        next_level_name=result.next_level_name,
        next_level_target=result.next_level_target,
        remaining=result.remaining,
        issues=result.issues,
        evaluation=evaluation_text(result, flags),
    )


def build_report(
    assessment: Assessment,
    flags: Mapping[int, TechniqueFlags | dict] | None = None,
) -> EvaluationReport:
    """Narrative report for a whole assessment.

    Flags are only used to pick category-specific wording; issues themselves
    already live on the results.
    """
    profile = assessment.profile
    summary = assessment.summary
    who = profile.name or "The member"

    parsed: dict[int, TechniqueFlags] = {}
    for raw_id, raw_flags in (flags or {}).items():
        category_id = int(raw_id)
        record = parse_flags(category_id, raw_flags)
        if record is not None:
            parsed[category_id] = record

    basic_info = (
        f"{who} is\n{profile.get_summary()},\n"
        f"with overall fitness rated {summary.overall_level} "
        f"(average score {summary.average_score:.1f})."
    )
    if profile.injury_notes:
        basic_info += (
            f"\nHowever, the reported {profile.injury_notes} injury history limits "
            "depth and stability in related movements."
        )

    evaluations = []
    all_issues = []
    for result in assessment.results:
        evaluations.append(evaluate_result(result, profile, parsed.get(result.category_id)))
        region = _region_label(result.category_id)
        all_issues.extend(f"{region}: {issue}" for issue in result.issues)

    text = f"{who}'s overall level is {summary.overall_level} ({summary.average_score:.1f}).\n"
    if all_issues:
        text += ", ".join(all_issues[:MAX_SUMMARY_ISSUES]) + "\n"
        text += "are currently reducing training efficiency.\n"
    text += "\n" + summary.description

    return EvaluationReport(
        basic_info=basic_info,
        evaluations=tuple(evaluations),
        summary=text,
    )
