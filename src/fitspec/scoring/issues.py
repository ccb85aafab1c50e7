"""Technique issue detection from measurement flags."""

from ..errors import FlagsMismatch
from ..models.categories import get_category
from ..models.flags import FLAG_TYPES, TechniqueFlags

# Per category: (flag field, issue text) in priority order
ISSUE_RULES: dict[int, tuple[tuple[str, str], ...]] = {
    1: (  # Bench Press
        ("imbalance", "Left/right strength difference noticed → stability issue"),
        ("shoulder_discomfort", "Shoulder discomfort"),
        ("range_limited", "Limited range of motion"),
        ("scapula_control", "Difficulty keeping the scapula set"),
    ),
    2: (  # Pull-up
        ("arm_dominant", "Arm-dominant pull → insufficient lat engagement"),
        ("lats_engagement_unclear", "Difficulty feeling the lats work"),
        ("momentum", "Uses momentum"),
        ("scapula_control", "Difficulty controlling the scapula"),
    ),
    3: (  # Shoulder Press
        ("shoulder_pain", "Shoulder pain"),
        ("lumbar_overextension", "Lower back hyperextension"),
        ("range_limited", "Limited range of motion"),
        ("core_instability", "Core instability"),
    ),
    4: (  # Barbell Squat
        ("depth_limited", "Squat depth limited above parallel"),
        ("knee_pain", "Knee pain during the lift"),
        ("lower_back_strain", "Lower back strain"),
        ("balance_instability", "Left/right balance instability"),
    ),
    5: (  # Sit-up
        ("lower_back_discomfort", "Lower back discomfort"),
        ("momentum", "Uses momentum"),
        ("core_tension_loss", "Difficulty holding core tension"),
        ("upper_body_sway", "Upper body sways"),
    ),
    6: (  # Barbell Row
        ("arm_dominant", "Arm-dominant pull → insufficient back engagement"),
        ("lats_engagement_unclear", "Difficulty feeling the lats work"),
        ("lower_back_strain", "Lower back strain"),
        ("imbalance", "Left/right strength difference"),
    ),
    7: (  # Deadlift
        ("lower_back_strain", "Lower back strain"),
        ("form_breakdown", "Form breaks down (rounded back)"),
        ("grip_failure", "Difficulty holding the grip"),
        ("balance_instability", "Balance instability"),
    ),
    8: (  # Push-up
        ("shoulder_discomfort", "Shoulder discomfort"),
        ("range_limited", "Limited range of motion"),
        ("imbalance", "Left/right strength difference"),
        ("core_instability", "Core instability (hips sagging)"),
    ),
    9: (  # Bodyweight Squat
        ("depth_limited", "Squat depth limited above parallel"),
        ("knee_pain", "Knee pain during the movement"),
        ("lower_back_strain", "Lower back strain"),
        ("balance_instability", "Left/right balance instability"),
    ),
    10: (  # Burpee
        ("breathing_control", "Difficulty controlling breathing"),
        ("form_breakdown", "Movement accuracy drops"),
        ("lower_back_discomfort", "Lower back discomfort"),
        ("early_fatigue", "Low endurance (fatigues quickly)"),
    ),
}

# Cross-reference between a limited squat and a reported knee injury
KNEE_RISK_CATEGORY = 4
KNEE_TOKENS: tuple[str, ...] = ("knee", "무릎")
KNEE_RISK_ISSUE = "Likely related to the reported knee injury history"


def _mentions_knee(injury_notes: str | None) -> bool:
    if not injury_notes:
        return False
    return any(token in injury_notes for token in KNEE_TOKENS)


def collect_issues(
    category_id: int,
    flags: TechniqueFlags | None,
    injury_notes: str | None = "",
) -> tuple[str, ...]:
    """Translate technique flags into issue descriptions.

    Issues come out in the category's fixed priority order. Flexibility
    categories never report issues.

    Raises:
        UnknownCategory: If the category id is not registered.
        FlagsMismatch: If the flag record belongs to another category.
    """
    category = get_category(category_id)
    if category.is_ordinal or flags is None:
        return ()
    if type(flags) is not FLAG_TYPES[category.id]:
        raise FlagsMismatch(category.id, flags)

    issues: list[str] = []
    for flag_name, text in ISSUE_RULES[category.id]:
        if not getattr(flags, flag_name):
            continue
        issues.append(text)
        if (
            category.id == KNEE_RISK_CATEGORY
            and flag_name == "depth_limited"
            and _mentions_knee(injury_notes)
        ):
            issues.append(KNEE_RISK_ISSUE)
    return tuple(issues)
