"""Technique flags reported during measurement capture.

Each category with technique checks has its own record of named booleans.
Flexibility tests have no flags.
"""

from dataclasses import asdict, dataclass, fields

from ..errors import FlagsMismatch


class TechniqueFlags:
    """Shared helpers for the per-category flag records."""

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "TechniqueFlags":
        """Create from dictionary, rejecting flag names the record doesn't have."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown {cls.__name__} fields: {', '.join(sorted(unknown))}")
        values = {}
        for name, value in data.items():
            # Only real booleans or 0/1; strings like "false" are rejected
            if not isinstance(value, (bool, int)) or value not in (0, 1):
                raise ValueError(f"{cls.__name__}.{name} must be true or false, got {value!r}")
            values[name] = bool(value)
        return cls(**values)

    def raised(self) -> list[str]:
        """Names of flags that are set, in field order."""
        return [f.name for f in fields(self) if getattr(self, f.name)]


@dataclass(frozen=True)
class BenchPressFlags(TechniqueFlags):
    imbalance: bool = False
    shoulder_discomfort: bool = False
    range_limited: bool = False
    scapula_control: bool = False


@dataclass(frozen=True)
class PullUpFlags(TechniqueFlags):
    arm_dominant: bool = False
    lats_engagement_unclear: bool = False
    momentum: bool = False
    scapula_control: bool = False


@dataclass(frozen=True)
class ShoulderPressFlags(TechniqueFlags):
    shoulder_pain: bool = False
    lumbar_overextension: bool = False
    range_limited: bool = False
    core_instability: bool = False


@dataclass(frozen=True)
class SquatFlags(TechniqueFlags):
    """Shared by the barbell and bodyweight squat."""

    depth_limited: bool = False
    knee_pain: bool = False
    lower_back_strain: bool = False
    balance_instability: bool = False


@dataclass(frozen=True)
class SitUpFlags(TechniqueFlags):
    lower_back_discomfort: bool = False
    momentum: bool = False
    core_tension_loss: bool = False
    upper_body_sway: bool = False


@dataclass(frozen=True)
class BarbellRowFlags(TechniqueFlags):
    arm_dominant: bool = False
    lats_engagement_unclear: bool = False
    lower_back_strain: bool = False
    imbalance: bool = False


@dataclass(frozen=True)
class DeadliftFlags(TechniqueFlags):
    lower_back_strain: bool = False
    form_breakdown: bool = False
    grip_failure: bool = False
    balance_instability: bool = False


@dataclass(frozen=True)
class PushUpFlags(TechniqueFlags):
    shoulder_discomfort: bool = False
    range_limited: bool = False
    imbalance: bool = False
    core_instability: bool = False


@dataclass(frozen=True)
class BurpeeFlags(TechniqueFlags):
    breathing_control: bool = False
    form_breakdown: bool = False
    lower_back_discomfort: bool = False
    early_fatigue: bool = False


# Category id -> flag record type
FLAG_TYPES: dict[int, type[TechniqueFlags]] = {
    1: BenchPressFlags,
    2: PullUpFlags,
    3: ShoulderPressFlags,
    4: SquatFlags,
    5: SitUpFlags,
    6: BarbellRowFlags,
    7: DeadliftFlags,
    8: PushUpFlags,
    9: SquatFlags,
    10: BurpeeFlags,
}


def parse_flags(category_id: int, data: dict | TechniqueFlags | None) -> TechniqueFlags | None:
    """Build the flag record for a category from its dict form.

    Raises:
        FlagsMismatch: If the category has no flags or a field is unknown.
    """
    if data is None:
        return None
    flag_type = FLAG_TYPES.get(category_id)
    if isinstance(data, TechniqueFlags):
        if type(data) is not flag_type:
            raise FlagsMismatch(category_id, data)
        return data
    if not isinstance(data, dict):
        raise FlagsMismatch(category_id, data)
    if flag_type is None:
        if any(data.values()):
            raise FlagsMismatch(category_id, data)
        return None
    try:
        return flag_type.from_dict(data)
    except ValueError:
        raise FlagsMismatch(category_id, data) from None
