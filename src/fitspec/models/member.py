"""Member biometrics supplied to an assessment."""

import math
from dataclasses import dataclass
from enum import Enum

from ..errors import InvalidMemberProfile


class Gender(str, Enum):
    """Gender as recorded by the member directory.

    Only the two values the directory supports are modeled.
    """

    MALE = "male"
    FEMALE = "female"


def _is_positive_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value) and value > 0
    except OverflowError:
        return False


@dataclass(frozen=True)
class MemberProfile:
    """Biometrics used to scale level thresholds."""

    age: int  # years
    bodyweight: float  # in kg
    gender: Gender
    injury_notes: str = ""  # comma-joined body parts, e.g. "knee, shoulder"
    name: str = ""
    height_cm: float | None = None
    member_id: str | None = None

    def __post_init__(self):
        if self.injury_notes is None:
            object.__setattr__(self, "injury_notes", "")
        if self.name is None:
            object.__setattr__(self, "name", "")

        if isinstance(self.age, bool) or not isinstance(self.age, int) or self.age <= 0:
            raise InvalidMemberProfile("age", self.age, "must be a positive integer")
        if not _is_positive_number(self.bodyweight):
            raise InvalidMemberProfile("bodyweight", self.bodyweight, "must be a positive number")
        if self.height_cm is not None and not _is_positive_number(self.height_cm):
            raise InvalidMemberProfile("height_cm", self.height_cm, "must be a positive number")
        if not isinstance(self.gender, Gender):
            try:
                object.__setattr__(self, "gender", Gender(self.gender))
            except ValueError:
                raise InvalidMemberProfile("gender", self.gender, "must be 'male' or 'female'") from None
        if not isinstance(self.injury_notes, str):
            raise InvalidMemberProfile("injury_notes", self.injury_notes, "must be text")
        if not isinstance(self.name, str):
            raise InvalidMemberProfile("name", self.name, "must be text")

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "age": self.age,
            "bodyweight": self.bodyweight,
            "gender": self.gender.value,
            "injury_notes": self.injury_notes,
            "name": self.name,
            "height_cm": self.height_cm,
            "member_id": self.member_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "MemberProfile":
        """Create from dictionary."""
        try:
            age = data["age"]
            bodyweight = data["bodyweight"]
            gender = data["gender"]
        except KeyError as e:
            raise InvalidMemberProfile(e.args[0], None, "is required") from None
        return cls(
            age=age,
            bodyweight=bodyweight,
            gender=gender,
            injury_notes=data.get("injury_notes") or "",
            name=data.get("name", ""),
            height_cm=data.get("height_cm"),
            member_id=data.get("member_id"),
        )

    def get_summary(self) -> str:
        """One-line description for reports."""
        parts = [f"{self.age} y/o", self.gender.value]
        if self.height_cm:
            parts.append(f"{self.height_cm:g}cm")
        parts.append(f"{self.bodyweight:g}kg")
        return " / ".join(parts)
