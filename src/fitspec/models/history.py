"""Stored assessment history."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class SavedAssessment:
    """An assessment kept for later review, newest first per member."""

    member_id: str
    measured_at: datetime
    report: dict  # Assessment.to_dict() plus charts and evaluation
    exercise_types: list[str] = field(default_factory=list)
    id: int | None = None

    @property
    def average_score(self) -> float | None:
        return self.report.get("summary", {}).get("average_score")

    @property
    def overall_level(self) -> str | None:
        return self.report.get("summary", {}).get("overall_level")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "member_id": self.member_id,
            "measured_at": self.measured_at.isoformat(),
            "exercise_types": self.exercise_types,
            "report": self.report,
        }
