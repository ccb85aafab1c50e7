"""Assessment service shared by the CLI and the web API."""

import logging
from datetime import datetime

from ..db.repositories import AssessmentRepository
from ..models.history import SavedAssessment
from ..scoring.engine import Assessment, assess, parse_request
from ..scoring.evaluation import build_report

logger = logging.getLogger(__name__)


class AssessmentService:
    """Runs assessments from request payloads and optionally stores them.

    Scoring itself is synchronous and pure; only saving touches the database.
    """

    def __init__(self, repository: AssessmentRepository | None = None):
        self._repository = repository

    @property
    def repository(self) -> AssessmentRepository:
        if self._repository is None:
            self._repository = AssessmentRepository()
        return self._repository

    def run(self, data: dict, skip_invalid: bool = False) -> tuple[Assessment, dict]:
        """Score a request payload.

        Args:
            data: ``{"profile": {...}, "measurements": [...], "flags": {...}}``
            skip_invalid: Drop invalid values instead of failing the batch

        Returns:
            The assessment and its full serialized report, including charts
            for every measured exercise group and the narrative evaluation.
        """
        profile, measurements, flags = parse_request(data)
        assessment = assess(profile, measurements, flags, skip_invalid=skip_invalid)

        payload = assessment.to_dict()
        payload["charts"] = {name: chart.to_dict() for name, chart in assessment.charts().items()}
        payload["evaluation"] = build_report(assessment, flags).to_dict()
        return assessment, payload

    async def save(
        self,
        assessment: Assessment,
        payload: dict,
        measured_at: datetime | None = None,
    ) -> SavedAssessment:
        """Store a scored assessment in the member's history."""
        member_id = assessment.profile.member_id or assessment.profile.name
        if not member_id:
            raise ValueError("A member_id or name is required to save an assessment")

        saved = SavedAssessment(
            member_id=member_id,
            measured_at=measured_at or datetime.now(),
            report=payload,
            exercise_types=[t.value for t in assessment.exercise_types()],
        )
        await self.repository.save(saved)
        logger.info("Stored assessment %s for member %s", saved.id, member_id)
        return saved
