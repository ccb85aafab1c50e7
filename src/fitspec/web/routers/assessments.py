"""Assessment scoring and history routes."""

import logging

from fastapi import APIRouter, Body, HTTPException

from ...db.repositories import AssessmentRepository
from ...errors import AssessmentError
from ...services.assessment import AssessmentService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assessments", tags=["assessments"])


@router.post("")
async def create_assessment(
    data: dict = Body(...),
    save: bool = False,
    skip_invalid: bool = False,
):
    """Score a measurement batch.

    With ``save=true`` the report is stored in the member's history and the
    response carries its ``id``.
    """
    service = AssessmentService()
    try:
        assessment, payload = service.run(data, skip_invalid=skip_invalid)
    except AssessmentError as e:
        logger.info("Rejected assessment request: %s", e)
        raise HTTPException(status_code=422, detail=str(e))

    if save:
        try:
            saved = await service.save(assessment, payload)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))
        payload = {**payload, "id": saved.id}

    return payload


@router.get("")
async def list_assessments(member_id: str | None = None):
    """Stored assessments, newest first."""
    repo = AssessmentRepository()
    items = await repo.list_by_member(member_id) if member_id else await repo.list_all()
    return {"assessments": [item.to_dict() for item in items]}


@router.get("/{assessment_id}")
async def get_assessment(assessment_id: int):
    """One stored assessment."""
    saved = await AssessmentRepository().get(assessment_id)
    if saved is None:
        raise HTTPException(status_code=404, detail="Assessment not found")
    return saved.to_dict()


@router.delete("/{assessment_id}")
async def delete_assessment(assessment_id: int):
    """Delete one stored assessment."""
    if not await AssessmentRepository().delete(assessment_id):
        raise HTTPException(status_code=404, detail="Assessment not found")
    return {"status": "deleted", "id": assessment_id}
