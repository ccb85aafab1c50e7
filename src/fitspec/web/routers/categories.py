"""Category and level standard routes."""

from fastapi import APIRouter, HTTPException, Query

from ...errors import AssessmentError, UnknownCategory
from ...models.categories import ExerciseType, categories_for_type, get_category, list_categories
from ...models.member import MemberProfile
from ...scoring.standards import calculate_thresholds, level_standards

router = APIRouter(prefix="/api", tags=["categories"])


@router.get("/categories")
async def categories(exercise_type: ExerciseType | None = Query(None, alias="type")):
    """All measurable categories, optionally limited to one exercise group."""
    items = categories_for_type(exercise_type) if exercise_type else list_categories()
    return {"categories": [c.to_dict() for c in items]}


@router.get("/categories/{category_id}")
async def category(
    category_id: int,
    age: int | None = None,
    bodyweight: float | None = None,
    gender: str | None = None,
):
    """One category; with a full member profile, also its thresholds."""
    try:
        found = get_category(category_id)
    except UnknownCategory as e:
        raise HTTPException(status_code=404, detail=str(e))

    body = found.to_dict()
    if age is not None and bodyweight is not None and gender is not None:
        try:
            profile = MemberProfile(age=age, bodyweight=bodyweight, gender=gender)
        except AssessmentError as e:
            raise HTTPException(status_code=422, detail=str(e))
        body["thresholds"] = calculate_thresholds(found, profile).to_dict()
    return body


@router.get("/standards")
async def standards(age: int, bodyweight: float, gender: str):
    """Level thresholds of every category for one member."""
    try:
        profile = MemberProfile(age=age, bodyweight=bodyweight, gender=gender)
    except AssessmentError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "profile": profile.to_dict(),
        "standards": [t.to_dict() for t in level_standards(profile)],
    }
