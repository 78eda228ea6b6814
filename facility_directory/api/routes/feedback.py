"""Feedback submission route."""
from fastapi import APIRouter, Body, Depends, HTTPException

from facility_directory.api.deps import get_db
from facility_directory.core.exceptions import SubmitError
from facility_directory.models.feedback import FeedbackCreated, FeedbackForm
from facility_directory.services.feedback_service import submit_feedback

router = APIRouter(prefix="/feedback", tags=["feedback"])


@router.post("", status_code=201, response_model=FeedbackCreated)
async def create_feedback(
    payload: FeedbackForm = Body(...),
    db=Depends(get_db),
):
    try:
        feedback_id = submit_feedback(payload, db)
    except SubmitError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return FeedbackCreated(id=feedback_id, anonymous=payload.anonymous)
