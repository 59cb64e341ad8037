"""Idea submission and history endpoints."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from idea_validator.errors import AnalysisRequestFailure, FetchFailure, MalformedAnalysisError
from idea_validator.models import (
    CurrentUser,
    ErrorResponse,
    IdeaHistoryResponse,
    IdeaSubmission,
    ValidationResponse,
)
from idea_validator.pipelines.idea_history import load_idea_history
from idea_validator.pipelines.submission import IdeaSubmissionService
from idea_validator.routers.deps import get_current_user, require_user
from idea_validator.services import (
    get_gemini_client,
    get_sheet_exporter,
    get_snowflake_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/ideas", tags=["Ideas"])


@router.post(
    "/validate",
    response_model=ValidationResponse,
    summary="Validate Idea",
    responses={502: {"model": ErrorResponse, "description": "Analysis failed"}},
)
async def validate_idea(
    submission: IdeaSubmission,
    user: Optional[CurrentUser] = Depends(get_current_user),
):
    """Analyze a product idea.

    The analysis is always returned when the AI call succeeds. Export and
    storage are best-effort; anonymous submissions are never stored.
    """
    service = IdeaSubmissionService(
        gemini=get_gemini_client(),
        exporter=get_sheet_exporter(),
        db=get_snowflake_service(),
    )
    try:
        return await service.submit(submission, user)
    except (AnalysisRequestFailure, MalformedAnalysisError) as exc:
        logger.warning(f"Idea analysis failed: {exc}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"An error occurred: {exc}",
        )


@router.get(
    "",
    response_model=IdeaHistoryResponse,
    summary="List My Ideas",
)
async def list_ideas(user: CurrentUser = Depends(require_user)):
    """All ideas of the signed-in user, newest first."""
    try:
        records = load_idea_history(get_snowflake_service(), user.id)
    except FetchFailure as exc:
        # Shown as an empty history
        logger.error(f"Idea history unavailable: {exc}")
        records = []
    return IdeaHistoryResponse(items=records, total=len(records))
