"""Submission flow: analyze an idea, export it, then persist it.

Order of operations:
  1. Gemini analysis; failure aborts before anything is written
  2. sheet export, best-effort
  3. Snowflake insert, only for a signed-in user, best-effort

Steps 2 and 3 never change what the user sees about the analysis itself.
"""
import asyncio
from datetime import datetime, timezone
from typing import Optional

import structlog

from idea_validator.analytics.taxonomy import classify_score
from idea_validator.errors import PersistenceFailure, SideChannelFailure
from idea_validator.models.analysis import AnalysisResult
from idea_validator.models.enums import SCORE_BAND_DESCRIPTIONS
from idea_validator.models.idea import CurrentUser, IdeaSubmission, ValidationResponse
from idea_validator.services.gemini import GeminiClient
from idea_validator.services.sheet_export import SheetExporter, build_sheet_row
from idea_validator.services.snowflake import SnowflakeService

logger = structlog.get_logger(__name__)


class IdeaSubmissionService:
    """Run one idea through analysis, export and persistence."""

    def __init__(
        self,
        gemini: GeminiClient,
        exporter: SheetExporter,
        db: SnowflakeService,
    ) -> None:
        self.gemini = gemini
        self.exporter = exporter
        self.db = db

    async def _export(self, submission: IdeaSubmission, analysis: AnalysisResult) -> bool:
        row = build_sheet_row(submission, analysis, datetime.now(timezone.utc))
        try:
            return await self.exporter.export(row)
        except SideChannelFailure as e:
            logger.warning("sheet_export_failed", error=str(e))
            return False

    def _insert(
        self,
        submission: IdeaSubmission,
        analysis: AnalysisResult,
        user: CurrentUser,
    ) -> str:
        try:
            return self.db.insert_idea(
                owner_id=user.id,
                owner_email=user.email,
                owner_name=user.display_name,
                idea_text=submission.idea,
                contact=submission.contact.model_dump(),
                analysis=analysis.model_dump(mode="json", exclude_none=True),
            )
        except Exception as e:
            raise PersistenceFailure(f"Failed to store idea for {user.id}: {e}") from e

    async def _persist(
        self,
        submission: IdeaSubmission,
        analysis: AnalysisResult,
        user: Optional[CurrentUser],
    ) -> Optional[str]:
        if user is None:
            return None
        try:
            return await asyncio.to_thread(self._insert, submission, analysis, user)
        except PersistenceFailure as e:
            logger.error("idea_persist_failed", owner_id=user.id, error=str(e))
            return None

    async def submit(
        self,
        submission: IdeaSubmission,
        user: Optional[CurrentUser] = None,
    ) -> ValidationResponse:
        """Validate one idea.

        Raises:
            AnalysisRequestFailure: the AI call did not complete.
            MalformedAnalysisError: the AI answer violates the analysis contract.
        """
        analysis = await self.gemini.analyze_idea(submission.idea)

        exported = await self._export(submission, analysis)
        record_id = await self._persist(submission, analysis, user)

        band = classify_score(analysis.score_value)
        logger.info(
            "idea_validated",
            owner_id=user.id if user else None,
            score=analysis.score_value,
            band=band.value if band else None,
            persisted=record_id is not None,
            exported=exported,
        )
        return ValidationResponse(
            analysis=analysis,
            score_band=band,
            grade_description=SCORE_BAND_DESCRIPTIONS.get(band) if band else None,
            record_id=record_id,
            persisted=record_id is not None,
            exported=exported,
        )
