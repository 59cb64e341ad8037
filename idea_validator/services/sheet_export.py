"""Side-channel export of submissions to a spreadsheet webhook."""
import logging
from datetime import datetime
from typing import Any, Optional

import httpx

from idea_validator.config import get_settings
from idea_validator.errors import SideChannelFailure
from idea_validator.models.analysis import AnalysisResult
from idea_validator.models.idea import IdeaSubmission

logger = logging.getLogger(__name__)


def build_sheet_row(
    submission: IdeaSubmission,
    analysis: AnalysisResult,
    timestamp: datetime,
) -> dict[str, Any]:
    """Flatten a submission into the spreadsheet column layout."""
    return {
        "timestamp": timestamp.isoformat(),
        "name": submission.contact.name,
        "phone": submission.contact.phone,
        "email": submission.contact.email,
        "idea": submission.idea,
        "score": analysis.score_value,
        "remarks": analysis.score.reasoning if analysis.score is not None else "",
    }


class SheetExporter:
    """POST flattened rows to a Google Apps Script web app."""

    def __init__(
        self,
        url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.url)

    async def export(self, row: dict[str, Any]) -> bool:
        """Send one row. Returns False when no webhook URL is configured.

        Raises:
            SideChannelFailure: transport error or an error status.
        """
        if not self.enabled:
            logger.warning("Sheet webhook URL is not set; export skipped")
            return False

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.post(self.url, json=row)
        except httpx.HTTPError as e:
            raise SideChannelFailure(f"Sheet export failed: {e}") from e

        if response.status_code >= 400:
            raise SideChannelFailure(f"Sheet export failed: status {response.status_code}")
        return True


# Singleton instance
_sheet_exporter: Optional[SheetExporter] = None


def get_sheet_exporter() -> SheetExporter:
    """Get or create sheet exporter singleton."""
    global _sheet_exporter
    if _sheet_exporter is None:
        settings = get_settings()
        _sheet_exporter = SheetExporter(
            url=settings.sheet_webhook_url,
            timeout=settings.sheet_timeout_seconds,
        )
    return _sheet_exporter
