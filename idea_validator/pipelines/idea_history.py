"""Load an owner's idea history from the record store."""
import json
from datetime import datetime, timezone
from typing import Any, Optional

import structlog
from pydantic import ValidationError

from idea_validator.errors import FetchFailure, MalformedAnalysisError
from idea_validator.models.analysis import AnalysisResult
from idea_validator.models.idea import Contact, IdeaRecord
from idea_validator.pipelines.result_normalizer import normalize_analysis
from idea_validator.services.snowflake import SnowflakeService

logger = structlog.get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _variant(value: Any) -> Any:
    """Snowflake returns VARIANT columns as JSON text."""
    if isinstance(value, (str, bytes)):
        return json.loads(value)
    return value


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _analysis(row: dict[str, Any]) -> Optional[AnalysisResult]:
    raw = row.get("analysis")
    if raw is None:
        return None
    try:
        return normalize_analysis(raw if isinstance(raw, dict) else str(raw))
    except MalformedAnalysisError as e:
        logger.warning("stored_analysis_dropped", record_id=row.get("id"), error=str(e))
        return None


def _contact(row: dict[str, Any]) -> Contact:
    try:
        return Contact.model_validate(_variant(row.get("contact")) or {})
    except (ValueError, ValidationError) as e:
        logger.warning("stored_contact_dropped", record_id=row.get("id"), error=str(e))
        return Contact()


def row_to_record(row: dict[str, Any]) -> IdeaRecord:
    """Map one ``ideas`` row to an IdeaRecord, re-validating its analysis."""
    return IdeaRecord(
        id=str(row["id"]),
        owner_id=str(row["owner_id"]),
        owner_email=row.get("owner_email"),
        owner_name=row.get("owner_name"),
        idea_text=row.get("idea_text") or "",
        contact=_contact(row),
        submitted_at=_as_utc(row.get("submitted_at")),
        analysis=_analysis(row),
    )


def sort_newest_first(records: list[IdeaRecord]) -> list[IdeaRecord]:
    """Order by submission time descending; a missing timestamp sorts as the epoch."""
    return sorted(records, key=lambda r: r.submitted_at or EPOCH, reverse=True)


def load_idea_history(db: SnowflakeService, owner_id: str) -> list[IdeaRecord]:
    """All ideas of one owner, newest first.

    Raises:
        FetchFailure: the store could not be read.
    """
    try:
        rows = db.get_ideas_for_owner(owner_id)
    except Exception as e:
        raise FetchFailure(f"Failed to load ideas for {owner_id}: {e}") from e

    records = []
    for row in rows:
        try:
            records.append(row_to_record(row))
        except (KeyError, ValueError, ValidationError) as e:
            logger.warning("stored_row_dropped", owner_id=owner_id, record_id=row.get("id"), error=str(e))
    records = sort_newest_first(records)
    logger.info(
        "idea_history_loaded",
        owner_id=owner_id,
        records=len(records),
        analyzed=sum(1 for r in records if r.analysis is not None),
    )
    return records
