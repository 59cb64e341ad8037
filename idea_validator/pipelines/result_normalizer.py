"""Result normalizer: raw AI payload → AnalysisResult.

The generative endpoint is an untrusted boundary. A payload is accepted only
if it parses as a JSON object and matches the AnalysisResult schema; a score
outside [0, 100] is rejected rather than clamped. Missing optional fields
default to empty collections.
"""
import json
import re
from typing import Any, Union

import structlog
from pydantic import ValidationError

from idea_validator.errors import MalformedAnalysisError
from idea_validator.models.analysis import AnalysisResult

logger = structlog.get_logger(__name__)

# Models occasionally wrap JSON in markdown fences despite a JSON mime type
_CODE_FENCE = re.compile(r"```(?:json)?", re.IGNORECASE)


def _parse(payload: Union[str, bytes]) -> Any:
    if isinstance(payload, bytes):
        payload = payload.decode("utf-8", errors="replace")
    text = _CODE_FENCE.sub("", payload).strip()
    if not text:
        raise MalformedAnalysisError("Analysis payload is empty")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedAnalysisError(f"Analysis payload is not valid JSON: {e.msg}") from e


def normalize_analysis(payload: Union[str, bytes, dict]) -> AnalysisResult:
    """Validate a raw payload and return the normalized AnalysisResult.

    Raises:
        MalformedAnalysisError: unparseable JSON, a non-object document, or a
            field violating the contract (including score.value outside [0, 100]).
    """
    data = payload if isinstance(payload, dict) else _parse(payload)
    if not isinstance(data, dict):
        raise MalformedAnalysisError(
            f"Analysis payload must be a JSON object, got {type(data).__name__}"
        )
    try:
        result = AnalysisResult.model_validate(data)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        logger.warning("analysis_rejected", fields=fields, errors=e.error_count())
        raise MalformedAnalysisError(
            f"Analysis payload violates contract: {', '.join(fields)}"
        ) from e

    logger.info(
        "analysis_normalized",
        has_score=result.score is not None,
        developments=len(result.key_developments),
        deployment_steps=len(result.deployment_steps),
        roadmap_quarters=[q.value for q in result.roadmap],
        has_pitch=result.investor_pitch is not None,
    )
    return result
