"""Analysis result models: the validated shape of the AI evaluation."""
from typing import Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    field_validator,
)

from .enums import Quarter


class ScoreResult(BaseModel):
    """Overall idea score with the model's reasoning."""
    model_config = ConfigDict(frozen=True)

    value: float = Field(..., ge=0, le=100, strict=True, allow_inf_nan=False)
    reasoning: StrictStr = ""

    @field_validator("reasoning", mode="before")
    @classmethod
    def reasoning_default(cls, v):
        return "" if v is None else v


class AnalysisResult(BaseModel):
    """Normalized AI output.

    Accepts the snake_case keys of the generation contract and the camelCase
    keys used by older stored records. Optional collections default to empty,
    a blank pitch is treated as absent, and roadmap keys are restricted to
    q1..q4 and re-ordered q1 -> q4.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    score: Optional[ScoreResult] = None
    key_developments: list[StrictStr] = Field(
        default_factory=list,
        validation_alias=AliasChoices("key_developments", "keyDevelopments"),
    )
    deployment_steps: list[StrictStr] = Field(
        default_factory=list,
        validation_alias=AliasChoices("deployment_steps", "deploymentSteps"),
    )
    roadmap: dict[Quarter, StrictStr] = Field(default_factory=dict)
    investor_pitch: Optional[StrictStr] = Field(
        default=None,
        validation_alias=AliasChoices("investor_pitch", "investorPitch"),
    )

    @field_validator("key_developments", "deployment_steps", mode="before")
    @classmethod
    def list_default(cls, v):
        return [] if v is None else v

    @field_validator("roadmap", mode="before")
    @classmethod
    def roadmap_keys(cls, v):
        if v is None:
            return {}
        if isinstance(v, dict):
            return {
                (k.strip().lower() if isinstance(k, str) else k): goal
                for k, goal in v.items()
            }
        return v

    @field_validator("roadmap")
    @classmethod
    def roadmap_order(cls, v: dict[Quarter, str]) -> dict[Quarter, str]:
        return {q: v[q] for q in Quarter if q in v}

    @field_validator("investor_pitch", mode="before")
    @classmethod
    def blank_pitch(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def score_value(self) -> Optional[float]:
        return self.score.value if self.score is not None else None

    def ordered_roadmap(self) -> list[tuple[Quarter, Optional[str]]]:
        """All four quarters in display order; missing quarters map to None."""
        return [(q, self.roadmap.get(q)) for q in Quarter]
