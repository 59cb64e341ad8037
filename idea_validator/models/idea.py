"""Idea record and submission models."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .analysis import AnalysisResult
from .enums import ScoreBand


class Contact(BaseModel):
    """Contact details supplied with a submission."""
    name: str = Field(default="", max_length=200)
    email: str = Field(default="", max_length=320)
    phone: str = Field(default="", max_length=50)

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return ""
        return v.strip() if isinstance(v, str) else v


class IdeaSubmission(BaseModel):
    """Request body for validating a product idea."""
    idea: str = Field(..., description="Free-form product idea description")
    contact: Contact

    @field_validator("idea")
    @classmethod
    def idea_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("idea must not be empty")
        return v

    @model_validator(mode="after")
    def contact_required(self) -> "IdeaSubmission":
        if not self.contact.name or not self.contact.email:
            raise ValueError("contact name and email are required")
        return self


class CurrentUser(BaseModel):
    """Authenticated user resolved at the auth boundary."""
    id: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    photo_url: Optional[str] = None


class IdeaRecord(BaseModel):
    """One stored submission plus its optional analysis."""
    model_config = ConfigDict(frozen=True)

    id: str
    owner_id: str
    owner_email: Optional[str] = None
    owner_name: Optional[str] = None
    idea_text: str
    contact: Contact = Field(default_factory=Contact)
    submitted_at: Optional[datetime] = None
    analysis: Optional[AnalysisResult] = None

    @property
    def score_value(self) -> Optional[float]:
        return self.analysis.score_value if self.analysis is not None else None


class ValidationResponse(BaseModel):
    """Result of the submission flow."""
    analysis: AnalysisResult
    score_band: Optional[ScoreBand] = None
    grade_description: Optional[str] = None
    record_id: Optional[str] = Field(None, description="Store id; null when not persisted")
    persisted: bool = False
    exported: bool = False


class IdeaHistoryResponse(BaseModel):
    """An owner's idea history, newest first."""
    items: list[IdeaRecord]
    total: int
