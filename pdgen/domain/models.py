"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure domain objects — Pydantic models with no imports from adapters or ports.

These models are the lingua franca of the entire system:
  • the catalog produces OccupationalGroup / SeriesEntry
  • the validation pipeline produces PositionRequest or a FieldErrorSet
  • interfaces (CLI, Streamlit, FastAPI) serialise them

PositionRequest uses camelCase aliases so the HTTP body and the model share
one shape: {jobTitle, department, payScaleGrade, jobFamily, series}.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────────────────

class PayScaleGrade(str, Enum):
    """Federal pay scale and grade.  Closed set; not tied to job family."""
    GS_1  = "GS-1"
    GS_2  = "GS-2"
    GS_3  = "GS-3"
    GS_4  = "GS-4"
    GS_5  = "GS-5"
    GS_6  = "GS-6"
    GS_7  = "GS-7"
    GS_8  = "GS-8"
    GS_9  = "GS-9"
    GS_10 = "GS-10"
    GS_11 = "GS-11"
    GS_12 = "GS-12"
    GS_13 = "GS-13"
    GS_14 = "GS-14"
    GS_15 = "GS-15"
    SES   = "SES"      # Senior Executive Service
    ES_1  = "ES-1"
    ES_2  = "ES-2"
    ES_3  = "ES-3"
    ES_4  = "ES-4"
    ES_5  = "ES-5"
    ES_6  = "ES-6"
    SL    = "SL"       # Senior Level
    ST    = "ST"       # Scientific or Professional
    GM    = "GM"       # General Schedule, managers (former PMRS)
    GG    = "GG"       # General Schedule-like, excepted service
    AD    = "AD"       # Administratively determined

    @classmethod
    def values(cls) -> list[str]:
        """All grade strings in display order."""
        return [g.value for g in cls]


# ── Taxonomy ───────────────────────────────────────────────────────────────────

class OccupationalGroup(BaseModel):
    """A top-level OPM job family, e.g. 2200 / Information Technology."""

    model_config = ConfigDict(frozen=True)

    code:  str
    title: str

    @property
    def label(self) -> str:
        return f"{self.code} – {self.title}"


class SeriesEntry(BaseModel):
    """An occupational series nested under exactly one OccupationalGroup."""

    model_config = ConfigDict(frozen=True)

    code:       str
    title:      str
    group_code: str

    @property
    def label(self) -> str:
        return f"{self.code} – {self.title}"


# ── Validated request ──────────────────────────────────────────────────────────

class PositionRequest(BaseModel):
    """A submission that passed every validation rule.

    Only the validation pipeline constructs these; the invariant that
    ``series`` belongs to ``job_family`` is checked there, not here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    job_title:       str           = Field(..., alias="jobTitle")
    department:      str
    pay_scale_grade: PayScaleGrade = Field(..., alias="payScaleGrade")
    job_family:      str           = Field(..., alias="jobFamily")
    series:          str

    def to_wire(self) -> dict:
        """Serialise with the camelCase field names used on the wire."""
        return self.model_dump(mode="json", by_alias=True)


# ── Validation output ──────────────────────────────────────────────────────────

class FieldError(BaseModel):
    """One {field, message} pair of a FieldErrorSet."""

    field:   str
    message: str


# FieldErrorSet: wire field name → human-readable message.
FieldErrorSet = dict[str, str]


class ValidationResult(BaseModel):
    """Either a PositionRequest or a non-empty FieldErrorSet, never both."""

    model_config = ConfigDict(frozen=True)

    request: Optional[PositionRequest] = None
    errors:  FieldErrorSet             = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.request is not None

    def error_list(self) -> list[FieldError]:
        """FieldErrorSet as a list of {field, message} pairs."""
        return [FieldError(field=f, message=m) for f, m in self.errors.items()]


# ── Generation ─────────────────────────────────────────────────────────────────

class GenerationResult(BaseModel):
    """Text returned by an LLMPort, plus usage metadata for logging."""

    text:          str
    model:         str = ""
    input_tokens:  int = 0
    output_tokens: int = 0
    generated_at:  datetime = Field(
                       default_factory=lambda: datetime.now(timezone.utc)
                   )

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


# ── HTTP payloads ──────────────────────────────────────────────────────────────

class GenerateDescriptionResponse(BaseModel):
    """200 body of POST /api/generate-description."""

    success:     bool = True
    description: str


class ApiErrorResponse(BaseModel):
    """400 / 500 body of POST /api/generate-description."""

    success: bool = False
    error:   str
    details: Optional[list[FieldError]] = None

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
