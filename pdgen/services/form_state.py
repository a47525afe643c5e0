"""
services/form_state.py
──────────────────────────────────────────────────────────────────────────────
Form state behind the Streamlit UI, kept free of any Streamlit import so the
dependent-field behaviour can be unit-tested.

Dependent fields:
  Changing the job family ALWAYS clears the chosen series, even when the old
  series code happens to exist under the new family.

Step indicator (Define → Generate → Finalize):
  DEFINE    form being filled / corrected
  GENERATE  submission passed client validation, generation in flight
  FINALIZE  a description has been returned
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from pdgen.domain.models import FieldErrorSet, PositionRequest, SeriesEntry
from pdgen.services.catalog import TaxonomyCatalog
from pdgen.services.validation import validate_for_submission

logger = logging.getLogger(__name__)


class WorkflowStep(IntEnum):
    DEFINE   = 1
    GENERATE = 2
    FINALIZE = 3

    @property
    def label(self) -> str:
        return self.name.title()


# snake_case attribute → wire name used by the validator
_WIRE_NAMES: dict[str, str] = {
    "job_title": "jobTitle",
    "department": "department",
    "pay_scale_grade": "payScaleGrade",
    "job_family": "jobFamily",
    "series": "series",
}


@dataclass
class FormState:
    """Mutable per-session form values, errors and step."""

    job_title:       str = ""
    department:      str = ""
    pay_scale_grade: str = ""
    job_family:      str = ""
    series:          str = ""
    errors:          FieldErrorSet = field(default_factory=dict)
    description:     str = ""
    step:            WorkflowStep = WorkflowStep.DEFINE

    # ── Field updates ──────────────────────────────────────────────────────

    def set_field(self, name: str, value: str) -> None:
        """Update a plain field and drop its stale error.

        ``job_family`` is routed through :meth:`set_job_family` so the series
        reset can never be bypassed.
        """
        if name == "job_family":
            self.set_job_family(value)
            return
        if name not in _WIRE_NAMES:
            raise KeyError(f"Unknown form field {name!r}")
        setattr(self, name, value)
        self.errors.pop(_WIRE_NAMES[name], None)

    def set_job_family(self, code: str) -> None:
        """Select a job family and reset the dependent series."""
        if self.series:
            logger.debug("Job family %r → %r; clearing series %r", self.job_family, code, self.series)
        self.job_family = code
        self.series = ""
        self.errors.pop("jobFamily", None)
        self.errors.pop("series", None)

    def series_options(self, catalog: TaxonomyCatalog) -> tuple[SeriesEntry, ...]:
        """Series selectable under the current job family (empty if none)."""
        return catalog.list_series_for_group(self.job_family)

    # ── Submission ─────────────────────────────────────────────────────────

    def as_candidate(self) -> dict[str, Any]:
        """Current values keyed by wire name, as sent to the API."""
        return {wire: getattr(self, attr) for attr, wire in _WIRE_NAMES.items()}

    def submit(self, catalog: TaxonomyCatalog | None = None) -> PositionRequest | None:
        """Validate client-side.

        Returns:
            The PositionRequest and advances to GENERATE on success;
            None with ``errors`` populated (step stays DEFINE) on failure.
        """
        result = validate_for_submission(self.as_candidate(), catalog)
        if not result.ok:
            self.errors = dict(result.errors)
            self.step = WorkflowStep.DEFINE
            return None
        self.errors = {}
        self.step = WorkflowStep.GENERATE
        return result.request

    def record_description(self, text: str) -> None:
        self.description = text
        self.step = WorkflowStep.FINALIZE

    def record_failure(self) -> None:
        """Generation failed; return to the form with values intact."""
        self.step = WorkflowStep.DEFINE

    def reset(self) -> None:
        """Clear everything and start again at DEFINE."""
        for attr in _WIRE_NAMES:
            setattr(self, attr, "")
        self.errors = {}
        self.description = ""
        self.step = WorkflowStep.DEFINE
