"""
services/validation.py
──────────────────────────────────────────────────────────────────────────────
Validation pipeline: candidate form data → PositionRequest | FieldErrorSet.

One rule set, two entry points:
  validate_for_submission()  client side (Streamlit form, inline errors)
  validate_for_api()         server side (FastAPI endpoint, before generation)

Both run PositionRules.validate(); they differ only in the wording supplied
by their ValidationMessages, never in which inputs are accepted.

Rule order:
  1. Independent per-field checks (trim → required → length / membership).
  2. Cross-field check last: series must belong to jobFamily.  Skipped when
     jobFamily already failed or series is empty, so a bad family never
     produces a second, cascading series error.
Errors accumulate into one FieldErrorSet; nothing short-circuits.

Malformed input never raises.  A non-mapping candidate is read as an empty
form; non-string values fail the field they sit in.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pdgen.domain.models import (
    FieldErrorSet,
    PayScaleGrade,
    PositionRequest,
    ValidationResult,
)
from pdgen.services.catalog import TaxonomyCatalog, get_catalog

logger = logging.getLogger(__name__)

# Wire name → accepted snake_case alias
_FIELD_ALIASES: dict[str, str] = {
    "jobTitle": "job_title",
    "department": "department",
    "payScaleGrade": "pay_scale_grade",
    "jobFamily": "job_family",
    "series": "series",
}

_VALID_GRADES = frozenset(PayScaleGrade.values())


@dataclass(frozen=True)
class ValidationMessages:
    """Message catalogue for one validation entry point.

    ``{label}`` and ``{min}`` / ``{max}`` are filled in per field.
    """

    required:        str = "{label} is required"
    not_text:        str = "{label} must be text"
    too_short:       str = "{label} must be at least {min} characters"
    too_long:        str = "{label} must be less than {max} characters"
    invalid_grade:   str = "Please select a valid pay scale and grade"
    invalid_family:  str = "Please select a valid job family"
    invalid_series:  str = "Please select a valid series for the chosen job family"


SUBMISSION_MESSAGES = ValidationMessages()

API_MESSAGES = ValidationMessages(
    invalid_grade="Invalid pay scale and grade",
    invalid_family="Invalid job family code",
    invalid_series="Invalid series code for the selected job family",
)


@dataclass(frozen=True)
class _TextRule:
    field: str
    label: str
    min_len: int
    max_len: int


_TEXT_RULES: tuple[_TextRule, ...] = (
    _TextRule("jobTitle", "Job title", 3, 100),
    _TextRule("department", "Department", 2, 100),
)


class PositionRules:
    """The single definition of what makes a submission valid.

    Args:
        catalog: Taxonomy used for job family / series membership.
    """

    def __init__(self, catalog: TaxonomyCatalog) -> None:
        self._catalog = catalog

    # ── Public API ─────────────────────────────────────────────────────────

    def validate(
        self,
        candidate: Any,
        messages: ValidationMessages,
    ) -> ValidationResult:
        """Run every rule against ``candidate`` and collect all failures."""
        values = _normalise(candidate)
        errors: FieldErrorSet = {}

        # ── Stage 1: independent field checks ──────────────────────────────
        for rule in _TEXT_RULES:
            message = self._check_text(values[rule.field], rule, messages)
            if message:
                errors[rule.field] = message

        grade = values["payScaleGrade"]
        if not isinstance(grade, str) or grade not in _VALID_GRADES:
            errors["payScaleGrade"] = messages.invalid_grade

        family = values["jobFamily"]
        family_message = self._check_required(family, "Job family", messages)
        if not family_message and not self._catalog.is_valid_group_code(family):
            family_message = messages.invalid_family
        if family_message:
            errors["jobFamily"] = family_message

        series = values["series"]
        series_message = self._check_required(series, "Series", messages)
        if series_message:
            errors["series"] = series_message

        # ── Stage 2: cross-field check ─────────────────────────────────────
        if not family_message and not series_message:
            if not self._catalog.is_valid_series_code(family, series):
                errors["series"] = messages.invalid_series

        if errors:
            logger.debug("Validation failed | fields=%s", sorted(errors))
            return ValidationResult(errors=errors)

        return ValidationResult(
            request=PositionRequest(
                job_title=values["jobTitle"],
                department=values["department"],
                pay_scale_grade=PayScaleGrade(grade),
                job_family=family,
                series=series,
            )
        )

    # ── Private helpers ────────────────────────────────────────────────────

    @staticmethod
    def _check_required(value: Any, label: str, messages: ValidationMessages) -> str | None:
        if value is None or value == "":
            return messages.required.format(label=label)
        if not isinstance(value, str):
            return messages.not_text.format(label=label)
        return None

    def _check_text(
        self,
        value: Any,
        rule: _TextRule,
        messages: ValidationMessages,
    ) -> str | None:
        missing = self._check_required(value, rule.label, messages)
        if missing:
            return missing
        if len(value) < rule.min_len:
            return messages.too_short.format(label=rule.label, min=rule.min_len)
        if len(value) > rule.max_len:
            return messages.too_long.format(label=rule.label, max=rule.max_len)
        return None


# ── Entry points ───────────────────────────────────────────────────────────

def validate_for_submission(
    candidate: Any,
    catalog: TaxonomyCatalog | None = None,
) -> ValidationResult:
    """Client-side validation: wording suited to inline form errors."""
    return _rules(catalog).validate(candidate, SUBMISSION_MESSAGES)


def validate_for_api(
    candidate: Any,
    catalog: TaxonomyCatalog | None = None,
) -> ValidationResult:
    """Server-side validation: same rules, API wording."""
    return _rules(catalog).validate(candidate, API_MESSAGES)


def _rules(catalog: TaxonomyCatalog | None) -> PositionRules:
    return PositionRules(catalog if catalog is not None else get_catalog())


# ── Input normalisation ────────────────────────────────────────────────────

def _normalise(candidate: Any) -> dict[str, Any]:
    """Read the five fields by wire name (or snake_case alias), trimming text."""
    source: Mapping = candidate if isinstance(candidate, Mapping) else {}
    values: dict[str, Any] = {}
    for wire, alias in _FIELD_ALIASES.items():
        raw = source.get(wire, source.get(alias))
        values[wire] = raw.strip() if isinstance(raw, str) else raw
    return values
