"""
services/generator.py
──────────────────────────────────────────────────────────────────────────────
Generation service: validated PositionRequest → position description text.

This is the primary entry point for all interfaces (CLI, Streamlit, API).
It knows nothing about infrastructure — it only speaks in domain objects and
the LLMPort.

Gating:
  generate() only accepts a PositionRequest, which only the validation
  pipeline produces.  generate_from_candidate() is the convenience path for
  raw input: it runs the server-side validator first and never calls the
  LLM when validation fails.
"""
from __future__ import annotations

import logging
from typing import Any

from pdgen.config.prompts import SYSTEM_PROMPT, build_user_message
from pdgen.config.settings import Settings
from pdgen.domain.exceptions import GenerationError
from pdgen.domain.models import GenerationResult, PositionRequest, ValidationResult
from pdgen.ports.llm_port import LLMPort
from pdgen.services.catalog import TaxonomyCatalog
from pdgen.services.validation import validate_for_api

logger = logging.getLogger(__name__)


class DescriptionGenerator:
    """Turns validated position requests into generated descriptions.

    Inject via services/container.py — do not instantiate directly in
    application code.

    Args:
        llm:      Any object satisfying LLMPort.
        catalog:  Taxonomy used for titles in the prompt and for validation.
        settings: Shared application settings.
    """

    def __init__(
        self,
        llm: LLMPort,
        catalog: TaxonomyCatalog,
        settings: Settings,
    ) -> None:
        self._llm = llm
        self._catalog = catalog
        self._settings = settings

    @property
    def model_name(self) -> str:
        return self._llm.model_name

    @property
    def catalog(self) -> TaxonomyCatalog:
        return self._catalog

    # ── Public API ─────────────────────────────────────────────────────────

    def validate(self, candidate: Any) -> ValidationResult:
        """Server-side validation against this generator's catalog."""
        return validate_for_api(candidate, self._catalog)

    def generate(self, request: PositionRequest) -> GenerationResult:
        """Generate a position description.

        Raises:
            GenerationError: The model returned no text, or the provider
                failed (including ModelNotFoundError).
            AuthenticationError: Provider rejected the credentials.
        """
        logger.info(
            "generate | title=%r grade=%s family=%s series=%s",
            request.job_title[:80],
            request.pay_scale_grade.value,
            request.job_family,
            request.series,
        )

        group = self._catalog.get_group(request.job_family)
        series = self._catalog.get_series(request.job_family, request.series)
        user = build_user_message(
            request,
            family_title=group.title if group else None,
            series_title=series.title if series else None,
        )

        result = self._llm.generate_text(
            SYSTEM_PROMPT,
            user,
            max_tokens=self._settings.max_tokens,
            temperature=self._settings.temperature,
        )
        if not result.text:
            raise GenerationError("No description generated")

        logger.info(
            "Token usage | input=%d output=%d total=%d",
            result.input_tokens,
            result.output_tokens,
            result.total_tokens,
        )
        return result

    def generate_from_candidate(
        self,
        candidate: Any,
    ) -> tuple[ValidationResult, GenerationResult | None]:
        """Validate raw input, then generate only if it passed."""
        validation = self.validate(candidate)
        if not validation.ok:
            return validation, None
        return validation, self.generate(validation.request)
