"""
services/container.py
──────────────────────────────────────────────────────────────────────────────
Dependency Injection container.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

Provider selection is driven entirely by environment variables — no code
changes are needed to switch between providers:

  LLM_PROVIDER=bedrock  (default) → BedrockLLMAdapter
  LLM_PROVIDER=openai             → OpenAILLMAdapter

Thread safety:
  @lru_cache(maxsize=1) makes get_generator() return the same instance across
  calls.  The generator holds no per-request state, so one instance per
  process is shared by every Streamlit session and every API request.
"""
from __future__ import annotations

import logging
from functools import lru_cache

from pdgen.config.settings import Settings, get_settings
from pdgen.domain.exceptions import ConfigurationError
from pdgen.ports.llm_port import LLMPort
from pdgen.services.catalog import get_catalog
from pdgen.services.generator import DescriptionGenerator

logger = logging.getLogger(__name__)


def _build_llm(settings: Settings) -> LLMPort:
    """Instantiate the correct LLMPort adapter based on LLM_PROVIDER."""
    provider = settings.llm_provider.lower()
    if provider == "openai":
        from pdgen.adapters.openai_llm import OpenAILLMAdapter
        logger.info("LLM provider: OpenAI (%s)", settings.openai_llm_model)
        return OpenAILLMAdapter(settings)
    if provider == "bedrock":
        from pdgen.adapters.bedrock_llm import BedrockLLMAdapter
        logger.info("LLM provider: AWS Bedrock (%s)", settings.bedrock_model_id)
        return BedrockLLMAdapter(settings)
    raise ConfigurationError(
        f"Unknown LLM_PROVIDER '{settings.llm_provider}'. "
        "Valid values: 'bedrock', 'openai'."
    )


@lru_cache(maxsize=1)
def get_generator() -> DescriptionGenerator:
    """Build and return the fully wired DescriptionGenerator singleton.

    Returns:
        Fully initialised DescriptionGenerator ready for use.

    Raises:
        ConfigurationError: Unknown provider name or missing AWS settings.
        AuthenticationError: Required API keys are missing.
        CatalogIntegrityError: The taxonomy reference data is malformed.
    """
    settings = get_settings()
    logger.info("Building DescriptionGenerator | llm_provider=%s", settings.llm_provider)

    catalog = get_catalog()
    llm = _build_llm(settings)

    generator = DescriptionGenerator(llm=llm, catalog=catalog, settings=settings)
    logger.info("DescriptionGenerator ready | llm=%s", llm.model_name)
    return generator
