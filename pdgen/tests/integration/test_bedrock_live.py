"""
tests/integration/test_bedrock_live.py
──────────────────────────────────────────────────────────────────────────────
Integration tests for BedrockLLMAdapter against the live AWS Bedrock API.

Requirements:
  • AWS_REGION set, plus either an IAM role or AWS_ACCESS_KEY_ID /
    AWS_SECRET_ACCESS_KEY
  • Model access granted for BEDROCK_MODEL_ID

Run with:
  pytest pdgen/tests/integration/ -m integration -v
"""
from __future__ import annotations

import pytest

from pdgen.adapters.bedrock_llm import BedrockLLMAdapter
from pdgen.config.settings import get_settings
from pdgen.domain.exceptions import ConfigurationError
from pdgen.services.catalog import get_catalog
from pdgen.services.generator import DescriptionGenerator

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def live_adapter():
    try:
        return BedrockLLMAdapter(get_settings())
    except ConfigurationError as exc:
        pytest.skip(f"Bedrock not configured: {exc}")


def test_short_completion(live_adapter):
    result = live_adapter.generate_text(
        "You answer in one word.",
        "Reply with the word: ready",
        max_tokens=10,
        temperature=0.0,
    )
    assert result.text
    assert result.input_tokens > 0


def test_full_generation(live_adapter):
    generator = DescriptionGenerator(
        llm=live_adapter, catalog=get_catalog(), settings=get_settings()
    )
    validation, result = generator.generate_from_candidate(
        {
            "jobTitle": "IT Specialist (INFOSEC)",
            "department": "Office of the Chief Information Officer",
            "payScaleGrade": "GS-13",
            "jobFamily": "2200",
            "series": "2210",
        }
    )
    assert validation.ok
    assert "Responsibilities" in result.text
