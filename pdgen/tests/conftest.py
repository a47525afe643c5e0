"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and mock adapter implementations.

Mock adapters implement the Port Protocols via structural subtyping — they do
NOT inherit from any base class.  pytest uses them to test service logic
without any real AWS or OpenAI connections.

Fixture hierarchy:
  settings        → Settings with test defaults (no env lookups that matter)
  catalog         → TaxonomyCatalog built from the built-in OPM data
  small_catalog   → tiny hand-written catalog for integrity / ordering tests
  mock_llm        → implements LLMPort (returns a canned description)
  failing_llm     → implements LLMPort (raises a configurable PDGenError)
  generator       → DescriptionGenerator wired with mock_llm
  api_client      → FastAPI TestClient with the generator overridden
"""
from __future__ import annotations

import pytest

from pdgen.config.settings import Settings
from pdgen.domain.exceptions import GenerationError
from pdgen.domain.models import GenerationResult
from pdgen.services.catalog import TaxonomyCatalog, load_catalog
from pdgen.services.generator import DescriptionGenerator


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Return a Settings instance with sane test defaults."""
    return Settings(
        llm_provider="bedrock",
        aws_region="us-east-1",
        aws_access_key_id="",
        aws_secret_access_key="",
        bedrock_model_id="anthropic.claude-test",
        openai_api_key="",
        openai_llm_model="gpt-test",
        max_tokens=2000,
        temperature=0.7,
        taxonomy_csv_path=None,
        log_level="INFO",
        llm_timeout=5,
        llm_retries=2,
    )


# ── Catalog fixtures ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def catalog() -> TaxonomyCatalog:
    return load_catalog()


@pytest.fixture
def small_catalog() -> TaxonomyCatalog:
    return TaxonomyCatalog.from_records(
        groups=[("0200", "Human Resources Management"), ("2200", "Information Technology")],
        series=[
            ("0201", "Human Resources Management", "0200"),
            ("0203", "Human Resources Assistance", "0200"),
            ("2210", "Information Technology Management", "2200"),
        ],
    )


# ── Mock adapters ──────────────────────────────────────────────────────────

CANNED_DESCRIPTION = (
    "About the Role\n"
    "Lead the delivery of enterprise IT services.\n\n"
    "Key Responsibilities\n"
    "- Plan and manage IT projects"
)


class MockLLMAdapter:
    """Returns a canned description and records every call."""

    model_name = "mock-llm"

    def __init__(self, text: str = CANNED_DESCRIPTION) -> None:
        self.text = text
        self.calls: list[dict] = []

    def generate_text(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> GenerationResult:
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_message": user_message,
                "max_tokens": max_tokens,
                "temperature": temperature,
            }
        )
        return GenerationResult(
            text=self.text,
            model=self.model_name,
            input_tokens=120,
            output_tokens=480,
        )


class FailingLLMAdapter:
    """Raises the configured exception on every call."""

    model_name = "mock-llm-failing"

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or GenerationError("provider exploded")
        self.calls = 0

    def generate_text(self, system_prompt, user_message, max_tokens, temperature):
        self.calls += 1
        raise self.exc


# ── pytest fixtures ────────────────────────────────────────────────────────

VALID_CANDIDATE = {
    "jobTitle": "Dev",
    "department": "Eng",
    "payScaleGrade": "GS-12",
    "jobFamily": "2200",
    "series": "2210",
}


@pytest.fixture
def valid_candidate() -> dict:
    return dict(VALID_CANDIDATE)


@pytest.fixture
def mock_llm() -> MockLLMAdapter:
    return MockLLMAdapter()


@pytest.fixture
def failing_llm() -> FailingLLMAdapter:
    return FailingLLMAdapter()


@pytest.fixture
def generator(mock_llm, catalog, settings) -> DescriptionGenerator:
    return DescriptionGenerator(llm=mock_llm, catalog=catalog, settings=settings)


@pytest.fixture
def api_client(generator):
    """TestClient whose generate endpoint uses the mock-backed generator."""
    from fastapi.testclient import TestClient

    from pdgen.interfaces.api import app, get_generator_provider

    app.dependency_overrides[get_generator_provider] = lambda: (lambda: generator)
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
