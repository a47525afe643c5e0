"""
tests/unit/test_container.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for provider selection in services/container.py.
"""
from __future__ import annotations

from dataclasses import replace
from unittest.mock import patch

import pytest

from pdgen.adapters.bedrock_llm import BedrockLLMAdapter
from pdgen.adapters.openai_llm import OpenAILLMAdapter
from pdgen.domain.exceptions import AuthenticationError, ConfigurationError
from pdgen.ports.llm_port import LLMPort
from pdgen.services.container import _build_llm


def test_openai_selected(settings):
    llm = _build_llm(replace(settings, llm_provider="openai", openai_api_key="sk-x"))
    assert isinstance(llm, OpenAILLMAdapter)
    assert isinstance(llm, LLMPort)


@patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
def test_bedrock_selected_case_insensitively(mock_client, settings):
    llm = _build_llm(replace(settings, llm_provider="Bedrock"))
    assert isinstance(llm, BedrockLLMAdapter)
    assert llm.model_name == "anthropic.claude-test"


def test_unknown_provider(settings):
    with pytest.raises(ConfigurationError, match="Unknown LLM_PROVIDER"):
        _build_llm(replace(settings, llm_provider="gemini"))


def test_openai_without_key(settings):
    with pytest.raises(AuthenticationError):
        _build_llm(replace(settings, llm_provider="openai", openai_api_key=""))


def test_mock_adapter_satisfies_port(mock_llm):
    assert isinstance(mock_llm, LLMPort)
