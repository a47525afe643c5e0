"""
tests/unit/test_bedrock_llm_adapter.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for BedrockLLMAdapter.

AnthropicBedrock is patched out, so no AWS credentials or network are used.
SDK errors are built with real httpx responses so the adapter's error
translation is exercised against the actual anthropic exception classes.
"""
from __future__ import annotations

from dataclasses import replace
from types import SimpleNamespace
from unittest.mock import patch

import anthropic
import httpx
import pytest

from pdgen.adapters.bedrock_llm import BedrockLLMAdapter
from pdgen.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GenerationError,
    ModelNotFoundError,
)

_REQUEST = httpx.Request("POST", "https://bedrock-runtime.us-east-1.amazonaws.com/model/x/invoke")


def _status_error(cls, status: int):
    return cls("boom", response=httpx.Response(status, request=_REQUEST), body=None)


def _message(*blocks, input_tokens: int = 5, output_tokens: int = 7):
    return SimpleNamespace(
        content=list(blocks),
        usage=SimpleNamespace(input_tokens=input_tokens, output_tokens=output_tokens),
    )


def _text(value: str):
    return SimpleNamespace(type="text", text=value)


# ── Credentials ────────────────────────────────────────────────────────────

class TestCredentials:
    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_iam_role_needs_only_region(self, mock_client, settings):
        BedrockLLMAdapter(settings)

        kwargs = mock_client.call_args.kwargs
        assert kwargs["aws_region"] == "us-east-1"
        assert "aws_access_key" not in kwargs
        assert kwargs["max_retries"] == settings.llm_retries

    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_iam_role_without_region_fails(self, mock_client, settings):
        with pytest.raises(ConfigurationError, match="AWS_REGION"):
            BedrockLLMAdapter(replace(settings, aws_region=""))
        mock_client.assert_not_called()

    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_static_keys_passed_through(self, mock_client, settings):
        BedrockLLMAdapter(
            replace(settings, aws_access_key_id="AKIA", aws_secret_access_key="secret")
        )
        kwargs = mock_client.call_args.kwargs
        assert kwargs["aws_access_key"] == "AKIA"
        assert kwargs["aws_secret_key"] == "secret"

    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_partial_keys_list_every_missing_name(self, mock_client, settings):
        with pytest.raises(ConfigurationError) as exc_info:
            BedrockLLMAdapter(replace(settings, aws_access_key_id="AKIA", aws_region=""))
        message = str(exc_info.value)
        assert "AWS_SECRET_ACCESS_KEY" in message
        assert "AWS_REGION" in message
        assert "AWS_ACCESS_KEY_ID" not in message


# ── generate_text ──────────────────────────────────────────────────────────

class TestGenerateText:
    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_returns_first_text_block(self, mock_client, settings):
        create = mock_client.return_value.messages.create
        create.return_value = _message(
            SimpleNamespace(type="tool_use"), _text("  About the Role  "), _text("ignored")
        )

        result = BedrockLLMAdapter(settings).generate_text(
            "system", "user", max_tokens=2000, temperature=0.7
        )

        assert result.text == "About the Role"
        assert result.model == "anthropic.claude-test"
        assert (result.input_tokens, result.output_tokens) == (5, 7)
        create.assert_called_once_with(
            model="anthropic.claude-test",
            max_tokens=2000,
            temperature=0.7,
            system="system",
            messages=[{"role": "user", "content": "user"}],
        )

    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_no_text_block_gives_empty_text(self, mock_client, settings):
        mock_client.return_value.messages.create.return_value = _message()
        result = BedrockLLMAdapter(settings).generate_text("s", "u", 10, 0.0)
        assert result.text == ""

    @pytest.mark.parametrize(
        "sdk_error, expected",
        [
            (_status_error(anthropic.NotFoundError, 404), ModelNotFoundError),
            (_status_error(anthropic.PermissionDeniedError, 403), AuthenticationError),
            (_status_error(anthropic.AuthenticationError, 401), AuthenticationError),
            (_status_error(anthropic.InternalServerError, 500), GenerationError),
            (anthropic.APIConnectionError(request=_REQUEST), GenerationError),
        ],
    )
    @patch("pdgen.adapters.bedrock_llm.AnthropicBedrock")
    def test_sdk_errors_translated(self, mock_client, sdk_error, expected, settings):
        mock_client.return_value.messages.create.side_effect = sdk_error

        with pytest.raises(expected) as exc_info:
            BedrockLLMAdapter(settings).generate_text("s", "u", 10, 0.0)
        assert exc_info.value.__cause__ is sdk_error
