"""
adapters/bedrock_llm.py
──────────────────────────────────────────────────────────────────────────────
Implements LLMPort using Claude on AWS Bedrock (anthropic.AnthropicBedrock).

Key behaviour:
  - Credentials: if neither AWS_ACCESS_KEY_ID nor AWS_SECRET_ACCESS_KEY is
    set, an IAM role is assumed and only AWS_REGION is required; otherwise
    all three must be present.  Checked at construction (fail fast).
  - Retries on throttling / 5xx are delegated to the SDK (max_retries).
  - SDK errors are translated into the domain hierarchy:
      NotFoundError                              → ModelNotFoundError
      PermissionDeniedError / AuthenticationError → AuthenticationError
      any other APIError                          → GenerationError

Required env vars:
  AWS_REGION         — e.g. us-east-1
  BEDROCK_MODEL_ID   — default: anthropic.claude-3-5-sonnet-20241022-v2:0

This is the default provider (LLM_PROVIDER=bedrock).
"""
from __future__ import annotations

import logging

import anthropic
from anthropic import AnthropicBedrock

from pdgen.config.settings import Settings
from pdgen.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    GenerationError,
    ModelNotFoundError,
)
from pdgen.domain.models import GenerationResult

logger = logging.getLogger(__name__)


def _check_credentials(settings: Settings) -> None:
    """Raise ConfigurationError listing every missing AWS setting."""
    if settings.uses_iam_role:
        if not settings.aws_region:
            raise ConfigurationError(
                "Missing required environment variable: AWS_REGION. "
                "Check your .env file or ensure an IAM role is configured."
            )
        return

    required = {
        "AWS_ACCESS_KEY_ID": settings.aws_access_key_id,
        "AWS_SECRET_ACCESS_KEY": settings.aws_secret_access_key,
        "AWS_REGION": settings.aws_region,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}. "
            "Check your .env file."
        )


class BedrockLLMAdapter:
    """Claude-on-Bedrock adapter.

    Injected into DescriptionGenerator via services/container.py.
    """

    def __init__(self, settings: Settings) -> None:
        _check_credentials(settings)
        self._settings = settings

        kwargs: dict = {
            "aws_region": settings.aws_region,
            "max_retries": settings.llm_retries,
            "timeout": float(settings.llm_timeout),
        }
        if not settings.uses_iam_role:
            kwargs["aws_access_key"] = settings.aws_access_key_id
            kwargs["aws_secret_key"] = settings.aws_secret_access_key
        self._client = AnthropicBedrock(**kwargs)

        logger.debug(
            "BedrockLLMAdapter ready | model=%s region=%s iam_role=%s",
            settings.bedrock_model_id,
            settings.aws_region,
            settings.uses_iam_role,
        )

    # ── LLMPort implementation ─────────────────────────────────────────────

    @property
    def model_name(self) -> str:
        return self._settings.bedrock_model_id

    def generate_text(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> GenerationResult:
        """Invoke the Bedrock model and return its first text block.

        Raises:
            ModelNotFoundError:  Unknown BEDROCK_MODEL_ID.
            AuthenticationError: Access denied / bad credentials.
            GenerationError:     Any other Bedrock failure.
        """
        logger.info("Invoking Bedrock model: %s", self.model_name)
        try:
            message = self._client.messages.create(
                model=self.model_name,
                max_tokens=max_tokens,
                temperature=temperature,
                system=system_prompt,
                messages=[{"role": "user", "content": user_message}],
            )
        except anthropic.NotFoundError as exc:
            raise ModelNotFoundError(
                f"Bedrock model '{self.model_name}' was not found."
            ) from exc
        except (anthropic.PermissionDeniedError, anthropic.AuthenticationError) as exc:
            raise AuthenticationError(
                "Access denied to Bedrock. Check your AWS credentials and permissions."
            ) from exc
        except anthropic.APIError as exc:
            logger.error("Bedrock call failed: %s", exc)
            raise GenerationError(f"Bedrock call failed: {exc}") from exc

        text = next(
            (block.text for block in message.content if getattr(block, "type", "") == "text"),
            "",
        )
        return GenerationResult(
            text=text.strip(),
            model=self.model_name,
            input_tokens=message.usage.input_tokens,
            output_tokens=message.usage.output_tokens,
        )
