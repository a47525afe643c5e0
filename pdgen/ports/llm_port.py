"""
ports/llm_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for text-generation (LLM) providers.

Current implementations:
  BedrockLLMAdapter  (AWS Bedrock, Claude)  — default
  OpenAILLMAdapter   (OpenAI Chat Completions)

To add a provider: write an adapter implementing this Protocol, then add one
branch in services/container.py.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from pdgen.domain.models import GenerationResult


@runtime_checkable
class LLMPort(Protocol):
    """Contract for a free-text generating LLM provider."""

    @property
    def model_name(self) -> str:
        """Identifier of the underlying LLM."""
        ...

    def generate_text(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> GenerationResult:
        """Send a prompt to the LLM and return its text with usage metadata.

        Args:
            system_prompt: System-level instruction.
            user_message:  User-turn content.
            max_tokens:    Upper bound on generated tokens.
            temperature:   Sampling temperature.

        Returns:
            GenerationResult; ``text`` may be empty if the model produced
            nothing (the caller decides whether that is an error).

        Raises:
            AuthenticationError: Credentials missing, invalid or denied.
            ModelNotFoundError:  The configured model id does not exist.
            GenerationError:     Any other unrecoverable provider failure.
        """
        ...
