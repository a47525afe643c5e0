"""
adapters/openai_llm.py
──────────────────────────────────────────────────────────────────────────────
Implements LLMPort using the OpenAI Chat Completions API.

Key behaviour:
  - Uses /v1/chat/completions via raw requests (no openai SDK dependency)
  - system_prompt → system role message; user_message → user role message
  - Retries on 429 / 500 / 503 and network errors with exponential back-off
  - 401 → AuthenticationError, 404 → ModelNotFoundError
  - Anything else unrecoverable → GenerationError

Required env vars:
  OPENAI_API_KEY     — your OpenAI secret key  (sk-...)
  OPENAI_LLM_MODEL   — default: gpt-4o

To enable:
  Set LLM_PROVIDER=openai in your .env file.
"""
from __future__ import annotations

import logging
import time

import requests

from pdgen.config.settings import Settings
from pdgen.domain.exceptions import AuthenticationError, GenerationError, ModelNotFoundError
from pdgen.domain.models import GenerationResult

logger = logging.getLogger(__name__)

_OPENAI_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class OpenAILLMAdapter:
    """OpenAI GPT chat completions adapter.

    Injected into DescriptionGenerator via services/container.py when
    ``LLM_PROVIDER=openai`` is set in the environment.
    """

    def __init__(self, settings: Settings) -> None:
        if not settings.openai_api_key:
            raise AuthenticationError(
                "OPENAI_API_KEY is not set. "
                "Add it to your .env file or environment."
            )
        self._settings = settings
        self._headers = {
            "Authorization": f"Bearer {settings.openai_api_key}",
            "Content-Type": "application/json",
        }
        logger.debug("OpenAILLMAdapter ready | model=%s", settings.openai_llm_model)

    # ── LLMPort implementation ─────────────────────────────────────────────

    @property
    def model_name(self) -> str:
        """Name of the underlying OpenAI chat model."""
        return self._settings.openai_llm_model

    def generate_text(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> GenerationResult:
        """Send a prompt and return the generated text.

        Raises:
            AuthenticationError: On 401.
            ModelNotFoundError:  On 404.
            GenerationError:     On any other non-2xx, or after all retries.
        """
        payload = self._build_payload(system_prompt, user_message, max_tokens, temperature)
        return self._post_with_retry(payload, retries=self._settings.llm_retries)

    # ── Private helpers ────────────────────────────────────────────────────

    def _build_payload(
        self,
        system_prompt: str,
        user_message: str,
        max_tokens: int,
        temperature: float,
    ) -> dict:
        """Build the OpenAI chat completions request body."""
        return {
            "model": self._settings.openai_llm_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

    def _post_with_retry(
        self,
        payload: dict,
        retries: int = 3,
    ) -> GenerationResult:
        """POST to the OpenAI API with back-off on 429 / 500 / 503."""
        delay = 2.0
        last_exc: Exception | None = None

        for attempt in range(1, retries + 1):
            try:
                resp = requests.post(
                    _OPENAI_CHAT_URL,
                    headers=self._headers,
                    json=payload,
                    timeout=self._settings.llm_timeout,
                )
            except requests.RequestException as exc:
                last_exc = exc
                logger.warning(
                    "OpenAI LLM request error (attempt %d/%d): %s",
                    attempt, retries, exc,
                )
                time.sleep(delay)
                delay *= 2
                continue

            if resp.status_code == 401:
                raise AuthenticationError(
                    "OpenAI returned 401 Unauthorised. "
                    "Check that OPENAI_API_KEY is valid."
                )

            if resp.status_code == 404:
                raise ModelNotFoundError(
                    f"OpenAI model '{self.model_name}' was not found (HTTP 404)."
                )

            if resp.status_code in (429, 500, 503):
                logger.warning(
                    "OpenAI LLM %d (attempt %d/%d) — back-off %.1fs",
                    resp.status_code, attempt, retries, delay,
                )
                time.sleep(delay)
                delay *= 2
                continue

            if not resp.ok:
                logger.error(
                    "OpenAI LLM HTTP %d: %s",
                    resp.status_code, resp.text[:300],
                )
                raise GenerationError(f"OpenAI returned HTTP {resp.status_code}")

            return self._extract_result(resp.json())

        logger.error("OpenAI LLM failed after %d attempts", retries)
        raise GenerationError(
            f"OpenAI LLM failed after {retries} attempts"
        ) from last_exc

    def _extract_result(self, response_json: dict) -> GenerationResult:
        """Pull the content string and usage out of the chat completions response."""
        try:
            choices = response_json.get("choices", [])
            content = ""
            if choices:
                content = (choices[0].get("message", {}).get("content") or "").strip()
            else:
                logger.warning("OpenAI response contained no choices")
            usage = response_json.get("usage") or {}
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            raise GenerationError(f"Unexpected OpenAI response structure: {exc}") from exc

        return GenerationResult(
            text=content,
            model=response_json.get("model", self.model_name),
            input_tokens=usage.get("prompt_tokens", 0),
            output_tokens=usage.get("completion_tokens", 0),
        )
