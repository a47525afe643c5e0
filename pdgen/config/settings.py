"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

To swap providers, change the relevant env var — no code edits required:
  LLM_PROVIDER      → bedrock (default) | openai
  BEDROCK_MODEL_ID  → swap the Claude model served by Bedrock
  OPENAI_LLM_MODEL  → swap the OpenAI chat model
  TAXONOMY_CSV_PATH → replace the built-in OPM reference data

AWS credentials: leave AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY unset to use
an IAM role (only AWS_REGION is then required).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")

DEFAULT_BEDROCK_MODEL_ID = "anthropic.claude-3-5-sonnet-20241022-v2:0"


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    return int(os.getenv(key, str(default)))


def _env_float(key: str, default: float) -> float:
    return float(os.getenv(key, str(default)))


def _env_optional_path(key: str) -> Path | None:
    value = os.getenv(key, "").strip()
    return Path(value) if value else None


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Provider selection ──────────────────────────────────────────────────
    # Valid values: "bedrock" | "openai"
    llm_provider: str = field(
        default_factory=lambda: _env("LLM_PROVIDER", "bedrock")
    )

    # ── AWS Bedrock ─────────────────────────────────────────────────────────
    aws_region: str = field(
        default_factory=lambda: _env("AWS_REGION", "")
    )
    aws_access_key_id: str = field(
        default_factory=lambda: _env("AWS_ACCESS_KEY_ID", "")
    )
    aws_secret_access_key: str = field(
        default_factory=lambda: _env("AWS_SECRET_ACCESS_KEY", "")
    )
    bedrock_model_id: str = field(
        default_factory=lambda: _env("BEDROCK_MODEL_ID", DEFAULT_BEDROCK_MODEL_ID)
    )

    # ── OpenAI ─────────────────────────────────────────────────────────────
    openai_api_key: str = field(
        default_factory=lambda: _env("OPENAI_API_KEY", "")
    )
    openai_llm_model: str = field(
        default_factory=lambda: _env("OPENAI_LLM_MODEL", "gpt-4o")
    )

    # ── Generation ─────────────────────────────────────────────────────────
    max_tokens: int = field(
        default_factory=lambda: _env_int("LLM_MAX_TOKENS", 2000)
    )
    temperature: float = field(
        default_factory=lambda: _env_float("LLM_TEMPERATURE", 0.7)
    )

    # ── Reference data ─────────────────────────────────────────────────────
    taxonomy_csv_path: Path | None = field(
        default_factory=lambda: _env_optional_path("TAXONOMY_CSV_PATH")
    )

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: _env("LOG_LEVEL", "INFO")
    )

    # ── HTTP timeouts (seconds) ────────────────────────────────────────────
    llm_timeout: int = field(default_factory=lambda: _env_int("LLM_TIMEOUT", 90))
    llm_retries: int = field(default_factory=lambda: _env_int("LLM_RETRIES", 3))

    @property
    def uses_iam_role(self) -> bool:
        """True when no static AWS keys are configured."""
        return not self.aws_access_key_id and not self.aws_secret_access_key


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly —
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
