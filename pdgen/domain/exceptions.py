"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at PDGenError so callers can catch broadly
(except PDGenError) or narrowly (except GenerationError).

Input validation failures are NOT exceptions: the validation pipeline always
returns a FieldErrorSet.  Only the conditions below escalate.

HTTP mapping used by interfaces/api.py:
  GenerationError       → 500
  ModelNotFoundError    → 500 (specific message)
  AuthenticationError   → 500 (specific message)
  CatalogIntegrityError → fatal at startup, never reaches a request
"""
from __future__ import annotations


class PDGenError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(PDGenError):
    """Raised when required configuration is missing or invalid."""


class AuthenticationError(PDGenError):
    """Raised when provider credentials are missing, invalid or denied."""


class CatalogIntegrityError(PDGenError):
    """Raised when the OPM taxonomy reference data is malformed or missing."""


class GenerationError(PDGenError):
    """Raised when the text-generation call fails or returns no text."""


class ModelNotFoundError(GenerationError):
    """Raised when the configured model id does not exist at the provider."""
