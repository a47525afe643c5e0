"""
HR Position Description Generator — Production Package
=======================================================
Hexagonal (Ports & Adapters) architecture.

Layer map
─────────────────────────────────────────────────────
  config/       Settings, logging setup & prompt strings
  domain/       Pure business objects (models, exceptions, OPM data) — no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete LLM providers (AWS Bedrock, OpenAI)
  services/     Catalog, validation, form state, generation; depend on Ports
  interfaces/   Delivery layer: CLI, Streamlit UI, FastAPI
  tests/        Full test suite: unit / integration / e2e

Swapping the LLM provider:
  1. Write a new adapter in adapters/ implementing LLMPort
  2. Add one branch in services/container.py
  3. Done — zero other files touched
"""
__version__ = "1.0.0"
