"""
config/log.py
──────────────────────────────────────────────────────────────────────────────
Process-wide logging setup shared by the CLI, the API and the Streamlit UI.

Modules never configure logging themselves; they only do
``logger = logging.getLogger(__name__)``.  Each interface calls
configure_logging() once at startup.
"""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL".
               Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).debug("Logging initialised at %s", level.upper())
