"""
API logger.

Provides logging interface for the HTTP layer with automatic [api] prefix.
"""

import os
from pathlib import Path
from typing import Optional

from loguru import logger

from folioflow.utils.llm import DEFAULT_FALLBACK_MODEL, DEFAULT_MODEL
from folioflow.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[api]"


def setup_api_logger(log_dir: Optional[Path] = None) -> Path:
    """
    Setup logger for the API server.

    Records which models are configured and whether a credential is present
    (never the credential itself).

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="api",
        log_dir=log_dir,
        extra_provenance={
            "API key configured": "Yes" if os.getenv("GROQ_API_KEY") else "No (set GROQ_API_KEY in .env)",
            "Primary model": os.getenv("MODEL_NAME", DEFAULT_MODEL),
            "Fallback model": os.getenv("FALLBACK_MODEL", DEFAULT_FALLBACK_MODEL),
        },
    )


def _log_info(message: str) -> None:
    """Log info message with [api] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [api] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [api] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [api] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")
