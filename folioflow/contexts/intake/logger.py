"""
Intake context logger.

Provides logging interface for the intake context with automatic [intake] prefix.
All intake modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from folioflow.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[intake]"


def setup_intake_logger(log_dir: Optional[Path] = None, source: str = "") -> Path:
    """
    Setup logger for the intake context.

    Args:
        log_dir: Directory for this session (defaults to LOGS_PATH)
        source: Name of the file being extracted, recorded in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="intake",
        log_dir=log_dir,
        extra_provenance={"Source": source} if source else None,
    )


def _log_info(message: str) -> None:
    """Log info message with [intake] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [intake] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [intake] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [intake] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [intake] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_page_layout(page_number: int, fragment_count: int, two_column: bool, link_count: int) -> None:
    """Log the layout decision for one page."""
    layout = "two-column" if two_column else "single-column"
    _log_debug(
        f"Page {page_number}: {fragment_count} fragments, {layout}, {link_count} URI links"
    )


def log_extraction_result(num_pages: int, num_chars: int, elapsed_time: float) -> None:
    """Log a finished extraction."""
    _log_success(f"Extracted {num_chars} characters from {num_pages} page(s) ({elapsed_time:.2f}s)")
