"""
Structuring context logger.

Provides logging interface for the structuring context with automatic [structure] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[structure]"


def _log_info(message: str) -> None:
    """Log info message with [structure] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [structure] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [structure] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_reconciliation_result(resume) -> None:
    """Summarize what a reconciled resume contains."""
    counts = {
        "experiences": len(resume.experiences),
        "education": len(resume.education),
        "projects": len(resume.projects),
        "certifications": len(resume.certifications),
        "languages": len(resume.languages),
        "awards": len(resume.awards),
        "custom sections": len(resume.custom_sections),
    }
    summary = ", ".join(f"{count} {name}" for name, count in counts.items())
    _log_info(f"Reconciled resume for {resume.full_name or 'Unknown'}: {summary}")
