"""
Editing context logger.

Provides logging interface for the editing context with automatic [edit] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[edit]"


def _log_info(message: str) -> None:
    """Log info message with [edit] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [edit] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_history_change(action: str, past: int, future: int) -> None:
    """Log an undo/redo step with the resulting stack depths."""
    _log_info(f"{action}: {past} undo step(s), {future} redo step(s) remaining")
