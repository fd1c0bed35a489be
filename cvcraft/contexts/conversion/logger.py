"""
Conversion context logger.

Provides logging interface for conversion context with automatic [convert] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[convert]"


def _log_debug(message: str) -> None:
    """Log debug message with [convert] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
