"""
Parsing context logger.

Provides logging interface for parsing context with automatic [parse] prefix.
"""

from loguru import logger

CONTEXT_PREFIX = "[parse]"


def _log_debug(message: str) -> None:
    """Log debug message with [parse] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [parse] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")
