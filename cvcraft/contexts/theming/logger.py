"""
Theming context logger.

Provides logging interface for theming context with automatic [theme] prefix.
All theming modules should import from this module, not from loguru directly.
"""

from pathlib import Path
from typing import List

from loguru import logger

CONTEXT_PREFIX = "[theme]"


# Wrapper functions with automatic [theme] prefix


def _log_info(message: str) -> None:
    """Log info message with [theme] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [theme] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [theme] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [theme] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [theme] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_discovery_result(themes_path: Path, names: List[str]) -> None:
    """Log the outcome of a discovery pass."""
    if names:
        _log_success(f"Discovered {len(names)} themes in {themes_path}: {', '.join(names)}")
    else:
        _log_info(f"No themes discovered in {themes_path}")
