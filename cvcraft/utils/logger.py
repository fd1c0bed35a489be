"""
Shared loguru setup for command runs.

Each run gets its own log directory with one <context>.log file, plus an
optional stdout sink. The caller supplies the run header (input, theme, ...).
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from cvcraft import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    run_info: Optional[Dict[str, object]] = None,
    console: bool = True,
) -> Path:
    """
    Point loguru at a fresh log file for one run and write the run header.

    Args:
        context_name: Context identifier, used as the log file stem
        log_dir: Directory for this run
        run_info: Header entries; None values are skipped
        console: Also log INFO and above to stdout

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    log_run_header(context_name, run_info)
    return log_file


def log_run_header(context_name: str, run_info: Optional[Dict[str, object]] = None) -> None:
    """Log the cvcraft version, the command line, and the caller's run entries."""
    logger.debug(f"cvcraft {__version__} [{context_name}] {' '.join(sys.argv)}")
    for key, value in (run_info or {}).items():
        if value is not None:
            logger.info(f"{key}: {value}")
