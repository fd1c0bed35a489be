"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from loguru directly.
"""

from pathlib import Path

from loguru import logger

from cvcraft.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(
    log_dir: Path,
    input_path: Path = None,
    output_path: Path = None,
    theme: str = None,
    output_format: str = None,
    customization=None,  # ThemeCustomization
    console: bool = True,
) -> Path:
    """
    Setup logger for one conversion run.

    The run header records the input and output files, the theme, the
    format, and any color overrides.

    Example:
        log_file = setup_rendering_logger(
            log_dir, input_path=Path("resume.md"), theme="modern", output_format="word"
        )
        _log_info("Starting conversion...")
    """
    colors = None
    if customization is not None and not customization.is_empty:
        overrides = {
            "primary": customization.primary_color,
            "secondary": customization.secondary_color,
            "accent": customization.accent_color,
        }
        colors = ", ".join(f"{key}={value}" for key, value in overrides.items() if value)

    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        run_info={
            "Input": input_path,
            "Output": output_path,
            "Theme": theme,
            "Format": output_format,
            "Colors": colors,
        },
        console=console,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_conversion_start(output_format: str, theme: str, output_path: Path = None) -> None:
    """Log start of a conversion with context."""
    _log_info(f"Converting to {output_format} with theme '{theme}'")
    if output_path:
        _log_debug(f"  Output: {output_path}")


def log_conversion_result(
    output_format: str,
    result,  # ConversionResult
) -> None:
    """
    Log conversion result.

    Args:
        output_format: "word" or "html"
        result: ConversionResult from convert_markdown_to_word() or convert_markdown_to_html()
    """
    if result.success:
        _log_success(f"{output_format} conversion succeeded ({result.time_s:.2f}s)")
        if result.output_path:
            _log_info(f"  Output: {result.output_path}")
        if result.element_count is not None:
            _log_debug(f"  Elements: {result.element_count}")
    else:
        _log_error(f"{output_format} conversion failed ({result.time_s:.2f}s)")
        if result.error:
            _log_error(f"  Error: {result.error}")
