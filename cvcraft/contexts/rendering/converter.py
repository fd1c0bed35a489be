"""
Markdown -> output document orchestration.

This module exports:
- convert_markdown_to_word: markdown -> page markup -> structural elements -> .docx
- convert_markdown_to_html: markdown -> themed page markup
- ConversionResult: outcome of either, with timing

Expected failures (unknown theme, unwritable output) are reported through
ConversionResult rather than raised.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cvcraft.contexts.conversion.structural_converter import StructuralConverter
from cvcraft.contexts.parsing.parser import MarkdownParser
from cvcraft.contexts.rendering.exceptions import RenderError
from cvcraft.contexts.rendering.html_renderer import HTMLRenderer
from cvcraft.contexts.rendering.logger import log_conversion_result, log_conversion_start
from cvcraft.contexts.rendering.word_builder import WordDocumentBuilder
from cvcraft.contexts.theming.exceptions import ThemeNotFoundError
from cvcraft.contexts.theming.theme_data_structure import ThemeCustomization
from cvcraft.contexts.theming.theme_registry import ThemeRegistry
from cvcraft.utils.settings import get_settings


@dataclass
class ConversionResult:
    """Result from convert_markdown_to_word() or convert_markdown_to_html()."""

    success: bool
    output_path: Optional[Path] = None
    error: Optional[str] = None
    time_s: float = 0.0
    element_count: Optional[int] = None
    # Rendered page, for HTML conversions
    content: Optional[str] = None


def _resolve_theme(theme: Optional[str]) -> str:
    return theme or get_settings().themes.default


def convert_markdown_to_word(
    markdown_text: str,
    output_path: Path,
    theme: Optional[str] = None,
    customization: Optional[ThemeCustomization] = None,
    theme_registry: Optional[ThemeRegistry] = None,
    parser: Optional[MarkdownParser] = None,
) -> ConversionResult:
    """
    Convert a markdown resume to a Word document.

    Args:
        markdown_text: Markdown resume, optionally with front matter
        output_path: Destination .docx path
        theme: Theme name (defaults to themes.default setting)
        customization: Optional color overrides
        theme_registry: Registry to use (a new one by default)
        parser: Parser to use (a default MarkdownParser by default)

    Returns:
        ConversionResult
    """
    theme = _resolve_theme(theme)
    output_path = Path(output_path)
    log_conversion_start("word", theme, output_path)
    start_time = time.time()

    try:
        parsed = (parser or MarkdownParser()).parse(markdown_text)
        page = HTMLRenderer(theme_registry).render(parsed, theme, customization)
        document = StructuralConverter().build_document(page, parsed.metadata, theme)
        WordDocumentBuilder().save(document, output_path)
        result = ConversionResult(
            success=True,
            output_path=output_path,
            element_count=len(document.elements),
        )
    except (ThemeNotFoundError, RenderError) as e:
        result = ConversionResult(success=False, output_path=output_path, error=str(e))
    except OSError as e:
        result = ConversionResult(
            success=False, output_path=output_path, error=f"Failed to read theme: {e}"
        )

    result.time_s = time.time() - start_time
    log_conversion_result("word", result)
    return result


def convert_markdown_to_html(
    markdown_text: str,
    output_path: Optional[Path] = None,
    theme: Optional[str] = None,
    customization: Optional[ThemeCustomization] = None,
    theme_registry: Optional[ThemeRegistry] = None,
    parser: Optional[MarkdownParser] = None,
) -> ConversionResult:
    """
    Convert a markdown resume to a themed page.

    Args:
        markdown_text: Markdown resume, optionally with front matter
        output_path: Optional destination .html path; when omitted the page is
                     only returned in ConversionResult.content
        theme: Theme name (defaults to themes.default setting)
        customization: Optional color overrides
        theme_registry: Registry to use (a new one by default)
        parser: Parser to use (a default MarkdownParser by default)

    Returns:
        ConversionResult with the page in content
    """
    theme = _resolve_theme(theme)
    log_conversion_start("html", theme, output_path)
    start_time = time.time()

    try:
        parsed = (parser or MarkdownParser()).parse(markdown_text)
        page = HTMLRenderer(theme_registry).render(parsed, theme, customization)
        if output_path is not None:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(page, encoding="utf-8")
        result = ConversionResult(success=True, output_path=output_path, content=page)
    except ThemeNotFoundError as e:
        result = ConversionResult(success=False, output_path=output_path, error=str(e))
    except OSError as e:
        result = ConversionResult(
            success=False, output_path=output_path, error=f"Failed to write page: {e}"
        )

    result.time_s = time.time() - start_time
    log_conversion_result("html", result)
    return result
