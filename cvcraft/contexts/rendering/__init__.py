"""
Rendering Context

Responsibilities:
- Assembles themed page markup from parsed content
- Builds Word documents from structural elements
- Orchestrates markdown -> output conversions with timing and logging

Owns: Page template, Word formatting policy, ConversionResult
Never: Decides how markdown or markup is classified
"""

from cvcraft.contexts.rendering.converter import (
    ConversionResult,
    convert_markdown_to_html,
    convert_markdown_to_word,
)
from cvcraft.contexts.rendering.exceptions import RenderError
from cvcraft.contexts.rendering.html_renderer import HTMLRenderer
from cvcraft.contexts.rendering.word_builder import WordDocumentBuilder, suggested_filename

__all__ = [
    "convert_markdown_to_word",
    "convert_markdown_to_html",
    "ConversionResult",
    "HTMLRenderer",
    "WordDocumentBuilder",
    "suggested_filename",
    "RenderError",
]
