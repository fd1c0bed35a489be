"""
Markdown resume parser.

Entry point of the parsing context: splits the front matter from the body,
renders the body to markup, and segments it into classified sections.
Never fails on malformed input; the worst case is a single paragraph.
"""

from typing import Callable, Optional

import markdown

from cvcraft.contexts.parsing.content_data_structure import ParsedContent
from cvcraft.contexts.parsing.front_matter import extract_front_matter
from cvcraft.contexts.parsing.logger import _log_debug
from cvcraft.contexts.parsing.section_patterns import LineRegex
from cvcraft.contexts.parsing.segmenter import SectionSegmenter
from cvcraft.utils.settings import get_settings
from cvcraft.utils.text_processing import normalize_newlines

# Single line breaks become <br />, typographic quotes/dashes, tables, fenced code
MARKDOWN_EXTENSIONS = ["extra", "nl2br", "sane_lists", "smarty"]

# smarty writes named entities by default; the Word output needs the characters
SMARTY_SUBSTITUTIONS = {
    "left-single-quote": "\u2018",
    "right-single-quote": "\u2019",
    "left-double-quote": "\u201c",
    "right-double-quote": "\u201d",
    "left-angle-quote": "\u00ab",
    "right-angle-quote": "\u00bb",
    "ndash": "\u2013",
    "mdash": "\u2014",
    "ellipsis": "\u2026",
}


def separate_lists(content: str) -> str:
    """
    Insert a blank line where a list starts directly under a text line.

    The markdown library only starts a list after a blank line, so without
    this "**Company** | 2020\\n- Did things" renders the bullets as text.
    Fenced code is left untouched.

    Example:
        >>> separate_lists("Intro\\n- a\\n- b")
        'Intro\\n\\n- a\\n- b'
    """
    lines = []
    in_code = False
    previous = ""
    for line in content.split("\n"):
        if LineRegex.CODE_FENCE.match(line):
            in_code = not in_code
        elif (
            not in_code
            and LineRegex.RENDERED_LIST_ITEM.match(line)
            and previous.strip()
            and not LineRegex.RENDERED_LIST_ITEM.match(previous)
            and not previous.startswith((" ", "\t"))
        ):
            lines.append("")
        lines.append(line)
        previous = line
    return "\n".join(lines)


def render_markdown(content: str) -> str:
    """
    Render markdown body content to markup.

    Args:
        content: Markdown text without front matter

    Returns:
        Rendered markup ("" for empty input)
    """
    return markdown.markdown(
        separate_lists(content),
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs={"smarty": {"substitutions": SMARTY_SUBSTITUTIONS}},
    )


class MarkdownParser:
    """
    Parses a markdown resume into ParsedContent.

    Args:
        renderer: Callable turning markdown into markup (defaults to render_markdown)
        coalesce_headings: Legacy header coalescing rule (defaults to settings)
        recognize_blocks: Emit code/table sections (defaults to settings)
    """

    def __init__(
        self,
        renderer: Optional[Callable[[str], str]] = None,
        coalesce_headings: Optional[bool] = None,
        recognize_blocks: Optional[bool] = None,
    ):
        parsing_settings = get_settings().parsing
        if coalesce_headings is None:
            coalesce_headings = bool(parsing_settings.coalesce_headings)
        if recognize_blocks is None:
            recognize_blocks = bool(parsing_settings.recognize_blocks)

        self.renderer = renderer or render_markdown
        self.coalesce_headings = coalesce_headings
        self.recognize_blocks = recognize_blocks

    def parse(self, text: str) -> ParsedContent:
        """
        Parse a markdown resume.

        Args:
            text: Full markdown document, optionally starting with front matter

        Returns:
            ParsedContent with rendered markup, metadata, and sections
        """
        text = normalize_newlines(text)
        content, metadata = extract_front_matter(text)

        segmenter = SectionSegmenter(
            coalesce_headings=self.coalesce_headings,
            recognize_blocks=self.recognize_blocks,
        )
        sections = segmenter.segment(content)
        html = self.renderer(content)

        _log_debug(f"Parsed {len(metadata)} metadata fields and {len(sections)} sections")
        return ParsedContent(html=html, metadata=metadata, sections=sections)


def parse(text: str) -> ParsedContent:
    """Parse with default settings."""
    return MarkdownParser().parse(text)
