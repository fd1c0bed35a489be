"""
Markdown Pattern Constants

Regex patterns used by front matter extraction and section segmentation.
Organized into frozen dataclasses by category, following the convention of
one class per concern with class-level pattern strings.
"""

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class FrontMatterPatterns:
    """Front matter block delimiters."""

    # A line consisting solely of three dashes (surrounding whitespace ignored)
    DELIMITER: str = "---"


@dataclass(frozen=True)
class LinePatterns:
    """
    Line classification patterns for section segmentation.

    Matching is done against the raw (unstripped) line, so indented
    markers are treated as plain text.
    """

    # One or more leading hashes; group 1 is the run
    HEADER: str = r"^(#+)"

    # Hash run plus any following whitespace, removed to get header text
    HEADER_PREFIX: str = r"^#+\s*"

    # "- " or "* " bullets, or "12." ordered markers (no space required)
    LIST_ITEM: str = r"^(?:[-*] |\d+\.)"

    # Marker plus following whitespace, removed to get item text
    LIST_MARKER: str = r"^(?:[-*]|\d+\.)\s*"

    # Fenced code block delimiter (``` or ~~~, optional info string)
    CODE_FENCE: str = r"^(```|~~~)"

    # Pipe table row
    TABLE_ROW: str = r"^\|"

    # List item as the markdown renderer sees it (marker must be followed by whitespace)
    RENDERED_LIST_ITEM: str = r"^(?:[-*+]|\d+[.)])\s"


class LineRegex:
    """Compiled versions of LinePatterns."""

    HEADER = re.compile(LinePatterns.HEADER)
    HEADER_PREFIX = re.compile(LinePatterns.HEADER_PREFIX)
    LIST_ITEM = re.compile(LinePatterns.LIST_ITEM)
    LIST_MARKER = re.compile(LinePatterns.LIST_MARKER)
    CODE_FENCE = re.compile(LinePatterns.CODE_FENCE)
    TABLE_ROW = re.compile(LinePatterns.TABLE_ROW)
    RENDERED_LIST_ITEM = re.compile(LinePatterns.RENDERED_LIST_ITEM)


def header_level(line: str) -> int:
    """Number of leading '#' characters (0 if the line is not a header)."""
    match = LineRegex.HEADER.match(line)
    return len(match.group(1)) if match else 0


def strip_header_marker(line: str) -> str:
    """Remove the leading hash run and the whitespace after it."""
    return LineRegex.HEADER_PREFIX.sub("", line, count=1)


def is_list_item(line: str) -> bool:
    return LineRegex.LIST_ITEM.match(line) is not None


def strip_list_marker(line: str) -> str:
    """Remove a bullet or ordered marker and the whitespace after it."""
    return LineRegex.LIST_MARKER.sub("", line, count=1)
