"""
Section segmentation.

Single-pass line classification over the body of a resume. The only state is
the currently open section; every line is classified and mapped to a named
transition that decides whether the open section is closed, extended, or
replaced.

Transitions:

    open_header      '#' line: close the open section, open a header
    add_list_item    list marker: reuse an open list or close and open one
    coalesce_header  text after an open header (legacy mode only): the header
                     becomes a paragraph whose first line is the heading text
    open_paragraph   text with nothing open, or after a list or header
    extend_paragraph text while a paragraph is open
    skip_blank       blank lines never open or close anything

With recognize_blocks enabled, fenced code and pipe tables get their own
transitions (open_code / extend_code / close_code, open_table / add_table_row).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from cvcraft.contexts.parsing.content_data_structure import Section, SectionKind
from cvcraft.contexts.parsing.section_patterns import (
    LineRegex,
    header_level,
    is_list_item,
    strip_header_marker,
    strip_list_marker,
)


class LineKind(str, Enum):
    """Classification of a single body line."""

    BLANK = "blank"
    HEADER = "header"
    LIST_ITEM = "list_item"
    TEXT = "text"
    CODE_FENCE = "code_fence"
    TABLE_ROW = "table_row"


@dataclass
class _OpenSection:
    """Mutable section under construction; frozen into a Section on close."""

    kind: SectionKind
    lines: List[str] = field(default_factory=list)
    level: Optional[int] = None
    items: List[str] = field(default_factory=list)

    def freeze(self) -> Optional[Section]:
        if self.kind == SectionKind.LIST:
            if not self.items:
                return None
            return Section(kind=self.kind, items=tuple(self.items))
        if self.kind == SectionKind.TABLE:
            return Section(kind=self.kind, content="\n".join(self.lines), items=tuple(self.lines))
        return Section(kind=self.kind, content="\n".join(self.lines), level=self.level)


class SectionSegmenter:
    """
    Line-classification state machine producing Sections in document order.

    Args:
        coalesce_headings: Keep the legacy rule where a text line directly under
            an open header turns that header into a paragraph
        recognize_blocks: Emit code sections for fenced blocks and table
            sections for pipe tables instead of treating them as text
    """

    def __init__(self, coalesce_headings: bool = False, recognize_blocks: bool = False):
        self.coalesce_headings = coalesce_headings
        self.recognize_blocks = recognize_blocks
        self._sections: List[Section] = []
        self._open: Optional[_OpenSection] = None
        self._in_code = False

    # Classification

    def classify(self, line: str) -> LineKind:
        if self.recognize_blocks and LineRegex.CODE_FENCE.match(line):
            return LineKind.CODE_FENCE
        if header_level(line):
            return LineKind.HEADER
        if is_list_item(line):
            return LineKind.LIST_ITEM
        if not line.strip():
            return LineKind.BLANK
        if self.recognize_blocks and LineRegex.TABLE_ROW.match(line):
            return LineKind.TABLE_ROW
        return LineKind.TEXT

    # Transitions

    def _close(self) -> None:
        if self._open is not None:
            section = self._open.freeze()
            if section is not None:
                self._sections.append(section)
        self._open = None

    def open_header(self, line: str) -> None:
        self._close()
        self._open = _OpenSection(
            kind=SectionKind.HEADER,
            lines=[strip_header_marker(line)],
            level=header_level(line),
        )

    def add_list_item(self, line: str) -> None:
        if self._open is None or self._open.kind != SectionKind.LIST:
            self._close()
            self._open = _OpenSection(kind=SectionKind.LIST)
        self._open.items.append(strip_list_marker(line))

    def coalesce_header(self, line: str) -> None:
        self._open.kind = SectionKind.PARAGRAPH
        self._open.level = None
        self._open.lines.append(line)

    def open_paragraph(self, line: str) -> None:
        self._close()
        self._open = _OpenSection(kind=SectionKind.PARAGRAPH, lines=[line])

    def extend_paragraph(self, line: str) -> None:
        self._open.lines.append(line)

    def open_code(self) -> None:
        self._close()
        self._open = _OpenSection(kind=SectionKind.CODE)
        self._in_code = True

    def extend_code(self, line: str) -> None:
        self._open.lines.append(line)

    def close_code(self) -> None:
        self._in_code = False
        self._close()

    def open_table(self, line: str) -> None:
        self._close()
        self._open = _OpenSection(kind=SectionKind.TABLE, lines=[line])

    def add_table_row(self, line: str) -> None:
        self._open.lines.append(line)

    # Driver

    def feed(self, line: str) -> None:
        """Apply the transition for one line."""
        if self._in_code:
            if LineRegex.CODE_FENCE.match(line):
                self.close_code()
            else:
                self.extend_code(line)
            return

        kind = self.classify(line)
        open_kind = self._open.kind if self._open is not None else None

        if kind == LineKind.BLANK:
            return
        if kind == LineKind.CODE_FENCE:
            self.open_code()
        elif kind == LineKind.HEADER:
            self.open_header(line)
        elif kind == LineKind.LIST_ITEM:
            self.add_list_item(line)
        elif kind == LineKind.TABLE_ROW:
            if open_kind == SectionKind.TABLE:
                self.add_table_row(line)
            else:
                self.open_table(line)
        elif open_kind == SectionKind.HEADER and self.coalesce_headings:
            self.coalesce_header(line)
        elif open_kind == SectionKind.PARAGRAPH:
            self.extend_paragraph(line)
        else:
            self.open_paragraph(line)

    def finish(self) -> Tuple[Section, ...]:
        """Close any open section and return everything produced so far."""
        self._in_code = False
        self._close()
        return tuple(self._sections)

    def segment(self, content: str) -> Tuple[Section, ...]:
        """
        Segment body content into sections.

        Args:
            content: Markdown body (front matter already removed)

        Returns:
            Sections in document order; empty for blank input
        """
        self._sections = []
        self._open = None
        self._in_code = False
        for line in content.split("\n"):
            self.feed(line)
        return self.finish()


def segment_sections(
    content: str, coalesce_headings: bool = False, recognize_blocks: bool = False
) -> Tuple[Section, ...]:
    """Convenience wrapper around SectionSegmenter.segment()."""
    segmenter = SectionSegmenter(
        coalesce_headings=coalesce_headings, recognize_blocks=recognize_blocks
    )
    return segmenter.segment(content)
