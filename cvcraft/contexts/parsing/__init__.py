"""
Parsing Context

Responsibilities:
- Extracts the front matter block into ResumeMetadata
- Segments the markdown body into classified sections
- Renders the body to markup for downstream renderers

Owns: ParsedContent, ResumeMetadata, Section
Never: Applies themes or builds output documents
"""

from cvcraft.contexts.parsing.content_data_structure import (
    ParsedContent,
    ResumeMetadata,
    Section,
    SectionKind,
)
from cvcraft.contexts.parsing.front_matter import extract_front_matter
from cvcraft.contexts.parsing.parser import (
    MarkdownParser,
    parse,
    render_markdown,
    separate_lists,
)
from cvcraft.contexts.parsing.segmenter import SectionSegmenter, segment_sections

__all__ = [
    # Entry points
    "parse",
    "MarkdownParser",
    "render_markdown",
    "separate_lists",
    "extract_front_matter",
    "segment_sections",
    "SectionSegmenter",
    # Data structures
    "ParsedContent",
    "ResumeMetadata",
    "Section",
    "SectionKind",
]
