"""
Front matter extraction.

A resume may start with a block of `key: value` lines fenced by two lines
consisting solely of `---`. Anything else at the top of the document means
there is no metadata and the whole input is body content.
"""

from typing import Dict, List, Tuple

from cvcraft.contexts.parsing.content_data_structure import ResumeMetadata
from cvcraft.contexts.parsing.logger import _log_warning
from cvcraft.contexts.parsing.section_patterns import FrontMatterPatterns


def _is_delimiter(line: str) -> bool:
    return line.strip() == FrontMatterPatterns.DELIMITER


def parse_metadata_lines(lines: List[str]) -> Dict[str, str]:
    """
    Split metadata lines on the first colon.

    Lines without a colon, or with nothing before it, are ignored.
    Later duplicate keys overwrite earlier ones.

    Args:
        lines: Lines between the front matter delimiters

    Returns:
        Ordered dict of trimmed keys to trimmed values
    """
    metadata = {}
    for line in lines:
        colon_index = line.find(":")
        if colon_index <= 0:
            continue
        key = line[:colon_index].strip()
        if not key:
            continue
        metadata[key] = line[colon_index + 1 :].strip()
    return metadata


def extract_front_matter(text: str) -> Tuple[str, ResumeMetadata]:
    """
    Separate the front matter block from the body.

    Args:
        text: Full markdown document (LF line endings)

    Returns:
        Tuple of (body content, metadata). When no complete block opens the
        document, the body is the input unchanged and metadata is empty.

    Example:
        >>> body, metadata = extract_front_matter("---\\nname: X\\n---\\nbody")
        >>> body, dict(metadata)
        ('body', {'name': 'X'})
    """
    lines = text.split("\n")
    if not lines or not _is_delimiter(lines[0]):
        return text, ResumeMetadata()

    for index in range(1, len(lines)):
        if _is_delimiter(lines[index]):
            metadata = parse_metadata_lines(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            return body, ResumeMetadata(metadata)

    _log_warning("Front matter opened with --- but never closed; treating it as body content")
    return text, ResumeMetadata()
