"""
Parsed Content Data Structures

Defines the value types produced by the parsing context: resume metadata,
classified sections, and the ParsedContent aggregate handed to renderers.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

# Metadata keys that make up the contact line, in display order
CONTACT_KEYS = ("email", "phone", "website", "location")


class SectionKind(str, Enum):
    """Classification of a content block."""

    HEADER = "header"
    PARAGRAPH = "paragraph"
    LIST = "list"
    TABLE = "table"
    CODE = "code"


class ResumeMetadata(Mapping):
    """
    Ordered, read-only key/value metadata from the front matter block.

    Any key is allowed. The common resume fields get convenience accessors;
    website and location fall back to the url and address keys respectively.
    """

    def __init__(self, entries: Optional[Dict[str, str]] = None):
        self._entries: Dict[str, str] = dict(entries or {})

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ResumeMetadata({self._entries!r})"

    def __hash__(self) -> int:
        return hash(tuple(self._entries.items()))

    @property
    def name(self) -> Optional[str]:
        return self._entries.get("name") or None

    @property
    def title(self) -> Optional[str]:
        return self._entries.get("title") or None

    @property
    def email(self) -> Optional[str]:
        return self._entries.get("email") or None

    @property
    def phone(self) -> Optional[str]:
        return self._entries.get("phone") or None

    @property
    def website(self) -> Optional[str]:
        return self._entries.get("website") or self._entries.get("url") or None

    @property
    def location(self) -> Optional[str]:
        return self._entries.get("location") or self._entries.get("address") or None

    def contact_items(self) -> List[str]:
        """
        Present contact values in display order (email, phone, website, location).

        Returns:
            List of non-empty contact values
        """
        values = [getattr(self, key) for key in CONTACT_KEYS]
        return [value for value in values if value]


@dataclass(frozen=True)
class Section:
    """
    A classified content block.

    Attributes:
        kind: Block classification
        content: Raw text content (newline-joined for multi-line blocks)
        level: Heading level, only set for header sections
        items: Item strings, only set for list (and table) sections
    """

    kind: SectionKind
    content: str = ""
    level: Optional[int] = None
    items: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class ParsedContent:
    """
    Result of parsing a markdown resume.

    Attributes:
        html: Rendered markup of the body (front matter excluded)
        metadata: Front matter key/value pairs
        sections: Classified blocks in document order
    """

    html: str
    metadata: ResumeMetadata = field(default_factory=ResumeMetadata)
    sections: Tuple[Section, ...] = ()

    @property
    def headers(self) -> List[Section]:
        """All header sections, in order."""
        return [section for section in self.sections if section.kind == SectionKind.HEADER]
