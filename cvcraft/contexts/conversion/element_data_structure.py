"""
Structural Element Data Structures

Flat, typed units handed to the Word document builder.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ElementKind(str, Enum):
    """Kinds of structural element. There is no third heading tier."""

    HEADING_1 = "heading-level-1"
    HEADING_2 = "heading-level-2"
    PARAGRAPH = "paragraph"
    LIST_ITEM = "list-item"


@dataclass(frozen=True)
class StructuralElement:
    kind: ElementKind
    text: str


@dataclass(frozen=True)
class StructuralDocument:
    """
    Everything the Word document builder needs.

    Attributes:
        font: Font family selected from the theme name
        title: Name line synthesized from metadata (None if absent)
        contact_line: Contact values joined with " | " (None if absent)
        elements: Content elements in document order
    """

    font: str
    title: Optional[str] = None
    contact_line: Optional[str] = None
    elements: Tuple[StructuralElement, ...] = ()
