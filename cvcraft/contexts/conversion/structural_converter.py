"""
Structural converter.

Recovers a flat heading/paragraph/list-item stream from already-rendered
page markup so it can drive the Word document builder. This is a lossy,
line-oriented recovery, not a DOM parser:

1. Preprocess on tokens: drop style/script blocks, keep only the inner markup
   of the "content" container if there is one, drop the header block (the
   name/contact lines are synthesized from metadata instead).
2. Classify each physical line, first match wins (see LINE_RULES).

Never raises on malformed markup; unrecognized lines either become bare
paragraphs or are skipped as style/script residue.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from cvcraft.contexts.conversion.element_data_structure import (
    ElementKind,
    StructuralDocument,
    StructuralElement,
)
from cvcraft.contexts.conversion.fonts import select_font
from cvcraft.contexts.conversion.logger import _log_debug
from cvcraft.contexts.conversion.markup_tokenizer import (
    Token,
    TokenKind,
    element_inner,
    first_element_text,
    remove_elements,
    render,
    text_content,
    tokenize,
)
from cvcraft.contexts.parsing.content_data_structure import ResumeMetadata

# Blocks removed with their contents before line classification
SKIPPED_BLOCK_TAGS = frozenset({"style", "script"})

CONTENT_CLASS = "content"
HEADER_CLASS = "header"
HEADER_TAG = "header"

# Lines starting with one of these tags are layout, never content
WRAPPER_TAGS = frozenset(
    {
        # document
        "html",
        "head",
        "body",
        "meta",
        "link",
        "title",
        # generic containers
        "div",
        # sectioning
        "section",
        "article",
        "main",
        "aside",
        "nav",
        "footer",
    }
)

# (tag, element kind) in priority order; h3 shares the second heading tier
LINE_RULES: Tuple[Tuple[str, ElementKind], ...] = (
    ("h1", ElementKind.HEADING_1),
    ("h2", ElementKind.HEADING_2),
    ("h3", ElementKind.HEADING_2),
    ("li", ElementKind.LIST_ITEM),
    ("p", ElementKind.PARAGRAPH),
)

CONTACT_SEPARATOR = " | "


@dataclass(frozen=True)
class ResiduePatterns:
    """
    Heuristics for bare lines that are leftover style or script.

    These only apply to lines no tag rule matched.
    """

    BRACES: str = r"[{}]"
    FUNCTION: str = r"\bfunction\b\s*[\w$]*\s*\("
    DECLARATION: str = r"\b(?:const|let|var)\s+[A-Za-z_$][\w$]*\s*="
    CSS_PROPERTY: str = r"(?:^|[\s;])(?:margin|padding|color|background(?:-[a-z]+)?|border(?:-[a-z]+)?|font-[a-z]+)\s*:"
    # Hot-reload socket and theme selector from the preview page
    SCRIPT_INJECTION: Tuple[str, ...] = ("ws.on", "location.reload", "Theme:")


RESIDUE_REGEX = re.compile(
    "|".join(
        [
            ResiduePatterns.BRACES,
            ResiduePatterns.FUNCTION,
            ResiduePatterns.DECLARATION,
            ResiduePatterns.CSS_PROPERTY,
        ]
    )
)


def looks_like_residue(text: str) -> bool:
    """Whether tag-stripped text looks like CSS or JavaScript rather than content."""
    if RESIDUE_REGEX.search(text):
        return True
    return any(marker in text for marker in ResiduePatterns.SCRIPT_INJECTION)


def _is_content_container(token: Token) -> bool:
    return CONTENT_CLASS in token.classes


def _is_header_block(token: Token) -> bool:
    return token.name == HEADER_TAG or HEADER_CLASS in token.classes


def extract_clean_content(markup: str) -> str:
    """
    Reduce page markup to the part that holds resume content.

    Args:
        markup: Rendered page or fragment markup

    Returns:
        Markup with style/script blocks removed, narrowed to the content
        container when present, and with the header block removed
    """
    tokens = tokenize(markup)
    tokens = remove_elements(tokens, lambda token: token.name in SKIPPED_BLOCK_TAGS)

    inner = element_inner(tokens, _is_content_container)
    if inner is not None:
        tokens = inner

    tokens = remove_elements(tokens, _is_header_block)
    return render(tokens)


def _is_wrapper_line(tokens: List[Token]) -> bool:
    first = tokens[0]
    if first.kind == TokenKind.DECLARATION:
        return True
    return first.is_tag and first.name in WRAPPER_TAGS


def classify_line(line: str) -> Optional[StructuralElement]:
    """
    Turn one physical line of markup into at most one element.

    Args:
        line: A single line of cleaned markup

    Returns:
        The element for the line, or None if the line is skipped
    """
    stripped = line.strip()
    if not stripped:
        return None

    tokens = tokenize(stripped)
    if _is_wrapper_line(tokens):
        return None

    for tag, kind in LINE_RULES:
        text = first_element_text(tokens, tag)
        if text is None:
            continue
        if kind == ElementKind.PARAGRAPH and not text:
            return None
        return StructuralElement(kind=kind, text=text)

    text = text_content(tokens).strip()
    if not text or looks_like_residue(text):
        return None
    return StructuralElement(kind=ElementKind.PARAGRAPH, text=text)


class StructuralConverter:
    """Converts rendered markup into a StructuralDocument for the Word builder."""

    def to_structural_elements(
        self,
        markup: str,
        metadata: Optional[ResumeMetadata] = None,
        theme_name: Optional[str] = None,
    ) -> List[StructuralElement]:
        """
        Content elements recovered from markup, in document order.

        Args:
            markup: Rendered markup (full page or fragment)
            metadata: Resume metadata (used for the synthesized title/contact lines)
            theme_name: Theme name (used for font selection)

        Returns:
            Flat list of StructuralElement
        """
        return list(self.build_document(markup, metadata, theme_name).elements)

    def build_document(
        self,
        markup: str,
        metadata: Optional[ResumeMetadata] = None,
        theme_name: Optional[str] = None,
    ) -> StructuralDocument:
        """
        Build the complete structural document.

        Args:
            markup: Rendered markup (full page or fragment)
            metadata: Resume metadata for the title and contact lines
            theme_name: Theme name used to select the font family

        Returns:
            StructuralDocument with font, synthesized lines, and elements
        """
        metadata = metadata if metadata is not None else ResumeMetadata()

        cleaned = extract_clean_content(markup)
        elements = []
        for line in cleaned.split("\n"):
            element = classify_line(line)
            if element is not None:
                elements.append(element)

        contact_items = metadata.contact_items()
        document = StructuralDocument(
            font=select_font(theme_name),
            title=metadata.name,
            contact_line=CONTACT_SEPARATOR.join(contact_items) if contact_items else None,
            elements=tuple(elements),
        )
        _log_debug(
            f"Recovered {len(elements)} elements from {len(cleaned.splitlines())} lines "
            f"(font: {document.font})"
        )
        return document


def to_structural_elements(
    markup: str, metadata: Optional[ResumeMetadata] = None, theme_name: Optional[str] = None
) -> List[StructuralElement]:
    """Convenience wrapper around StructuralConverter.to_structural_elements()."""
    return StructuralConverter().to_structural_elements(markup, metadata, theme_name)
