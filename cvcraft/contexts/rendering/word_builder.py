"""
Word document builder.

Turns a StructuralDocument into a .docx file. Sizes and spacing per element
kind are fixed; the only per-document input is the font family.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from docx import Document
from docx.document import Document as DocxDocument
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from cvcraft.contexts.conversion.element_data_structure import (
    ElementKind,
    StructuralDocument,
    StructuralElement,
)
from cvcraft.contexts.parsing.content_data_structure import ResumeMetadata
from cvcraft.contexts.rendering.exceptions import RenderError
from cvcraft.contexts.rendering.logger import _log_debug
from cvcraft.utils.text_processing import slugify

BULLET = "•"


@dataclass(frozen=True)
class ParagraphStyle:
    """
    Run and paragraph formatting for one kind of line.

    Attributes:
        style_name: Built-in Word paragraph style
        size_pt: Font size
        bold: Bold run
        space_before_pt: Spacing above the paragraph
        space_after_pt: Spacing below the paragraph
        left_indent_in: Left indent in inches
        prefix: Text prepended to the run
    """

    style_name: str = "Normal"
    size_pt: float = 11
    bold: bool = False
    space_before_pt: float = 0
    space_after_pt: float = 6
    left_indent_in: float = 0
    prefix: str = ""


TITLE_STYLE = ParagraphStyle(style_name="Title", size_pt=16, bold=True, space_after_pt=12)
CONTACT_STYLE = ParagraphStyle(size_pt=10, space_after_pt=18)

ELEMENT_STYLES: Dict[ElementKind, ParagraphStyle] = {
    ElementKind.HEADING_1: ParagraphStyle(
        style_name="Heading 1", size_pt=14, bold=True, space_before_pt=18, space_after_pt=9
    ),
    ElementKind.HEADING_2: ParagraphStyle(
        style_name="Heading 2", size_pt=12, bold=True, space_before_pt=12, space_after_pt=9
    ),
    ElementKind.PARAGRAPH: ParagraphStyle(size_pt=11, space_after_pt=6),
    ElementKind.LIST_ITEM: ParagraphStyle(
        size_pt=11, space_after_pt=3, left_indent_in=0.25, prefix=f"{BULLET} "
    ),
}

# Default body text
BODY_SIZE_PT = 11


def suggested_filename(
    metadata: ResumeMetadata, theme: Optional[str] = None, extension: str = "docx"
) -> str:
    """
    File name for a generated document, e.g. "modern-jane-doe.docx".

    Args:
        metadata: Resume metadata (name defaults to "resume")
        theme: Optional theme name used as prefix
        extension: File extension without the dot
    """
    name = slugify(metadata.name or "resume")
    theme_prefix = f"{theme}-" if theme else ""
    return f"{theme_prefix}{name}.{extension}"


class WordDocumentBuilder:
    """Builds python-docx Documents from StructuralDocuments."""

    def _set_default_font(self, doc: DocxDocument, font: str) -> None:
        normal = doc.styles["Normal"]
        normal.font.name = font
        normal.font.size = Pt(BODY_SIZE_PT)
        # East Asian text uses a separate font attribute
        normal.element.rPr.rFonts.set(qn("w:eastAsia"), font)
        normal.paragraph_format.space_after = Pt(6)

    def _add_line(self, doc: DocxDocument, text: str, style: ParagraphStyle, font: str) -> None:
        paragraph = doc.add_paragraph(style=style.style_name)
        run = paragraph.add_run(f"{style.prefix}{text}")
        run.font.name = font
        run.font.size = Pt(style.size_pt)
        run.bold = style.bold

        paragraph_format = paragraph.paragraph_format
        paragraph_format.space_before = Pt(style.space_before_pt)
        paragraph_format.space_after = Pt(style.space_after_pt)
        if style.left_indent_in:
            paragraph_format.left_indent = Inches(style.left_indent_in)

    def add_element(self, doc: DocxDocument, element: StructuralElement, font: str) -> None:
        if element.kind == ElementKind.PARAGRAPH and not element.text.strip():
            return
        self._add_line(doc, element.text, ELEMENT_STYLES[element.kind], font)

    def build(self, document: StructuralDocument) -> DocxDocument:
        """
        Build a Word document.

        Args:
            document: Structural document from the conversion context

        Returns:
            python-docx Document ready to save
        """
        doc = Document()
        self._set_default_font(doc, document.font)

        if document.title:
            self._add_line(doc, document.title, TITLE_STYLE, document.font)
        if document.contact_line:
            self._add_line(doc, document.contact_line, CONTACT_STYLE, document.font)

        for element in document.elements:
            self.add_element(doc, element, document.font)

        _log_debug(f"Built Word document with {len(doc.paragraphs)} paragraphs")
        return doc

    def save(self, document: StructuralDocument, output_path: Path) -> Path:
        """
        Build and write a Word document.

        Args:
            document: Structural document from the conversion context
            output_path: Destination .docx path (parent directories are created)

        Returns:
            The output path

        Raises:
            RenderError: If the document cannot be built or written
        """
        output_path = Path(output_path)
        try:
            doc = self.build(document)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            doc.save(str(output_path))
        except (OSError, ValueError, KeyError) as e:
            raise RenderError(
                "Failed to write Word document", output_path=output_path, original_error=e
            ) from e
        return output_path
