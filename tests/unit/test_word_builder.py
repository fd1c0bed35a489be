"""Unit tests for the Word document builder."""

import pytest
from docx import Document
from docx.shared import Inches, Pt

from cvcraft.contexts.conversion import ElementKind, StructuralDocument, StructuralElement
from cvcraft.contexts.parsing import ResumeMetadata
from cvcraft.contexts.rendering import RenderError, WordDocumentBuilder, suggested_filename


@pytest.fixture
def structural_document():
    return StructuralDocument(
        font="Arial",
        title="Jane Doe",
        contact_line="jane@example.com | NYC",
        elements=(
            StructuralElement(ElementKind.HEADING_1, "Jane Doe"),
            StructuralElement(ElementKind.HEADING_2, "Experience"),
            StructuralElement(ElementKind.PARAGRAPH, "Acme | 2020 - Present"),
            StructuralElement(ElementKind.LIST_ITEM, "Built APIs"),
            StructuralElement(ElementKind.PARAGRAPH, "   "),
        ),
    )


@pytest.mark.unit
class TestSuggestedFilename:
    """Test output file naming."""

    def test_with_theme(self):
        metadata = ResumeMetadata({"name": "Jane Doe"})
        assert suggested_filename(metadata, "modern") == "modern-jane-doe.docx"

    def test_without_name(self):
        assert suggested_filename(ResumeMetadata()) == "resume.docx"

    def test_punctuation_becomes_dashes(self):
        metadata = ResumeMetadata({"name": "José Q. Doe"})
        assert suggested_filename(metadata, extension="html") == "jos--q--doe.html"


@pytest.mark.unit
class TestWordDocumentBuilder:
    """Test paragraph policy and file output."""

    def test_paragraph_sequence(self, structural_document):
        doc = WordDocumentBuilder().build(structural_document)
        texts = [paragraph.text for paragraph in doc.paragraphs]
        assert texts == [
            "Jane Doe",
            "jane@example.com | NYC",
            "Jane Doe",
            "Experience",
            "Acme | 2020 - Present",
            "• Built APIs",
        ]

    def test_title_formatting(self, structural_document):
        title = WordDocumentBuilder().build(structural_document).paragraphs[0]
        run = title.runs[0]
        assert run.bold is True
        assert run.font.size == Pt(16)
        assert run.font.name == "Arial"

    def test_heading_styles(self, structural_document):
        paragraphs = WordDocumentBuilder().build(structural_document).paragraphs
        assert paragraphs[2].style.name == "Heading 1"
        assert paragraphs[2].runs[0].font.size == Pt(14)
        assert paragraphs[3].style.name == "Heading 2"
        assert paragraphs[3].runs[0].font.size == Pt(12)

    def test_list_item_indent(self, structural_document):
        item = WordDocumentBuilder().build(structural_document).paragraphs[5]
        assert item.paragraph_format.left_indent == Inches(0.25)
        assert item.runs[0].font.size == Pt(11)

    def test_default_font(self, structural_document):
        doc = WordDocumentBuilder().build(structural_document)
        assert doc.styles["Normal"].font.name == "Arial"

    def test_document_without_metadata_lines(self):
        document = StructuralDocument(
            font="Helvetica", elements=(StructuralElement(ElementKind.PARAGRAPH, "Only"),)
        )
        doc = WordDocumentBuilder().build(document)
        assert [paragraph.text for paragraph in doc.paragraphs] == ["Only"]

    def test_save_creates_directories(self, structural_document, tmp_path):
        output_path = tmp_path / "nested" / "out" / "resume.docx"
        result = WordDocumentBuilder().save(structural_document, output_path)

        assert result == output_path
        assert output_path.exists()
        reopened = Document(str(output_path))
        assert reopened.paragraphs[0].text == "Jane Doe"

    def test_save_failure_raises_render_error(self, structural_document, tmp_path):
        with pytest.raises(RenderError) as exc_info:
            WordDocumentBuilder().save(structural_document, tmp_path)

        assert exc_info.value.output_path == tmp_path
        assert isinstance(exc_info.value.original_error, OSError)
