"""Unit tests for section segmentation."""

import pytest

from cvcraft.contexts.parsing import Section, SectionKind, segment_sections
from cvcraft.contexts.parsing.segmenter import LineKind, SectionSegmenter


def header(content, level):
    return Section(kind=SectionKind.HEADER, content=content, level=level)


def paragraph(content):
    return Section(kind=SectionKind.PARAGRAPH, content=content)


def bullet_list(*items):
    return Section(kind=SectionKind.LIST, items=tuple(items))


@pytest.mark.unit
class TestLineClassification:
    """Test per-line classification."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("# Title", LineKind.HEADER),
            ("#NoSpace", LineKind.HEADER),
            ("- item", LineKind.LIST_ITEM),
            ("* item", LineKind.LIST_ITEM),
            ("1. item", LineKind.LIST_ITEM),
            ("12.item", LineKind.LIST_ITEM),
            ("-no space", LineKind.TEXT),
            ("**Bold** text", LineKind.TEXT),
            ("  - indented", LineKind.TEXT),
            ("", LineKind.BLANK),
            ("   ", LineKind.BLANK),
            ("| a | b |", LineKind.TEXT),
            ("```python", LineKind.TEXT),
        ],
    )
    def test_classify(self, line, expected):
        assert SectionSegmenter().classify(line) == expected

    def test_blocks_classified_when_enabled(self):
        segmenter = SectionSegmenter(recognize_blocks=True)
        assert segmenter.classify("```python") == LineKind.CODE_FENCE
        assert segmenter.classify("~~~") == LineKind.CODE_FENCE
        assert segmenter.classify("| a | b |") == LineKind.TABLE_ROW


@pytest.mark.unit
class TestSegmentation:
    """Test the section merge points."""

    def test_header_then_list(self):
        sections = segment_sections("# Name\n\n- Skill A\n- Skill B")
        assert sections == (header("Name", 1), bullet_list("Skill A", "Skill B"))

    def test_header_level_and_text(self):
        sections = segment_sections("### Projects\n####### Deep")
        assert sections == (header("Projects", 3), header("Deep", 7))

    def test_text_after_header_opens_paragraph(self):
        sections = segment_sections("## Experience\nSenior Engineer at Acme")
        assert sections == (header("Experience", 2), paragraph("Senior Engineer at Acme"))

    def test_legacy_header_coalescing(self):
        sections = segment_sections("## Experience\nSenior Engineer at Acme", coalesce_headings=True)
        assert sections == (paragraph("Experience\nSenior Engineer at Acme"),)

    def test_coalesced_paragraph_keeps_extending(self):
        sections = segment_sections("# A\nline one\nline two", coalesce_headings=True)
        assert sections == (paragraph("A\nline one\nline two"),)

    def test_blank_lines_do_not_separate_paragraphs(self):
        sections = segment_sections("First paragraph\n\n\nSecond paragraph")
        assert sections == (paragraph("First paragraph\nSecond paragraph"),)

    def test_blank_lines_do_not_separate_lists(self):
        assert segment_sections("- a\n\n- b") == (bullet_list("a", "b"),)

    def test_text_after_list_opens_paragraph(self):
        sections = segment_sections("- a\n- b\nAfter the list")
        assert sections == (bullet_list("a", "b"), paragraph("After the list"))

    def test_list_after_paragraph(self):
        sections = segment_sections("Intro\n- a")
        assert sections == (paragraph("Intro"), bullet_list("a"))

    def test_header_closes_list(self):
        sections = segment_sections("- a\n# Next")
        assert sections == (bullet_list("a"), header("Next", 1))

    def test_list_markers_stripped(self):
        sections = segment_sections("1. First\n2.Second\n* Third\n-   Fourth")
        assert sections == (bullet_list("First", "Second", "Third", "Fourth"),)

    @pytest.mark.parametrize("content", ["", "\n", "\n\n   \n"])
    def test_blank_input(self, content):
        assert segment_sections(content) == ()

    def test_fences_are_text_by_default(self):
        sections = segment_sections("```\ncode\n```")
        assert sections == (paragraph("```\ncode\n```"),)


@pytest.mark.unit
class TestBlockRecognition:
    """Test code and table sections (recognize_blocks=True)."""

    def test_code_block_verbatim(self):
        sections = segment_sections(
            "```python\nprint('x')\n\n# not a header\n```\nAfter", recognize_blocks=True
        )
        assert sections == (
            Section(kind=SectionKind.CODE, content="print('x')\n\n# not a header"),
            paragraph("After"),
        )

    def test_unclosed_code_block_runs_to_end(self):
        sections = segment_sections("~~~\ncode", recognize_blocks=True)
        assert sections == (Section(kind=SectionKind.CODE, content="code"),)

    def test_table_rows(self):
        rows = ("| a | b |", "|---|---|", "| 1 | 2 |")
        sections = segment_sections("\n".join(rows) + "\nText", recognize_blocks=True)
        assert sections == (
            Section(kind=SectionKind.TABLE, content="\n".join(rows), items=rows),
            paragraph("Text"),
        )

    def test_core_rules_unchanged(self):
        content = "# Name\n\n- Skill A\n- Skill B\nText"
        assert segment_sections(content, recognize_blocks=True) == segment_sections(content)
