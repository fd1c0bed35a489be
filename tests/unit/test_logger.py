"""Unit tests for run logging setup."""

import pytest
from loguru import logger

from cvcraft import __version__
from cvcraft.contexts.rendering.logger import _log_info, setup_rendering_logger
from cvcraft.contexts.theming import ThemeCustomization


@pytest.fixture
def read_log():
    """Close loguru sinks so the log file is flushed, then return its text."""

    def _read(log_file):
        logger.remove()
        return log_file.read_text(encoding="utf-8")

    yield _read
    logger.remove()


@pytest.mark.unit
class TestRenderingLogger:
    """Test the conversion run header and prefixed messages."""

    def test_run_header(self, tmp_path, read_log):
        log_file = setup_rendering_logger(
            tmp_path / "run",
            input_path=tmp_path / "resume.md",
            output_path=tmp_path / "resume.docx",
            theme="modern",
            output_format="word",
            customization=ThemeCustomization(primary_color="#112233"),
            console=False,
        )
        assert log_file == tmp_path / "run" / "render.log"

        text = read_log(log_file)
        assert f"Input: {tmp_path / 'resume.md'}" in text
        assert f"Output: {tmp_path / 'resume.docx'}" in text
        assert "Theme: modern" in text
        assert "Format: word" in text
        assert "Colors: primary=#112233" in text
        assert f"cvcraft {__version__} [render]" in text

    def test_missing_entries_skipped(self, tmp_path, read_log):
        log_file = setup_rendering_logger(tmp_path, theme="ats", console=False)
        _log_info("Starting conversion")

        text = read_log(log_file)
        assert "Theme: ats" in text
        assert "Input:" not in text
        assert "Colors:" not in text
        assert "[render] Starting conversion" in text
