"""Unit tests for configuration loading."""

import pytest

from cue_sheet.config import CueSheetConfig


class TestCueSheetConfig:
    """Test CueSheetConfig class."""

    def test_defaults(self):
        config = CueSheetConfig()
        assert config.parser.max_file_size_bytes == 10 * 1024 * 1024
        assert config.parser.encoding is None
        assert config.output.indent == "\t"
        assert config.output.track_spacing is True
        assert config.logging.level == "WARNING"
        assert config.validate() == []

    def test_from_env(self, monkeypatch):
        """Test environment variable overrides."""
        monkeypatch.setenv("CUE_SHEET_MAX_FILE_SIZE_BYTES", "2048")
        monkeypatch.setenv("CUE_SHEET_ENCODING", "cp1252")
        monkeypatch.setenv("CUE_SHEET_INDENT", "2")
        monkeypatch.setenv("CUE_SHEET_TRACK_SPACING", "false")
        monkeypatch.setenv("CUE_SHEET_LOG_LEVEL", "debug")
        monkeypatch.setenv("CUE_SHEET_LOG_FORMAT", "JSON")

        config = CueSheetConfig.from_env()

        assert config.parser.max_file_size_bytes == 2048
        assert config.parser.encoding == "cp1252"
        assert config.output.indent == "  "
        assert config.output.track_spacing is False
        assert config.logging.level == "DEBUG"
        assert config.logging.format == "json"
        assert config.validate() == []

    def test_tab_indent(self, monkeypatch):
        monkeypatch.setenv("CUE_SHEET_INDENT", "TAB")
        assert CueSheetConfig.from_env().output.indent == "\t"

    def test_invalid_number(self, monkeypatch):
        monkeypatch.setenv("CUE_SHEET_MAX_FILE_SIZE_BYTES", "lots")
        with pytest.raises(ValueError):
            CueSheetConfig.from_env()

    def test_validate_reports_problems(self):
        config = CueSheetConfig()
        config.parser.max_file_size_bytes = 0
        config.output.indent = "->"
        config.logging.level = "LOUD"
        config.logging.format = "xml"

        assert config.validate() == [
            "max_file_size_bytes must be positive",
            "indent must be non-empty whitespace",
            "Unknown log level: LOUD",
            "Unknown log format: xml",
        ]
