"""Tests for settings and logging setup."""

import logging
from pathlib import Path

from docfonts.config import (
    DEFAULT_FONT_EXTENSIONS,
    DocFontsSettings,
    FontDiscoveryConfig,
    get_default_settings,
)
from docfonts.utils import FontScanStats, configure_logging
from docfonts.utils.logging import _HANDLER_MARK


class TestSettings:
    """Tests for pydantic settings."""

    def test_defaults(self) -> None:
        """Test default discovery and logging settings."""
        settings = get_default_settings()
        assert isinstance(settings, DocFontsSettings)
        assert settings.discovery.include_system_dirs
        assert settings.discovery.font_dirs == []
        assert settings.discovery.extensions == DEFAULT_FONT_EXTENSIONS
        assert settings.logging.log_level == "WARNING"

    def test_extensions_normalized(self) -> None:
        """Test extensions are lowercased and dotted."""
        config = FontDiscoveryConfig(extensions=("TTF", ".OTF"))
        assert config.extensions == (".ttf", ".otf")

    def test_font_dirs_coerced(self) -> None:
        """Test string directories become paths."""
        config = FontDiscoveryConfig(font_dirs=["/opt/fonts"])
        assert config.font_dirs == [Path("/opt/fonts")]


class TestFontScanStats:
    """Tests for FontScanStats class."""

    def test_duration(self) -> None:
        """Test duration from start/end times."""
        stats = FontScanStats(start_time=10.0, end_time=12.5)
        assert stats.duration_seconds == 2.5

    def test_duration_unfinished(self) -> None:
        """Test an unfinished scan has zero duration."""
        assert FontScanStats(start_time=10.0).duration_seconds == 0.0


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_log_file(self, tmp_path: Path) -> None:
        """Test the log file is created and handlers are not duplicated."""
        log_file = tmp_path / "docfonts.log"
        root = logging.getLogger()
        try:
            configure_logging(log_file=log_file, quiet=True)
            configure_logging(log_file=log_file, quiet=True)
            marked = [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]
            assert len(marked) == 2
            assert log_file.exists()
        finally:
            for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
                root.removeHandler(handler)
                handler.close()

    def test_console_only_without_log_file(self, tmp_path: Path, monkeypatch) -> None:
        """Test no log file is written when none is given."""
        monkeypatch.chdir(tmp_path)
        root = logging.getLogger()
        try:
            configure_logging(console_level="WARNING")
            marked = [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]
            assert len(marked) == 1
            assert marked[0].level == logging.WARNING
            assert not isinstance(marked[0], logging.FileHandler)
            assert list(tmp_path.iterdir()) == []
        finally:
            for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
                root.removeHandler(handler)
                handler.close()

    def test_quiet_console_errors_only(self) -> None:
        """Test quiet raises the console handler to ERROR."""
        root = logging.getLogger()
        try:
            configure_logging(console_level="DEBUG", quiet=True)
            marked = [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]
            assert [h.level for h in marked] == [logging.ERROR]
        finally:
            for handler in [h for h in root.handlers if getattr(h, _HANDLER_MARK, False)]:
                root.removeHandler(handler)
                handler.close()
