"""Tests for terminal styling of diagnostics."""

from sheetexpr import terminal


class TestColorDetection:
    def test_force_color_wins(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "1")
        monkeypatch.setenv("FORCE_COLOR", "1")
        assert terminal._detect_colors() is True

    def test_no_color(self, monkeypatch):
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setenv("NO_COLOR", "1")
        assert terminal._detect_colors() is False

    def test_supports_color_reflects_cached_value(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.supports_color()


class TestPaint:
    def test_plain_when_disabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.paint("Error", "red", "bold") == "Error"

    def test_codes_when_enabled(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        result = terminal.paint("Error", "red", "bold")
        assert result == "\033[31m\033[1mError\033[0m"

    def test_no_styles(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.paint("Error") == "Error"

    def test_strip_colors(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", True)
        assert terminal.strip_colors(terminal.error_code("S-OP-001")) == "S-OP-001"


class TestSourceLine:
    def test_error_line_marker(self, monkeypatch):
        monkeypatch.setattr(terminal, "_USE_COLORS", False)
        assert terminal.source_line(7, "x: 1/0;", is_error=True) == ">  7 | x: 1/0;"
        assert terminal.source_line(12, "y: 2;") == "  12 | y: 2;"
