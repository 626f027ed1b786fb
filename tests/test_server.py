"""
Tests for the command-line entry point.
"""

import pytest

from chuk_mcp_scales.server import main, print_notation


class TestPrintNotation:
    """Tests for --abc output."""

    def test_prints_drill(self, capsys):
        """A valid root prints the ABC text."""
        assert print_notation("G", "Major") == 0
        out = capsys.readouterr().out
        assert out.startswith("M: 2/4\nL: 1/16\nK: G\n")
        assert out.endswith("|]\n")

    def test_minor_alias(self, capsys):
        """Scale type aliases are accepted."""
        assert print_notation("E", "harmonic minor") == 0
        assert "K: Em" in capsys.readouterr().out

    def test_invalid_root(self, capsys):
        """Invalid input exits with status 2 and prints nothing."""
        assert print_notation("H", "Major") == 2
        assert capsys.readouterr().out == ""

    def test_main_abc(self, monkeypatch, capsys):
        """--abc prints and exits without starting the server."""
        monkeypatch.setattr("sys.argv", ["chuk-mcp-scales", "--abc", "Bb", "--scale", "minor"])
        with pytest.raises(SystemExit) as exc:
            main()
        assert exc.value.code == 0
        assert "K: Bbm" in capsys.readouterr().out
