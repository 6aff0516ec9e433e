"""Tests for _tty module."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from termgrid import _tty


@pytest.fixture
def color_env(monkeypatch):
    """Clear colour-related environment variables."""
    for name in ("NO_COLOR", "CLICOLOR", "CLICOLOR_FORCE", "TERMGRID_FORCE_TTY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestIsTty:
    """Test is_tty function."""

    def test_is_tty_force_env(self, color_env):
        """Test that TERMGRID_FORCE_TTY=1 returns True."""
        color_env.setenv("TERMGRID_FORCE_TTY", "1")
        color_env.setattr("sys.stdout.isatty", lambda: False)
        assert _tty.is_tty() is True

    def test_is_tty_isatty_true(self, color_env):
        """Test that is_tty returns True when isatty() returns True."""
        color_env.setattr("sys.stdout.isatty", lambda: True)
        assert _tty.is_tty() is True

    def test_is_tty_isatty_false(self, color_env):
        """Test that is_tty returns False when isatty() returns False."""
        color_env.setattr("sys.stdout.isatty", lambda: False)
        assert _tty.is_tty() is False


class TestShouldUseColor:
    """Test should_use_color function."""

    def test_no_color_env_disables(self, color_env):
        """Test that NO_COLOR environment variable disables color."""
        color_env.setenv("NO_COLOR", "1")
        color_env.setattr("sys.stdout.isatty", lambda: True)
        assert _tty.should_use_color() is False

    def test_clicolor_zero_disables(self, color_env):
        """Test that CLICOLOR=0 disables color."""
        color_env.setenv("CLICOLOR", "0")
        color_env.setattr("sys.stdout.isatty", lambda: True)
        assert _tty.should_use_color() is False

    def test_clicolor_force_enables(self, color_env):
        """Test that CLICOLOR_FORCE enables color."""
        color_env.setenv("CLICOLOR_FORCE", "1")
        color_env.setattr("sys.stdout.isatty", lambda: False)
        assert _tty.should_use_color() is True

    def test_falls_through_to_tty(self, color_env):
        """Test that without env vars, returns is_tty() result."""
        color_env.setattr("sys.stdout.isatty", lambda: True)
        assert _tty.should_use_color() is True

    def test_falls_through_to_tty_false(self, color_env):
        """Test that without env vars and non-TTY, returns False."""
        color_env.setattr("sys.stdout.isatty", lambda: False)
        assert _tty.should_use_color() is False

    def test_no_color_overrides_clicolor_force(self, color_env):
        """Test that NO_COLOR takes precedence over CLICOLOR_FORCE."""
        color_env.setenv("NO_COLOR", "1")
        color_env.setenv("CLICOLOR_FORCE", "1")
        assert _tty.should_use_color() is False


class TestTerminalWidth:
    """Test terminal_width function."""

    def test_uses_console_width(self):
        """Test the width comes from the Rich console size."""
        with patch("termgrid._tty.Console") as mock_console_class:
            mock_console = MagicMock()
            mock_console.size.width = 132
            mock_console_class.return_value = mock_console
            assert _tty.terminal_width() == 132

    def test_columns_env(self, monkeypatch):
        """Test COLUMNS is honoured."""
        monkeypatch.setenv("TERM", "xterm-256color")
        monkeypatch.setenv("COLUMNS", "57")
        assert _tty.terminal_width() == 57

    def test_falls_back_on_error(self):
        """Test an unreadable terminal gives the default width."""
        with patch("termgrid._tty.Console", side_effect=OSError):
            assert _tty.terminal_width() == _tty.DEFAULT_WIDTH


class TestSemanticMessages:
    """Test the warning helper."""

    def test_warning_tty_color(self, color_env):
        """Test warning on a TTY is yellow."""
        color_env.setenv("TERMGRID_FORCE_TTY", "1")
        assert _tty.warning("careful") == "\033[0;33m! careful\033[0m"

    def test_warning_no_color(self, color_env):
        """Test warning without colour has no ANSI codes."""
        color_env.setenv("NO_COLOR", "1")
        assert _tty.warning("careful") == "! careful"
