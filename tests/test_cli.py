"""
Tests for the passgen command line interface.
"""

import re
from unittest.mock import patch

import pyperclip
import pytest
from click.testing import CliRunner

from passgen.__main__ import cli
from passgen.utils.password_generator import AMBIGUOUS, LOWERCASE, NUMBERS, SYMBOLS, UPPERCASE

PASSWORD_LINE = re.compile(r"^Generated password: (.+)$", re.MULTILINE)


def extract_password(output: str) -> str:
    """Pull the generated password out of CLI output."""
    match = PASSWORD_LINE.search(output)
    assert match, f"No password in output: {output!r}"
    return match.group(1)


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


class TestDefaultCommand:
    """Test generation without a subcommand."""

    def test_default_no_copy(self, runner):
        """Test default generation prints a 16-character alphanumeric password."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, ["--no-copy"])

        assert result.exit_code == 0
        password = extract_password(result.output)
        assert len(password) == 16
        assert all(c in LOWERCASE + UPPERCASE + NUMBERS for c in password)
        mock_copy.assert_not_called()

    def test_default_copies(self, runner):
        """Test default generation copies to clipboard."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, [])

        assert result.exit_code == 0
        password = extract_password(result.output)
        mock_copy.assert_called_once_with(password)
        assert "Password copied to clipboard!" in result.output

    def test_flags(self, runner):
        """Test inclusion and ambiguous flags reach the generator."""
        result = runner.invoke(cli, [
            "-l", "64",
            "--no-lowercase",
            "--no-uppercase",
            "--symbols",
            "-x",
            "--no-copy",
        ])

        assert result.exit_code == 0
        password = extract_password(result.output)
        assert len(password) == 64
        assert all(c in NUMBERS + SYMBOLS for c in password)
        assert not any(c in AMBIGUOUS for c in password)

    def test_verbose(self, runner):
        """Test verbose mode still generates."""
        result = runner.invoke(cli, ["-v", "--no-copy"])

        assert result.exit_code == 0
        assert len(extract_password(result.output)) == 16

    def test_version(self, runner):
        """Test the version option."""
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output


class TestErrors:
    """Test error reporting and exit codes."""

    @pytest.mark.parametrize("length", ["0", "-5", "abc"])
    def test_invalid_length(self, runner, length):
        """Test invalid lengths exit with an error and no password."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, [f"--length={length}"])

        assert result.exit_code == 1
        assert "Length must be a positive number" in result.output
        assert "Generated password" not in result.output
        mock_copy.assert_not_called()

    def test_length_too_large(self, runner):
        """Test lengths above 256 are rejected."""
        result = runner.invoke(cli, ["pin", "-l", "257", "--no-clipboard"])

        assert result.exit_code == 1
        assert "Length cannot exceed 256 characters" in result.output

    def test_empty_alphabet(self, runner):
        """Test disabling every set reports an error and writes nothing."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, ["--no-lowercase", "--no-uppercase", "--no-numbers"])

        assert result.exit_code == 1
        assert "Error generating password" in result.output
        assert "Generated password" not in result.output
        mock_copy.assert_not_called()

    def test_clipboard_failure_still_shows_password(self, runner):
        """Test the password is displayed when the clipboard write fails."""
        with patch('pyperclip.copy', side_effect=pyperclip.PyperclipException("no clipboard")):
            result = runner.invoke(cli, ["strong"])

        assert result.exit_code == 0
        assert "Failed to copy to clipboard: no clipboard" in result.output
        assert len(extract_password(result.output)) == 20
        assert "copied to clipboard!" not in result.output

    def test_clipboard_os_error_still_shows_password(self, runner):
        """Test the PIN is displayed when the clipboard process cannot run."""
        with patch('pyperclip.copy', side_effect=OSError("xclip exec failed")):
            result = runner.invoke(cli, ["pin"])

        assert result.exit_code == 0
        assert result.exception is None
        assert "Failed to copy to clipboard: xclip exec failed" in result.output
        assert extract_password(result.output).isdigit()

    def test_huge_length(self, runner):
        """Test a length with thousands of digits is reported as too large."""
        result = runner.invoke(cli, ["--length", "9" * 5000, "--no-copy"])

        assert result.exit_code == 1
        assert not isinstance(result.exception, ValueError)
        assert "Length cannot exceed 256 characters" in result.output

    @pytest.mark.parametrize("args", [
        ["-l", "40", "pin"],
        ["--symbols", "strong"],
        ["--no-copy", "simple"],
    ])
    def test_default_options_with_preset(self, runner, args):
        """Test default-command options are rejected before a preset subcommand."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, args)

        assert result.exit_code == 1
        assert "Cannot use --" in result.output
        assert "Generated password" not in result.output
        mock_copy.assert_not_called()

    def test_verbose_with_preset(self, runner):
        """Test --verbose is still allowed before a preset subcommand."""
        result = runner.invoke(cli, ["-v", "pin", "--no-clipboard"])

        assert result.exit_code == 0
        assert len(extract_password(result.output)) == 6


class TestPresetCommands:
    """Test the preset subcommands."""

    def test_pin(self, runner):
        """Test pin produces six digits."""
        result = runner.invoke(cli, ["pin", "--no-clipboard"])

        assert result.exit_code == 0
        pin = extract_password(result.output)
        assert len(pin) == 6
        assert pin.isdigit()

    def test_simple(self, runner):
        """Test simple produces 12 characters without ambiguous ones."""
        result = runner.invoke(cli, ["simple", "--no-clipboard"])

        assert result.exit_code == 0
        password = extract_password(result.output)
        assert len(password) == 12
        assert not any(c in AMBIGUOUS for c in password)

    def test_strong_length_override(self, runner):
        """Test strong honors a length override."""
        result = runner.invoke(cli, ["strong", "--length", "32", "--no-clipboard"])

        assert result.exit_code == 0
        password = extract_password(result.output)
        assert len(password) == 32
        assert all(c in LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS for c in password)

    def test_preset_copies(self, runner):
        """Test presets copy to clipboard by default."""
        with patch('pyperclip.copy') as mock_copy:
            result = runner.invoke(cli, ["pin"])

        assert result.exit_code == 0
        mock_copy.assert_called_once_with(extract_password(result.output))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
