"""
Tests for terminal output: commit type colouring, framing and the spinner.

Run with:
    pytest tests/test_output.py -v
"""

import re

import pytest

from commitmsg import COMMIT_TYPES
from commitmsg import output
from commitmsg.output import (
    COMMIT_TYPE_COLORS,
    Colors,
    Spinner,
    colorize_commit_type,
    frame_message,
    print_error,
)

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


@pytest.fixture
def colors_on(monkeypatch):
    monkeypatch.setattr(output, "COLORS_ENABLED", True)


@pytest.fixture
def colors_off(monkeypatch):
    monkeypatch.setattr(output, "COLORS_ENABLED", False)
    monkeypatch.setattr(output, "STDERR_COLORS_ENABLED", False)


# ---------------------------------------------------------------------------
# Commit type colouring
# ---------------------------------------------------------------------------

class TestColorizeCommitType:

    def test_every_commit_type_has_a_color(self):
        assert set(COMMIT_TYPE_COLORS) == set(COMMIT_TYPES)

    def test_feat_prefix_is_green(self, colors_on):
        colored = colorize_commit_type("feat(cli): add flag")
        assert Colors.GREEN in colored
        assert ANSI_RE.sub('', colored) == "feat(cli): add flag"

    def test_breaking_marker_is_red(self, colors_on):
        colored = colorize_commit_type("feat!: drop support for v1 tokens")
        assert f"{Colors.BOLD}{Colors.RED}!" in colored
        assert ANSI_RE.sub('', colored) == "feat!: drop support for v1 tokens"

    @pytest.mark.parametrize("subject", [
        "Add README describing the tool",
        "wip: not a known type",
        "feat add flag",
    ])
    def test_plain_subject_untouched(self, colors_on, subject):
        assert colorize_commit_type(subject) == subject

    def test_no_color_when_disabled(self, colors_off):
        assert colorize_commit_type("fix: handle empty diff") == "fix: handle empty diff"


# ---------------------------------------------------------------------------
# Framing
# ---------------------------------------------------------------------------

class TestFrameMessage:

    def test_rules_match_longest_line(self, colors_off):
        framed = frame_message("Add logging\n\nSet up the root logger for the CLI.")
        lines = framed.split('\n')
        assert lines[0] == lines[-1]
        assert len(lines[0]) == len("Set up the root logger for the CLI.")
        assert lines[1:-1] == ["Add logging", "", "Set up the root logger for the CLI."]

    def test_plain_subject_is_bold(self, colors_on):
        framed = frame_message("Add logging")
        assert f"{Colors.BOLD}Add logging{Colors.RESET}" in framed

    def test_empty_message_still_framed(self, colors_off):
        lines = frame_message("").split('\n')
        assert len(lines[0]) == 40
        assert lines[1] == ""


# ---------------------------------------------------------------------------
# stderr output
# ---------------------------------------------------------------------------

class TestStderr:

    def test_print_error_goes_to_stderr(self, colors_off, capsys):
        print_error("Could not read file")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Could not read file" in captured.err

    def test_spinner_silent_when_not_a_tty(self, capsys):
        with Spinner():
            pass
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""
