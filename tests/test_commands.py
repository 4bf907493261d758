"""Tests for commands.py.

Tests command table lookup, PATH checks and the command probe.
"""

import sys
from unittest.mock import Mock, patch

import pytest

import config
from commands import commands_for_os, find_missing_executables, probe_command
from counter import CompletionCounter

PYTHON = sys.executable


class TestCommandsForOs:
    """Tests for commands_for_os function."""

    def test_linux_defaults(self):
        """Test default table is used for known OS."""
        assert commands_for_os("linux") == config.COMMANDS["linux"]

    def test_case_insensitive(self):
        """Test OS identifier is matched case-insensitively."""
        assert commands_for_os("Darwin") == config.COMMANDS["darwin"]

    def test_unknown_os_empty(self):
        """Test unknown OS yields no commands."""
        assert commands_for_os("plan9") == []

    def test_custom_table(self):
        """Test explicit table overrides defaults."""
        table = {"linux": ["echo hi"]}
        assert commands_for_os("linux", table) == ["echo hi"]
        assert commands_for_os("windows", table) == []

    def test_returns_copy(self):
        """Test caller cannot mutate the configured table."""
        commands = commands_for_os("linux")
        commands.append("rm -rf /")
        assert "rm -rf /" not in config.COMMANDS["linux"]


class TestFindMissingExecutables:
    """Tests for find_missing_executables function."""

    @patch("commands.command_exists")
    def test_all_present(self, mock_exists):
        """Test nothing reported when all executables exist."""
        mock_exists.return_value = True

        assert find_missing_executables(["ip addr show", "ss -tuln"]) == []

    @patch("commands.command_exists")
    def test_missing_reported_once(self, mock_exists, caplog):
        """Test each missing executable is reported once."""
        mock_exists.side_effect = lambda cmd: cmd != "ip"

        missing = find_missing_executables(["ip addr show", "ip route show", "ss -tuln"])

        assert missing == ["ip"]
        assert caplog.text.count("Command not found on PATH: ip") == 1

    @patch("commands.command_exists")
    def test_blank_command_ignored(self, mock_exists):
        """Test blank command lines are skipped."""
        assert find_missing_executables(["   "]) == []
        mock_exists.assert_not_called()


class TestProbeCommand:
    """Tests for probe_command function."""

    def test_captures_stdout(self):
        """Test real command output is captured unmodified."""
        counter = CompletionCounter()

        result = probe_command(f"{PYTHON} -c print('hi')", counter)

        assert result == "hi\n"
        assert counter.snapshot() == 1

    def test_repeatable(self):
        """Test same command twice yields same output."""
        counter = CompletionCounter()
        command = f"{PYTHON} -c print(6*7)"

        first = probe_command(command, counter)
        second = probe_command(command, counter)

        assert first == second == "42\n"
        assert counter.snapshot() == 2

    @patch("utils.system.subprocess.run")
    def test_whitespace_tokenized(self, mock_run):
        """Test command line is split on whitespace, never via a shell."""
        mock_run.return_value = Mock(returncode=0, stdout="")

        probe_command("ip   route  show", CompletionCounter())

        args, kwargs = mock_run.call_args
        assert args[0] == ["ip", "route", "show"]
        assert kwargs["shell"] is False

    @patch("utils.system.subprocess.run")
    def test_nonzero_exit_degrades(self, mock_run):
        """Test failing command yields "" and still counts."""
        mock_run.return_value = Mock(returncode=2, stdout="partial output")
        counter = CompletionCounter()

        assert probe_command("ip route show", counter) == ""
        assert counter.snapshot() == 1

    def test_missing_executable_degrades(self):
        """Test command that cannot start yields "" and still counts."""
        counter = CompletionCounter()

        assert probe_command("definitely-not-a-real-command-xyz --flag", counter) == ""
        assert counter.snapshot() == 1

    def test_empty_command_degrades(self):
        """Test blank command yields "" and still counts."""
        counter = CompletionCounter()

        assert probe_command("", counter) == ""
        assert counter.snapshot() == 1

    @patch("utils.system.subprocess.run")
    def test_timeout_forwarded(self, mock_run):
        """Test timeout reaches subprocess.run."""
        mock_run.return_value = Mock(returncode=0, stdout="ok\n")

        probe_command("ip addr show", CompletionCounter(), timeout=4)

        assert mock_run.call_args.kwargs["timeout"] == 4

    @pytest.mark.parametrize("command", ["ip addr show", "ipconfig /all"])
    @patch("utils.system.subprocess.run")
    def test_counter_once_per_call(self, mock_run, command):
        """Test exactly one increment per call, success or failure."""
        mock_run.side_effect = [Mock(returncode=0, stdout="x"), FileNotFoundError()]
        counter = CompletionCounter()

        probe_command(command, counter)
        probe_command(command, counter)

        assert counter.snapshot() == 2
