"""Tests for the ossid CLI."""

import json
import re

from typer.testing import CliRunner

from ossid import __version__
from ossid.cli import app
from ossid.ids import is_valid_id
from tests.factories import KNOWN_ID, KNOWN_ID_MS

# ANSI escape sequence pattern for stripping colors from output
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*m")

runner = CliRunner()


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


class TestCliVersion:
    """Tests for CLI version flag."""

    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert result.stdout.strip() == __version__


class TestCliHelp:
    """Tests for CLI help output."""

    def test_help_displays_commands(self) -> None:
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        output = strip_ansi(result.stdout)
        for command in ("generate", "validate", "inspect", "compare", "demo"):
            assert command in output


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generates_one_by_default(self) -> None:
        result = runner.invoke(app, ["generate"])

        assert result.exit_code == 0
        lines = result.stdout.split()
        assert len(lines) == 1
        assert is_valid_id(lines[0])

    def test_generates_count_in_order(self) -> None:
        result = runner.invoke(app, ["generate", "--count", "5"])

        assert result.exit_code == 0
        lines = result.stdout.split()
        assert len(lines) == 5
        assert lines == sorted(lines)
        assert len(set(lines)) == 5
        assert all(is_valid_id(line) for line in lines)

    def test_rejects_zero_count(self) -> None:
        result = runner.invoke(app, ["generate", "-n", "0"])

        assert result.exit_code == 2


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid(self) -> None:
        result = runner.invoke(app, ["validate", KNOWN_ID])

        assert result.exit_code == 0
        assert result.stdout.strip() == "valid"

    def test_invalid(self) -> None:
        result = runner.invoke(app, ["validate", "invalid-id"])

        assert result.exit_code == 1
        assert result.stdout.strip() == "invalid"


class TestInspectCommand:
    """Tests for the inspect command."""

    def test_text_output(self) -> None:
        result = runner.invoke(app, ["inspect", KNOWN_ID])

        assert result.exit_code == 0
        assert "2016-07-30T23:54:10.259000+00:00" in result.stdout
        assert KNOWN_ID in result.stdout

    def test_json_output(self) -> None:
        result = runner.invoke(app, ["inspect", KNOWN_ID, "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["id"] == KNOWN_ID
        assert data["timestamp_ms"] == KNOWN_ID_MS
        assert data["timestamp"] == "2016-07-30T23:54:10.259000+00:00"
        assert data["age_seconds"] > 0

    def test_invalid_token(self) -> None:
        result = runner.invoke(app, ["inspect", "invalid-id"])

        assert result.exit_code == 2


class TestCompareCommand:
    """Tests for the compare command."""

    def test_older_first(self) -> None:
        newer = "01ARZ3NDEM0000000000000000"
        result = runner.invoke(app, ["compare", KNOWN_ID, newer])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "-1"
        assert lines[1] == f"{KNOWN_ID} is older than {newer}"

    def test_same(self) -> None:
        result = runner.invoke(app, ["compare", KNOWN_ID, KNOWN_ID])

        assert result.exit_code == 0
        assert result.stdout.splitlines()[0] == "0"

    def test_invalid_token(self) -> None:
        result = runner.invoke(app, ["compare", KNOWN_ID, "invalid-id"])

        assert result.exit_code == 2


class TestDemoCommand:
    """Tests for the demo command."""

    def test_runs_demo(self) -> None:
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert "=== ossid Package Example ===" in result.stdout
        assert "=== Example Complete ===" in result.stdout
