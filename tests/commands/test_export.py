"""Tests for export CLI commands (ics, links)."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from catchup.cli import cli
from catchup.domain.calendar import format_basic
from catchup.domain.derivation import derive
from tests.conftest import ALICE, BOB


@pytest.mark.usefixtures("_isolated_project")
class TestExportIcsCommand:
    def test_stdout(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "ics", ALICE, BOB, "--start-year", "2025"])
        assert result.exit_code == 0
        assert result.output.startswith("BEGIN:VCALENDAR")
        assert result.output.count("BEGIN:VEVENT") == 20
        assert result.output.rstrip().endswith("END:VCALENDAR")

    def test_round_trip_timestamps(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["export", "ics", ALICE, BOB, "--start-year", "2025", "--horizon", "1"]
        )
        pair = derive(ALICE, BOB, 2025)
        assert f"DTSTART:{format_basic(pair.first)}" in result.output
        assert f"DTSTART:{format_basic(pair.second)}" in result.output

    def test_output_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        target = tmp_path / "catchups.ics"
        result = cli_runner.invoke(
            cli, ["export", "ics", ALICE, BOB, "--start-year", "2025", "--output", str(target)]
        )
        assert result.exit_code == 0
        assert "export_ics" in result.output
        assert target.read_bytes().count(b"\r\nBEGIN:VEVENT\r\n") == 20

    def test_output_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "export", "ics", ALICE, BOB, "--horizon", "4", "--output", str(tmp_path)]
        )
        assert result.exit_code == 0
        expected = tmp_path / "random-catchup-4-years.ics"
        assert result.output.strip() == str(expected)
        assert expected.is_file()

    def test_json_includes_content(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "export", "ics", ALICE, BOB, "--start-year", "2025", "--horizon", "1"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "export_ics"
        assert data["data"]["event_count"] == 2
        assert data["data"]["content"].startswith("BEGIN:VCALENDAR\r\n")

    def test_invalid_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "ics", "", ""])
        assert result.exit_code == 1
        assert "Please enter both email addresses" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestExportLinksCommand:
    def test_links(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["export", "links", ALICE, BOB, "--start-year", "2025", "--horizon", "2"]
        )
        assert result.exit_code == 0
        assert result.output.count("https://calendar.google.com/calendar/render?") == 4

    def test_quiet_prints_urls_only(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "export", "links", ALICE, BOB, "--start-year", "2025", "--horizon", "1"]
        )
        lines = result.output.strip().splitlines()
        assert len(lines) == 2
        assert all(line.startswith("https://calendar.google.com/") for line in lines)

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "export", "links", ALICE, BOB, "--start-year", "2025"]
        )
        data = json.loads(result.output)
        assert data["data"]["count"] == 20

    def test_invalid_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "links", "not-an-email", BOB])
        assert result.exit_code == 1


class TestExportGroup:
    def test_help_lists_subcommands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "--help"])
        assert result.exit_code == 0
        assert "ics" in result.output
        assert "links" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "--examples"])
        assert result.exit_code == 0
        assert "catchup export ics" in result.output
