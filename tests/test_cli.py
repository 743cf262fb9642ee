"""Tests for the root catchup CLI."""

import pytest
from click.testing import CliRunner

from catchup import __version__
from catchup.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "schedule" in result.output
    assert "export" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [["--json"], ["-q"], ["-v"], ["--log-json"], ["-c", "/tmp/does-not-exist.toml"]],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


# --- Commands registered ---


@pytest.mark.parametrize("name", ["schedule", "export"])
def test_command_registered(name: str) -> None:
    assert name in cli.commands


def test_invalid_config_reported(cli_runner: CliRunner, tmp_path) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[schedule\n")
    result = cli_runner.invoke(cli, ["-c", str(bad), "schedule", "a@b.co", "c@d.co"])
    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
