"""Shared pytest fixtures and test helpers for catchup tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from catchup.config.settings import CatchupSettings
from catchup.domain.participants import ParticipantPair
from catchup.services.telemetry import disable_telemetry

ALICE = "alice@example.com"
BOB = "bob@example.com"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep host config, logging and telemetry state out of every test."""
    monkeypatch.delenv("CATCHUP_CONFIG", raising=False)
    monkeypatch.delenv("CATCHUP_PROJECT_ROOT", raising=False)
    app_level = logging.getLogger("catchup").level
    yield
    disable_telemetry()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    logging.getLogger("catchup").setLevel(app_level)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Empty project directory (no catchup.toml, no template overrides)."""
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> CatchupSettings:
    return CatchupSettings.from_cli(project_root=project_root)


@pytest.fixture
def participants() -> ParticipantPair:
    return ParticipantPair(first=ALICE, second=BOB)


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root so the CLI never sees a real config.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    monkeypatch.chdir(project_root)
