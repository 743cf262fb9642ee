"""CatchupSettings: one frozen object for flags, environment and catchup.toml.

Sources, strongest first: keyword arguments (the CLI flags), ``CATCHUP_*``
environment variables (``CATCHUP_SCHEDULE__HORIZON_YEARS=5``), the
discovered ``catchup.toml``, then the defaults on the section models.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from catchup.config.discovery import find_config
from catchup.config.models import CalendarConfig, ScheduleConfig

# File picked by from_cli() for the settings object under construction.
_config_file: ContextVar[Path | None] = ContextVar("catchup_config_file", default=None)


class CatchupSettings(BaseSettings):
    """Resolved settings for one catchup invocation.

    Attributes:
        project_root: Directory holding ``catchup.toml`` (or the CWD when
            there is none). Template overrides are looked up here.
        config_path: The config file actually loaded, if any.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="CATCHUP_",
        env_nested_delimiter="__",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    schedule: ScheduleConfig = Field(default_factory=ScheduleConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_config_file.get()),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **flags: Any,
    ) -> CatchupSettings:
        """Build settings for a CLI run.

        An explicit *config_path* that does not exist is ignored. Without
        one, ``catchup.toml`` is searched upward from *project_root* (or the
        CWD), and the directory it is found in becomes the project root.

        Raises:
            click.ClickException: the config file is not valid TOML.
        """
        if config_path:
            candidate = Path(config_path)
            config_file = candidate if candidate.is_file() else None
        else:
            config_file = find_config(project_root)

        if project_root is None:
            project_root = config_file.parent if config_file else Path.cwd()

        token = _config_file.set(config_file)
        try:
            return cls(project_root=project_root, config_path=config_file, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {config_file}: {exc}") from exc
        finally:
            _config_file.reset(token)
