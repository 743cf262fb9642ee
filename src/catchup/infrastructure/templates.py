"""Jinja2 templates for event titles and descriptions.

Packaged defaults live in ``catchup/templates/event/``. A project can
override either file by placing one of the same name in
``.catchup/templates/event/`` (or ``.catchup/templates/``) next to its
``catchup.toml``.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from catchup.domain.participants import ParticipantPair

TITLE_TEMPLATE = "title.j2"
DESCRIPTION_TEMPLATE = "description.j2"


def build_template_environment(group: str, *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with project overrides before packaged defaults."""

    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / ".catchup" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("catchup", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


class EventTemplates:
    """Renders the human-facing text shared by calendar files and links."""

    def __init__(self, *, project_root: Path | None = None) -> None:
        self._env = build_template_environment("event", project_root=project_root)

    def title(self, participants: ParticipantPair) -> str:
        user_a, user_b = participants.usernames
        template = self._env.get_template(TITLE_TEMPLATE)
        return template.render(participants=participants, user_a=user_a, user_b=user_b).strip()

    def description(self, participants: ParticipantPair, year: int) -> str:
        template = self._env.get_template(DESCRIPTION_TEMPLATE)
        return template.render(participants=participants, year=year).strip()
