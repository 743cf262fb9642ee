"""Locate ``catchup.toml``.

``CATCHUP_CONFIG`` names the file outright; otherwise the nearest
``catchup.toml`` in the start directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "catchup.toml"
CONFIG_ENV_VAR = "CATCHUP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: CWD), or None.

    A ``CATCHUP_CONFIG`` path that is not a file disables the search.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
