"""Locate zooctl.toml.

The ``ZOOCTL_CONFIG`` env var names the file directly; otherwise the
search walks up from the working directory the way git looks for .git/.
``--config`` bypasses discovery entirely (see ``ZooSettings.from_cli``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "zooctl.toml"
CONFIG_ENV_VAR = "ZOOCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the zooctl.toml governing *start* (default: cwd), or None.

    A ``ZOOCTL_CONFIG`` pointing at a missing file yields None rather than
    falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
