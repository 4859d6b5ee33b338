"""Locate ``appstate.toml`` for a working directory.

The nearest file in the directory or any ancestor wins. ``$APPSTATE_CONFIG``
replaces the search entirely; the ``--config`` flag never reaches here.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "appstate.toml"
CONFIG_ENV_VAR = "APPSTATE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), if any.

    A ``$APPSTATE_CONFIG`` that names a missing file yields None rather
    than falling back to the ancestor search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None
    return next((c for c in _candidates(start or Path.cwd()) if c.is_file()), None)


def _candidates(start: Path) -> Iterator[Path]:
    here = start.resolve()
    for directory in (here, *here.parents):
        yield directory / CONFIG_FILENAME
