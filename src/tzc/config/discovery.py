"""Locate the tzc.toml that applies to this invocation.

``TZC_CONFIG`` wins; otherwise the nearest ``tzc.toml`` in the working
directory or one of its parents is used. ``--config`` bypasses both in
:meth:`TzcSettings.from_cli`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tzc.toml"
CONFIG_ENV_VAR = "TZC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for a run started in *start* (default: cwd).

    A ``TZC_CONFIG`` that names a missing file disables config loading
    rather than falling through to the walk-up search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
