"""Config file discovery.

Walk-up finder locates keyrules.toml, similar to how git finds .git/.
The KEYRULES_CONFIG env var overrides the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "keyrules.toml"
CONFIG_ENV_VAR = "KEYRULES_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the keyrules.toml governing *start* (default: cwd), or None.

    KEYRULES_CONFIG is consulted first; when it names a missing file no
    walk-up happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
