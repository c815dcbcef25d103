"""Configuration-root resolution.

The root is resolved once by the command layer and handed to every store,
so nothing below the CLI reads environment variables or platform paths.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "slatus"
CONFIG_DIR_ENV = "SLATUS_CONFIG_DIR"

TOKEN_FILE = "token"
PRESETS_FILE = "statuses.json"
PREFERENCES_FILE = "preferences.yaml"


def default_config_dir() -> Path:
    """Return the per-user, per-platform configuration directory."""
    return Path(user_config_dir(APP_NAME))


def resolve_config_dir(override: str | Path | None = None) -> Path:
    """Pick the configuration root.

    Precedence: explicit *override* (``--config-dir``), then
    ``$SLATUS_CONFIG_DIR``, then the platform default.
    """
    if override:
        return Path(override).expanduser()
    env = os.environ.get(CONFIG_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return default_config_dir()
