"""User preferences for slatus.

Loads settings from ``<config dir>/preferences.yaml``.
Falls back to sensible defaults if the file doesn't exist or is invalid.
`config` and `doctor` create a commented default file so users can find it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .log import logger
from .platform import PREFERENCES_FILE

DEFAULT_API_URL = "https://slack.com/api"
API_URL_ENV = "SLATUS_API_URL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_DEFAULT_YAML = """\
# slatus preferences
# Delete this file to reset to defaults.

api:
  base_url: "https://slack.com/api"   # Web API root; $SLATUS_API_URL overrides

logging:
  level: "WARNING"                     # DEBUG, INFO, WARNING, ERROR
"""


@dataclass
class ApiPreferences:
    """Where the remote status calls go."""

    base_url: str = DEFAULT_API_URL


@dataclass
class LoggingPreferences:
    level: str = "WARNING"


@dataclass
class Preferences:
    """Top-level slatus preferences."""

    api: ApiPreferences = field(default_factory=ApiPreferences)
    logging: LoggingPreferences = field(default_factory=LoggingPreferences)


def load_preferences(config_dir: Path) -> Preferences:
    """Load preferences from YAML file under *config_dir*.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Never writes: read-only commands must not create the config dir.
    """
    path = config_dir / PREFERENCES_FILE
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if isinstance(data.get("api"), dict):
                url = data["api"].get("base_url")
                if url:
                    prefs.api.base_url = str(url).rstrip("/")
            if isinstance(data.get("logging"), dict):
                level = str(data["logging"].get("level") or "").upper()
                if level in _LOG_LEVELS:
                    prefs.logging.level = level
        except (OSError, UnicodeDecodeError, yaml.YAMLError, AttributeError):
            logger.debug("failed to read preferences from %s", path, exc_info=True)

    env_url = os.environ.get(API_URL_ENV)
    if env_url:
        prefs.api.base_url = env_url.rstrip("/")

    return prefs


def write_default_preferences(config_dir: Path) -> bool:
    """Create a commented default preferences file if none exists.

    Returns True when a file was written.
    """
    path = config_dir / PREFERENCES_FILE
    if path.exists():
        return False
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(_DEFAULT_YAML, encoding="utf-8")
    except OSError:
        logger.debug("could not write default preferences to %s", path, exc_info=True)
        return False
    return True
