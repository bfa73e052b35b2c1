"""User configuration path resolution.

Precedence (highest to lowest):
1. Explicit path passed by the caller (e.g. the CLI ``--settings`` flag)
2. Environment variables: SNIPD_SETTINGS_PATH, SNIPD_CONFIG_PATH, SNIPD_HOME
3. Default directory: ``~/.snipd``

Relative paths are resolved against the user's home directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

DEFAULT_USER_CONFIG_DIR = ".snipd"
SETTINGS_FILE_NAME = "settings.yaml"
CONFIG_FILE_NAME = "config.yaml"

HOME_ENV = "SNIPD_HOME"
SETTINGS_PATH_ENV = "SNIPD_SETTINGS_PATH"
CONFIG_PATH_ENV = "SNIPD_CONFIG_PATH"


def _absolute(raw: str) -> Path:
    p = Path(raw).expanduser()
    if not p.is_absolute():
        p = Path.home() / p
    return p


def get_user_config_dir() -> Path:
    """Return the user config directory (not created)."""
    env_override = os.environ.get(HOME_ENV)
    if env_override and env_override.strip():
        return _absolute(env_override.strip())
    return Path.home() / DEFAULT_USER_CONFIG_DIR


def get_settings_path(explicit: Optional[str | Path] = None) -> Path:
    """Return the formatting settings file path."""
    if explicit:
        return _absolute(str(explicit))
    env_override = os.environ.get(SETTINGS_PATH_ENV)
    if env_override and env_override.strip():
        return _absolute(env_override.strip())
    return get_user_config_dir() / SETTINGS_FILE_NAME


def get_config_path(explicit: Optional[str | Path] = None) -> Path:
    """Return the user config overlay path."""
    if explicit:
        return _absolute(str(explicit))
    env_override = os.environ.get(CONFIG_PATH_ENV)
    if env_override and env_override.strip():
        return _absolute(env_override.strip())
    return get_user_config_dir() / CONFIG_FILE_NAME


__all__ = [
    "DEFAULT_USER_CONFIG_DIR",
    "SETTINGS_FILE_NAME",
    "CONFIG_FILE_NAME",
    "HOME_ENV",
    "SETTINGS_PATH_ENV",
    "CONFIG_PATH_ENV",
    "get_user_config_dir",
    "get_settings_path",
    "get_config_path",
]
