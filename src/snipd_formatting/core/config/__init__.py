"""Formatting configuration: bundled defaults, user settings, editor model."""
from __future__ import annotations

from .editor import FormattingEditor, PropertyErrors, PropertyRow
from .manager import (
    ConfigManager,
    DefaultTemplates,
    FormattingConfig,
    build_formatting_config,
    load_formatting_config,
)
from .paths import get_config_path, get_settings_path, get_user_config_dir
from .settings import (
    EffectiveTemplates,
    FormattingSettings,
    SettingsStore,
    validate_settings_payload,
)

__all__ = [
    "ConfigManager",
    "DefaultTemplates",
    "FormattingConfig",
    "build_formatting_config",
    "load_formatting_config",
    "EffectiveTemplates",
    "FormattingSettings",
    "SettingsStore",
    "validate_settings_payload",
    "FormattingEditor",
    "PropertyRow",
    "PropertyErrors",
    "get_config_path",
    "get_settings_path",
    "get_user_config_dir",
]
