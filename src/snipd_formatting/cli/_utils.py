"""Shared CLI utility functions."""
from __future__ import annotations

import argparse

from snipd_formatting.core.config import (
    ConfigManager,
    FormattingConfig,
    FormattingEditor,
    SettingsStore,
)

from ._output import OutputFormatter


def get_settings_store(args: argparse.Namespace) -> SettingsStore:
    return SettingsStore(getattr(args, "settings", None) or None)


def get_formatting_config(args: argparse.Namespace) -> FormattingConfig:
    return ConfigManager(getattr(args, "config", None) or None).load()


def open_editor(args: argparse.Namespace, formatter: OutputFormatter) -> tuple[FormattingEditor, SettingsStore]:
    """Load config and settings and wrap them in an editor that prints notices."""
    config = get_formatting_config(args)
    store = get_settings_store(args)

    def notify(message: str) -> None:
        formatter.error(message, error_code="notice")

    editor = FormattingEditor(store.load(), config.default_templates, notify=notify)
    return editor, store


def to_index(raw: int) -> int:
    """Convert a 1-based CLI position to a list index."""
    return raw - 1


__all__ = [
    "get_settings_store",
    "get_formatting_config",
    "open_editor",
    "to_index",
]
