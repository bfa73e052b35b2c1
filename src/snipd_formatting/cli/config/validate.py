"""
Snipd formatting config validate command.

SUMMARY: Validate the settings file and report unknown variables

Fails when the settings file cannot be loaded. Placeholders that are not part
of the variable vocabulary are reported as warnings only: they render as
empty text.
"""

from __future__ import annotations

import argparse

from snipd_formatting.cli import (
    OutputFormatter,
    add_standard_flags,
    get_formatting_config,
    get_settings_store,
)
from snipd_formatting.core.exceptions import SnipdFormattingError
from snipd_formatting.core.templating import unknown_placeholders

SUMMARY = "Validate the settings file and report unknown variables"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = get_formatting_config(args)
        store = get_settings_store(args)
        settings = store.load()
    except SnipdFormattingError as e:
        formatter.error(e, error_code="invalid_settings")
        return 1

    effective = settings.effective_templates(config.default_templates)
    sources = {
        "file_name": effective.file_name,
        "episode": effective.episode,
        "snip": effective.snip,
    }
    for prop in settings.additional_properties or ():
        sources[f"property:{prop.name}"] = prop.template

    warnings = {}
    for where, template in sources.items():
        unknown = unknown_placeholders(template)
        if unknown:
            warnings[where] = unknown

    message = f"Settings OK: {store.path}"
    if warnings:
        details = "; ".join(f"{where}: {', '.join(names)}" for where, names in warnings.items())
        message += f"\nWarning: unknown variables render as empty text ({details})"
    formatter.success({"path": str(store.path), "warnings": warnings}, message, status="valid")
    return 0
