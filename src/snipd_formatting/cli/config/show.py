"""
Snipd formatting config show command.

SUMMARY: Show the effective templates and additional properties

Templates the user has not overridden are shown as the built-in default.
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

SUMMARY = "Show the effective templates and additional properties"

_KINDS = ("file_name", "episode", "snip")


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--template",
        choices=_KINDS,
        help="Print only this template, verbatim",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        config = get_formatting_config(args)
        store = get_settings_store(args)
        settings = store.load()
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    effective = settings.effective_templates(config.default_templates)
    overridden = {
        "file_name": settings.episode_file_name_template is not None,
        "episode": settings.episode_template is not None,
        "snip": settings.snip_template is not None,
    }
    properties = [p.to_dict() for p in settings.additional_properties or ()]

    if args.template:
        text = getattr(effective, args.template)
        if formatter.json_mode:
            formatter.json_output(
                {"template": args.template, "value": text, "overridden": overridden[args.template]}
            )
        else:
            print(text)
        return 0

    if formatter.json_mode:
        formatter.json_output(
            {
                "settings_path": str(store.path),
                "templates": {kind: getattr(effective, kind) for kind in _KINDS},
                "overridden": overridden,
                "additional_properties": properties,
            }
        )
        return 0

    formatter.text(f"Settings file: {store.path}{'' if store.exists() else ' (not created yet)'}")
    for kind in _KINDS:
        label = "custom" if overridden[kind] else "default"
        formatter.text(f"\n{kind} template ({label}):")
        for line in getattr(effective, kind).splitlines() or [""]:
            formatter.text(f"  | {line}")
    formatter.text("\nAdditional properties:")
    if not properties:
        formatter.text("  (none)")
    for position, prop in enumerate(properties, start=1):
        display = f" ({prop['display_name']})" if prop.get("display_name") else ""
        formatter.text(f"  {position}. {prop['name']}{display}: {prop['template']}")
    return 0
