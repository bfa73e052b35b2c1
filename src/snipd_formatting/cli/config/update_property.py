"""
Snipd formatting config update-property command.

SUMMARY: Change the name, template or display name of a property
"""

from __future__ import annotations

import argparse

from snipd_formatting.cli import (
    OutputFormatter,
    add_index_arg,
    add_standard_flags,
    open_editor,
    to_index,
)
from snipd_formatting.core.exceptions import SnipdFormattingError

SUMMARY = "Change the name, template or display name of a property"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_index_arg(parser)
    parser.add_argument("--name", help="New property key")
    parser.add_argument("--template", help="New value template")
    parser.add_argument("--display-name", help="New label ('' clears it)")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    if args.name is None and args.template is None and args.display_name is None:
        formatter.error("Nothing to update: pass --name, --template or --display-name")
        return 1

    try:
        editor, store = open_editor(args, formatter)
        editor.update_property(
            to_index(args.index),
            name=args.name,
            template=args.template,
            display_name=args.display_name,
        )
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except IndexError as e:
        formatter.error(e, error_code="not_found")
        return 1

    if editor.save(store) is None:
        return 1
    formatter.success({"position": args.index, "path": str(store.path)}, f"Updated property {args.index}")
    return 0
