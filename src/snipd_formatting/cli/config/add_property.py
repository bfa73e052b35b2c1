"""
Snipd formatting config add-property command.

SUMMARY: Add an additional frontmatter property
"""

from __future__ import annotations

import argparse

from snipd_formatting.cli import OutputFormatter, add_standard_flags, open_editor
from snipd_formatting.core.exceptions import SnipdFormattingError

SUMMARY = "Add an additional frontmatter property"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("name", help="Property key, e.g. 'category'")
    parser.add_argument("template", help="Value template, e.g. '{{show_title}}'")
    parser.add_argument("--display-name", default="", help="Label shown instead of the key")
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        editor, store = open_editor(args, formatter)
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    index = editor.add_property()
    editor.update_property(index, name=args.name, template=args.template, display_name=args.display_name)
    if editor.save(store) is None:
        return 1

    formatter.success(
        {"position": index + 1, "name": args.name.strip(), "path": str(store.path)},
        f"Added property {index + 1}: {args.name.strip()}",
    )
    return 0
