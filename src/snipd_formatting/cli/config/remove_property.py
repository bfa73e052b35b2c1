"""
Snipd formatting config remove-property command.

SUMMARY: Remove an additional frontmatter property
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

SUMMARY = "Remove an additional frontmatter property"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_index_arg(parser)
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        editor, store = open_editor(args, formatter)
        removed = editor.remove_property(to_index(args.index))
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except IndexError as e:
        formatter.error(e, error_code="not_found")
        return 1

    if editor.save(store) is None:
        return 1
    formatter.success(
        {"position": args.index, "name": removed.name, "path": str(store.path)},
        f"Removed property {args.index}: {removed.name}",
    )
    return 0
