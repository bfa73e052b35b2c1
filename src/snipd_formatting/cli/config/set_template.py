"""
Snipd formatting config set-template command.

SUMMARY: Replace the file name, episode or snip template

A template identical to the built-in default (or blank) is stored as
"use the default", so later changes to the default still apply.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from snipd_formatting.cli import OutputFormatter, add_standard_flags, open_editor
from snipd_formatting.core.exceptions import SnipdFormattingError
from snipd_formatting.core.templating import unknown_placeholders
from snipd_formatting.core.utils.io import read_text

SUMMARY = "Replace the file name, episode or snip template"

_ATTRS = {
    "file_name": "file_name_template",
    "episode": "episode_template",
    "snip": "snip_template",
}


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "kind",
        choices=sorted(_ATTRS),
        help="Template to replace",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--value", help="Template text")
    source.add_argument("--file", help="Read the template from a file ('-' for stdin)")
    add_standard_flags(parser)


def _read_template(args: argparse.Namespace) -> str:
    if args.value is not None:
        return args.value
    if args.file == "-":
        return sys.stdin.read()
    return read_text(Path(args.file))


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        template = _read_template(args)
        editor, store = open_editor(args, formatter)
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1
    except OSError as e:
        formatter.error(e, error_code="io_error")
        return 1

    setattr(editor, _ATTRS[args.kind], template)
    saved = editor.save(store)
    if saved is None:
        return 1

    unknown = unknown_placeholders(template)
    message = f"Updated {args.kind} template"
    if unknown:
        message += f"\nWarning: unknown variables render as empty text: {', '.join(unknown)}"
    formatter.success(
        {"kind": args.kind, "path": str(store.path), "unknown_variables": unknown},
        message,
    )
    return 0
