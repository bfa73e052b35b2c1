"""
Snipd formatting config reset command.

SUMMARY: Reset templates and additional properties to the defaults
"""

from __future__ import annotations

import argparse

from snipd_formatting.cli import OutputFormatter, add_standard_flags, open_editor
from snipd_formatting.core.exceptions import SnipdFormattingError

SUMMARY = "Reset templates and additional properties to the defaults"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        editor, store = open_editor(args, formatter)
    except SnipdFormattingError as e:
        formatter.error(e, error_code=e.__class__.__name__)
        return 1

    editor.reset_to_default()
    if editor.save(store) is None:
        return 1
    formatter.success({"path": str(store.path)}, f"Formatting settings reset to defaults ({store.path})")
    return 0
