"""
Snipd formatting vars command.

SUMMARY: List the template variables

Prints the ``{{variable}}`` tokens available in each template, grouped the
same way the formatting editor groups them.
"""

from __future__ import annotations

import argparse

from snipd_formatting.cli import OutputFormatter, add_json_flag
from snipd_formatting.core.templating import VARIABLE_GROUPS, placeholder_token

SUMMARY = "List the template variables"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--group",
        choices=sorted(VARIABLE_GROUPS),
        help="Only list the variables of one template",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    groups = {args.group: VARIABLE_GROUPS[args.group]} if args.group else VARIABLE_GROUPS

    if formatter.json_mode:
        formatter.json_output({name: list(names) for name, names in groups.items()})
        return 0

    for name, names in groups.items():
        formatter.text(f"{name}:")
        for var in names:
            formatter.text(f"  {placeholder_token(var)}")
    return 0
