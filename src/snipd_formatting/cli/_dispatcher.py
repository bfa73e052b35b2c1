"""
Auto-discovery CLI dispatcher.

Scans subfolders for commands and registers them automatically:

- cli/commands/<name>.py  => `snipd-formatting <name>`
- cli/<domain>/<name>.py  => `snipd-formatting <domain> <name>`

Each command module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args) -> int``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

PACKAGE = "snipd_formatting.cli"


def _import_command(module_name: str, summary: str) -> dict[str, Any] | None:
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        print(f"Warning: Could not import {module_name}: {e}", file=sys.stderr)
        return None
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Discover CLI domain subfolders (e.g. config/)."""
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.name == "commands":
            continue
        if item.is_dir() and not item.name.startswith("_"):
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no domain prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}
    if not commands_dir.exists():
        return commands

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        info = _import_command(f"{PACKAGE}.commands.{item.stem}", item.stem)
        if info is not None:
            commands[item.stem] = info
    return commands


@lru_cache(maxsize=8)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Discover all commands in a domain subfolder."""
    domain_dir = Path(__file__).parent / domain
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(domain_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        info = _import_command(f"{PACKAGE}.{domain}.{item.stem}", f"{domain} {item.stem}")
        if info is not None:
            commands[item.stem] = info
    return commands


def _add_command(subparsers: Any, cmd_name: str, cmd_info: dict[str, Any]) -> None:
    primary_name = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary_name != cmd_name else []
    cmd_parser = subparsers.add_parser(
        primary_name,
        aliases=aliases,
        help=cmd_info["summary"],
    )
    if cmd_info["register_args"]:
        cmd_info["register_args"](cmd_parser)
    if cmd_info["main"]:
        cmd_parser.set_defaults(_func=cmd_info["main"])


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with auto-discovered domains and commands."""
    parser = argparse.ArgumentParser(
        prog="snipd-formatting",
        description="Render podcast episodes and snips into Markdown notes using your templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write log messages to this file",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="commands",
        metavar="<command>",
    )

    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        _add_command(subparsers, cmd_name, cmd_info)

    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue
        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )
        for cmd_name, cmd_info in sorted(domain_commands.items()):
            _add_command(cmd_subparsers, cmd_name, cmd_info)

    return parser


def _get_version() -> str:
    from snipd_formatting import __version__

    return __version__


def _configure_logging(args: argparse.Namespace) -> None:
    from snipd_formatting.core.stdlib_logging import (
        configure_console_logging,
        configure_stdlib_logging,
    )

    if getattr(args, "log_file", None):
        configure_stdlib_logging(log_path=Path(args.log_file), level="DEBUG" if args.verbose else "INFO")
    if getattr(args, "verbose", False):
        configure_console_logging("DEBUG")


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.domain:
        parser.print_help()
        return 0

    func = getattr(args, "_func", None)
    if func is None:
        # Domain given without a command: show the domain help
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)  # type: ignore[union-attr]
        if domain_parser:
            domain_parser.print_help()
        return 0

    _configure_logging(args)
    logger.debug("Running %s %s", args.domain, getattr(args, "command", "") or "")
    return int(func(args) or 0)


__all__ = [
    "discover_domains",
    "discover_root_commands",
    "discover_commands",
    "build_parser",
    "main",
]
