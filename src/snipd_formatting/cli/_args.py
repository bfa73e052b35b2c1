"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_settings_flag(parser: argparse.ArgumentParser) -> None:
    """Add --settings flag for the formatting settings file."""
    parser.add_argument(
        "--settings",
        type=str,
        help="Settings file (default: $SNIPD_SETTINGS_PATH or ~/.snipd/settings.yaml)",
    )


def add_config_flag(parser: argparse.ArgumentParser) -> None:
    """Add --config flag for the user config overlay."""
    parser.add_argument(
        "--config",
        type=str,
        help="Config overlay file (default: $SNIPD_CONFIG_PATH or ~/.snipd/config.yaml)",
    )


def add_index_arg(parser: argparse.ArgumentParser) -> None:
    """Add the 1-based position of an additional property."""
    parser.add_argument(
        "index",
        type=int,
        help="Position of the property (1 = first), as listed by 'config show'",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --json, --settings and --config."""
    add_json_flag(parser)
    add_settings_flag(parser)
    add_config_flag(parser)


__all__ = [
    "add_json_flag",
    "add_settings_flag",
    "add_config_flag",
    "add_index_arg",
    "add_standard_flags",
]
