"""
Snipd formatting CLI package.

Provides the command-line interface with auto-discovery of commands
from cli/commands/ (top level) and domain subfolders (config/).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._args import (
    add_config_flag,
    add_index_arg,
    add_json_flag,
    add_settings_flag,
    add_standard_flags,
)
from ._output import OutputFormatter
from ._utils import get_formatting_config, get_settings_store, open_editor, to_index

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_settings_flag",
    "add_config_flag",
    "add_index_arg",
    "add_standard_flags",
    # Utilities
    "get_settings_store",
    "get_formatting_config",
    "open_editor",
    "to_index",
]
