"""YAML I/O utilities with atomic writes."""
from __future__ import annotations

from pathlib import Path
from typing import Any, TextIO

import yaml

from .core import atomic_write


class _LiteralDumper(yaml.SafeDumper):
    """SafeDumper that writes multiline strings in literal block style (|)."""


def _str_representer(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_LiteralDumper.add_representer(str, _str_representer)


def read_yaml(
    path: Path, default: Any = None, raise_on_error: bool = False
) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Returns:
        Any: Parsed YAML data, or default if error

    Examples:
        >>> settings = read_yaml(Path("settings.yaml"), default={})
        >>> assert isinstance(settings, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def write_yaml(path: Path, data: Any, *, sort_keys: bool = False) -> None:
    """Atomically write YAML data to ``path``.

    Multiline strings are written as literal blocks so templates stay readable
    when the file is edited by hand.
    """

    def _writer(f: TextIO) -> None:
        yaml.dump(
            data,
            f,
            Dumper=_LiteralDumper,
            default_flow_style=False,
            sort_keys=sort_keys,
            allow_unicode=True,
        )

    atomic_write(Path(path), _writer)


__all__ = [
    "read_yaml",
    "write_yaml",
]
