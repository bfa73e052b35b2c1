"""I/O utilities.

This package provides safe, atomic file operations:
- Core: atomic writes, text I/O
- YAML: read/write
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_parent_dir,
    read_text,
    write_text,
)
from .yaml import (
    read_yaml,
    write_yaml,
)

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
    # yaml
    "read_yaml",
    "write_yaml",
]
