"""Core I/O utilities.

Single source of truth for safe file access patterns:
- Atomic writes with fsync and rename
- Text file read/write operations

This module provides the primitives used by yaml.py.
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, TextIO, Union

PathLike = Union[str, Path]


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory for ``path`` exists."""
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def atomic_write(
    path: Path,
    write_fn: Callable[[TextIO], None],
    *,
    encoding: str = "utf-8",
) -> None:
    """Write to ``path`` atomically using a temp file + fsync + rename.

    - Parent directory is created if missing
    - Data is written to a temporary file in the same directory
    - File is fsync'd, then atomically replaced
    - Any leftover temp file is cleaned up on failure, so the previous
      content of ``path`` survives a failed write

    Args:
        path: Target file path
        write_fn: Callable that writes content to the file object
        encoding: Text encoding (default: utf-8)
    """
    path = Path(path)
    ensure_parent_dir(path)

    tmp_path: Optional[Path] = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=str(path.parent),
            prefix=f".{path.name}.",
            delete=False,
        ) as f:
            tmp_path = Path(f.name)
            write_fn(f)
            f.flush()
            os.fsync(f.fileno())

        os.replace(str(tmp_path), str(path))
    finally:
        if tmp_path is not None and tmp_path.exists():
            try:
                tmp_path.unlink()
            except OSError:
                # Best-effort cleanup; never fail callers on temp removal
                pass


def read_text(path: PathLike) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
        Other I/O errors are propagated to callers
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")
    return path.read_text(encoding="utf-8")


def write_text(path: PathLike, content: str) -> None:
    """Atomically write UTF-8 text to ``path``."""
    target = Path(path)

    def _writer(f: TextIO) -> None:
        f.write(content)

    atomic_write(target, _writer)


__all__ = [
    "PathLike",
    "ensure_parent_dir",
    "atomic_write",
    "read_text",
    "write_text",
]
