"""Standard library logging setup for the CLI."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

_CONFIGURED_LOG_PATH: str | None = None
_FILE_HANDLER: logging.Handler | None = None
_CONSOLE_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, log_path: Path, level: str = "INFO") -> None:
    """Send log records to ``log_path`` (no stderr handler).

    Idempotent per-process: if already configured for the same file, no-op.
    """
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER

    resolved = str(Path(log_path).expanduser().resolve())
    if _CONFIGURED_LOG_PATH == resolved and _FILE_HANDLER is not None:
        return

    Path(resolved).parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _FILE_HANDLER is not None:
        root.removeHandler(_FILE_HANDLER)
        _FILE_HANDLER.close()
        _FILE_HANDLER = None

    fh = logging.FileHandler(resolved, encoding="utf-8")
    fh.setLevel(_level_from_name(level))
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)

    _FILE_HANDLER = fh
    _CONFIGURED_LOG_PATH = resolved


def configure_console_logging(level: str = "DEBUG") -> None:
    """Mirror log records to stderr (``--verbose``)."""
    global _CONSOLE_HANDLER

    root = logging.getLogger()
    root.setLevel(min(root.level or logging.WARNING, _level_from_name(level)))
    if _CONSOLE_HANDLER is not None:
        _CONSOLE_HANDLER.setLevel(_level_from_name(level))
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    _CONSOLE_HANDLER = handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove handlers installed by this module."""
    global _CONFIGURED_LOG_PATH, _FILE_HANDLER, _CONSOLE_HANDLER
    root = logging.getLogger()
    for handler in (_FILE_HANDLER, _CONSOLE_HANDLER):
        if handler is not None:
            root.removeHandler(handler)
            handler.close()
    _CONFIGURED_LOG_PATH = None
    _FILE_HANDLER = None
    _CONSOLE_HANDLER = None


__all__ = [
    "configure_stdlib_logging",
    "configure_console_logging",
    "reset_stdlib_logging_for_tests",
]
