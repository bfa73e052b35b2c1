"""Unified CLI output formatting utilities.

Supports both JSON and text output modes.
"""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON; otherwise output text
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output success result.

        Args:
            data: Result data dictionary
            message: Human-readable success message (used in text mode)
            status: Status string for JSON output
        """
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str, ensure_ascii=False))
        else:
            print(message)

    def error(
        self,
        error: Exception | str,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred (or a message)
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: Dict[str, Any] = {"error": error_code, "message": msg}
            context = getattr(error, "context", None)
            if context:
                output["context"] = context
            print(json.dumps(output, indent=self.indent, default=str, ensure_ascii=False), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str, ensure_ascii=False))

    def text(self, message: str) -> None:
        """Output plain text message (text mode only)."""
        if not self.json_mode:
            print(message)

    def text_kv(self, key: str, value: Any, prefix: str = "  ") -> None:
        """Output key-value pair in text mode."""
        if not self.json_mode:
            print(f"{prefix}{key}: {value}")


__all__ = ["OutputFormatter"]
