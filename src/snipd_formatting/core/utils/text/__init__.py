"""Text helpers."""
from __future__ import annotations

from .frontmatter import format_frontmatter

__all__ = ["format_frontmatter"]
