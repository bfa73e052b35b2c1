"""YAML frontmatter formatting for episode notes.

Episode notes start with a YAML frontmatter block delimited by '---'
markers, followed by the rendered episode body.

Example:
    ```yaml
    ---
    episode_title: The Future of Energy
    show: Deep Dive
    category: Science
    ---

    # The Future of Energy
    ```
"""
from __future__ import annotations

from typing import Any, Dict

import yaml


def format_frontmatter(data: Dict[str, Any], *, exclude_none: bool = True) -> str:
    """Format a dictionary as YAML frontmatter.

    Keys keep their insertion order.

    Example:
        >>> print(format_frontmatter({'show': 'Deep Dive', 'category': 'Science'}))
        ---
        show: Deep Dive
        category: Science
        ---
        <BLANKLINE>
    """
    if exclude_none:
        data = {k: v for k, v in data.items() if v is not None}

    if not data:
        return "---\n---\n"

    yaml_content = yaml.safe_dump(
        data,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )

    return f"---\n{yaml_content}---\n"


__all__ = ["format_frontmatter"]
