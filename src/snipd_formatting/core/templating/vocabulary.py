"""Template variable vocabulary.

These are the only names the resolver guarantees to fill. Any other
``{{name}}`` in a user template renders as empty output.

The groups mirror the variable lists offered next to each template in the
formatting editor.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Tuple

EPISODE_VARIABLES: Tuple[str, ...] = (
    "episode_title",
    "episode_image",
    "show_title",
    "show_author",
    "guests",
    "episode_publish_date",
    "episode_ai_description",
    "mentioned_books",
    "episode_duration",
    "episode_url",
    "show_url",
    "episode_export_date",
)

SNIPS_SECTION = "snips_section"

SNIP_VARIABLES: Tuple[str, ...] = (
    "snip_title",
    "snip_url",
    "snip_tags",
    "snip_favorite_star",
    "snip_start_time",
    "snip_end_time",
    "snip_duration",
    "snip_note",
    "snip_quote",
    "snip_transcript",
)

# Variables offered for each editable template.
FILE_NAME_VARIABLES: Tuple[str, ...] = (
    "episode_title",
    "episode_duration",
    "episode_publish_date",
    "episode_url",
)
EPISODE_TEMPLATE_VARIABLES: Tuple[str, ...] = EPISODE_VARIABLES + (SNIPS_SECTION,)
SNIP_TEMPLATE_VARIABLES: Tuple[str, ...] = SNIP_VARIABLES
PROPERTY_VARIABLES: Tuple[str, ...] = EPISODE_VARIABLES

VARIABLE_GROUPS: Dict[str, Tuple[str, ...]] = {
    "file_name": FILE_NAME_VARIABLES,
    "episode": EPISODE_TEMPLATE_VARIABLES,
    "snip": SNIP_TEMPLATE_VARIABLES,
    "properties": PROPERTY_VARIABLES,
}

ALL_VARIABLES: FrozenSet[str] = frozenset(EPISODE_VARIABLES + (SNIPS_SECTION,) + SNIP_VARIABLES)


def placeholder_token(name: str) -> str:
    """Return the ``{{name}}`` token users paste into a template."""
    return "{{" + name + "}}"


def is_known_variable(name: str) -> bool:
    return name in ALL_VARIABLES


__all__ = [
    "EPISODE_VARIABLES",
    "SNIPS_SECTION",
    "SNIP_VARIABLES",
    "FILE_NAME_VARIABLES",
    "EPISODE_TEMPLATE_VARIABLES",
    "SNIP_TEMPLATE_VARIABLES",
    "PROPERTY_VARIABLES",
    "VARIABLE_GROUPS",
    "ALL_VARIABLES",
    "placeholder_token",
    "is_known_variable",
]
