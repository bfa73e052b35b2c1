"""Template rendering for episode and snip notes.

Templates use two markers:

- ``{{variable}}``: replaced by the variable value (empty when absent)
- ``{{variable}}[[Header]]``: emits ``Header`` + separator + value only when
  the value is present and non-blank

Modules:
- vocabulary: variable names and the groups offered per template
- segments: parsed template segments
- parser: template text to segments (cached)
- renderer: segments + variable map to text
- resolver: episodes and snips to variable maps
- formatting: date, duration, list and markdown formatting rules
- properties: additional frontmatter property definitions
- engine: episode note rendering facade
"""
from __future__ import annotations

from .engine import RenderedEpisode, TemplateEngine, sanitize_file_name, write_episode_note
from .formatting import FormattingOptions
from .parser import parse, placeholders, unknown_placeholders, unparse
from .properties import (
    PropertyDefinition,
    RenderedProperty,
    build_properties,
    merge_properties,
    missing_fields,
)
from .renderer import DEFAULT_HEADER_SEPARATOR, VariableMap, render, render_template
from .resolver import VariableResolver, Variables, resolve
from .segments import ConditionalHeader, Literal, Placeholder, Segment
from .vocabulary import ALL_VARIABLES, VARIABLE_GROUPS, placeholder_token

__all__ = [
    # Segments and parsing
    "Segment",
    "Literal",
    "Placeholder",
    "ConditionalHeader",
    "parse",
    "unparse",
    "placeholders",
    "unknown_placeholders",
    # Rendering
    "VariableMap",
    "DEFAULT_HEADER_SEPARATOR",
    "render",
    "render_template",
    # Resolution
    "FormattingOptions",
    "Variables",
    "VariableResolver",
    "resolve",
    "ALL_VARIABLES",
    "VARIABLE_GROUPS",
    "placeholder_token",
    # Properties
    "PropertyDefinition",
    "RenderedProperty",
    "build_properties",
    "merge_properties",
    "missing_fields",
    # Engine
    "RenderedEpisode",
    "TemplateEngine",
    "sanitize_file_name",
    "write_episode_note",
]
