"""Template renderer.

Walks parsed segments and substitutes resolved values:

- Literal: appended verbatim
- Placeholder: the value when present, nothing when absent
- ConditionalHeader: header + separator + value when the value is present
  and non-blank; nothing otherwise, so a header never appears without
  its content

Rendering reads nothing but its arguments: the same segments and variable
map always produce the same text.
"""
from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from .parser import parse
from .segments import ConditionalHeader, Literal, Segment

VariableMap = Mapping[str, Optional[str]]

DEFAULT_HEADER_SEPARATOR = "\n"


def render(
    segments: Iterable[Segment],
    variables: VariableMap,
    header_separator: str = DEFAULT_HEADER_SEPARATOR,
) -> str:
    """Render parsed ``segments`` against ``variables``.

    Args:
        segments: Output of ``parse``
        variables: Variable name to value, ``None`` meaning absent
        header_separator: Text between a conditional header and its value

    Returns:
        Rendered text
    """
    out: List[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            out.append(segment.text)
            continue

        value = variables.get(segment.name)
        if isinstance(segment, ConditionalHeader):
            if value is not None and value.strip():
                out.append(segment.header)
                out.append(header_separator)
                out.append(value)
        elif value is not None:
            out.append(value)
    return "".join(out)


def render_template(
    template: str,
    variables: VariableMap,
    header_separator: str = DEFAULT_HEADER_SEPARATOR,
) -> str:
    """Parse (cached) and render ``template`` in one call.

    Example:
        >>> render_template("{{snip_note}}[[#### Note]]", {"snip_note": "hello"})
        '#### Note\\nhello'
    """
    return render(parse(template), variables, header_separator)


__all__ = [
    "VariableMap",
    "DEFAULT_HEADER_SEPARATOR",
    "render",
    "render_template",
]
