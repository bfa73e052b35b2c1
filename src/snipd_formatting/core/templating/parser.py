"""Template parser.

Scans a template left to right for ``{{name}}`` placeholders, each optionally
followed by a ``[[header]]`` marker, and produces a tuple of segments.

Parsing never fails. Malformed syntax degrades to literal text:

- unterminated ``{{``: literal from the delimiter to the end
- ``{{`` followed by another ``{{`` before its ``}}``: the first one is
  literal and scanning resumes at the inner one
- empty name (``{{}}``, ``{{  }}``) or a name containing a brace
  (``{{} }}``): literal
- ``{{{name}}``: the first brace is literal and ``{{name}}`` is parsed
- ``[[`` without a ``]]`` before the next ``{{`` or the end: not a header;
  the placeholder stays plain and ``[[`` is literal

Parsed templates are cached by their exact text. Cached values are tuples
of frozen segments and are never mutated.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List, Optional, Tuple

from .segments import ConditionalHeader, Literal, Placeholder, Segment
from .vocabulary import is_known_variable

OPEN = "{{"
CLOSE = "}}"
HEADER_OPEN = "[["
HEADER_CLOSE = "]]"


def _scan(template: str) -> Tuple[Segment, ...]:
    segments: List[Segment] = []
    literal: List[str] = []

    def flush_literal() -> None:
        text = "".join(literal)
        if text:
            segments.append(Literal(text))
        literal.clear()

    i = 0
    n = len(template)
    while i < n:
        start = template.find(OPEN, i)
        if start == -1:
            literal.append(template[i:])
            break
        literal.append(template[i:start])

        end = template.find(CLOSE, start + len(OPEN))
        if end == -1:
            literal.append(template[start:])
            break

        nested = template.find(OPEN, start + len(OPEN), end)
        if nested != -1:
            literal.append(template[start:nested])
            i = nested
            continue

        raw_name = template[start + len(OPEN):end]
        if raw_name.startswith("{"):
            # "{{{name}}": the first brace is text, the placeholder opens one later
            literal.append("{")
            i = start + 1
            continue

        name = raw_name.strip()
        if not name or "{" in name or "}" in name:
            literal.append(template[start:end + len(CLOSE)])
            i = end + len(CLOSE)
            continue

        i = end + len(CLOSE)
        header: Optional[str] = None
        if template.startswith(HEADER_OPEN, i):
            header_end = template.find(HEADER_CLOSE, i + len(HEADER_OPEN))
            if header_end != -1 and template.find(OPEN, i + len(HEADER_OPEN), header_end) == -1:
                header = template[i + len(HEADER_OPEN):header_end]
                i = header_end + len(HEADER_CLOSE)

        flush_literal()
        if header is None:
            segments.append(Placeholder(name))
        else:
            segments.append(ConditionalHeader(name, header))

    flush_literal()
    return tuple(segments)


@lru_cache(maxsize=256)
def parse(template: str) -> Tuple[Segment, ...]:
    """Parse ``template`` into segments (cached by template text).

    Example:
        >>> parse("{{snip_note}}[[#### Note]]")
        (ConditionalHeader(name='snip_note', header='#### Note'),)
    """
    return _scan(template)


def unparse(segments: Iterable[Segment]) -> str:
    """Reconstruct template text from segments.

    ``parse(unparse(parse(t)))`` equals ``parse(t)`` for every template.
    """
    parts: List[str] = []
    for segment in segments:
        if isinstance(segment, Literal):
            parts.append(segment.text)
        elif isinstance(segment, ConditionalHeader):
            parts.append(f"{OPEN}{segment.name}{CLOSE}{HEADER_OPEN}{segment.header}{HEADER_CLOSE}")
        else:
            parts.append(f"{OPEN}{segment.name}{CLOSE}")
    return "".join(parts)


def placeholders(template: str) -> List[str]:
    """Return variable names referenced by ``template``, in first-use order."""
    seen: List[str] = []
    for segment in parse(template):
        if isinstance(segment, (Placeholder, ConditionalHeader)) and segment.name not in seen:
            seen.append(segment.name)
    return seen


def unknown_placeholders(template: str, known: Optional[Iterable[str]] = None) -> List[str]:
    """Return referenced names that are outside ``known`` (default: the variable vocabulary).

    Unknown names are not errors (they render empty); this is used to warn
    users about likely typos.
    """
    if known is None:
        return [name for name in placeholders(template) if not is_known_variable(name)]
    known_set = set(known)
    return [name for name in placeholders(template) if name not in known_set]


def clear_parse_cache() -> None:
    parse.cache_clear()


__all__ = [
    "OPEN",
    "CLOSE",
    "HEADER_OPEN",
    "HEADER_CLOSE",
    "parse",
    "unparse",
    "placeholders",
    "unknown_placeholders",
    "clear_parse_cache",
]
