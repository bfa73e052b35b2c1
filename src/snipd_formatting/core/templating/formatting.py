"""Value formatting rules used by the variable resolver."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from ..models import Book, TranscriptLine

_IMAGE_FIELD = re.compile(r"\{(title|url)\}")


@dataclass(frozen=True)
class FormattingOptions:
    """Knobs for turning domain values into template text.

    Defaults match the bundled ``formatting`` config section.
    """

    header_separator: str = "\n"
    snip_separator: str = "\n\n"
    list_separator: str = ", "
    date_format: str = "%Y-%m-%d"
    tag_prefix: str = "#"
    favorite_star: str = "⭐️"
    image_template: str = "![{title}]({url})"
    file_name_max_length: int = 200
    file_name_fallback: str = "Untitled episode"


def format_date(value: Optional[date], date_format: str) -> Optional[str]:
    if value is None:
        return None
    return value.strftime(date_format)


def format_duration(seconds: Optional[float]) -> Optional[str]:
    """Format a span as ``1h 2min``, ``1min 30s`` or ``45s``.

    Seconds are dropped once the span reaches an hour.
    """
    if seconds is None:
        return None
    total = int(math.floor(seconds + 0.5))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}min")
    if secs and not hours:
        parts.append(f"{secs}s")
    return " ".join(parts) if parts else "0s"


def format_timestamp(seconds: Optional[float]) -> Optional[str]:
    """Format a position in the episode as ``04:05`` or ``1:02:03``."""
    if seconds is None:
        return None
    total = int(seconds)
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def join_list(items: Iterable[str], separator: str) -> Optional[str]:
    """Join non-blank items; an empty result is absent."""
    values = [item.strip() for item in items if item and item.strip()]
    if not values:
        return None
    return separator.join(values)


def format_tags(tags: Iterable[str], prefix: str) -> Optional[str]:
    """Render tags as ``#tag #other-tag``."""
    rendered = []
    for tag in tags:
        text = tag.strip()
        while prefix and text.startswith(prefix):
            text = text[len(prefix):]
        cleaned = "-".join(text.split())
        if cleaned:
            rendered.append(f"{prefix}{cleaned}")
    return " ".join(rendered) if rendered else None


def format_books(books: Iterable[Book]) -> Optional[str]:
    """One Markdown bullet per book: ``- [Title](url) by Author``."""
    lines = []
    for book in books:
        title = f"[{book.title}]({book.url})" if book.url else book.title
        line = f"- {title}"
        if book.author:
            line += f" by {book.author}"
        lines.append(line)
    return "\n".join(lines) if lines else None


def format_transcript(lines: Iterable[TranscriptLine]) -> Optional[str]:
    """One paragraph per transcript line, prefixed by the speaker in bold."""
    paragraphs = []
    for line in lines:
        text = line.text.strip()
        if not text:
            continue
        if line.speaker:
            paragraphs.append(f"**{line.speaker}:** {text}")
        else:
            paragraphs.append(text)
    return "\n\n".join(paragraphs) if paragraphs else None


def format_image(url: Optional[str], title: str, image_template: str) -> Optional[str]:
    if not url:
        return None
    values = {"title": title, "url": url}
    return _IMAGE_FIELD.sub(lambda m: values[m.group(1)], image_template)


__all__ = [
    "FormattingOptions",
    "format_date",
    "format_duration",
    "format_timestamp",
    "join_list",
    "format_tags",
    "format_books",
    "format_transcript",
    "format_image",
]
