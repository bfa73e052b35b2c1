"""Domain models for podcast episodes and their snips.

Episodes are usually loaded from a YAML or JSON export via
``Episode.from_mapping``. Field names are snake_case; missing optional fields
become ``None`` (or an empty list) so the resolver can mark the matching
template variables as absent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from .exceptions import EpisodeDataError


def _opt_str(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise EpisodeDataError(
            f"Field '{key}' must be a string, got {type(value).__name__}",
            context={"field": key},
        )
    return str(value)


def _opt_seconds(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise EpisodeDataError(f"Field '{key}' must be a number of seconds", context={"field": key})
    try:
        seconds = float(value)
    except (TypeError, ValueError) as exc:
        raise EpisodeDataError(
            f"Field '{key}' must be a number of seconds, got {value!r}",
            context={"field": key},
        ) from exc
    if seconds < 0:
        raise EpisodeDataError(f"Field '{key}' must not be negative", context={"field": key})
    return seconds


def _opt_date(data: Mapping[str, Any], key: str) -> Optional[date]:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00")).date()
    except ValueError as exc:
        raise EpisodeDataError(
            f"Field '{key}' must be an ISO date, got {value!r}",
            context={"field": key},
        ) from exc


def _list_of(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise EpisodeDataError(
            f"Field '{key}' must be a list, got {type(value).__name__}",
            context={"field": key},
        )
    return value


def _mapping(value: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise EpisodeDataError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Show:
    """Podcast show an episode belongs to."""

    title: str
    author: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Show":
        data = _mapping(data, "Show")
        title = _opt_str(data, "title")
        if not title:
            raise EpisodeDataError("Show is missing its title", context={"field": "show.title"})
        return cls(title=title, author=_opt_str(data, "author"), url=_opt_str(data, "url"))


@dataclass(frozen=True)
class Book:
    """Book mentioned during an episode."""

    title: str
    author: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Any) -> "Book":
        # A bare string is accepted as the book title.
        if isinstance(data, str):
            return cls(title=data)
        data = _mapping(data, "Book")
        title = _opt_str(data, "title")
        if not title:
            raise EpisodeDataError("Book is missing its title", context={"field": "book.title"})
        return cls(title=title, author=_opt_str(data, "author"), url=_opt_str(data, "url"))


@dataclass(frozen=True)
class TranscriptLine:
    """One paragraph of a snip transcript."""

    text: str
    speaker: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Any) -> "TranscriptLine":
        if isinstance(data, str):
            return cls(text=data)
        data = _mapping(data, "Transcript line")
        return cls(text=_opt_str(data, "text") or "", speaker=_opt_str(data, "speaker"))


@dataclass(frozen=True)
class Snip:
    """A saved highlight of an episode."""

    title: Optional[str] = None
    url: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    favorite: bool = False
    start_seconds: Optional[float] = None
    end_seconds: Optional[float] = None
    note: Optional[str] = None
    quote: Optional[str] = None
    transcript: List[TranscriptLine] = field(default_factory=list)

    @property
    def duration_seconds(self) -> Optional[float]:
        """Length of the snip, or None when either bound is unknown."""
        if self.start_seconds is None or self.end_seconds is None:
            return None
        return max(0.0, self.end_seconds - self.start_seconds)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Snip":
        data = _mapping(data, "Snip")
        return cls(
            title=_opt_str(data, "title"),
            url=_opt_str(data, "url"),
            tags=[str(t) for t in _list_of(data, "tags") if t is not None],
            favorite=bool(data.get("favorite", False)),
            start_seconds=_opt_seconds(data, "start_seconds"),
            end_seconds=_opt_seconds(data, "end_seconds"),
            note=_opt_str(data, "note"),
            quote=_opt_str(data, "quote"),
            transcript=[TranscriptLine.from_mapping(t) for t in _list_of(data, "transcript")],
        )


@dataclass(frozen=True)
class Episode:
    """Podcast episode with the snips saved from it."""

    title: str
    show: Show
    image_url: Optional[str] = None
    guests: List[str] = field(default_factory=list)
    publish_date: Optional[date] = None
    ai_description: Optional[str] = None
    mentioned_books: List[Book] = field(default_factory=list)
    duration_seconds: Optional[float] = None
    url: Optional[str] = None
    snips: List[Snip] = field(default_factory=list)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Episode":
        """Build an episode from a parsed YAML/JSON export.

        Raises:
            EpisodeDataError: If required fields are missing or mistyped
        """
        data = _mapping(data, "Episode")
        title = _opt_str(data, "title")
        if not title:
            raise EpisodeDataError("Episode is missing its title", context={"field": "title"})
        if "show" not in data:
            raise EpisodeDataError("Episode is missing its show", context={"field": "show"})
        return cls(
            title=title,
            show=Show.from_mapping(data["show"]),
            image_url=_opt_str(data, "image_url"),
            guests=[str(g) for g in _list_of(data, "guests") if g is not None],
            publish_date=_opt_date(data, "publish_date"),
            ai_description=_opt_str(data, "ai_description"),
            mentioned_books=[Book.from_mapping(b) for b in _list_of(data, "mentioned_books")],
            duration_seconds=_opt_seconds(data, "duration_seconds"),
            url=_opt_str(data, "url"),
            snips=[Snip.from_mapping(s) for s in _list_of(data, "snips")],
        )


__all__ = [
    "Show",
    "Book",
    "TranscriptLine",
    "Snip",
    "Episode",
]
