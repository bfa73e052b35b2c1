"""Variable resolver.

Turns an episode or a snip into a variable map: every name of the relevant
vocabulary maps to its rendered text, or to ``None`` when the object has no
content for it. The resolver is pure; the export date is captured by the
caller and passed in.
"""
from __future__ import annotations

from datetime import date
from typing import Dict, Optional, Union

from ..models import Episode, Snip
from .formatting import (
    FormattingOptions,
    format_books,
    format_date,
    format_duration,
    format_image,
    format_tags,
    format_timestamp,
    format_transcript,
    join_list,
)
from .vocabulary import SNIPS_SECTION

Variables = Dict[str, Optional[str]]


class VariableResolver:
    """Resolve template variables for episodes and snips.

    Example:
        resolver = VariableResolver(FormattingOptions())
        variables = resolver.resolve_episode(episode, export_date=date.today())
        variables["show_title"]  # -> "Deep Dive"
    """

    def __init__(self, options: Optional[FormattingOptions] = None) -> None:
        self.options = options or FormattingOptions()

    def resolve(
        self,
        obj: Union[Episode, Snip],
        *,
        export_date: Optional[date] = None,
        snips_section: Optional[str] = None,
    ) -> Variables:
        """Resolve variables for an episode or a snip."""
        if isinstance(obj, Episode):
            return self.resolve_episode(obj, export_date=export_date, snips_section=snips_section)
        if isinstance(obj, Snip):
            return self.resolve_snip(obj)
        raise TypeError(f"Cannot resolve variables for {type(obj).__name__}")

    def resolve_episode(
        self,
        episode: Episode,
        *,
        export_date: Optional[date] = None,
        snips_section: Optional[str] = None,
    ) -> Variables:
        """Resolve the episode vocabulary.

        Args:
            episode: Episode to describe
            export_date: Date of this export, captured once by the caller
            snips_section: Already rendered snips, absent when there are none
        """
        opts = self.options
        values: Variables = {
            "episode_title": episode.title,
            "episode_image": format_image(episode.image_url, episode.title, opts.image_template),
            "show_title": episode.show.title,
            "show_author": episode.show.author,
            "guests": join_list(episode.guests, opts.list_separator),
            "episode_publish_date": format_date(episode.publish_date, opts.date_format),
            "episode_ai_description": episode.ai_description,
            "mentioned_books": format_books(episode.mentioned_books),
            "episode_duration": format_duration(episode.duration_seconds),
            "episode_url": episode.url,
            "show_url": episode.show.url,
            "episode_export_date": format_date(export_date, opts.date_format),
            SNIPS_SECTION: snips_section,
        }
        return values

    def resolve_snip(self, snip: Snip) -> Variables:
        """Resolve the snip vocabulary."""
        opts = self.options
        values: Variables = {
            "snip_title": snip.title,
            "snip_url": snip.url,
            "snip_tags": format_tags(snip.tags, opts.tag_prefix),
            "snip_favorite_star": opts.favorite_star if snip.favorite else None,
            "snip_start_time": format_timestamp(snip.start_seconds),
            "snip_end_time": format_timestamp(snip.end_seconds),
            "snip_duration": format_duration(snip.duration_seconds),
            "snip_note": snip.note,
            "snip_quote": snip.quote,
            "snip_transcript": format_transcript(snip.transcript),
        }
        return values


def resolve(
    obj: Union[Episode, Snip],
    *,
    options: Optional[FormattingOptions] = None,
    export_date: Optional[date] = None,
    snips_section: Optional[str] = None,
) -> Variables:
    """Module-level shortcut for ``VariableResolver(options).resolve(...)``."""
    return VariableResolver(options).resolve(
        obj, export_date=export_date, snips_section=snips_section
    )


__all__ = ["Variables", "VariableResolver", "resolve"]
