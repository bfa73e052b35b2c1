"""Template engine facade.

Renders one episode into a note:

1. resolve the episode variables once (export date captured up front)
2. render every snip with the snip template over episode + snip variables;
   ``{{snips_section}}`` is the rendered snips joined by the snip separator
3. render the episode body and the file name
4. build the built-in and additional frontmatter properties

Usage:
    engine = TemplateEngine(config)
    note = engine.render_episode(episode, settings, export_date=date(2024, 5, 1))
    path = write_episode_note(note, vault_dir)
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

from ..models import Episode, Snip
from ..utils.io import write_text
from ..utils.text import format_frontmatter
from .properties import RenderedProperty, build_properties, merge_properties
from .renderer import render_template
from .resolver import Variables, VariableResolver

if TYPE_CHECKING:
    from ..config import EffectiveTemplates, FormattingConfig, FormattingSettings

logger = logging.getLogger(__name__)

# Characters that are unsafe in file names or break wiki links.
_UNSAFE_FILE_NAME_CHARS = re.compile(r'[\\/:*?"<>|#^\[\]]')
_WHITESPACE = re.compile(r"\s+")


def sanitize_file_name(name: str, *, max_length: int = 200, fallback: str = "Untitled episode") -> str:
    """Make a rendered file name safe to use as a note name.

    Unsafe characters are removed, whitespace is collapsed, and the result is
    trimmed and truncated. An empty result becomes ``fallback``.
    """
    cleaned = _UNSAFE_FILE_NAME_CHARS.sub("", name)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip().strip(".")
    if max_length > 0:
        cleaned = cleaned[:max_length].rstrip()
    return cleaned or fallback


@dataclass
class RenderedEpisode:
    """Everything needed to write one episode note."""

    file_name: str
    body: str
    properties: List[RenderedProperty] = field(default_factory=list)
    frontmatter: Dict[str, str] = field(default_factory=dict)
    snip_bodies: List[str] = field(default_factory=list)

    def to_markdown(self) -> str:
        return format_frontmatter(self.frontmatter) + self.body


class TemplateEngine:
    """Render episodes and snips with the configured templates."""

    def __init__(self, config: Optional["FormattingConfig"] = None) -> None:
        if config is None:
            from ..config import ConfigManager

            config = ConfigManager().load()
        self.config = config
        self.options = config.options
        self.resolver = VariableResolver(config.options)

    def _templates(self, settings: Optional["FormattingSettings"]) -> "EffectiveTemplates":
        from ..config import FormattingSettings

        return (settings or FormattingSettings()).effective_templates(self.config.default_templates)

    def render_snip(
        self,
        snip: Snip,
        settings: Optional["FormattingSettings"] = None,
        *,
        episode_variables: Optional[Variables] = None,
    ) -> str:
        """Render one snip body.

        Episode variables, when given, are visible to the snip template too;
        snip variables win on a name clash.
        """
        variables: Variables = dict(episode_variables or {})
        variables.update(self.resolver.resolve_snip(snip))
        template = self._templates(settings).snip
        return render_template(template, variables, self.options.header_separator)

    def render_episode(
        self,
        episode: Episode,
        settings: Optional["FormattingSettings"] = None,
        *,
        export_date: Optional[date] = None,
    ) -> RenderedEpisode:
        """Render the file name, body and frontmatter of an episode note."""
        if export_date is None:
            export_date = date.today()
        templates = self._templates(settings)
        separator = self.options.header_separator

        episode_vars = self.resolver.resolve_episode(episode, export_date=export_date)
        snip_bodies = [
            self.render_snip(snip, settings, episode_variables=episode_vars)
            for snip in episode.snips
        ]
        variables: Variables = dict(episode_vars)
        variables["snips_section"] = (
            self.options.snip_separator.join(snip_bodies) if snip_bodies else None
        )

        body = render_template(templates.episode, variables, separator)
        file_name = sanitize_file_name(
            render_template(templates.file_name, variables, separator),
            max_length=self.options.file_name_max_length,
            fallback=self.options.file_name_fallback,
        )

        base = build_properties(self.config.base_properties, variables, separator)
        additional = build_properties(
            (settings.additional_properties or ()) if settings else (),
            variables,
            separator,
        )
        logger.debug(
            "Rendered episode %r: %d snips, %d additional properties",
            episode.title,
            len(snip_bodies),
            len(additional),
        )
        return RenderedEpisode(
            file_name=file_name,
            body=body,
            properties=base + additional,
            frontmatter=merge_properties(base, additional),
            snip_bodies=snip_bodies,
        )


def write_episode_note(rendered: RenderedEpisode, output_dir: Path) -> Path:
    """Atomically write ``rendered`` as ``<output_dir>/<file_name>.md``."""
    path = Path(output_dir) / f"{rendered.file_name}.md"
    write_text(path, rendered.to_markdown())
    logger.info("Wrote episode note %s", path)
    return path


__all__ = [
    "RenderedEpisode",
    "TemplateEngine",
    "sanitize_file_name",
    "write_episode_note",
]
