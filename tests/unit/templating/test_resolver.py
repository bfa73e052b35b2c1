"""Tests for resolving episodes and snips into variable maps."""
from __future__ import annotations

from datetime import date

import pytest

from snipd_formatting.core.models import Episode, Show, Snip
from snipd_formatting.core.templating.formatting import FormattingOptions
from snipd_formatting.core.templating.resolver import VariableResolver, resolve
from snipd_formatting.core.templating.vocabulary import EPISODE_VARIABLES, SNIP_VARIABLES, SNIPS_SECTION


class TestResolveEpisode:
    def test_every_episode_variable_is_present(self, episode: Episode) -> None:
        values = VariableResolver().resolve_episode(episode, export_date=date(2024, 5, 1))
        assert set(values) == set(EPISODE_VARIABLES) | {SNIPS_SECTION}

    def test_values(self, episode: Episode) -> None:
        values = VariableResolver().resolve_episode(episode, export_date=date(2024, 5, 1))

        assert values["episode_title"] == "The Future of Energy"
        assert values["episode_image"] == "![The Future of Energy](https://img.example/ep.png)"
        assert values["show_title"] == "Deep Dive"
        assert values["show_author"] == "Jane Host"
        assert values["guests"] == "Ada, Grace"
        assert values["episode_publish_date"] == "2024-03-05"
        assert values["episode_duration"] == "1h 2min"
        assert values["episode_export_date"] == "2024-05-01"
        assert values["mentioned_books"] == (
            "- [Sustainable Energy](https://books.example/se) by David MacKay\n- The Grid"
        )
        assert values[SNIPS_SECTION] is None

    def test_missing_content_is_absent(self) -> None:
        bare = Episode(title="Bare", show=Show("Pod"))
        values = VariableResolver().resolve_episode(bare)

        for name in ("episode_image", "show_author", "guests", "episode_publish_date",
                     "episode_ai_description", "mentioned_books", "episode_duration",
                     "episode_url", "show_url", "episode_export_date"):
            assert values[name] is None, name

    def test_options_change_formatting(self, episode: Episode) -> None:
        options = FormattingOptions(list_separator=" & ", date_format="%d/%m/%Y")
        values = VariableResolver(options).resolve_episode(episode, export_date=date(2024, 5, 1))
        assert values["guests"] == "Ada & Grace"
        assert values["episode_publish_date"] == "05/03/2024"


class TestResolveSnip:
    def test_every_snip_variable_is_present(self, episode: Episode) -> None:
        assert set(VariableResolver().resolve_snip(episode.snips[0])) == set(SNIP_VARIABLES)

    def test_values(self, episode: Episode) -> None:
        values = VariableResolver().resolve_snip(episode.snips[0])

        assert values["snip_title"] == "Battery costs"
        assert values["snip_tags"] == "#energy #battery-storage"
        assert values["snip_favorite_star"] == "⭐️"
        assert values["snip_start_time"] == "04:05"
        assert values["snip_end_time"] == "05:35"
        assert values["snip_duration"] == "1min 30s"
        assert values["snip_transcript"] == "**Ada:** Costs fell ninety percent."

    def test_not_favorite_has_no_star(self) -> None:
        values = VariableResolver().resolve_snip(Snip(title="x"))
        assert values["snip_favorite_star"] is None
        assert values["snip_tags"] is None
        assert values["snip_duration"] is None


def test_resolve_dispatches_on_type(episode: Episode) -> None:
    assert resolve(episode)["episode_title"] == "The Future of Energy"
    assert resolve(episode.snips[1])["snip_title"] == "Grid scale"


def test_resolve_rejects_other_objects() -> None:
    with pytest.raises(TypeError):
        resolve({"title": "not an episode"})  # type: ignore[arg-type]
