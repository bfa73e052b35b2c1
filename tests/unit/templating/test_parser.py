"""Tests for the template parser."""
from __future__ import annotations

import pytest

from snipd_formatting.core.templating.parser import (
    parse,
    placeholders,
    unknown_placeholders,
    unparse,
)
from snipd_formatting.core.templating.segments import ConditionalHeader, Literal, Placeholder
from snipd_formatting.core.templating.vocabulary import is_known_variable


class TestParse:
    def test_plain_text_is_one_literal(self) -> None:
        assert parse("just text") == (Literal("just text"),)

    def test_empty_template(self) -> None:
        assert parse("") == ()

    def test_placeholder_between_literals(self) -> None:
        assert parse("Title: {{episode_title}}!") == (
            Literal("Title: "),
            Placeholder("episode_title"),
            Literal("!"),
        )

    def test_name_is_trimmed(self) -> None:
        assert parse("{{ show_title }}") == (Placeholder("show_title"),)

    def test_conditional_header(self) -> None:
        assert parse("{{snip_note}}[[#### Note]]") == (ConditionalHeader("snip_note", "#### Note"),)

    def test_header_must_follow_immediately(self) -> None:
        assert parse("{{snip_note}} [[#### Note]]") == (
            Placeholder("snip_note"),
            Literal(" [[#### Note]]"),
        )

    def test_empty_header_is_allowed(self) -> None:
        assert parse("{{snip_note}}[[]]") == (ConditionalHeader("snip_note", ""),)

    def test_adjacent_placeholders(self) -> None:
        assert parse("{{a}}{{b}}") == (Placeholder("a"), Placeholder("b"))


class TestMalformedInput:
    """Malformed markers degrade to literal text instead of failing."""

    def test_unterminated_placeholder(self) -> None:
        assert parse("Hello {{name") == (Literal("Hello {{name"),)

    def test_nested_open_keeps_first_as_literal(self) -> None:
        assert parse("{{a {{b}}") == (Literal("{{a "), Placeholder("b"))

    @pytest.mark.parametrize("template", ["{{}}", "{{   }}", "{{} }}", "{{ a}b }}"])
    def test_empty_or_brace_name_is_literal(self, template: str) -> None:
        assert parse(template) == (Literal(template),)

    def test_extra_open_brace_is_literal(self) -> None:
        assert parse("{{{episode_title}}}") == (
            Literal("{"),
            Placeholder("episode_title"),
            Literal("}"),
        )

    def test_unterminated_header(self) -> None:
        assert parse("{{snip_note}}[[#### Note") == (
            Placeholder("snip_note"),
            Literal("[[#### Note"),
        )

    def test_header_cannot_span_a_placeholder(self) -> None:
        assert parse("{{a}}[[H{{b}}]]") == (
            Placeholder("a"),
            Literal("[[H"),
            Placeholder("b"),
            Literal("]]"),
        )

    def test_lone_closers_are_literal(self) -> None:
        assert parse("}} ]] [[") == (Literal("}} ]] [["),)


class TestParseCache:
    def test_same_text_returns_cached_tuple(self) -> None:
        template = "{{episode_title}} - {{show_title}}"
        assert parse(template) is parse(template)


@pytest.mark.parametrize(
    "template",
    [
        "# {{episode_title}}\n\n{{snips_section}}[[## Snips]]",
        "{{a {{b}}",
        "{{}} and {{x}}[[open",
        "{{a}}[[]]",
        "{{} }}",
        "a]{{} }}",
        "x{{{ a }}",
    ],
)
def test_unparse_reparses_to_same_segments(template: str) -> None:
    assert parse(unparse(parse(template))) == parse(template)


def test_placeholders_in_first_use_order() -> None:
    template = "{{show_title}} {{episode_title}}[[#]] {{show_title}}"
    assert placeholders(template) == ["show_title", "episode_title"]


def test_unknown_placeholders_reports_typos() -> None:
    assert unknown_placeholders("{{episode_title}} {{episode_titel}}") == ["episode_titel"]
    assert unknown_placeholders("{{custom}}", known=["custom"]) == []


def test_unknown_placeholders_defaults_to_variable_vocabulary() -> None:
    assert is_known_variable("snip_note")
    assert not is_known_variable("snip_notes")
    template = "{{snip_note}}[[#### Note]] {{snip_notes}} {{snips_section}}"
    assert unknown_placeholders(template) == ["snip_notes"]
