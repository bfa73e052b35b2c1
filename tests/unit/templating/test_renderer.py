"""Tests for rendering parsed templates against variable maps."""
from __future__ import annotations

import pytest

from snipd_formatting.core.templating.parser import parse
from snipd_formatting.core.templating.renderer import render, render_template

NOTE_TEMPLATE = "{{snip_note}}[[#### Note]]"


def test_placeholder_is_substituted() -> None:
    assert render_template("{{episode_title}}", {"episode_title": "Ep 1"}) == "Ep 1"


def test_header_omitted_when_value_absent() -> None:
    assert render_template(NOTE_TEMPLATE, {"snip_note": None}) == ""
    assert render_template(NOTE_TEMPLATE, {}) == ""


def test_header_emitted_with_value() -> None:
    assert render_template(NOTE_TEMPLATE, {"snip_note": "hello"}) == "#### Note\nhello"


@pytest.mark.parametrize(
    "separator,expected",
    [
        ("\n", "#### Note\nhello"),
        ("\n\n", "#### Note\n\nhello"),
    ],
)
def test_header_separator_is_configurable(separator: str, expected: str) -> None:
    assert render_template(NOTE_TEMPLATE, {"snip_note": "hello"}, separator) == expected


@pytest.mark.parametrize("blank", ["", "   ", "\n\t"])
def test_header_omitted_for_blank_value(blank: str) -> None:
    assert render_template(f"A{NOTE_TEMPLATE}B", {"snip_note": blank}) == "AB"


def test_plain_placeholder_keeps_whitespace_value() -> None:
    assert render_template("[{{snip_note}}]", {"snip_note": "  "}) == "[  ]"


def test_absent_and_unknown_placeholders_render_empty() -> None:
    template = "{{episode_title}}|{{no_such_variable}}|"
    assert render_template(template, {"episode_title": None}) == "||"


def test_literals_pass_through_unchanged() -> None:
    template = "Hello }} and [[x]] {{"
    assert render_template(template, {}) == template


def test_render_is_deterministic() -> None:
    segments = parse("# {{episode_title}}\n{{snip_quote}}[[> Quote]]")
    variables = {"episode_title": "Ep", "snip_quote": "q"}
    assert render(segments, variables) == render(segments, variables) == "# Ep\n> Quote\nq"
