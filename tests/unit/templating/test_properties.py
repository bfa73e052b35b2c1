"""Tests for additional property definitions and the property set builder."""
from __future__ import annotations

import pytest

from snipd_formatting.core.exceptions import PropertyValidationError
from snipd_formatting.core.templating.properties import (
    PropertyDefinition,
    RenderedProperty,
    build_properties,
    merge_properties,
    missing_fields,
)


class TestPropertyDefinition:
    def test_create_trims_input(self) -> None:
        prop = PropertyDefinition.create("  category ", " {{show_title}} ", "  ")
        assert prop == PropertyDefinition("category", "{{show_title}}", None)

    @pytest.mark.parametrize(
        "name,template,name_missing,template_missing",
        [
            ("", "{{show_title}}", True, False),
            ("category", "   ", False, True),
            (None, None, True, True),
        ],
    )
    def test_blank_fields_are_rejected(self, name, template, name_missing, template_missing) -> None:
        with pytest.raises(PropertyValidationError) as exc_info:
            PropertyDefinition.create(name, template)
        assert exc_info.value.name_missing is name_missing
        assert exc_info.value.template_missing is template_missing

    def test_from_mapping_reports_entry_position(self) -> None:
        with pytest.raises(PropertyValidationError) as exc_info:
            PropertyDefinition.from_mapping({"name": " ", "template": "x"}, index=1)
        assert exc_info.value.index == 1
        assert "(entry 2)" in str(exc_info.value)
        assert exc_info.value.context["name_missing"] is True

    @pytest.mark.parametrize(
        "entry,field",
        [
            ({"name": 2024, "template": "{{show_title}}"}, "name"),
            ({"name": "year", "template": ["{{show_title}}"]}, "template"),
            ({"name": "year", "template": "x", "display_name": True}, "display_name"),
        ],
    )
    def test_from_mapping_rejects_non_string_fields(self, entry, field) -> None:
        with pytest.raises(PropertyValidationError) as exc_info:
            PropertyDefinition.from_mapping(entry, index=0)
        assert exc_info.value.context["field"] == field
        assert exc_info.value.index == 0
        assert "(entry 1)" in str(exc_info.value)

    def test_to_dict_omits_empty_display_name(self) -> None:
        assert PropertyDefinition("k", "v").to_dict() == {"name": "k", "template": "v"}
        assert PropertyDefinition("k", "v", "Key").to_dict()["display_name"] == "Key"


def test_missing_fields() -> None:
    assert missing_fields("a", "b") == (False, False)
    assert missing_fields(" ", "") == (True, True)


def test_build_properties_renders_templates() -> None:
    definitions = [PropertyDefinition("category", "{{show_title}}")]
    props = build_properties(definitions, {"show_title": "Pod"})
    assert [p.as_pair() for p in props] == [("category", "Pod")]


def test_rendered_property_unpacks_as_pair() -> None:
    definitions = [PropertyDefinition("category", "{{show_title}}"), PropertyDefinition("host", "{{show_author}}")]
    props = build_properties(definitions, {"show_title": "Pod", "show_author": "Ada"})

    key, value = props[0]
    assert (key, value) == ("category", "Pod")
    assert dict(props) == {"category": "Pod", "host": "Ada"}
    assert tuple(RenderedProperty("k", "v", "Label")) == ("k", "v")


def test_blank_definition_never_reaches_builder() -> None:
    definitions = []
    with pytest.raises(PropertyValidationError):
        definitions.append(PropertyDefinition.create("", "{{show_title}}"))
    assert build_properties(definitions, {"show_title": "Pod"}) == []


def test_display_name_does_not_change_key_or_value() -> None:
    props = build_properties([PropertyDefinition("cat", "{{show_title}}", "Category")], {"show_title": "Pod"})
    assert props == [RenderedProperty("cat", "Pod", "Category")]


def test_build_properties_keeps_order_and_headers() -> None:
    definitions = [
        PropertyDefinition("b", "{{guests}}[[With:]]"),
        PropertyDefinition("a", "{{show_title}}"),
    ]
    props = build_properties(definitions, {"guests": "Ada", "show_title": "Pod"}, " ")
    assert [p.as_pair() for p in props] == [("b", "With: Ada"), ("a", "Pod")]


def test_merge_properties_replaces_duplicate_keys_in_place() -> None:
    base = [RenderedProperty("title", "T"), RenderedProperty("show", "S")]
    additional = [RenderedProperty("show", "Custom"), RenderedProperty("extra", "E")]
    merged = merge_properties(base, additional)
    assert list(merged.items()) == [("title", "T"), ("show", "Custom"), ("extra", "E")]
