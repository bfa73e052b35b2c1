"""Additional frontmatter properties.

A property definition pairs a frontmatter key with a template. Building the
property set renders every template against one variable map, so property
templates can use the whole episode vocabulary.

Definitions are validated when they are constructed; the builder only ever
sees definitions with a non-blank name and template.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import PropertyValidationError
from .renderer import DEFAULT_HEADER_SEPARATOR, VariableMap, render_template


def missing_fields(name: Optional[str], template: Optional[str]) -> Tuple[bool, bool]:
    """Return ``(name_missing, template_missing)`` for raw user input."""
    name_missing = not name or not name.strip()
    template_missing = not template or not template.strip()
    return name_missing, template_missing


@dataclass(frozen=True)
class PropertyDefinition:
    """Validated (key, template, display name) triple.

    ``display_name`` is a label for presentation only; it never changes the
    key or the rendered value.
    """

    name: str
    template: str
    display_name: Optional[str] = None

    def __post_init__(self) -> None:
        name_missing, template_missing = missing_fields(self.name, self.template)
        if name_missing or template_missing:
            what = " and ".join(
                label for label, missing in (("name", name_missing), ("template", template_missing)) if missing
            )
            raise PropertyValidationError(
                f"Additional property is missing its {what}",
                name_missing=name_missing,
                template_missing=template_missing,
            )

    @classmethod
    def create(
        cls,
        name: Optional[str],
        template: Optional[str],
        display_name: Optional[str] = None,
    ) -> "PropertyDefinition":
        """Trim raw input and build a definition; blank display names become None.

        Raises:
            PropertyValidationError: If name or template is blank
        """
        label = (display_name or "").strip() or None
        return cls(name=(name or "").strip(), template=(template or "").strip(), display_name=label)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, index: Optional[int] = None) -> "PropertyDefinition":
        """Build a definition from a loaded YAML entry.

        Raises:
            PropertyValidationError: If a field is blank or not a string
        """
        where = f" (entry {index + 1})" if index is not None else ""
        for key in ("name", "template", "display_name"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise PropertyValidationError(
                    f"Additional property field '{key}' must be a string, got {type(value).__name__}{where}",
                    name_missing=key == "name",
                    template_missing=key == "template",
                    index=index,
                    context={"field": key},
                )
        try:
            return cls.create(data.get("name"), data.get("template"), data.get("display_name"))
        except PropertyValidationError as exc:
            raise PropertyValidationError(
                f"{exc}{where}",
                name_missing=exc.name_missing,
                template_missing=exc.template_missing,
                index=index,
            ) from exc

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "template": self.template}
        if self.display_name:
            data["display_name"] = self.display_name
        return data


@dataclass(frozen=True)
class RenderedProperty:
    """One frontmatter field produced from a definition."""

    key: str
    value: str
    display_name: Optional[str] = None

    def as_pair(self) -> Tuple[str, str]:
        return (self.key, self.value)

    def __iter__(self) -> Iterator[str]:
        # Unpacks as a (key, value) pair.
        yield self.key
        yield self.value


def build_properties(
    definitions: Iterable[PropertyDefinition],
    variables: VariableMap,
    header_separator: str = DEFAULT_HEADER_SEPARATOR,
) -> List[RenderedProperty]:
    """Render each definition's template, keeping definition order."""
    return [
        RenderedProperty(
            key=definition.name,
            value=render_template(definition.template, variables, header_separator),
            display_name=definition.display_name,
        )
        for definition in definitions
    ]


def merge_properties(
    base: Iterable[RenderedProperty],
    additional: Iterable[RenderedProperty],
) -> Dict[str, str]:
    """Combine built-in and user properties into a frontmatter mapping.

    A user property whose key repeats a built-in key replaces the built-in
    value and keeps its position.
    """
    merged: Dict[str, str] = {}
    for prop in base:
        merged[prop.key] = prop.value
    for prop in additional:
        merged[prop.key] = prop.value
    return merged


__all__ = [
    "missing_fields",
    "PropertyDefinition",
    "RenderedProperty",
    "build_properties",
    "merge_properties",
]
