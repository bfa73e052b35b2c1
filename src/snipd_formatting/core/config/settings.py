"""User formatting settings and their persistence.

The settings file holds the user's overrides only:

```yaml
episode_file_name_template: null        # null = use the default template
episode_template: |
  # {{episode_title}}
  {{snips_section}}[[## Snips]]
snip_template: null
additional_properties:                  # null = none configured
  - name: category
    template: "{{show_title}}"
    display_name: Category
```

Files are validated against ``schemas/settings.schema.yaml`` with JSON Schema
and every additional property must have a non-blank name and template.
Invalid files are rejected with ``SettingsError``; entries are never dropped
silently.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from snipd_formatting.core.exceptions import PropertyValidationError, SettingsError
from snipd_formatting.core.templating.properties import PropertyDefinition
from snipd_formatting.core.utils.io import read_yaml, write_yaml
from snipd_formatting.data import read_yaml as read_bundled_yaml

from .manager import DefaultTemplates
from .paths import get_settings_path

logger = logging.getLogger(__name__)

SETTINGS_SCHEMA = "settings.schema.yaml"


@dataclass(frozen=True)
class EffectiveTemplates:
    """Templates actually used for rendering (overrides or defaults)."""

    file_name: str
    episode: str
    snip: str


@dataclass(frozen=True)
class FormattingSettings:
    """The user's template overrides and additional properties.

    ``None`` means "use the default" for templates and "none configured" for
    additional properties.
    """

    episode_file_name_template: Optional[str] = None
    episode_template: Optional[str] = None
    snip_template: Optional[str] = None
    additional_properties: Optional[Tuple[PropertyDefinition, ...]] = None

    def effective_templates(self, defaults: DefaultTemplates) -> EffectiveTemplates:
        """Resolve overrides against the built-in ``defaults``."""
        return EffectiveTemplates(
            file_name=self.episode_file_name_template or defaults.file_name,
            episode=self.episode_template or defaults.episode,
            snip=self.snip_template or defaults.snip,
        )

    @property
    def is_default(self) -> bool:
        return self == FormattingSettings()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FormattingSettings":
        """Build settings from an already schema-validated mapping.

        Raises:
            SettingsError: If an additional property has a blank name or template
        """
        raw_props = data.get("additional_properties")
        props: Optional[Tuple[PropertyDefinition, ...]] = None
        if raw_props:
            definitions: List[PropertyDefinition] = []
            for index, entry in enumerate(raw_props):
                try:
                    definitions.append(PropertyDefinition.from_mapping(entry, index=index))
                except PropertyValidationError as exc:
                    raise SettingsError(
                        f"Invalid additional property: {exc}",
                        context=exc.context,
                    ) from exc
            props = tuple(definitions)
        return cls(
            episode_file_name_template=data.get("episode_file_name_template") or None,
            episode_template=data.get("episode_template") or None,
            snip_template=data.get("snip_template") or None,
            additional_properties=props,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "episode_file_name_template": self.episode_file_name_template,
            "episode_template": self.episode_template,
            "snip_template": self.snip_template,
            "additional_properties": (
                [p.to_dict() for p in self.additional_properties]
                if self.additional_properties
                else None
            ),
        }


def settings_validator() -> Draft202012Validator:
    return Draft202012Validator(read_bundled_yaml("schemas", SETTINGS_SCHEMA))


def validate_settings_payload(data: Any) -> None:
    """Validate raw settings data against the JSON schema.

    Raises:
        SettingsError: Listing every schema violation
    """
    errors = sorted(settings_validator().iter_errors(data), key=lambda e: list(e.path))
    if not errors:
        return
    messages = []
    for err in errors:
        location = ".".join(str(p) for p in err.path) or "<root>"
        messages.append(f"{location}: {err.message}")
    raise SettingsError(
        "Invalid settings: " + "; ".join(messages),
        context={"errors": messages},
    )


class SettingsStore:
    """Load and save ``FormattingSettings`` as a YAML file."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = get_settings_path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> FormattingSettings:
        """Load settings; a missing or empty file means all defaults.

        Raises:
            SettingsError: If the file is not valid YAML or violates the schema
        """
        if not self.path.exists():
            logger.debug("No settings file at %s, using defaults", self.path)
            return FormattingSettings()
        try:
            data = read_yaml(self.path, default={}, raise_on_error=True)
        except yaml.YAMLError as exc:
            raise SettingsError(
                f"Invalid YAML in settings file {self.path}: {exc}",
                context={"path": str(self.path)},
            ) from exc
        validate_settings_payload(data)
        return FormattingSettings.from_dict(data)

    def save(self, settings: FormattingSettings) -> Path:
        """Atomically write ``settings``; OSError propagates to the caller."""
        write_yaml(self.path, settings.to_dict())
        logger.info("Saved formatting settings to %s", self.path)
        return self.path


__all__ = [
    "EffectiveTemplates",
    "FormattingSettings",
    "SETTINGS_SCHEMA",
    "settings_validator",
    "validate_settings_payload",
    "SettingsStore",
]
