"""Formatting settings editor.

In-memory model behind the formatting dialog: the user edits temporary
copies of the three templates and an ordered list of property rows, then
saves or discards them.

- Property rows are drafts and may be blank while being edited.
- A parallel list of ``PropertyErrors`` flags rows that failed validation;
  fixing a flagged field clears its flag.
- ``save`` validates first. Rows with a blank name or template block the
  save, are flagged, and produce a notice; nothing is thrown to the caller.
- Templates equal to the built-in default are stored as ``None``; an empty
  property list is stored as ``None``.
- A failed write is reported through the notice callback and leaves both
  the editor and the settings file as they were.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from snipd_formatting.core.templating.properties import PropertyDefinition, missing_fields

from .manager import DefaultTemplates
from .settings import FormattingSettings, SettingsStore

logger = logging.getLogger(__name__)

Notifier = Callable[[str], None]

VALIDATION_NOTICE = "Please provide a name and template for each additional property."


@dataclass
class PropertyRow:
    """Editable draft of an additional property."""

    name: str = ""
    template: str = ""
    display_name: str = ""


@dataclass
class PropertyErrors:
    """Validation flags for one property row."""

    name: bool = False
    template: bool = False

    @property
    def any(self) -> bool:
        return self.name or self.template


def _log_notice(message: str) -> None:
    logger.info(message)


class FormattingEditor:
    """Edit formatting settings with per-row validation.

    Example:
        editor = FormattingEditor(store.load(), config.default_templates)
        index = editor.add_property()
        editor.update_property(index, name="category", template="{{show_title}}")
        if editor.save(store):
            ...
    """

    def __init__(
        self,
        settings: FormattingSettings,
        defaults: DefaultTemplates,
        *,
        notify: Optional[Notifier] = None,
    ) -> None:
        self.defaults = defaults
        self.notify: Notifier = notify or _log_notice
        self.file_name_template = settings.episode_file_name_template or defaults.file_name
        self.episode_template = settings.episode_template or defaults.episode
        self.snip_template = settings.snip_template or defaults.snip
        self.properties: List[PropertyRow] = [
            PropertyRow(p.name, p.template, p.display_name or "")
            for p in (settings.additional_properties or ())
        ]
        self.errors: List[PropertyErrors] = [PropertyErrors() for _ in self.properties]

    # ========== Property rows ==========

    def add_property(self) -> int:
        """Append an empty row and return its index."""
        self.properties.append(PropertyRow())
        self.errors.append(PropertyErrors())
        return len(self.properties) - 1

    def remove_property(self, index: int) -> PropertyRow:
        """Remove a row and its validation flags; returns the removed row.

        Raises:
            IndexError: If there is no row at ``index``
        """
        if not 0 <= index < len(self.properties):
            raise IndexError(f"No additional property at position {index + 1}")
        del self.errors[index]
        return self.properties.pop(index)

    def update_property(
        self,
        index: int,
        *,
        name: Optional[str] = None,
        template: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> PropertyRow:
        """Change fields of a row; a flagged field that becomes non-blank is unflagged.

        Raises:
            IndexError: If there is no row at ``index``
        """
        if not 0 <= index < len(self.properties):
            raise IndexError(f"No additional property at position {index + 1}")
        row = self.properties[index]
        errors = self.errors[index]
        if name is not None:
            row.name = name
            if errors.name and name.strip():
                errors.name = False
        if template is not None:
            row.template = template
            if errors.template and template.strip():
                errors.template = False
        if display_name is not None:
            row.display_name = display_name
        return row

    # ========== Validation and saving ==========

    def validate(self) -> bool:
        """Recompute the row flags. Returns True when any row is invalid."""
        self.errors = []
        for row in self.properties:
            name_missing, template_missing = missing_fields(row.name, row.template)
            self.errors.append(PropertyErrors(name=name_missing, template=template_missing))
        return any(e.any for e in self.errors)

    @property
    def has_errors(self) -> bool:
        return any(e.any for e in self.errors)

    def reset_to_default(self) -> None:
        """Restore the built-in templates and clear every property row."""
        self.file_name_template = self.defaults.file_name
        self.episode_template = self.defaults.episode
        self.snip_template = self.defaults.snip
        self.properties = []
        self.errors = []

    def _override(self, value: str, default: str) -> Optional[str]:
        if value == default or not value.strip():
            return None
        return value

    def to_settings(self) -> FormattingSettings:
        """Build settings from the current state.

        Call ``validate`` first; an invalid row raises
        ``PropertyValidationError`` here.
        """
        props = tuple(
            PropertyDefinition.create(row.name, row.template, row.display_name)
            for row in self.properties
        )
        return FormattingSettings(
            episode_file_name_template=self._override(self.file_name_template, self.defaults.file_name),
            episode_template=self._override(self.episode_template, self.defaults.episode),
            snip_template=self._override(self.snip_template, self.defaults.snip),
            additional_properties=props or None,
        )

    def save(self, store: SettingsStore) -> Optional[FormattingSettings]:
        """Validate and persist.

        Returns:
            The saved settings, or None when validation or the write failed
        """
        if self.validate():
            invalid = [i + 1 for i, e in enumerate(self.errors) if e.any]
            logger.debug("Save blocked, invalid property rows: %s", invalid)
            self.notify(VALIDATION_NOTICE)
            return None

        settings = self.to_settings()
        try:
            store.save(settings)
        except OSError as exc:
            logger.warning("Failed to save formatting settings to %s: %s", store.path, exc)
            self.notify(f"Failed to save formatting settings: {exc}")
            return None
        return settings


__all__ = [
    "PropertyRow",
    "PropertyErrors",
    "FormattingEditor",
    "VALIDATION_NOTICE",
]
