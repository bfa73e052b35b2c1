from __future__ import annotations

from typing import Any, Dict, Mapping


class SnipdFormattingError(Exception):
    """Base exception for snipd-formatting."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class PropertyValidationError(SnipdFormattingError, ValueError):
    """Raised when an additional property is missing its name or template."""

    def __init__(
        self,
        message: str = "",
        *,
        name_missing: bool = False,
        template_missing: bool = False,
        index: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        ctx.setdefault("name_missing", name_missing)
        ctx.setdefault("template_missing", template_missing)
        if index is not None:
            ctx.setdefault("index", index)
        SnipdFormattingError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.name_missing = name_missing
        self.template_missing = template_missing
        self.index = index


class SettingsError(SnipdFormattingError, ValueError):
    """Raised when a settings or config file is malformed."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SnipdFormattingError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class EpisodeDataError(SnipdFormattingError, ValueError):
    """Raised when an episode export cannot be turned into domain objects."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        SnipdFormattingError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "SnipdFormattingError",
    "PropertyValidationError",
    "SettingsError",
    "EpisodeDataError",
]
