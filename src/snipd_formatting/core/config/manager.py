"""
Formatting configuration management (YAML, layered, env overrides).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from snipd_formatting.core.exceptions import PropertyValidationError, SettingsError
from snipd_formatting.core.templating.formatting import FormattingOptions
from snipd_formatting.core.templating.properties import PropertyDefinition
from snipd_formatting.core.utils.io import read_yaml
from snipd_formatting.core.utils.merge import deep_merge
from snipd_formatting.data import read_yaml as read_bundled_yaml

from .paths import CONFIG_PATH_ENV, HOME_ENV, SETTINGS_PATH_ENV, get_config_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "SNIPD_"
# Path variables share the prefix but are not config keys.
_RESERVED_ENV = {HOME_ENV, SETTINGS_PATH_ENV, CONFIG_PATH_ENV}


@dataclass(frozen=True)
class DefaultTemplates:
    """Built-in templates used when the user has no override."""

    file_name: str
    episode: str
    snip: str


@dataclass(frozen=True)
class FormattingConfig:
    """Resolved configuration handed to the template engine."""

    options: FormattingOptions
    default_templates: DefaultTemplates
    base_properties: Tuple[PropertyDefinition, ...] = ()
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)


class ConfigManager:
    """Load and merge formatting configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: SNIPD_<SECTION>__<KEY> (e.g. SNIPD_FORMATTING__DATE_FORMAT)
    2. User config: ~/.snipd/config.yaml (or SNIPD_CONFIG_PATH)
    3. Bundled defaults: snipd_formatting.data/config/formatting.yaml
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        self.config_path = get_config_path(config_path)

    # ========== Env overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        # Strings are kept verbatim: separators are often pure whitespace.
        return value

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], str]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV:
                continue
            raw = key[len(ENV_PREFIX):]
            segs = raw.split("__")
            if not raw or any(seg == "" for seg in segs):
                raise SettingsError(
                    f"Malformed {ENV_PREFIX}* key: empty segment in '{key}'",
                    context={"env": key},
                )
            yield [seg.lower() for seg in segs], os.environ[key]

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        """Apply SNIPD_* overrides in place.

        Values are type-coerced, except where the key already holds a string.
        """
        for path, raw in self._iter_env_overrides():
            current = cfg
            for part in path[:-1]:
                nxt = current.get(part)
                if not isinstance(nxt, dict):
                    nxt = {}
                    current[part] = nxt
                current = nxt
            existing = current.get(path[-1])
            current[path[-1]] = raw if isinstance(existing, str) else self._coerce_type(raw)
            logger.debug("Config override from environment: %s", ".".join(path))

    # ========== Loading ==========

    def load_dict(self) -> Dict[str, Any]:
        """Return the merged configuration as a plain dictionary."""
        cfg = copy.deepcopy(read_bundled_yaml("config", "formatting.yaml"))
        if self.config_path.exists():
            try:
                user_cfg = read_yaml(self.config_path, default={}, raise_on_error=True)
            except yaml.YAMLError as exc:
                raise SettingsError(
                    f"Invalid YAML in config file {self.config_path}: {exc}",
                    context={"path": str(self.config_path)},
                ) from exc
            if not isinstance(user_cfg, dict):
                raise SettingsError(
                    f"Config file {self.config_path} must contain a mapping",
                    context={"path": str(self.config_path)},
                )
            cfg = deep_merge(cfg, user_cfg)
            logger.debug("Loaded user config from %s", self.config_path)
        self.apply_env_overrides(cfg)
        return cfg

    def load(self) -> FormattingConfig:
        """Load, merge and convert the configuration.

        Raises:
            SettingsError: If a section has the wrong shape
        """
        return build_formatting_config(self.load_dict())

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key (e.g. 'formatting.date_format')."""
        current: Any = self.load_dict()
        for part in key.split("."):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name) or {}
    if not isinstance(value, dict):
        raise SettingsError(f"Config section '{name}' must be a mapping", context={"section": name})
    return value


def _str_option(section: Dict[str, Any], key: str, default: str) -> str:
    value = section.get(key, default)
    if not isinstance(value, str):
        raise SettingsError(f"Config option '{key}' must be a string", context={"option": key})
    return value


def build_formatting_config(cfg: Dict[str, Any]) -> FormattingConfig:
    """Convert a merged config dictionary into a ``FormattingConfig``."""
    fmt = _section(cfg, "formatting")
    file_name = fmt.get("file_name") or {}
    if not isinstance(file_name, dict):
        raise SettingsError("Config option 'file_name' must be a mapping", context={"option": "file_name"})
    defaults = FormattingOptions()
    try:
        max_length = int(file_name.get("max_length", defaults.file_name_max_length))
    except (TypeError, ValueError) as exc:
        raise SettingsError("Config option 'file_name.max_length' must be an integer") from exc

    options = FormattingOptions(
        header_separator=_str_option(fmt, "header_separator", defaults.header_separator),
        snip_separator=_str_option(fmt, "snip_separator", defaults.snip_separator),
        list_separator=_str_option(fmt, "list_separator", defaults.list_separator),
        date_format=_str_option(fmt, "date_format", defaults.date_format),
        tag_prefix=_str_option(fmt, "tag_prefix", defaults.tag_prefix),
        favorite_star=_str_option(fmt, "favorite_star", defaults.favorite_star),
        image_template=_str_option(fmt, "image_template", defaults.image_template),
        file_name_max_length=max_length,
        file_name_fallback=_str_option(file_name, "fallback", defaults.file_name_fallback),
    )

    templates = _section(cfg, "templates")
    missing = [k for k in ("episode_file_name", "episode", "snip") if not templates.get(k)]
    if missing:
        raise SettingsError(
            f"Default templates missing from config: {missing}",
            context={"missing": missing},
        )
    default_templates = DefaultTemplates(
        file_name=str(templates["episode_file_name"]),
        episode=str(templates["episode"]),
        snip=str(templates["snip"]),
    )

    raw_base = _section(cfg, "properties").get("base") or []
    if not isinstance(raw_base, list):
        raise SettingsError("Config option 'properties.base' must be a list")
    base: List[PropertyDefinition] = []
    for index, entry in enumerate(raw_base):
        if not isinstance(entry, dict):
            raise SettingsError(f"Base property {index + 1} must be a mapping", context={"index": index})
        try:
            base.append(PropertyDefinition.from_mapping(entry, index=index))
        except PropertyValidationError as exc:
            raise SettingsError(f"Invalid base property: {exc}", context=exc.context) from exc

    return FormattingConfig(
        options=options,
        default_templates=default_templates,
        base_properties=tuple(base),
        raw=cfg,
    )


def load_formatting_config(config_path: Optional[Path] = None) -> FormattingConfig:
    """Shortcut for ``ConfigManager(config_path).load()``."""
    return ConfigManager(config_path).load()


__all__ = [
    "DefaultTemplates",
    "FormattingConfig",
    "ConfigManager",
    "build_formatting_config",
    "load_formatting_config",
]
