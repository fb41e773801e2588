"""Options for the opacity fallback transform and their JSON file loader."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from opacity_fallback.errors import ConfigError

__all__ = [
    "DEFAULT_PROPERTIES",
    "DEFAULT_FRAMEWORK_CUSTOM_PROPS",
    "OpacityFallbackOptions",
    "load_options",
]

log = logging.getLogger(__name__)

DEFAULT_PROPERTIES: tuple[str, ...] = (
    "background-color",
    "color",
    "border-color",
    "outline-color",
    "fill",
    "stroke",
    "caret-color",
    "text-decoration-color",
    "column-rule-color",
    "border-top-color",
    "border-right-color",
    "border-bottom-color",
    "border-left-color",
)

# Custom properties Tailwind itself composes colors through.
DEFAULT_FRAMEWORK_CUSTOM_PROPS: tuple[str, ...] = (
    "--tw-ring-color",
    "--tw-border-color",
    "--tw-outline-color",
    "--tw-inset-ring-color",
    "--tw-shadow-color",
    "--tw-inset-shadow-color",
    "--tw-drop-shadow-color",
    "--tw-gradient-from",
    "--tw-gradient-via",
    "--tw-gradient-to",
)

# JSON keys accepted by load_options, mapped to dataclass fields.
_FILE_KEYS = {
    "properties": "properties",
    "includeFrameworkCustomProps": "include_framework_custom_props",
    "include_framework_custom_props": "include_framework_custom_props",
}


@dataclass(frozen=True)
class OpacityFallbackOptions:
    """Which declarations the transform may rewrite.

    ``properties`` replaces :data:`DEFAULT_PROPERTIES` when given.
    """

    properties: tuple[str, ...] | None = None
    include_framework_custom_props: bool = True

    def participating_properties(self) -> frozenset[str]:
        names = set(DEFAULT_PROPERTIES if self.properties is None else self.properties)
        if self.include_framework_custom_props:
            names.update(DEFAULT_FRAMEWORK_CUSTOM_PROPS)
        return frozenset(names)


def _options_from_mapping(data: dict[str, Any], source: str) -> OpacityFallbackOptions:
    unknown = sorted(set(data) - set(_FILE_KEYS))
    if unknown:
        raise ConfigError(f"{source}: unknown option(s): {', '.join(unknown)}")

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        field_name = _FILE_KEYS[key]
        if field_name == "properties":
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"{source}: 'properties' must be a list of strings")
            kwargs[field_name] = tuple(value)
        else:
            if not isinstance(value, bool):
                raise ConfigError(f"{source}: '{key}' must be true or false")
            kwargs[field_name] = value
    return OpacityFallbackOptions(**kwargs)


def load_options(path: str | Path) -> OpacityFallbackOptions:
    """Read options from a JSON object such as ``{"properties": ["color"]}``."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )
    options = _options_from_mapping(data, path.name)
    log.debug("Loaded options from %s: %s", path, options)
    return options
