from __future__ import annotations

from opacity_fallback.config import OpacityFallbackOptions
from opacity_fallback.events import EventBus
from opacity_fallback.stylesheet.model import Stylesheet
from opacity_fallback.transforms.base import Transform
from opacity_fallback.transforms.opacity import OpacityFallbackTransform


def builtin_transforms(
    options: OpacityFallbackOptions | None = None,
    event_bus: EventBus | None = None,
) -> list[Transform]:
    """Return fresh instances of the built-in transforms, in run order."""
    return [OpacityFallbackTransform(options, event_bus=event_bus)]


def apply_transforms(
    sheet: Stylesheet,
    custom_transforms: list[Transform] | None = None,
    options: OpacityFallbackOptions | None = None,
    event_bus: EventBus | None = None,
) -> Stylesheet:
    """Apply all built-in transforms (and any custom ones) to *sheet*."""
    transforms = builtin_transforms(options, event_bus=event_bus)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for t in transforms:
        sheet = t.apply(sheet)
    return sheet


__all__ = ["OpacityFallbackTransform", "Transform", "apply_transforms", "builtin_transforms"]
