"""opacity_fallback -- keep Tailwind ``/NN`` opacity utilities working through var()."""

from __future__ import annotations

__version__ = "0.1.0"

from opacity_fallback.config import OpacityFallbackOptions, load_options  # noqa: E402
from opacity_fallback.errors import (  # noqa: E402
    ConfigError,
    OpacityFallbackError,
    StylesheetParseError,
)
from opacity_fallback.stylesheet import parse_stylesheet, serialize  # noqa: E402
from opacity_fallback.transforms import (  # noqa: E402
    OpacityFallbackTransform,
    apply_transforms,
)


def process_css(source: str, options: OpacityFallbackOptions | None = None) -> str:
    """Parse *source*, apply the opacity fallback and return the new CSS."""
    sheet = parse_stylesheet(source)
    sheet = apply_transforms(sheet, options=options)
    return serialize(sheet)


__all__ = [
    "__version__",
    "ConfigError",
    "OpacityFallbackError",
    "OpacityFallbackOptions",
    "OpacityFallbackTransform",
    "StylesheetParseError",
    "apply_transforms",
    "load_options",
    "parse_stylesheet",
    "process_css",
    "serialize",
]
