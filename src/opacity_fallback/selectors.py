"""Selector helpers: opacity suffix extraction and scope recognition.

Utility frameworks encode the opacity of a color class in the class name
itself, e.g. ``.text-white\\/60`` or ``.hover\\:bg-primary\\/10:hover``.
"""

from __future__ import annotations

import re

__all__ = [
    "ROOT_MARKERS",
    "DARK_MARKER",
    "CUSTOM_PREFIX",
    "TRIPLET_SUFFIX",
    "extract_opacity",
    "is_root_like",
    "is_dark_scoped",
    "dark_selector",
    "read_var_reference",
    "triplet_name",
    "custom_property",
]

ROOT_MARKERS = (":root", ":host")
DARK_MARKER = ".dark"
CUSTOM_PREFIX = "--"
TRIPLET_SUFFIX = "-rgb"

_ESCAPED_SUFFIX_RE = re.compile(r"\\/(\d{1,3})(?!\d)")
_BARE_SUFFIX_RE = re.compile(r"/(\d{1,3})(?!\d)")
_VAR_REFERENCE_RE = re.compile(r"var\(--([a-zA-Z0-9_-]+)\)")


def extract_opacity(selector: str) -> float | None:
    """Return the alpha encoded by the selector's ``/NN`` suffix, or None.

    Escaped matches are collected first, then bare matches; the last match in
    that pooled order wins.  The percentage is clamped to 0..100.
    """
    matches = [
        *_ESCAPED_SUFFIX_RE.finditer(selector),
        *_BARE_SUFFIX_RE.finditer(selector),
    ]
    if not matches:
        return None
    pct = int(matches[-1].group(1))
    return max(0, min(100, pct)) / 100


def is_root_like(selector: str) -> bool:
    return any(marker in selector for marker in ROOT_MARKERS)


def is_dark_scoped(selector: str) -> bool:
    return DARK_MARKER in selector


def dark_selector(selector: str) -> str | None:
    """Scope every comma-separated segment of *selector* under ``.dark``.

    Segments already mentioning ``.dark`` are kept as they are.  Returns None
    when the selector has no non-empty segment.
    """
    segments = [s.strip() for s in selector.split(",")]
    segments = [s for s in segments if s]
    if not segments:
        return None
    return ", ".join(
        s if DARK_MARKER in s else f"{DARK_MARKER} {s}" for s in segments
    )


def read_var_reference(value: str) -> str | None:
    """Return ``name`` if *value* is exactly ``var(--name)``."""
    match = _VAR_REFERENCE_RE.fullmatch(value.strip())
    return match.group(1) if match else None


def triplet_name(name: str) -> str:
    return f"{name}{TRIPLET_SUFFIX}"


def custom_property(name: str) -> str:
    return f"{CUSTOM_PREFIX}{name}"
