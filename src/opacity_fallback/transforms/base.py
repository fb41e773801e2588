"""Base protocol for stylesheet transforms."""

from __future__ import annotations

from typing import Protocol

from opacity_fallback.stylesheet.model import Stylesheet


class Transform(Protocol):
    """A stylesheet-to-stylesheet transformation step.

    Implementations may mutate *sheet* in place; they return the sheet the
    next step should receive.
    """

    def apply(self, sheet: Stylesheet) -> Stylesheet: ...
