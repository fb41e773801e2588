"""Per-run registry of triplet custom properties and known dark colors."""

from __future__ import annotations

from dataclasses import dataclass, field

from opacity_fallback.color import Color


@dataclass
class RgbVariableRegistry:
    """Mutable index built by the first two passes of a transform run.

    Attributes:
        available_triplet_vars: Triplet names (``brand-rgb``) that exist in
            the stylesheet, either authored or generated.
        dark_color_by_property_name: Color of each property (``brand``) as
            declared inside a dark-scoped rule.  The last declaration wins.
    """

    available_triplet_vars: set[str] = field(default_factory=set)
    dark_color_by_property_name: dict[str, Color] = field(default_factory=dict)

    def register_available(self, triplet_name: str) -> None:
        self.available_triplet_vars.add(triplet_name)

    def is_available(self, triplet_name: str) -> bool:
        return triplet_name in self.available_triplet_vars

    def record_dark_color(self, name: str, color: Color) -> None:
        self.dark_color_by_property_name[name] = color

    def dark_color_of(self, name: str) -> Color | None:
        return self.dark_color_by_property_name.get(name)
