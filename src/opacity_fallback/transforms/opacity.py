"""Opacity fallback transform: make ``/NN`` utility colors work through var().

Tailwind-style utilities such as ``.text-brand\\/50 { color: var(--brand) }``
lose their opacity when ``--brand`` holds a solid color.  The transform runs
three passes over the stylesheet:

1. Next to every parseable color custom property declared in a ``:root``,
   ``:host`` or ``.dark`` rule, add a triplet companion
   (``--brand-rgb: 51, 102, 255``) unless one already exists.
2. Record the color each property takes inside ``.dark`` rules.
3. In every rule whose selector carries an opacity suffix, rewrite
   participating declarations that are exactly ``var(--x)`` to
   ``rgba(var(--x-rgb), <alpha>)``, then insert a ``.dark`` copy of the rule
   with literal channels when the dark color of ``--x`` is known.

Nothing here raises on unsupported input: declarations and rules that do not
qualify are left as they are.
"""

from __future__ import annotations

import logging

from opacity_fallback.color import Color, format_alpha, parse_color_lenient
from opacity_fallback.config import OpacityFallbackOptions
from opacity_fallback.events import (
    DarkColorRecorded,
    DarkOverrideInserted,
    DeclarationRewritten,
    EventBus,
    TripletGenerated,
    TripletReused,
)
from opacity_fallback.registry import RgbVariableRegistry
from opacity_fallback.selectors import (
    CUSTOM_PREFIX,
    TRIPLET_SUFFIX,
    custom_property,
    dark_selector,
    extract_opacity,
    is_dark_scoped,
    is_root_like,
    read_var_reference,
    triplet_name,
)
from opacity_fallback.stylesheet.model import Declaration, Rule, Stylesheet

__all__ = ["OpacityFallbackTransform"]

log = logging.getLogger(__name__)


def _color_property_name(decl: Declaration) -> str | None:
    """Return the bare name of a custom property that is not itself a triplet."""
    if not decl.prop.startswith(CUSTOM_PREFIX):
        return None
    name = decl.prop[len(CUSTOM_PREFIX) :]
    if name.endswith(TRIPLET_SUFFIX):
        return None
    return name


class OpacityFallbackTransform:
    """Rewrite opacity-suffixed ``var()`` colors into composable ``rgba()``.

    The transform keeps no state between runs: each :meth:`apply` builds a
    fresh :class:`RgbVariableRegistry`, so an instance can be reused.
    """

    name = "tailwind-opacity-fallback"

    def __init__(
        self,
        options: OpacityFallbackOptions | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.options = options or OpacityFallbackOptions()
        self.event_bus = event_bus
        self._properties = self.options.participating_properties()

    def apply(self, sheet: Stylesheet) -> Stylesheet:
        registry = RgbVariableRegistry()
        generated = self._generate_triplets(sheet, registry)
        self._record_dark_colors(sheet, registry)
        rewritten, overrides = self._rewrite_rules(sheet, registry)
        log.info(
            "%s: %d triplet(s) generated, %d declaration(s) rewritten, "
            "%d dark override(s) inserted",
            self.name,
            generated,
            rewritten,
            overrides,
        )
        return sheet

    def _emit(self, event: object) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event)

    # -- pass 1 ----------------------------------------------------------------

    def _generate_triplets(self, sheet: Stylesheet, registry: RgbVariableRegistry) -> int:
        generated = 0

        def visit(rule: Rule) -> None:
            nonlocal generated
            if not (is_root_like(rule.selector) or is_dark_scoped(rule.selector)):
                return

            decls: list[Declaration] = []
            rule.walk_decls(decls.append)
            existing = {d.prop for d in decls}

            for decl in decls:
                name = _color_property_name(decl)
                if name is None:
                    continue
                color = parse_color_lenient(decl.value)
                if color is None:
                    continue

                triplet = triplet_name(name)
                prop = custom_property(triplet)
                if prop in existing:
                    registry.register_available(triplet)
                    self._emit(TripletReused(selector=rule.selector, prop=prop))
                    continue

                decl.after(Declaration(prop=prop, value=color.triplet()))
                existing.add(prop)
                registry.register_available(triplet)
                generated += 1
                log.debug("%s: added %s: %s", rule.selector, prop, color.triplet())
                self._emit(
                    TripletGenerated(selector=rule.selector, prop=prop, value=color.triplet())
                )

        sheet.walk_rules(visit)
        return generated

    # -- pass 2 ----------------------------------------------------------------

    def _record_dark_colors(self, sheet: Stylesheet, registry: RgbVariableRegistry) -> None:
        def visit(rule: Rule) -> None:
            if not is_dark_scoped(rule.selector):
                return

            def record(decl: Declaration) -> None:
                name = _color_property_name(decl)
                if name is None:
                    return
                color = parse_color_lenient(decl.value)
                if color is None:
                    return
                registry.record_dark_color(name, color)
                self._emit(DarkColorRecorded(name=name, triplet=color.triplet()))

            rule.walk_decls(record)

        sheet.walk_rules(visit)

    # -- pass 3 ----------------------------------------------------------------

    def _rewrite_rules(
        self, sheet: Stylesheet, registry: RgbVariableRegistry
    ) -> tuple[int, int]:
        rewritten = 0
        overrides = 0

        def visit(rule: Rule) -> None:
            nonlocal rewritten, overrides
            alpha = extract_opacity(rule.selector)
            if alpha is None:
                return

            touched = self._rewrite_declarations(rule, alpha, registry)
            rewritten += len(touched)
            if is_dark_scoped(rule.selector) or not touched:
                return
            if self._insert_dark_override(rule, alpha, touched, registry):
                overrides += 1

        sheet.walk_rules(visit)
        return rewritten, overrides

    def _rewrite_declarations(
        self, rule: Rule, alpha: float, registry: RgbVariableRegistry
    ) -> list[tuple[str, str]]:
        """Rewrite ``var(--x)`` values in *rule*; return the (prop, x) pairs touched."""
        touched: list[tuple[str, str]] = []

        def rewrite(decl: Declaration) -> None:
            if decl.prop not in self._properties:
                return
            name = read_var_reference(decl.value)
            if name is None:
                return
            triplet = triplet_name(name)
            if not registry.is_available(triplet):
                return

            decl.value = f"rgba(var({custom_property(triplet)}), {format_alpha(alpha)})"
            touched.append((decl.prop, name))
            log.debug("%s: %s -> %s", rule.selector, decl.prop, decl.value)
            self._emit(
                DeclarationRewritten(selector=rule.selector, prop=decl.prop, value=decl.value)
            )

        rule.walk_decls(rewrite)
        return touched

    def _insert_dark_override(
        self,
        rule: Rule,
        alpha: float,
        touched: list[tuple[str, str]],
        registry: RgbVariableRegistry,
    ) -> bool:
        """Insert a ``.dark`` copy of *rule* with literal dark channels."""
        dark_touched: list[tuple[str, Color]] = []
        for prop, name in touched:
            color = registry.dark_color_of(name)
            if color is not None:
                dark_touched.append((prop, color))
        if not dark_touched:
            return False

        selector = dark_selector(rule.selector)
        if selector is None:
            return False

        dark_rule = rule.clone(selector=selector)

        def override(decl: Declaration) -> None:
            for prop, color in dark_touched:
                if decl.prop == prop:
                    decl.value = color.rgba(alpha)

        dark_rule.walk_decls(override)
        # Inserted after the rule being visited, so the ongoing walk skips it.
        rule.after(dark_rule)
        log.debug("inserted dark override %s", selector)
        self._emit(
            DarkOverrideInserted(
                selector=selector, props=tuple(prop for prop, _ in dark_touched)
            )
        )
        return True
