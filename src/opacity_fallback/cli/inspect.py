"""CLI command: opacity-fallback inspect -- show what the transform would see."""

from __future__ import annotations

import sys

import click

from opacity_fallback.color import format_alpha, parse_color_lenient
from opacity_fallback.errors import StylesheetParseError
from opacity_fallback.selectors import extract_opacity, is_dark_scoped, is_root_like
from opacity_fallback.stylesheet import Declaration, parse_stylesheet


@click.command()
@click.argument(
    "cssfile", type=click.Path(exists=True, dir_okay=False, allow_dash=True)
)
def inspect(cssfile: str) -> None:
    """Parse a CSS file and list its color variables and opacity utilities.

    Shows every custom property declared in :root, :host or .dark rules with
    the triplet it parses to, then every rule whose selector carries a /NN
    opacity suffix.
    """
    try:
        with click.open_file(cssfile, "r", encoding="utf-8") as fh:
            sheet = parse_stylesheet(fh.read())
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    rules = sheet.rules

    click.echo("Variables:")
    for rule in rules:
        if not (is_root_like(rule.selector) or is_dark_scoped(rule.selector)):
            continue
        decls: list[Declaration] = []
        rule.walk_decls(decls.append)
        for decl in decls:
            if not decl.is_custom:
                continue
            color = parse_color_lenient(decl.value)
            parsed = color.triplet() if color else "unparseable"
            click.echo(f"  {rule.selector}  {decl.prop}: {decl.value}  -> {parsed}")
    click.echo()

    click.echo("Opacity utilities:")
    for rule in rules:
        alpha = extract_opacity(rule.selector)
        if alpha is None:
            continue
        click.echo(f"  {rule.selector}  alpha={format_alpha(alpha)}")
