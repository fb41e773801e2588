"""CLI command: opacity-fallback transform -- rewrite a CSS file."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click

from opacity_fallback.config import OpacityFallbackOptions, load_options
from opacity_fallback.errors import ConfigError, StylesheetParseError
from opacity_fallback.events import EventBus
from opacity_fallback.stylesheet import parse_stylesheet, serialize
from opacity_fallback.transforms import apply_transforms


def _resolve_options(
    config_path: str | None,
    properties: tuple[str, ...],
    no_framework_props: bool,
) -> OpacityFallbackOptions:
    """Merge the options file (if any) with command line overrides."""
    options = load_options(config_path) if config_path else OpacityFallbackOptions()
    if properties:
        options = dataclasses.replace(options, properties=properties)
    if no_framework_props:
        options = dataclasses.replace(options, include_framework_custom_props=False)
    return options


@click.command()
@click.argument(
    "cssfile", type=click.Path(exists=True, dir_okay=False, allow_dash=True)
)
@click.option(
    "-o", "--output", default=None, help="Write the result here instead of stdout"
)
@click.option(
    "--property",
    "properties",
    multiple=True,
    help="Property eligible for rewriting (repeatable; replaces the defaults)",
)
@click.option(
    "--no-framework-props",
    is_flag=True,
    help="Do not rewrite Tailwind's own --tw-* color properties",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="JSON options file",
)
@click.option("-v", "--verbose", is_flag=True, help="Log each rewrite to stderr")
def transform(
    cssfile: str,
    output: str | None,
    properties: tuple[str, ...],
    no_framework_props: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Rewrite opacity-suffixed var() colors in a CSS file.

    Reads CSSFILE (or stdin when CSSFILE is "-"), adds -rgb triplet
    companions, rewrites /NN utilities to rgba() and adds .dark overrides.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        options = _resolve_options(config_path, properties, no_framework_props)
    except ConfigError as exc:
        click.echo(f"Config error: {exc}", err=True)
        sys.exit(1)

    try:
        with click.open_file(cssfile, "r", encoding="utf-8") as fh:
            source = fh.read()
        sheet = parse_stylesheet(source)
    except StylesheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    event_bus = EventBus()
    sheet = apply_transforms(sheet, options=options, event_bus=event_bus)
    css = serialize(sheet)

    if output:
        Path(output).write_text(css, encoding="utf-8")
    else:
        click.echo(css, nl=False)

    if verbose:
        counts = event_bus.counts
        click.echo(
            f"Summary: {counts['TripletGenerated']} triplet(s) generated, "
            f"{counts['DeclarationRewritten']} declaration(s) rewritten, "
            f"{counts['DarkOverrideInserted']} dark override(s)",
            err=True,
        )
