"""opacity-fallback CLI entry point: Click group with subcommands."""

import click

from opacity_fallback import __version__


@click.group()
@click.version_option(version=__version__, prog_name="opacity-fallback")
def cli() -> None:
    """opacity-fallback - make /NN opacity utilities work with var() colors."""


# Import and register subcommands
from opacity_fallback.cli.transform import transform  # noqa: E402
from opacity_fallback.cli.inspect import inspect  # noqa: E402

cli.add_command(transform)
cli.add_command(inspect)
