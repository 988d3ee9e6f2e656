import logging
import os

import click

from fleetview.cli.commands.get import get_group
from fleetview.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Enable debug logging if FLEET_DEBUG environment variable is set
if os.getenv("FLEET_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="fleetview")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Read queries, packs, labels, hosts and settings from a Fleet server."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(get_group)


def main() -> None:
    """CLI entry point used by the `fleetview` console script."""
    cli()
