"""Command to list enrolled hosts."""

from pathlib import Path

import click

from fleetview.cli.alias import alias
from fleetview.cli.client import presenter_from_cli
from fleetview.cli.ensure import Ensure
from fleetview.cli.options import fleet_client_options
from fleetview.core.context import FleetContext


@alias("host", "h")
@click.command("hosts")
@fleet_client_options
@click.pass_obj
def get_hosts(ctx: FleetContext, config_path: Path, context_name: str) -> None:
    """List information about one or more hosts."""
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_hosts()
