"""Command to list labels or print one as a document."""

from pathlib import Path

import click

from fleetview.cli.alias import alias
from fleetview.cli.client import presenter_from_cli
from fleetview.cli.ensure import Ensure
from fleetview.cli.options import fleet_client_options, yaml_option
from fleetview.core.context import FleetContext


@alias("label", "l")
@click.command("labels")
@click.argument("name", required=False)
@fleet_client_options
@yaml_option
@click.pass_obj
def get_labels(
    ctx: FleetContext,
    name: str | None,
    config_path: Path,
    context_name: str,
    as_yaml: bool,
) -> None:
    """List information about one or more labels."""
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_labels(name, as_yaml=as_yaml)
