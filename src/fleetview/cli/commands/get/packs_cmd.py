"""Command to list packs or export them, optionally with their queries."""

from pathlib import Path

import click

from fleetview.cli.alias import alias
from fleetview.cli.client import presenter_from_cli
from fleetview.cli.ensure import Ensure
from fleetview.cli.options import fleet_client_options, yaml_option
from fleetview.core.context import FleetContext


@alias("pack", "p")
@click.command("packs")
@click.argument("name", required=False)
@fleet_client_options
@yaml_option
@click.option(
    "--with-queries",
    is_flag=True,
    help="Output queries included in pack(s) too",
)
@click.pass_obj
def get_packs(
    ctx: FleetContext,
    name: str | None,
    config_path: Path,
    context_name: str,
    as_yaml: bool,
    with_queries: bool,
) -> None:
    """List information about one or more packs.

    With --with-queries, every query referenced by the exported packs is
    appended to the document stream once.

    Examples:
        fleetview get packs
        fleetview get packs --yaml --with-queries > packs.yml
        fleetview get pack osquery_monitoring --with-queries
    """
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_packs(name, as_yaml=as_yaml, with_queries=with_queries)
