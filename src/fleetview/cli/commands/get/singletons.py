"""Commands that print a service-wide singleton resource as one document."""

from pathlib import Path

import click

from fleetview.cli.alias import alias
from fleetview.cli.client import presenter_from_cli
from fleetview.cli.ensure import Ensure
from fleetview.cli.options import fleet_client_options
from fleetview.core.context import FleetContext


@click.command("options")
@fleet_client_options
@click.pass_obj
def get_options(ctx: FleetContext, config_path: Path, context_name: str) -> None:
    """Retrieve the osquery configuration."""
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_options()


@alias("enroll_secrets", "enroll-secret", "enroll-secrets")
@click.command("enroll_secret")
@fleet_client_options
@click.pass_obj
def get_enroll_secret(ctx: FleetContext, config_path: Path, context_name: str) -> None:
    """Retrieve the osquery enroll secrets."""
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_enroll_secrets()


@click.command("config")
@fleet_client_options
@click.pass_obj
def get_app_config(ctx: FleetContext, config_path: Path, context_name: str) -> None:
    """Retrieve the Fleet configuration."""
    with presenter_from_cli(ctx, config_path, context_name) as presenter, Ensure.no_errors():
        presenter.print_app_config()
