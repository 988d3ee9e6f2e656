"""Building the Fleet gateway and presenter for a CLI invocation."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from fleetview.cli.ensure import Ensure
from fleetview.cli.output import emit_text
from fleetview.core.context import FleetContext
from fleetview.core.fleet.abc import Fleet
from fleetview.core.presenter import ResourcePresenter


def fleet_client_from_cli(ctx: FleetContext, config_path: Path, context_name: str) -> Fleet:
    """Load the selected server context and build its Fleet gateway.

    Exits with a styled error when the config cannot be loaded, the context
    does not exist, or the context lacks an address or token.
    """
    with Ensure.no_errors():
        client_config = ctx.config_store.load(config_path)

    context_config = Ensure.not_none(
        client_config.contexts.get(context_name),
        f'context "{context_name}" is not found in {config_path}',
    )
    Ensure.truthy(
        context_config.address,
        f"set the Fleet API address for context \"{context_name}\" in {config_path}",
    )
    Ensure.truthy(
        context_config.token,
        f"no API token for context \"{context_name}\"; "
        f"add the token of a logged in user to {config_path}",
    )
    with Ensure.no_errors():
        return ctx.fleet_factory(context_config)


@contextmanager
def presenter_from_cli(
    ctx: FleetContext, config_path: Path, context_name: str
) -> Iterator[ResourcePresenter]:
    """Yield a presenter over the selected server, closing the gateway on exit.

    Example:
        >>> with presenter_from_cli(ctx, config_path, context_name) as presenter:
        ...     presenter.print_hosts()
    """
    fleet = fleet_client_from_cli(ctx, config_path, context_name)
    try:
        yield ResourcePresenter(fleet, emit=emit_text)
    finally:
        fleet.close()
