"""Application context with dependency injection."""

from collections.abc import Callable
from dataclasses import dataclass

from fleetview.core.config_store import (
    DEFAULT_CONTEXT,
    ClientConfig,
    ConfigStore,
    ContextConfig,
    RealConfigStore,
)
from fleetview.core.fleet.abc import Fleet
from fleetview.core.fleet.real import RealFleet


@dataclass(frozen=True)
class FleetContext:
    """Immutable context holding all dependencies for fleetview commands.

    Created at CLI entry point and threaded through the application.
    The Fleet gateway itself is built per command, once the command's
    --config/--context flags have selected a server context.
    """

    config_store: ConfigStore
    fleet_factory: Callable[[ContextConfig], Fleet]

    @staticmethod
    def for_test(
        fleet: Fleet | None = None,
        config: ClientConfig | None = None,
        config_store: ConfigStore | None = None,
    ) -> "FleetContext":
        """Create test context with a pre-configured Fleet gateway.

        Args:
            fleet: Gateway returned for every context. If None, creates empty FakeFleet.
            config: Client config. If None, uses a "default" context with an
                address and token set.
            config_store: Optional ConfigStore. If None, creates FakeConfigStore
                serving ``config``.

        Returns:
            FleetContext whose factory ignores the selected context and
            returns ``fleet``

        Example:
            >>> fleet = FakeFleet(packs=[PackSpec(name="base")])
            >>> ctx = FleetContext.for_test(fleet=fleet)
            >>> runner.invoke(cli, ["get", "packs"], obj=ctx)
        """
        from fleetview.core.config_store import FakeConfigStore
        from fleetview.core.fleet.fake import FakeFleet

        if fleet is None:
            fleet = FakeFleet()

        if config is None:
            config = ClientConfig(
                contexts={
                    DEFAULT_CONTEXT: ContextConfig(
                        address="https://fleet.test:8080",
                        token="test-token",
                    )
                }
            )

        if config_store is None:
            config_store = FakeConfigStore(config=config)

        gateway = fleet
        return FleetContext(config_store=config_store, fleet_factory=lambda _: gateway)


def create_real_fleet(context_config: ContextConfig) -> Fleet:
    return RealFleet(
        context_config.address,
        context_config.token,
        url_prefix=context_config.url_prefix,
        verify=context_config.verify,
    )


def create_context() -> FleetContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.
    """
    return FleetContext(config_store=RealConfigStore(), fleet_factory=create_real_fleet)
