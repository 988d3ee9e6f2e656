"""Abstract interface for Fleet server retrieval."""

from abc import ABC, abstractmethod

from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecretSpec,
    HostSummary,
    LabelSpec,
    OptionsSpec,
    PackSpec,
    QuerySpec,
)


class Fleet(ABC):
    """Abstract interface for reading resources from a Fleet server.

    All implementations (real and fake) must implement this interface.
    This interface provides READ-only operations.
    """

    @abstractmethod
    def get_queries(self) -> list[QuerySpec]:
        """List every saved query.

        Raises:
            FleetApiError: If the server request fails
        """
        ...

    @abstractmethod
    def get_query(self, name: str) -> QuerySpec:
        """Fetch a saved query by name.

        Raises:
            NotFoundError: If no query has this name
            FleetApiError: If the server request fails
        """
        ...

    @abstractmethod
    def get_packs(self) -> list[PackSpec]:
        """List every pack."""
        ...

    @abstractmethod
    def get_pack(self, name: str) -> PackSpec:
        """Fetch a pack by name.

        Raises:
            NotFoundError: If no pack has this name
            FleetApiError: If the server request fails
        """
        ...

    @abstractmethod
    def get_labels(self) -> list[LabelSpec]:
        """List every label."""
        ...

    @abstractmethod
    def get_label(self, name: str) -> LabelSpec:
        """Fetch a label by name.

        Raises:
            NotFoundError: If no label has this name
            FleetApiError: If the server request fails
        """
        ...

    @abstractmethod
    def get_hosts(self) -> list[HostSummary]:
        """List every enrolled host."""
        ...

    @abstractmethod
    def get_options(self) -> OptionsSpec:
        """Fetch the osquery options."""
        ...

    @abstractmethod
    def get_enroll_secret_spec(self) -> EnrollSecretSpec:
        """Fetch the enroll secrets."""
        ...

    @abstractmethod
    def get_app_config(self) -> AppConfig:
        """Fetch the service-wide configuration."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Release any connection held to the server."""
        ...
