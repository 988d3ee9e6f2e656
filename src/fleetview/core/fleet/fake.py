"""Fake Fleet server for testing.

FakeFleet is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from collections import Counter

from fleetview.core.errors import FleetApiError, NotFoundError
from fleetview.core.fleet.abc import Fleet
from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecretSpec,
    HostSummary,
    LabelSpec,
    OptionsSpec,
    PackSpec,
    QuerySpec,
)


class FakeFleet(Fleet):
    """In-memory fake implementation of the Fleet server.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty collections). Every
    call is counted so tests can assert which endpoints were hit.
    """

    def __init__(
        self,
        *,
        queries: list[QuerySpec] | None = None,
        packs: list[PackSpec] | None = None,
        labels: list[LabelSpec] | None = None,
        hosts: list[HostSummary] | None = None,
        options: OptionsSpec | None = None,
        enroll_secrets: EnrollSecretSpec | None = None,
        app_config: AppConfig | None = None,
        failures: dict[str, FleetApiError] | None = None,
    ) -> None:
        """Create FakeFleet with pre-configured state.

        Args:
            queries: Saved queries, in server list order
            packs: Packs, in server list order
            labels: Labels, in server list order
            hosts: Enrolled hosts
            options: osquery options (empty config when None)
            enroll_secrets: Enroll secrets (no secrets when None)
            app_config: App configuration (no sections when None)
            failures: Method name -> error raised when that method is called
        """
        self._queries = queries or []
        self._packs = packs or []
        self._labels = labels or []
        self._hosts = hosts or []
        self._options = options or OptionsSpec(config={})
        self._enroll_secrets = enroll_secrets or EnrollSecretSpec(secrets=[])
        self._app_config = app_config or AppConfig(sections={})
        self._failures = failures or {}
        self._calls: Counter[str] = Counter()
        self._closed = False

    @property
    def calls(self) -> Counter[str]:
        """Read-only access to call counts keyed by method name."""
        return self._calls.copy()

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def _record(self, method: str) -> None:
        self._calls[method] += 1
        if method in self._failures:
            raise self._failures[method]

    def get_queries(self) -> list[QuerySpec]:
        self._record("get_queries")
        return list(self._queries)

    def get_query(self, name: str) -> QuerySpec:
        self._record("get_query")
        for query in self._queries:
            if query.name == name:
                return query
        raise NotFoundError(f"query {name} not found")

    def get_packs(self) -> list[PackSpec]:
        self._record("get_packs")
        return list(self._packs)

    def get_pack(self, name: str) -> PackSpec:
        self._record("get_pack")
        for pack in self._packs:
            if pack.name == name:
                return pack
        raise NotFoundError(f"pack {name} not found")

    def get_labels(self) -> list[LabelSpec]:
        self._record("get_labels")
        return list(self._labels)

    def get_label(self, name: str) -> LabelSpec:
        self._record("get_label")
        for label in self._labels:
            if label.name == name:
                return label
        raise NotFoundError(f"label {name} not found")

    def get_hosts(self) -> list[HostSummary]:
        self._record("get_hosts")
        return list(self._hosts)

    def get_options(self) -> OptionsSpec:
        self._record("get_options")
        return self._options

    def get_enroll_secret_spec(self) -> EnrollSecretSpec:
        self._record("get_enroll_secret_spec")
        return self._enroll_secrets

    def get_app_config(self) -> AppConfig:
        self._record("get_app_config")
        return self._app_config

    def close(self) -> None:
        self._closed = True
