"""Fetch resources from Fleet and render them as documents or tables."""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

import yaml
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from fleetview.core.documents import Envelope, ResourceKind, ResourceSpec, render_document
from fleetview.core.errors import FleetError, OperationError
from fleetview.core.fleet.abc import Fleet
from fleetview.core.fleet.types import PackSpec, QuerySpec

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUERY_COLUMNS = ("name", "description", "query")
PACK_COLUMNS = ("name", "platform", "description")
LABEL_COLUMNS = ("name", "platform", "description", "query")
HOST_COLUMNS = ("uuid", "hostname", "platform", "status")


class ResourcePresenter:
    """Renders Fleet resources in exactly one of two output modes.

    Document mode writes versioned envelope documents through ``emit``.
    Table mode prints a lined, fixed-column table to ``console``.
    Every fetch is a single blocking call; the first failure aborts.
    """

    def __init__(
        self,
        fleet: Fleet,
        *,
        emit: Callable[[str], None],
        console: Console | None = None,
    ) -> None:
        """Create a presenter.

        Args:
            fleet: Gateway used for every fetch
            emit: Writes document text (and informational lines) verbatim
            console: Rich console for tables (stdout when None)
        """
        self._fleet = fleet
        self._emit = emit
        self._console = console if console is not None else Console()

    def print_queries(self, name: str | None, *, as_yaml: bool) -> None:
        """Print one query by name, or every query."""
        if name:
            self._print_query(self._fleet.get_query(name), separator=False)
            return

        queries = _list("queries", self._fleet.get_queries)
        if as_yaml:
            for query in queries:
                self._print_query(query, separator=True)
            return

        if not queries:
            self._emit("no queries found\n")
            return
        self._render_table(QUERY_COLUMNS, [(q.name, q.description, q.query) for q in queries])

    def print_packs(self, name: str | None, *, as_yaml: bool, with_queries: bool) -> None:
        """Print one pack by name, or every pack.

        With ``with_queries``, the queries referenced by the printed packs
        follow the pack documents, each emitted once.
        """
        referenced: set[str] = set()

        if name:
            pack = self._fleet.get_pack(name)
            if with_queries:
                referenced |= pack.query_names()
            # a pack followed by its queries is a multi-document stream
            self._print_pack(pack, separator=with_queries)
            self._print_referenced_queries(referenced, enabled=with_queries)
            return

        packs = _list("packs", self._fleet.get_packs)
        if as_yaml:
            for pack in packs:
                self._print_pack(pack, separator=True)
                if with_queries:
                    referenced |= pack.query_names()
            self._print_referenced_queries(referenced, enabled=with_queries)
            return

        if not packs:
            self._emit("no packs found\n")
            return
        self._render_table(PACK_COLUMNS, [(p.name, p.platform, p.description) for p in packs])

    def print_labels(self, name: str | None, *, as_yaml: bool) -> None:
        """Print one label by name, or every label."""
        if name:
            label = self._fleet.get_label(name)
            self._emit(render_document(Envelope.of(label), separator=False))
            return

        labels = _list("labels", self._fleet.get_labels)
        if as_yaml:
            for label in labels:
                self._emit(render_document(Envelope.of(label), separator=True))
            return

        if not labels:
            self._emit("no labels found\n")
            return
        self._render_table(
            LABEL_COLUMNS,
            [(label.name, label.platform, label.description, label.query) for label in labels],
        )

    def print_hosts(self) -> None:
        """Print every host as a table."""
        hosts = _list("hosts", self._fleet.get_hosts)
        if not hosts:
            self._emit("no hosts found\n")
            return
        self._render_table(
            HOST_COLUMNS,
            [(h.uuid, h.display_text, h.platform, h.status) for h in hosts],
        )

    def print_options(self) -> None:
        """Print the osquery options as one document."""
        self._print_singleton(ResourceKind.OPTIONS, self._fleet.get_options())

    def print_enroll_secrets(self) -> None:
        """Print the enroll secrets as one document."""
        self._print_singleton(ResourceKind.ENROLL_SECRET, self._fleet.get_enroll_secret_spec())

    def print_app_config(self) -> None:
        """Print the server configuration as one document."""
        self._print_singleton(ResourceKind.CONFIG, self._fleet.get_app_config())

    def _print_singleton(self, kind: ResourceKind, spec: ResourceSpec) -> None:
        self._emit(render_document(Envelope(kind=kind, spec=spec), separator=False))

    def _print_query(self, query: QuerySpec, *, separator: bool) -> None:
        try:
            envelope = Envelope(kind=ResourceKind.QUERY, spec=query)
            text = render_document(envelope, separator=separator)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            raise OperationError("unable to print query", e) from e
        self._emit(text)

    def _print_pack(self, pack: PackSpec, *, separator: bool) -> None:
        try:
            envelope = Envelope(kind=ResourceKind.PACK, spec=pack)
            text = render_document(envelope, separator=separator)
        except (yaml.YAMLError, TypeError, ValueError) as e:
            raise OperationError("unable to print pack", e) from e
        self._emit(text)

    def _print_referenced_queries(self, referenced: set[str], *, enabled: bool) -> None:
        """Emit every query whose name is in ``referenced``.

        One bulk list-and-filter instead of a lookup per reference. Skipped
        entirely (no fetch) unless ``enabled``.
        """
        if not enabled:
            return

        logger.debug("resolving %d referenced queries", len(referenced))
        queries = _list("queries", self._fleet.get_queries)
        for query in queries:
            if query.name not in referenced:
                continue
            self._print_query(query, separator=True)

    def _render_table(self, headers: Sequence[str], rows: Iterable[Sequence[str]]) -> None:
        table = Table(box=box.ASCII, show_lines=True)
        for header in headers:
            # long unbroken tokens wrap onto more lines instead of being truncated
            table.add_column(header, overflow="fold")
        for row in rows:
            # Text cells keep brackets in query SQL from being read as markup
            table.add_row(*(Text(cell) for cell in row))
        self._console.print(table)


def _list(kind: str, fetch: Callable[[], list[T]]) -> list[T]:
    try:
        return fetch()
    except FleetError as e:
        raise OperationError(f"could not list {kind}", e) from e
