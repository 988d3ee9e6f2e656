"""Tests for ResourcePresenter document and table rendering."""

import pytest
import yaml

from fleetview.core.documents import API_VERSION
from fleetview.core.errors import FleetApiError, NotFoundError, OperationError
from fleetview.core.fleet.fake import FakeFleet
from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecret,
    EnrollSecretSpec,
    OptionsSpec,
    PackSpec,
    QuerySpec,
)
from fleetview.core.presenter import ResourcePresenter
from tests.test_utils.fleet_data import capture_console, host, label, pack, query


class Recorder:
    """Collects emitted text."""

    def __init__(self) -> None:
        self.chunks: list[str] = []

    def __call__(self, text: str) -> None:
        self.chunks.append(text)

    @property
    def text(self) -> str:
        return "".join(self.chunks)

    def documents(self) -> list[dict]:
        return [doc for doc in yaml.safe_load_all(self.text) if doc is not None]

    def separator_count(self) -> int:
        return self.text.splitlines().count("---")


def make_presenter(fleet: FakeFleet) -> tuple[ResourcePresenter, Recorder, object]:
    recorder = Recorder()
    console, buffer = capture_console()
    return ResourcePresenter(fleet, emit=recorder, console=console), recorder, buffer


# Empty collections


@pytest.mark.parametrize(
    ("method", "message"),
    [
        ("print_queries", "no queries found\n"),
        ("print_packs", "no packs found\n"),
        ("print_labels", "no labels found\n"),
    ],
)
def test_empty_collection_in_table_mode_prints_message(method: str, message: str) -> None:
    presenter, recorder, buffer = make_presenter(FakeFleet())
    kwargs = {"with_queries": False} if method == "print_packs" else {}

    getattr(presenter, method)(None, as_yaml=False, **kwargs)

    assert recorder.text == message
    assert buffer.getvalue() == ""


def test_empty_hosts_prints_message() -> None:
    presenter, recorder, _ = make_presenter(FakeFleet())

    presenter.print_hosts()

    assert recorder.text == "no hosts found\n"


@pytest.mark.parametrize("method", ["print_queries", "print_packs", "print_labels"])
def test_empty_collection_in_document_mode_emits_nothing(method: str) -> None:
    presenter, recorder, buffer = make_presenter(FakeFleet())
    kwargs = {"with_queries": False} if method == "print_packs" else {}

    getattr(presenter, method)(None, as_yaml=True, **kwargs)

    assert recorder.text == ""
    assert buffer.getvalue() == ""


# Document mode


def test_query_list_documents_each_have_a_separator() -> None:
    fleet = FakeFleet(queries=[query("a"), query("b"), query("c")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_queries(None, as_yaml=True)

    assert recorder.separator_count() == 3
    assert len(recorder.chunks) == 3
    assert all(chunk.startswith("---\n") for chunk in recorder.chunks)
    docs = recorder.documents()
    assert [d["spec"]["name"] for d in docs] == ["a", "b", "c"]
    assert all(d["kind"] == "query" and d["apiVersion"] == API_VERSION for d in docs)


def test_label_list_documents_each_have_a_separator() -> None:
    fleet = FakeFleet(labels=[label("macs"), label("servers")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_labels(None, as_yaml=True)

    assert recorder.separator_count() == 2
    assert [d["kind"] for d in recorder.documents()] == ["label", "label"]


def test_single_query_has_no_separator() -> None:
    fleet = FakeFleet(queries=[query("uptime")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_queries("uptime", as_yaml=False)

    assert not recorder.text.startswith("---")
    assert recorder.documents() == [
        {
            "apiVersion": "v1",
            "kind": "query",
            "spec": {
                "name": "uptime",
                "description": "uptime description",
                "query": "SELECT * FROM uptime",
            },
        }
    ]
    assert fleet.calls["get_queries"] == 0


def test_single_label_has_no_separator() -> None:
    fleet = FakeFleet(labels=[label("macs")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_labels("macs", as_yaml=False)

    assert recorder.separator_count() == 0
    assert recorder.documents()[0]["spec"]["platform"] == "darwin"


@pytest.mark.parametrize(
    ("method", "name"),
    [("print_queries", "missing"), ("print_labels", "missing")],
)
def test_single_lookup_not_found_propagates_unchanged(method: str, name: str) -> None:
    presenter, recorder, _ = make_presenter(FakeFleet())

    with pytest.raises(NotFoundError) as exc_info:
        getattr(presenter, method)(name, as_yaml=False)

    assert not isinstance(exc_info.value, OperationError)
    assert recorder.text == ""


def test_single_pack_not_found_propagates_unchanged() -> None:
    presenter, _, _ = make_presenter(FakeFleet())

    with pytest.raises(NotFoundError, match="pack missing not found"):
        presenter.print_packs("missing", as_yaml=False, with_queries=True)


# Pack query resolution


def test_packs_without_with_queries_never_fetch_queries() -> None:
    fleet = FakeFleet(packs=[pack("p1", "a", "b")], queries=[query("a"), query("b")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_packs(None, as_yaml=True, with_queries=False)

    assert fleet.calls["get_queries"] == 0
    assert [d["kind"] for d in recorder.documents()] == ["pack"]


def test_single_pack_without_with_queries_never_fetches_queries() -> None:
    fleet = FakeFleet(packs=[pack("p1", "a")], queries=[query("a")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_packs("p1", as_yaml=False, with_queries=False)

    assert fleet.calls["get_queries"] == 0
    assert recorder.separator_count() == 0


@pytest.mark.parametrize("order", [("p1", "p2"), ("p2", "p1")])
def test_with_queries_emits_deduplicated_queries_after_packs(order: tuple[str, str]) -> None:
    packs = {"p1": pack("p1", "A", "B"), "p2": pack("p2", "B", "C")}
    fleet = FakeFleet(
        packs=[packs[name] for name in order],
        queries=[query("A"), query("B"), query("C"), query("unreferenced")],
    )
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_packs(None, as_yaml=True, with_queries=True)

    docs = recorder.documents()
    kinds = [d["kind"] for d in docs]
    assert kinds == ["pack", "pack", "query", "query", "query"]
    assert {d["spec"]["name"] for d in docs if d["kind"] == "query"} == {"A", "B", "C"}
    assert recorder.separator_count() == 5
    assert fleet.calls["get_queries"] == 1
    assert fleet.calls["get_query"] == 0


def test_with_queries_and_no_packs_fetches_once_and_emits_nothing() -> None:
    fleet = FakeFleet(queries=[query("A")])
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_packs(None, as_yaml=True, with_queries=True)

    assert recorder.text == ""
    assert fleet.calls["get_queries"] == 1


def test_single_pack_with_queries_is_a_separated_stream() -> None:
    fleet = FakeFleet(
        packs=[pack("p1", "A", "B")],
        queries=[query("A"), query("B"), query("C")],
    )
    presenter, recorder, _ = make_presenter(fleet)

    presenter.print_packs("p1", as_yaml=False, with_queries=True)

    assert recorder.chunks[0].startswith("---\n")
    docs = recorder.documents()
    assert [(d["kind"], d["spec"]["name"]) for d in docs] == [
        ("pack", "p1"),
        ("query", "A"),
        ("query", "B"),
    ]


def test_with_queries_is_ignored_in_table_mode() -> None:
    fleet = FakeFleet(packs=[pack("p1", "A")], queries=[query("A")])
    presenter, recorder, buffer = make_presenter(fleet)

    presenter.print_packs(None, as_yaml=False, with_queries=True)

    assert fleet.calls["get_queries"] == 0
    assert recorder.text == ""
    assert "p1" in buffer.getvalue()


# Table mode


def _header_line(table_text: str, first_column: str) -> str:
    return next(line for line in table_text.splitlines() if first_column in line)


def _assert_columns_in_order(line: str, columns: list[str]) -> None:
    cells = [cell.strip() for cell in line.strip().strip("|").split("|")]
    assert cells == columns


def test_query_table_columns() -> None:
    fleet = FakeFleet(queries=[query("uptime")])
    presenter, _, buffer = make_presenter(fleet)

    presenter.print_queries(None, as_yaml=False)

    output = buffer.getvalue()
    _assert_columns_in_order(_header_line(output, "name"), ["name", "description", "query"])
    assert "SELECT * FROM uptime" in output


def test_pack_table_columns() -> None:
    fleet = FakeFleet(packs=[pack("base", "uptime", platform="darwin")])
    presenter, _, buffer = make_presenter(fleet)

    presenter.print_packs(None, as_yaml=False, with_queries=False)

    output = buffer.getvalue()
    _assert_columns_in_order(_header_line(output, "name"), ["name", "platform", "description"])
    _assert_columns_in_order(_header_line(output, "base"), ["base", "darwin", "base pack"])


def test_label_table_columns() -> None:
    fleet = FakeFleet(labels=[label("macs")])
    presenter, _, buffer = make_presenter(fleet)

    presenter.print_labels(None, as_yaml=False)

    output = buffer.getvalue()
    _assert_columns_in_order(
        _header_line(output, "name"), ["name", "platform", "description", "query"]
    )


def test_host_table_columns_use_display_text() -> None:
    fleet = FakeFleet(hosts=[host("uuid-1", "web-01"), host("uuid-2", "db-01", status="offline")])
    presenter, _, buffer = make_presenter(fleet)

    presenter.print_hosts()

    output = buffer.getvalue()
    header = _header_line(output, "uuid")
    _assert_columns_in_order(header, ["uuid", "hostname", "platform", "status"])
    row = _header_line(output, "uuid-2")
    _assert_columns_in_order(row, ["uuid-2", "db-01", "ubuntu", "offline"])


def test_table_cells_are_not_parsed_as_markup() -> None:
    fleet = FakeFleet(queries=[query("brackets", "SELECT '[bold]x[/bold]' AS v")])
    presenter, _, buffer = make_presenter(fleet)

    presenter.print_queries(None, as_yaml=False)

    assert "[bold]x[/bold]" in buffer.getvalue()


LONG_TOKEN = "a_really_long_process_name_that_is_a_single_token_0123456789"


def _cell_text(table_text: str) -> str:
    """Table text with borders and padding removed, so wrapped cells read contiguously."""
    return "".join(ch for ch in table_text if ch not in " |\n")


def test_long_cell_values_wrap_instead_of_truncating() -> None:
    fleet = FakeFleet(
        queries=[QuerySpec(name="procs", description="", query=f"SELECT '{LONG_TOKEN}'")]
    )
    console, buffer = capture_console(width=80)
    presenter = ResourcePresenter(fleet, emit=Recorder(), console=console)

    presenter.print_queries(None, as_yaml=False)

    output = buffer.getvalue()
    assert "…" not in output
    assert max(len(line) for line in output.splitlines()) <= 80
    assert f"SELECT'{LONG_TOKEN}'" in _cell_text(output)


# Singletons


def test_options_document() -> None:
    options = OptionsSpec(
        config={"options": {"logger_plugin": "tls"}},
        overrides={"darwin": {"options": {"disable_audit": False}}},
    )
    presenter, recorder, _ = make_presenter(FakeFleet(options=options))

    presenter.print_options()

    assert recorder.separator_count() == 0
    assert recorder.documents() == [
        {
            "apiVersion": "v1",
            "kind": "options",
            "spec": {
                "config": {"options": {"logger_plugin": "tls"}},
                "overrides": {"platforms": {"darwin": {"options": {"disable_audit": False}}}},
            },
        }
    ]


def test_enroll_secrets_document() -> None:
    secrets = EnrollSecretSpec(secrets=[EnrollSecret(name="default", secret="abc", active=True)])
    presenter, recorder, _ = make_presenter(FakeFleet(enroll_secrets=secrets))

    presenter.print_enroll_secrets()

    doc = recorder.documents()[0]
    assert doc["kind"] == "enroll_secret"
    assert doc["spec"]["secrets"][0]["secret"] == "abc"


def test_app_config_document() -> None:
    config = AppConfig(sections={"org_info": {"org_name": "Acme"}})
    presenter, recorder, _ = make_presenter(FakeFleet(app_config=config))

    presenter.print_app_config()

    assert recorder.documents()[0] == {
        "apiVersion": "v1",
        "kind": "config",
        "spec": {"org_info": {"org_name": "Acme"}},
    }


def test_singleton_fetch_failure_propagates_unchanged() -> None:
    error = FleetApiError("GET /api/v1/kolide/config received status 500: boom", 500)
    presenter, _, _ = make_presenter(FakeFleet(failures={"get_app_config": error}))

    with pytest.raises(FleetApiError) as exc_info:
        presenter.print_app_config()

    assert exc_info.value is error


# Error wrapping


@pytest.mark.parametrize(
    ("failing", "call", "message"),
    [
        ("get_queries", lambda p: p.print_queries(None, as_yaml=True), "could not list queries"),
        (
            "get_packs",
            lambda p: p.print_packs(None, as_yaml=True, with_queries=False),
            "could not list packs",
        ),
        ("get_labels", lambda p: p.print_labels(None, as_yaml=False), "could not list labels"),
        ("get_hosts", lambda p: p.print_hosts(), "could not list hosts"),
    ],
)
def test_list_failures_are_wrapped(failing: str, call, message: str) -> None:
    cause = FleetApiError("connection refused")
    presenter, recorder, _ = make_presenter(FakeFleet(failures={failing: cause}))

    with pytest.raises(OperationError) as exc_info:
        call(presenter)

    assert str(exc_info.value) == f"{message}: connection refused"
    assert exc_info.value.__cause__ is cause
    assert recorder.text == ""


def test_query_resolution_failure_after_packs_were_emitted() -> None:
    fleet = FakeFleet(
        packs=[pack("p1", "A")],
        failures={"get_queries": FleetApiError("timeout")},
    )
    presenter, recorder, _ = make_presenter(fleet)

    with pytest.raises(OperationError, match="could not list queries: timeout"):
        presenter.print_packs(None, as_yaml=True, with_queries=True)

    # Pack documents written before the failure stay written
    assert [d["kind"] for d in recorder.documents()] == ["pack"]


def test_query_that_cannot_be_serialized_is_wrapped() -> None:
    unprintable = QuerySpec(name="broken", description=object(), query="SELECT 1")
    presenter, recorder, _ = make_presenter(FakeFleet(queries=[query("uptime"), unprintable]))

    with pytest.raises(OperationError) as exc_info:
        presenter.print_queries(None, as_yaml=True)

    assert str(exc_info.value).startswith("unable to print query: ")
    assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
    # Documents written before the failure stay written
    assert [d["spec"]["name"] for d in recorder.documents()] == ["uptime"]


def test_single_query_that_cannot_be_serialized_is_wrapped() -> None:
    unprintable = QuerySpec(name="broken", description=object(), query="SELECT 1")
    presenter, recorder, _ = make_presenter(FakeFleet(queries=[unprintable]))

    with pytest.raises(OperationError, match="^unable to print query: "):
        presenter.print_queries("broken", as_yaml=False)

    assert recorder.text == ""


def test_pack_that_cannot_be_serialized_is_wrapped() -> None:
    unprintable = PackSpec(name="broken", description=object())
    presenter, recorder, _ = make_presenter(FakeFleet(packs=[pack("base"), unprintable]))

    with pytest.raises(OperationError) as exc_info:
        presenter.print_packs(None, as_yaml=True, with_queries=False)

    assert str(exc_info.value).startswith("unable to print pack: ")
    assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
    assert [d["spec"]["name"] for d in recorder.documents()] == ["base"]
