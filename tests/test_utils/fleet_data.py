"""Sample Fleet records shared by tests."""

from io import StringIO

from rich.console import Console

from fleetview.core.fleet.types import (
    HostSummary,
    LabelSpec,
    PackSpec,
    PackSpecQuery,
    QuerySpec,
)


def query(name: str, sql: str | None = None) -> QuerySpec:
    return QuerySpec(
        name=name,
        description=f"{name} description",
        query=sql or f"SELECT * FROM {name}",
    )


def pack(name: str, *query_names: str, platform: str = "linux") -> PackSpec:
    return PackSpec(
        name=name,
        description=f"{name} pack",
        platform=platform,
        queries=[PackSpecQuery(query_name=q, name=q, interval=60) for q in query_names],
    )


def label(name: str) -> LabelSpec:
    return LabelSpec(
        name=name,
        description=f"{name} hosts",
        query="SELECT 1 FROM os_version WHERE platform = 'darwin'",
        platform="darwin",
    )


def host(uuid: str, display_text: str, status: str = "online") -> HostSummary:
    return HostSummary(
        uuid=uuid,
        hostname=f"{display_text}.local",
        display_text=display_text,
        platform="ubuntu",
        status=status,
    )


def capture_console(width: int = 200) -> tuple[Console, StringIO]:
    """Console writing plain text to a buffer, wide enough by default to avoid wrapping."""
    buffer = StringIO()
    return Console(file=buffer, width=width, color_system=None), buffer
