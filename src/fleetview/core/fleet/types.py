"""Resource records returned by the Fleet server.

Records are built fresh for every invocation and never mutated. Each record
that can be exported knows its wire shape via ``to_dict()``; optional fields
that are unset are left out, matching the server's own JSON.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class QuerySpec:
    """A saved query.

    Fields:
        name: Unique query name, referenced by packs
        description: Free-form description
        query: osquery SQL text (opaque)
    """

    name: str
    description: str
    query: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "query": self.query,
        }


@dataclass(frozen=True)
class PackSpecQuery:
    """A scheduled reference from a pack to a saved query.

    Fields:
        query_name: Name of the referenced QuerySpec
        name: Name of this scheduled entry within the pack
        description: Free-form description
        interval: Schedule interval in seconds
        snapshot: Snapshot logging flag (None when unset)
        removed: Differential removal logging flag (None when unset)
        shard: Percentage of hosts to run on (None when unset)
        platform: Platform restriction (None when unset)
        version: Minimum osquery version (None when unset)
    """

    query_name: str
    name: str
    description: str = ""
    interval: int = 0
    snapshot: bool | None = None
    removed: bool | None = None
    shard: int | None = None
    platform: str | None = None
    version: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "query": self.query_name,
            "name": self.name,
            "interval": self.interval,
        }
        if self.description:
            data["description"] = self.description
        if self.snapshot is not None:
            data["snapshot"] = self.snapshot
        if self.removed is not None:
            data["removed"] = self.removed
        if self.shard is not None:
            data["shard"] = self.shard
        if self.platform is not None:
            data["platform"] = self.platform
        if self.version is not None:
            data["version"] = self.version
        return data


@dataclass(frozen=True)
class PackSpecTargets:
    """Label names whose hosts receive a pack."""

    labels: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class PackSpec:
    """A named, platform-scoped collection of scheduled query references.

    Fields:
        name: Unique pack name
        description: Free-form description
        platform: Comma separated platform list ("" for all)
        disabled: Whether the pack is disabled
        targets: Label targets
        queries: Ordered query references
        id: Server-side ID (None when not reported)
    """

    name: str
    description: str = ""
    platform: str = ""
    disabled: bool = False
    targets: PackSpecTargets = field(default_factory=PackSpecTargets)
    queries: list[PackSpecQuery] = field(default_factory=list)
    id: int | None = None

    def query_names(self) -> set[str]:
        """Names of all queries this pack references."""
        return {q.query_name for q in self.queries}

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "disabled": self.disabled}
        if self.id is not None:
            data["id"] = self.id
        if self.description:
            data["description"] = self.description
        if self.platform:
            data["platform"] = self.platform
        if self.targets.labels:
            data["targets"] = {"labels": list(self.targets.labels)}
        if self.queries:
            data["queries"] = [q.to_dict() for q in self.queries]
        return data


@dataclass(frozen=True)
class LabelSpec:
    """A label: a named query whose result set defines host membership."""

    name: str
    description: str
    query: str
    platform: str = ""
    label_type: str = ""
    label_membership_type: str = "dynamic"
    hosts: list[str] = field(default_factory=list)
    id: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "query": self.query,
            "label_membership_type": self.label_membership_type,
        }
        if self.id is not None:
            data["id"] = self.id
        if self.platform:
            data["platform"] = self.platform
        if self.label_type:
            data["label_type"] = self.label_type
        if self.hosts:
            data["hosts"] = list(self.hosts)
        return data


@dataclass(frozen=True)
class HostSummary:
    """Host inventory row. Only ever rendered as a table."""

    uuid: str
    hostname: str
    display_text: str
    platform: str
    status: str
    id: int | None = None
    os_version: str = ""
    osquery_version: str = ""


@dataclass(frozen=True)
class OptionsSpec:
    """osquery options distributed to hosts.

    Fields:
        config: Options applied to every host
        overrides: Platform name -> options replacing ``config`` on that platform
    """

    config: dict[str, Any]
    overrides: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"config": self.config}
        if self.overrides:
            data["overrides"] = {"platforms": self.overrides}
        return data


@dataclass(frozen=True)
class EnrollSecret:
    name: str
    secret: str
    active: bool
    created_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "secret": self.secret,
            "active": self.active,
        }
        if self.created_at is not None:
            data["created_at"] = self.created_at
        return data


@dataclass(frozen=True)
class EnrollSecretSpec:
    """All enroll secrets hosts may use to join the fleet."""

    secrets: list[EnrollSecret]

    def to_dict(self) -> dict[str, Any]:
        return {"secrets": [s.to_dict() for s in self.secrets]}


@dataclass(frozen=True)
class AppConfig:
    """Service-wide configuration, kept as the server's nested sections.

    Fields:
        sections: Section name (e.g. "org_info", "server_settings") -> settings
    """

    sections: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return dict(self.sections)
