"""Conversion of Fleet server JSON payloads into resource records."""

from typing import Any

from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecret,
    EnrollSecretSpec,
    HostSummary,
    LabelSpec,
    OptionsSpec,
    PackSpec,
    PackSpecQuery,
    PackSpecTargets,
    QuerySpec,
)


def parse_query_spec(data: dict[str, Any]) -> QuerySpec:
    return QuerySpec(
        name=data["name"],
        description=data.get("description") or "",
        query=data.get("query") or "",
    )


def parse_pack_spec(data: dict[str, Any]) -> PackSpec:
    """Convert a pack spec payload to PackSpec.

    Scheduled entries are keyed by "query" (the referenced query name) on the
    wire; a missing entry name falls back to the query name.
    """
    targets = data.get("targets") or {}
    queries = [
        PackSpecQuery(
            query_name=q["query"],
            name=q.get("name") or q["query"],
            description=q.get("description") or "",
            interval=int(q.get("interval") or 0),
            snapshot=q.get("snapshot"),
            removed=q.get("removed"),
            shard=q.get("shard"),
            platform=q.get("platform"),
            version=q.get("version"),
        )
        for q in data.get("queries") or []
    ]
    return PackSpec(
        name=data["name"],
        description=data.get("description") or "",
        platform=data.get("platform") or "",
        disabled=bool(data.get("disabled", False)),
        targets=PackSpecTargets(labels=list(targets.get("labels") or [])),
        queries=queries,
        id=data.get("id"),
    )


def parse_label_spec(data: dict[str, Any]) -> LabelSpec:
    return LabelSpec(
        name=data["name"],
        description=data.get("description") or "",
        query=data.get("query") or "",
        platform=data.get("platform") or "",
        label_type=str(data.get("label_type") or ""),
        label_membership_type=data.get("label_membership_type") or "dynamic",
        hosts=list(data.get("hosts") or []),
        id=data.get("id"),
    )


def parse_host(data: dict[str, Any]) -> HostSummary:
    """Convert a host response to HostSummary.

    The server flattens host fields next to the computed "status" and
    "display_text" values.
    """
    hostname = data.get("hostname") or ""
    return HostSummary(
        uuid=data.get("uuid") or "",
        hostname=hostname,
        display_text=data.get("display_text") or hostname,
        platform=data.get("platform") or "",
        status=data.get("status") or "",
        id=data.get("id"),
        os_version=data.get("os_version") or "",
        osquery_version=data.get("osquery_version") or "",
    )


def parse_options_spec(data: dict[str, Any]) -> OptionsSpec:
    overrides = data.get("overrides") or {}
    return OptionsSpec(
        config=data.get("config") or {},
        overrides=dict(overrides.get("platforms") or {}),
    )


def parse_enroll_secret_spec(data: dict[str, Any]) -> EnrollSecretSpec:
    return EnrollSecretSpec(
        secrets=[
            EnrollSecret(
                name=s.get("name") or "",
                secret=s["secret"],
                active=bool(s.get("active", False)),
                created_at=s.get("created_at"),
            )
            for s in data.get("secrets") or []
        ]
    )


def parse_app_config(data: dict[str, Any]) -> AppConfig:
    return AppConfig(sections=dict(data))
