"""Versioned envelope documents for exported resources.

Every exported resource is wrapped as::

    apiVersion: v1
    kind: pack
    spec:
      ...

so a consumer can dispatch on ``kind``/``apiVersion`` without out-of-band
context. Multi-document streams put a ``---`` line before each document.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

import yaml

from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecretSpec,
    LabelSpec,
    OptionsSpec,
    PackSpec,
    QuerySpec,
)

API_VERSION = "v1"
DOCUMENT_SEPARATOR = "---\n"


class ResourceKind(Enum):
    """Kinds of resource that can be exported as documents."""

    QUERY = "query"
    PACK = "pack"
    LABEL = "label"
    OPTIONS = "options"
    ENROLL_SECRET = "enroll_secret"
    CONFIG = "config"


ResourceSpec = QuerySpec | PackSpec | LabelSpec | OptionsSpec | EnrollSecretSpec | AppConfig

_SPEC_TYPES: dict[ResourceKind, type] = {
    ResourceKind.QUERY: QuerySpec,
    ResourceKind.PACK: PackSpec,
    ResourceKind.LABEL: LabelSpec,
    ResourceKind.OPTIONS: OptionsSpec,
    ResourceKind.ENROLL_SECRET: EnrollSecretSpec,
    ResourceKind.CONFIG: AppConfig,
}

_KINDS_BY_TYPE: dict[type, ResourceKind] = {t: kind for kind, t in _SPEC_TYPES.items()}


@dataclass(frozen=True)
class Envelope:
    """A resource tagged with its kind and the API version.

    Each kind carries exactly one spec type; mismatches raise TypeError.
    """

    kind: ResourceKind
    spec: ResourceSpec
    api_version: str = API_VERSION

    def __post_init__(self) -> None:
        expected = _SPEC_TYPES[self.kind]
        if not isinstance(self.spec, expected):
            msg = (
                f"{self.kind.value!r} envelope requires {expected.__name__}, "
                f"got {type(self.spec).__name__}"
            )
            raise TypeError(msg)

    @staticmethod
    def of(spec: ResourceSpec) -> "Envelope":
        """Wrap a spec, deriving the kind from its type."""
        kind = _KINDS_BY_TYPE.get(type(spec))
        if kind is None:
            msg = f"{type(spec).__name__} cannot be exported as a document"
            raise TypeError(msg)
        return Envelope(kind=kind, spec=spec)

    def to_dict(self) -> dict[str, Any]:
        return {
            "apiVersion": self.api_version,
            "kind": self.kind.value,
            "spec": self.spec.to_dict(),
        }


def render_document(envelope: Envelope, *, separator: bool) -> str:
    """Serialize an envelope to YAML document text.

    Args:
        envelope: Envelope to serialize
        separator: Prefix the document with "---" so it can be concatenated
            into a multi-document stream

    Returns:
        YAML text ending with a newline

    Raises:
        yaml.YAMLError: If the record holds values YAML cannot represent
    """
    text = yaml.safe_dump(
        envelope.to_dict(),
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True,
    )
    if separator:
        return DOCUMENT_SEPARATOR + text
    return text
