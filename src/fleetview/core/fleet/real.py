"""Production Fleet gateway using the server's REST API."""

import logging
import ssl
from typing import Any, Self
from urllib.parse import quote

import httpx

from fleetview.core.errors import FleetApiError, NotFoundError
from fleetview.core.fleet.abc import Fleet
from fleetview.core.fleet.parsing import (
    parse_app_config,
    parse_enroll_secret_spec,
    parse_host,
    parse_label_spec,
    parse_options_spec,
    parse_pack_spec,
    parse_query_spec,
)
from fleetview.core.fleet.types import (
    AppConfig,
    EnrollSecretSpec,
    HostSummary,
    LabelSpec,
    OptionsSpec,
    PackSpec,
    QuerySpec,
)

logger = logging.getLogger(__name__)

API_ROOT = "/api/v1/kolide"
DEFAULT_TIMEOUT = 30.0


class RealFleet(Fleet):
    """Production implementation talking to a Fleet server over HTTPS.

    Every method issues exactly one blocking GET request. Non-2xx responses
    raise FleetApiError (NotFoundError for 404); transport failures are
    re-raised as FleetApiError with the httpx error chained. Use as a
    context manager, or call close(), to release the connection pool.
    """

    def __init__(
        self,
        address: str,
        token: str,
        *,
        url_prefix: str = "",
        verify: ssl.SSLContext | bool = True,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize RealFleet.

        Args:
            address: Server address, e.g. "https://fleet.example.com:8080"
            token: API token sent as a bearer credential
            url_prefix: Path prefix the server is mounted under
            verify: TLS verification flag, or an SSL context trusting a custom CA
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (for testing)
        """
        base_url = address.rstrip("/") + "/" + url_prefix.strip("/")
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            headers={"Authorization": f"Bearer {token}"},
            verify=verify,
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def _get(self, path: str, *, resource: str | None = None) -> dict[str, Any]:
        url = API_ROOT + path
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            raise FleetApiError(f"GET {url}: {e}") from e

        logger.debug("GET %s -> %d", url, response.status_code)
        if response.status_code == httpx.codes.NOT_FOUND:
            if resource is not None:
                raise NotFoundError(f"{resource} not found")
            raise NotFoundError(f"GET {url}: the resource was not found")
        if response.is_error:
            raise FleetApiError(
                f"GET {url} received status {response.status_code}: {_error_detail(response)}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as e:
            raise FleetApiError(f"GET {url}: invalid JSON response: {e}") from e
        if not isinstance(body, dict):
            raise FleetApiError(f"GET {url}: unexpected response")
        return body

    def _list_field(self, path: str, key: str) -> list[dict[str, Any]]:
        # The server encodes an empty collection as null
        items = self._get(path).get(key) or []
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise FleetApiError(f"GET {API_ROOT}{path}: unexpected response, {key!r} is not a list")
        return items

    def _object_field(
        self, path: str, key: str, *, resource: str | None = None
    ) -> dict[str, Any]:
        value = self._get(path, resource=resource).get(key)
        if not isinstance(value, dict):
            raise FleetApiError(f"GET {API_ROOT}{path}: unexpected response, missing {key!r}")
        return value

    def _list_specs(self, kind: str) -> list[dict[str, Any]]:
        return self._list_field(f"/spec/{kind}", "specs")

    def _named_spec(self, kind: str, resource: str, name: str) -> dict[str, Any]:
        path = f"/spec/{kind}/{quote(name, safe='')}"
        return self._object_field(path, "specs", resource=f"{resource} {name}")

    def get_queries(self) -> list[QuerySpec]:
        return [parse_query_spec(item) for item in self._list_specs("queries")]

    def get_query(self, name: str) -> QuerySpec:
        return parse_query_spec(self._named_spec("queries", "query", name))

    def get_packs(self) -> list[PackSpec]:
        return [parse_pack_spec(item) for item in self._list_specs("packs")]

    def get_pack(self, name: str) -> PackSpec:
        return parse_pack_spec(self._named_spec("packs", "pack", name))

    def get_labels(self) -> list[LabelSpec]:
        return [parse_label_spec(item) for item in self._list_specs("labels")]

    def get_label(self, name: str) -> LabelSpec:
        return parse_label_spec(self._named_spec("labels", "label", name))

    def get_hosts(self) -> list[HostSummary]:
        return [parse_host(item) for item in self._list_field("/hosts", "hosts")]

    def get_options(self) -> OptionsSpec:
        return parse_options_spec(self._object_field("/spec/osquery_options", "spec"))

    def get_enroll_secret_spec(self) -> EnrollSecretSpec:
        return parse_enroll_secret_spec(self._object_field("/spec/enroll_secret", "spec"))

    def get_app_config(self) -> AppConfig:
        return parse_app_config(self._get("/config"))


def _error_detail(response: httpx.Response) -> str:
    """Extract a readable reason from a Fleet error payload.

    Error bodies look like {"message": "...", "errors": [{"name": ..., "reason": ...}]}.
    Falls back to the raw body when it is not a JSON object.
    """
    try:
        body = response.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        return response.text.strip() or response.reason_phrase

    message = body.get("message") or response.reason_phrase
    errors = body.get("errors") or []
    if errors and errors[0].get("reason"):
        return f"{message}: {errors[0]['reason']}"
    return message
