"""Client configuration data structures and loading.

Provides immutable client config loaded from a YAML file (``~/.fleet/config``
by default) that names one or more server contexts:

    contexts:
      default:
        address: https://localhost:8080
        email: admin@example.com
        token: <api token>
        tls-skip-verify: false
        rootca: ""
        url-prefix: ""
"""

import ssl
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import yaml

from fleetview.core.errors import ConfigError

DEFAULT_CONFIG_PATH = Path("~/.fleet/config")
DEFAULT_CONTEXT = "default"


@dataclass(frozen=True)
class ContextConfig:
    """Connection settings for one named server context.

    Fields:
        address: Server address including scheme
        email: Email of the logged-in user (informational)
        token: API token ("" when not logged in)
        tls_skip_verify: Disable TLS certificate verification
        rootca: Path to a CA bundle ("" for system roots)
        url_prefix: Path prefix the server is mounted under
    """

    address: str = ""
    email: str = ""
    token: str = ""
    tls_skip_verify: bool = False
    rootca: str = ""
    url_prefix: str = ""

    @property
    def verify(self) -> ssl.SSLContext | bool:
        """TLS verification setting in the form httpx expects.

        Raises:
            ConfigError: If the rootca bundle cannot be loaded
        """
        if self.tls_skip_verify:
            return False
        if not self.rootca:
            return True

        cafile = Path(self.rootca).expanduser()
        try:
            return ssl.create_default_context(cafile=str(cafile))
        except OSError as e:
            raise ConfigError(f"could not load root CA {cafile}: {e}") from e


@dataclass(frozen=True)
class ClientConfig:
    """Immutable client configuration: context name -> ContextConfig."""

    contexts: dict[str, ContextConfig]


class ConfigStore(ABC):
    """Abstract interface for client config access.

    Provides dependency injection for config loading, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def load(self, path: Path) -> ClientConfig:
        """Load client config.

        Args:
            path: Config file location (may start with "~")

        Returns:
            ClientConfig with every context in the file

        Raises:
            ConfigError: If the file is missing or malformed
        """
        ...


class RealConfigStore(ConfigStore):
    """Production implementation that reads the YAML config file."""

    def load(self, path: Path) -> ClientConfig:
        config_path = path.expanduser()
        if not config_path.exists():
            raise ConfigError(
                f"config file {config_path} not found; "
                "create it with a 'contexts' section naming the server address and token"
            )

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"could not parse config file {config_path}: {e}") from e

        return parse_client_config(data or {}, config_path)


class FakeConfigStore(ConfigStore):
    """In-memory config store for tests.

    Returns the configured ClientConfig for any path; raises ConfigError
    when constructed with None, as if the file did not exist.
    """

    def __init__(self, config: ClientConfig | None) -> None:
        self._config = config
        self._loaded_paths: list[Path] = []

    @property
    def loaded_paths(self) -> list[Path]:
        """Paths passed to load(), for test assertions."""
        return self._loaded_paths

    def load(self, path: Path) -> ClientConfig:
        self._loaded_paths.append(path)
        if self._config is None:
            raise ConfigError(f"config file {path} not found")
        return self._config


def parse_client_config(data: object, source: Path) -> ClientConfig:
    """Build ClientConfig from parsed YAML.

    Raises:
        ConfigError: If the document does not have the expected shape
    """
    if not isinstance(data, dict):
        raise ConfigError(f"config file {source} must contain a mapping")

    raw_contexts = data.get("contexts") or {}
    if not isinstance(raw_contexts, dict):
        raise ConfigError(f"'contexts' in {source} must be a mapping")

    contexts: dict[str, ContextConfig] = {}
    for name, raw in raw_contexts.items():
        if not isinstance(raw, dict):
            raise ConfigError(f"context {name!r} in {source} must be a mapping")
        contexts[str(name)] = ContextConfig(
            address=str(raw.get("address") or ""),
            email=str(raw.get("email") or ""),
            token=str(raw.get("token") or ""),
            tls_skip_verify=bool(raw.get("tls-skip-verify", False)),
            rootca=str(raw.get("rootca") or ""),
            url_prefix=str(raw.get("url-prefix") or ""),
        )
    return ClientConfig(contexts=contexts)
