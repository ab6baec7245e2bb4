"""
Configuration management for lyrics-explorer.

This module handles loading, validating, and providing access to the
application configuration stored in config.yaml.

The configuration file contains:
    - Network settings (optional proxy, request timeout)
    - Lyrics providers, in trial order, and the Genius access token
    - Paths of the alternate-names and bad-sentences resources
    - Log file directory

Configuration File Location:
    An explicit path can be passed with --config. Otherwise config.yaml is
    looked up in the current working directory; when it is absent the
    built-in defaults are used.

Environment:
    A .env file in the working directory is loaded with python-dotenv.
    GENIUS_ACCESS_TOKEN overrides providers.genius_token.

Example config.yaml:
    network:
      proxy_host: proxy.example.org
      proxy_port: 3128
      timeout: 15

    providers:
      order: [lrclib, genius, syncedlyrics]
      genius_token: null

    resources:
      alternate_names: ~/.config/lyrics-explorer/alternate_names.yaml
      bad_sentences: null  # packaged default

    logging:
      directory: ~/Music/.lyrics-explorer-logs
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from lyrics_explorer.core.exceptions import ConfigError


# Default configuration file name (looked up in current working directory)
CONFIG_FILENAME = "config.yaml"

# Environment variable holding the Genius API access token
GENIUS_TOKEN_ENV = "GENIUS_ACCESS_TOKEN"

RESOURCES_DIR = Path(__file__).resolve().parent.parent / "resources"
DEFAULT_ALTERNATE_NAMES = RESOURCES_DIR / "alternate_names.yaml"
DEFAULT_BAD_SENTENCES = RESOURCES_DIR / "bad_sentences.txt"

# Provider names accepted in providers.order
KNOWN_PROVIDERS = ("lrclib", "genius", "syncedlyrics")
DEFAULT_PROVIDER_ORDER = KNOWN_PROVIDERS

DEFAULT_TIMEOUT = 15.0
DEFAULT_USER_AGENT = "lyrics-explorer/0.1 (+https://github.com/lyrics-explorer)"


@dataclass(frozen=True)
class ProxyConfig:
    """
    HTTP proxy used by the lyrics providers.

    Attributes:
        host: Proxy hostname or IP address.
        port: Proxy TCP port (1-65535).
    """
    host: str
    port: int

    @property
    def url(self) -> str:
        """Proxy URL in the form expected by requests."""
        return f"http://{self.host}:{self.port}"

    def as_requests_proxies(self) -> dict[str, str]:
        """Return the proxies mapping for a requests.Session."""
        return {"http": self.url, "https": self.url}


@dataclass(frozen=True)
class NetworkConfig:
    """
    Network behavior configuration.

    Attributes:
        proxy: Optional proxy for provider requests. None means direct connection.
        timeout: Per-request timeout in seconds for HTTP based providers.
    """
    proxy: ProxyConfig | None
    timeout: float


@dataclass(frozen=True)
class ProvidersConfig:
    """
    Lyrics providers configuration.

    Attributes:
        order: Provider names in trial order. The first provider that
               returns lyrics wins, so this is a preference ranking.
        genius_token: Genius API access token. The Genius provider is
                      skipped when it is not set.
        user_agent: User-Agent header for HTTP based providers.
    """
    order: tuple[str, ...]
    genius_token: str | None
    user_agent: str


@dataclass(frozen=True)
class ResourcesConfig:
    """
    Locations of the lookup resources.

    Attributes:
        alternate_names: YAML file mapping an artist to its name variants.
        bad_sentences: Text file with one placeholder phrase per line.
    """
    alternate_names: Path
    bad_sentences: Path


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging configuration.

    Attributes:
        directory: Directory for the log files, or None for console only.
    """
    directory: Path | None


@dataclass(frozen=True)
class Config:
    """
    Complete application configuration.

    Created by load_config() and treated as immutable (frozen dataclass).
    Command line overrides are applied with dataclasses.replace().

    Example:
        config = load_config()
        print(f"Providers: {', '.join(config.providers.order)}")
    """
    network: NetworkConfig
    providers: ProvidersConfig
    resources: ResourcesConfig
    logging: LoggingConfig


def default_config() -> Config:
    """Return the configuration used when no config.yaml is present."""
    return _build_config({})


def load_config(config_path: Path | None = None) -> Config:
    """
    Load and validate configuration from config.yaml.

    Args:
        config_path: Optional explicit path to config file. It must exist.
                     If None, config.yaml in the current working directory
                     is used when present, the defaults otherwise.

    Returns:
        Config: A frozen dataclass containing all configuration values.

    Raises:
        ConfigError: If the explicit config file is not found, has invalid
                     YAML syntax, or contains invalid values.

    Behavior:
        1. Load .env (python-dotenv) so GENIUS_ACCESS_TOKEN can live there
        2. Locate config file (explicit path or CWD/config.yaml)
        3. Read and parse YAML content
        4. Validate and extract each section, applying defaults
        5. Create and return frozen Config object
    """
    load_dotenv(find_dotenv(usecwd=True))

    if config_path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        if not candidate.exists():
            return default_config()
        config_path = candidate
    elif not config_path.exists():
        raise ConfigError(
            f"Configuration file not found: {config_path}",
            details={"file_path": str(config_path)}
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(
            f"Failed to read configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    try:
        raw_config = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(
            f"Invalid YAML syntax in configuration file: {e}",
            details={"file_path": str(config_path), "original_error": str(e)}
        ) from e

    # An empty file is a valid, all-defaults configuration
    if raw_config is None:
        raw_config = {}

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a YAML dictionary",
            details={"file_path": str(config_path)}
        )

    return _build_config(raw_config)


def _build_config(raw_config: dict[str, Any]) -> Config:
    return Config(
        network=_parse_network_config(_section(raw_config, "network")),
        providers=_parse_providers_config(_section(raw_config, "providers")),
        resources=_parse_resources_config(_section(raw_config, "resources")),
        logging=_parse_logging_config(_section(raw_config, "logging")),
    )


def _section(raw_config: dict[str, Any], name: str) -> dict[str, Any]:
    """
    Return an optional section of the configuration as a dictionary.

    Raises:
        ConfigError: If the section is present but is not a dictionary.
    """
    section = raw_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(
            f"Section '{name}' must be a dictionary",
            details={"section": name}
        )
    return section


def _parse_network_config(network_section: dict[str, Any]) -> NetworkConfig:
    """
    Parse and validate the network configuration section.

    Raises:
        ConfigError: If only one of proxy_host/proxy_port is set, if the
                     port is out of range, or if timeout is not positive.
    """
    proxy = parse_proxy(
        network_section.get("proxy_host"),
        network_section.get("proxy_port"),
        field_prefix="network."
    )

    timeout = network_section.get("timeout", DEFAULT_TIMEOUT)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError(
            "'network.timeout' must be a positive number",
            details={"field": "network.timeout", "value": timeout}
        )

    return NetworkConfig(proxy=proxy, timeout=float(timeout))


def parse_proxy(host: Any, port: Any, field_prefix: str = "") -> ProxyConfig | None:
    """
    Validate a proxy host/port pair.

    Used both for the config file and for the --proxy-host/--proxy-port
    command line options.

    Args:
        host: Proxy hostname, or None.
        port: Proxy port, or None.
        field_prefix: Prefix for field names in error messages.

    Returns:
        ProxyConfig, or None when neither value is given.

    Raises:
        ConfigError: If only one of the two is given or a value is invalid.
    """
    if host is None and port is None:
        return None

    if host is None or port is None:
        raise ConfigError(
            f"'{field_prefix}proxy_host' and '{field_prefix}proxy_port' must be set together",
            details={"field": f"{field_prefix}proxy_host"}
        )

    if not isinstance(host, str) or not host.strip():
        raise ConfigError(
            f"'{field_prefix}proxy_host' must be a non-empty string",
            details={"field": f"{field_prefix}proxy_host"}
        )

    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise ConfigError(
            f"'{field_prefix}proxy_port' must be an integer between 1 and 65535",
            details={"field": f"{field_prefix}proxy_port", "value": port}
        )

    return ProxyConfig(host=host.strip(), port=port)


def _parse_providers_config(providers_section: dict[str, Any]) -> ProvidersConfig:
    """
    Parse and validate the providers configuration section.

    The Genius token from the environment (or .env) wins over the file.

    Raises:
        ConfigError: If order is empty, not a list, or names an unknown provider.
    """
    order = parse_provider_order(
        providers_section.get("order", list(DEFAULT_PROVIDER_ORDER))
    )

    genius_token = os.getenv(GENIUS_TOKEN_ENV) or providers_section.get("genius_token")
    if genius_token is not None:
        if not isinstance(genius_token, str):
            raise ConfigError(
                "'providers.genius_token' must be a string or null",
                details={"field": "providers.genius_token"}
            )
        genius_token = genius_token.strip() or None

    user_agent = providers_section.get("user_agent", DEFAULT_USER_AGENT)
    if not isinstance(user_agent, str) or not user_agent.strip():
        raise ConfigError(
            "'providers.user_agent' must be a non-empty string",
            details={"field": "providers.user_agent"}
        )

    return ProvidersConfig(
        order=order,
        genius_token=genius_token,
        user_agent=user_agent.strip()
    )


def parse_provider_order(raw_order: Any) -> tuple[str, ...]:
    """
    Validate a list of provider names.

    Accepts a list or a comma separated string (as given on the command line).
    Names are case-insensitive; duplicates are dropped keeping the first one.

    Raises:
        ConfigError: If the list is empty or contains an unknown name.
    """
    if isinstance(raw_order, str):
        raw_order = raw_order.split(",")

    if not isinstance(raw_order, (list, tuple)):
        raise ConfigError(
            "'providers.order' must be a list of provider names",
            details={"field": "providers.order"}
        )

    order: list[str] = []
    for raw_name in raw_order:
        if not isinstance(raw_name, str):
            raise ConfigError(
                "'providers.order' must only contain strings",
                details={"field": "providers.order", "value": raw_name}
            )
        name = raw_name.strip().lower()
        if not name:
            continue
        if name not in KNOWN_PROVIDERS:
            raise ConfigError(
                f"Unknown lyrics provider: '{name}' "
                f"(known providers: {', '.join(KNOWN_PROVIDERS)})",
                details={"field": "providers.order", "value": name}
            )
        if name not in order:
            order.append(name)

    if not order:
        raise ConfigError(
            "'providers.order' must name at least one provider",
            details={"field": "providers.order"}
        )

    return tuple(order)


def _parse_resources_config(resources_section: dict[str, Any]) -> ResourcesConfig:
    """
    Parse the resources section. Null entries fall back to the packaged files.

    Existence is checked when the resources are loaded, not here.
    """
    return ResourcesConfig(
        alternate_names=_parse_path(
            resources_section.get("alternate_names"),
            "resources.alternate_names",
            DEFAULT_ALTERNATE_NAMES
        ),
        bad_sentences=_parse_path(
            resources_section.get("bad_sentences"),
            "resources.bad_sentences",
            DEFAULT_BAD_SENTENCES
        ),
    )


def _parse_logging_config(logging_section: dict[str, Any]) -> LoggingConfig:
    """Parse the logging section. A null directory disables log files."""
    raw_directory = logging_section.get("directory")
    if raw_directory is None:
        return LoggingConfig(directory=None)
    return LoggingConfig(
        directory=_parse_path(raw_directory, "logging.directory", None)
    )


def _parse_path(raw_value: Any, field: str, default: Path | None) -> Path | None:
    if raw_value is None:
        return default

    if not isinstance(raw_value, str) or not raw_value.strip():
        raise ConfigError(
            f"'{field}' must be a non-empty string path or null",
            details={"field": field}
        )

    # Expand ~ and make absolute
    return Path(raw_value.strip()).expanduser().resolve()
