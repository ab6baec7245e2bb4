"""
Core module for lyrics-explorer.

This module provides the foundational components used throughout the application:
    - exceptions: Custom exception classes for error handling
    - config: Configuration loading and validation
    - logger: Logging system with multiple outputs

Usage:
    from lyrics_explorer.core import (
        Config, load_config,
        setup_logging, get_logger,
        LyricsExplorerError, ConfigError, TagError
    )
"""

from lyrics_explorer.core.config import (
    Config,
    LoggingConfig,
    NetworkConfig,
    ProvidersConfig,
    ProxyConfig,
    ResourcesConfig,
    default_config,
    load_config,
)
from lyrics_explorer.core.exceptions import (
    ConfigError,
    LyricsExplorerError,
    MissingTagError,
    ProviderError,
    ResourceError,
    TagError,
    TagReadError,
    TagWriteError,
)
from lyrics_explorer.core.logger import (
    get_logger,
    log_lyrics_failure,
    log_lyrics_found,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    # Config
    "Config",
    "NetworkConfig",
    "ProxyConfig",
    "ProvidersConfig",
    "ResourcesConfig",
    "LoggingConfig",
    "default_config",
    "load_config",
    # Exceptions
    "LyricsExplorerError",
    "ConfigError",
    "ResourceError",
    "TagError",
    "TagReadError",
    "MissingTagError",
    "TagWriteError",
    "ProviderError",
    # Logger
    "setup_logging",
    "get_logger",
    "log_lyrics_failure",
    "log_lyrics_found",
    "shutdown_logging",
]
