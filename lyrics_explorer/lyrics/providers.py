"""
Provider registry.

build_providers() turns the configured provider names into provider
instances, in the configured order, sharing the network settings.
"""

from typing import Callable

from lyrics_explorer.core.config import Config, KNOWN_PROVIDERS
from lyrics_explorer.core.exceptions import ConfigError
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.lyrics.base import LyricsProvider
from lyrics_explorer.lyrics.genius import GeniusProvider
from lyrics_explorer.lyrics.lrclib import LrcLibProvider
from lyrics_explorer.lyrics.synced import SyncedLyricsProvider

logger = get_logger(__name__)


def _build_lrclib(config: Config) -> LyricsProvider | None:
    return LrcLibProvider(
        user_agent=config.providers.user_agent,
        timeout=config.network.timeout,
        proxy=config.network.proxy,
    )


def _build_genius(config: Config) -> LyricsProvider | None:
    if not config.providers.genius_token:
        logger.warning(
            "Genius provider disabled: set GENIUS_ACCESS_TOKEN or "
            "providers.genius_token to enable it"
        )
        return None
    return GeniusProvider(
        access_token=config.providers.genius_token,
        timeout=config.network.timeout,
        proxy=config.network.proxy,
    )


def _build_synced(config: Config) -> LyricsProvider | None:
    return SyncedLyricsProvider(proxy=config.network.proxy)


PROVIDER_FACTORIES: dict[str, Callable[[Config], LyricsProvider | None]] = {
    "lrclib": _build_lrclib,
    "genius": _build_genius,
    "syncedlyrics": _build_synced,
}


def build_providers(config: Config) -> list[LyricsProvider]:
    """
    Create the providers listed in config.providers.order.

    Providers that cannot be built from the configuration (Genius without
    a token) are left out with a warning.

    Raises:
        ConfigError: If a name is unknown or no provider could be built.
    """
    providers: list[LyricsProvider] = []
    for name in config.providers.order:
        factory = PROVIDER_FACTORIES.get(name)
        if factory is None:
            raise ConfigError(
                f"Unknown lyrics provider: '{name}' "
                f"(known providers: {', '.join(KNOWN_PROVIDERS)})",
                details={"field": "providers.order", "value": name}
            )
        provider = factory(config)
        if provider is not None:
            providers.append(provider)

    if not providers:
        raise ConfigError(
            "No lyrics provider available with the current configuration",
            details={"field": "providers.order"}
        )

    logger.debug(f"Lyrics providers: {', '.join(p.name for p in providers)}")
    return providers
