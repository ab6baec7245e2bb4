"""
Genius lyrics provider.

Genius has the largest lyrics catalogue but requires an API access token
(https://genius.com/api-clients). The lyricsgenius client searches the
API for the song, then scrapes the lyrics from the song page.

Configuration:
    providers.genius_token in config.yaml, or the GENIUS_ACCESS_TOKEN
    environment variable (a .env file works too).
"""

import lyricsgenius
import requests

from lyrics_explorer.core.config import DEFAULT_TIMEOUT, ProxyConfig
from lyrics_explorer.core.exceptions import ProviderError
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.lyrics.base import Lyrics
from lyrics_explorer.utils import clean_genius_lyrics

logger = get_logger(__name__)


# Variants that never match the studio recording found in a library
EXCLUDED_TERMS = ["(Remix)", "(Live)", "(Cover)", "(Karaoke)"]


class GeniusProvider:
    """
    Looks lyrics up on Genius.

    Attributes:
        name: "genius"
        client: Configured lyricsgenius.Genius instance.

    Example:
        provider = GeniusProvider(access_token="...")
        lyrics = provider.lookup("Queen", "Bohemian Rhapsody")
    """

    name = "genius"

    def __init__(
        self,
        access_token: str,
        timeout: float = DEFAULT_TIMEOUT,
        proxy: ProxyConfig | None = None,
        client: lyricsgenius.Genius | None = None
    ) -> None:
        self.client = client or lyricsgenius.Genius(
            access_token,
            timeout=int(timeout),
            remove_section_headers=False,
            skip_non_songs=True,
            excluded_terms=EXCLUDED_TERMS,
            verbose=False,
        )
        if proxy is not None:
            # lyricsgenius sends every request through this session
            self.client._session.proxies.update(proxy.as_requests_proxies())

    def lookup(self, artist: str, title: str) -> Lyrics | None:
        """
        Search Genius for artist/title and return the song lyrics.

        Returns:
            Lyrics, or None if Genius has no matching song or no lyrics for it.

        Raises:
            ProviderError: On network or HTTP errors.
        """
        logger.debug(f"Genius query: {artist} - {title}")

        try:
            song = self.client.search_song(title, artist)
        except requests.exceptions.RequestException as e:
            raise ProviderError(
                f"Genius request failed: {e}",
                details={"provider": self.name, "artist": artist, "title": title}
            ) from e

        if song is None or not song.lyrics:
            return None

        text = clean_genius_lyrics(song.lyrics)
        if not text:
            return None

        return Lyrics(text=text, source=self.name)
