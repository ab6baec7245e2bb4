"""
LRCLIB lyrics provider.

LRCLIB (https://lrclib.net) is a free, open lyrics database with a JSON
API and no authentication. The provider asks for an exact artist/title
match:

    GET /api/get?artist_name=<artist>&track_name=<title>

A 404 answer means the song is unknown. Records carry plain lyrics,
synced (LRC) lyrics, or both; synced-only records are converted to plain
text. Instrumental records count as "not found".
"""

import requests

from lyrics_explorer.core.config import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, ProxyConfig
from lyrics_explorer.core.exceptions import ProviderError
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.lyrics.base import Lyrics
from lyrics_explorer.utils import strip_lrc_timestamps

logger = get_logger(__name__)


LRCLIB_BASE_URL = "https://lrclib.net"


class LrcLibProvider:
    """
    Looks lyrics up on LRCLIB.

    Attributes:
        name: "lrclib"
        session: requests.Session carrying the User-Agent and proxy settings.

    Example:
        provider = LrcLibProvider(proxy=ProxyConfig("proxy.local", 3128))
        lyrics = provider.lookup("Queen", "Bohemian Rhapsody")
    """

    name = "lrclib"

    def __init__(
        self,
        base_url: str = LRCLIB_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        proxy: ProxyConfig | None = None,
        session: requests.Session | None = None
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": user_agent})
        if proxy is not None:
            self.session.proxies.update(proxy.as_requests_proxies())

    def lookup(self, artist: str, title: str) -> Lyrics | None:
        """
        Fetch the lyrics of artist/title from LRCLIB.

        Returns:
            Lyrics, or None if LRCLIB has no (or only instrumental) record.

        Raises:
            ProviderError: On network errors, non-404 HTTP errors or an
                           unparsable answer.
        """
        params = {"artist_name": artist, "track_name": title}
        logger.debug(f"LRCLIB query: {artist} - {title}")

        try:
            response = self.session.get(
                f"{self.base_url}/api/get", params=params, timeout=self.timeout
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise ProviderError(
                f"LRCLIB request failed: {e}",
                details={"provider": self.name, "artist": artist, "title": title}
            ) from e
        except ValueError as e:
            raise ProviderError(
                f"LRCLIB returned an invalid answer: {e}",
                details={"provider": self.name, "artist": artist, "title": title}
            ) from e

        if not isinstance(data, dict):
            raise ProviderError(
                "LRCLIB returned an unexpected answer",
                details={"provider": self.name, "artist": artist, "title": title}
            )

        if data.get("instrumental"):
            logger.debug(f"LRCLIB record is instrumental: {artist} - {title}")
            return None

        plain = (data.get("plainLyrics") or "").strip()
        if not plain:
            plain = strip_lrc_timestamps(data.get("syncedLyrics") or "")

        if not plain:
            return None

        return Lyrics(text=plain, source=self.name)
