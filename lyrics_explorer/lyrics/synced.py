"""
syncedlyrics provider.

The syncedlyrics library queries several public sources (Musixmatch,
LRCLIB, NetEase, Megalobiz...) for a free text search term and returns
the first lyrics it finds. Only plain lyrics are requested, since
timestamps would end up in the tag.

syncedlyrics opens its own HTTP connections, so proxy settings cannot be
applied to it.
"""

import syncedlyrics

from lyrics_explorer.core.config import ProxyConfig
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.lyrics.base import Lyrics
from lyrics_explorer.utils import strip_lrc_timestamps

logger = get_logger(__name__)


class SyncedLyricsProvider:
    """
    Looks lyrics up through the syncedlyrics library.

    Attributes:
        name: "syncedlyrics"
        sources: Optional list of syncedlyrics backends to restrict the search to.
    """

    name = "syncedlyrics"

    def __init__(
        self,
        proxy: ProxyConfig | None = None,
        sources: list[str] | None = None
    ) -> None:
        self.sources = sources
        if proxy is not None:
            logger.warning("syncedlyrics does not support proxies: connecting directly")

    def lookup(self, artist: str, title: str) -> Lyrics | None:
        """
        Search "<artist> <title>" and return the plain lyrics.

        Returns:
            Lyrics, or None when no backend has the song.
        """
        search_term = f"{artist} {title}"
        logger.debug(f"syncedlyrics query: {search_term}")

        result = syncedlyrics.search(search_term, plain_only=True, providers=self.sources)
        if not result:
            return None

        # Some backends ignore plain_only and answer with LRC anyway
        text = strip_lrc_timestamps(result) if result.lstrip().startswith("[") else result.strip()
        if not text:
            return None

        return Lyrics(text=text, source=self.name)
