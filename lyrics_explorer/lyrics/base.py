"""
Common types shared by the lyrics providers.

A provider is any object with a ``name`` and a ``lookup(artist, title)``
method. Returning None is the normal "not found" answer and lets the
resolver move on to the next provider; any exception raised by lookup()
is an error for the file being processed.

Adding a source means writing a new class that satisfies LyricsProvider
and registering it in lyrics_explorer.lyrics.providers.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class Lyrics:
    """
    Container for fetched lyrics.

    Attributes:
        text: The plain lyrics text as it will be written into the tag.
        source: Name of the provider that returned the lyrics.
                Example: "lrclib", "genius", "syncedlyrics"
    """

    text: str
    source: str


@runtime_checkable
class LyricsProvider(Protocol):
    """
    A lyrics source queried by the resolver.

    Attributes:
        name: Short provider name used in logs and in providers.order.
    """

    name: str

    def lookup(self, artist: str, title: str) -> Lyrics | None:
        """
        Look up the lyrics of a song.

        Args:
            artist: Artist name (possibly an alternate spelling).
            title: Song title as read from the tag.

        Returns:
            Lyrics if the source has the song, None if it does not.

        Raises:
            ProviderError: On network errors or unexpected responses.
        """
        ...
