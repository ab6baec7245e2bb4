"""
Lyrics lookup for lyrics-explorer.

    - base: Lyrics container and the LyricsProvider protocol
    - lrclib, genius, synced: one provider per lyrics source
    - providers: builds the configured providers in order
    - alternate_names: artist name spellings to try
    - filters: usable-lyrics check (bad sentences)
"""

from lyrics_explorer.lyrics.alternate_names import AlternateNames
from lyrics_explorer.lyrics.base import Lyrics, LyricsProvider
from lyrics_explorer.lyrics.filters import BadSentenceFilter
from lyrics_explorer.lyrics.genius import GeniusProvider
from lyrics_explorer.lyrics.lrclib import LrcLibProvider
from lyrics_explorer.lyrics.providers import build_providers
from lyrics_explorer.lyrics.synced import SyncedLyricsProvider

__all__ = [
    "AlternateNames",
    "BadSentenceFilter",
    "GeniusProvider",
    "LrcLibProvider",
    "Lyrics",
    "LyricsProvider",
    "SyncedLyricsProvider",
    "build_providers",
]
