"""
Music library processing for lyrics-explorer.

    - walker: depth-first traversal of the library
    - tags: mutagen based tag access (artist, title, lyrics)
    - resolver: per-file lyrics resolution (fix and search modes)
    - sinks: notification receivers
    - explorer: runs the resolver over the library and counts outcomes
"""

from lyrics_explorer.library.explorer import ExplorationStats, LibraryExplorer
from lyrics_explorer.library.resolver import (
    LyricsResolver,
    ResolutionMode,
    ResolutionOutcome,
    ResolutionStatus,
    Track,
)
from lyrics_explorer.library.sinks import LoggingSink, OutputSink
from lyrics_explorer.library.tags import TagFields, TagFile
from lyrics_explorer.library.walker import LibraryWalker

__all__ = [
    "ExplorationStats",
    "LibraryExplorer",
    "LibraryWalker",
    "LoggingSink",
    "LyricsResolver",
    "OutputSink",
    "ResolutionMode",
    "ResolutionOutcome",
    "ResolutionStatus",
    "TagFields",
    "TagFile",
    "Track",
]
