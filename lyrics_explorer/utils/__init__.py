"""
Utility functions for lyrics-explorer.

    - Lyrics text cleanup for the different provider formats
    - File system helpers used by the library walker

Usage:
    from lyrics_explorer.utils import strip_lrc_timestamps, is_hidden
"""

import re
from pathlib import Path


# Leading LRC tags: timestamps ([01:23.45]) and metadata ([ar: Artist])
_LRC_TAG = re.compile(r"^\s*\[[^\]]*\]")

# Genius page chrome that lyricsgenius leaves in the text
_GENIUS_HEADER_MARKER = "Lyrics"
_GENIUS_EMBED_FOOTER = re.compile(r"\d*\s*Embed\s*$")
_GENIUS_SUGGESTIONS = re.compile(r"You might also like(?=\S)")


def strip_lrc_timestamps(lrc: str) -> str:
    """
    Derive plain lyrics from synced (LRC) lyrics.

    Removes every leading [....] block (timestamps or metadata tags) from
    each line and drops lines left empty.

    Example:
        strip_lrc_timestamps("[00:12.00]Hello\\n[00:15.30]World")  # "Hello\\nWorld"
    """
    out_lines: list[str] = []
    for line in lrc.splitlines():
        while _LRC_TAG.match(line):
            line = _LRC_TAG.sub("", line, count=1)
        line = line.strip()
        if line:
            out_lines.append(line)
    return "\n".join(out_lines)


def clean_genius_lyrics(lyrics: str) -> str:
    """
    Remove the page header and embed footer Genius adds around lyrics.

    lyricsgenius returns the text as scraped, e.g.:

        "Bohemian Rhapsody Lyrics[Intro]\\nIs this the real life?...\\n123Embed"

    The section headers ([Intro], [Chorus]) are part of the lyrics and kept.
    """
    if not lyrics:
        return ""

    # Only the first line can carry the "<N Contributors><Title> Lyrics" header
    first_line, separator, rest = lyrics.partition("\n")
    marker = first_line.find(_GENIUS_HEADER_MARKER)
    if marker != -1:
        first_line = first_line[marker + len(_GENIUS_HEADER_MARKER):]
    cleaned = first_line + separator + rest

    cleaned = _GENIUS_EMBED_FOOTER.sub("", cleaned)
    cleaned = _GENIUS_SUGGESTIONS.sub("\n", cleaned)
    return cleaned.strip()


def is_hidden(path: Path) -> bool:
    """Return True for dot-files and dot-directories (".git", ".DS_Store")."""
    return path.name.startswith(".")
