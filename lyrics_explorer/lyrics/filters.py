"""
Usable-lyrics check.

Lyrics sites answer unknown songs with placeholder pages ("We do not have
the lyrics for ... yet") and some taggers leave boilerplate behind. Text
containing one of these known phrases must never be kept in a file.

The phrase list is a plain text file, one phrase per line. Blank lines and
lines starting with '#' are ignored. Phrases are matched verbatim,
case-sensitive, as substrings.
"""

from pathlib import Path
from typing import Iterable

from lyrics_explorer.core.exceptions import ResourceError
from lyrics_explorer.core.logger import get_logger

logger = get_logger(__name__)


class BadSentenceFilter:
    """
    Decides whether a lyrics text is worth keeping.

    Example:
        bad = BadSentenceFilter(["Lyrics not found"])
        bad.is_usable("")                               # False
        bad.is_usable("Lyrics not found for this song")  # False
        bad.is_usable("Is this the real life?")          # True
    """

    def __init__(self, sentences: Iterable[str] = ()) -> None:
        self._sentences = frozenset(sentence for sentence in sentences if sentence)

    def __len__(self) -> int:
        return len(self._sentences)

    @property
    def sentences(self) -> frozenset[str]:
        return self._sentences

    def is_usable(self, lyrics: str) -> bool:
        """
        Return True if lyrics are not blank and free of every bad sentence.

        Applies to lyrics already in a file as well as to freshly fetched ones.
        """
        if not lyrics or lyrics.isspace():
            return False
        return not any(sentence in lyrics for sentence in self._sentences)

    @classmethod
    def load(cls, path: Path) -> "BadSentenceFilter":
        """
        Load the phrases from a text file.

        Raises:
            ResourceError: If the file cannot be read.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except OSError as e:
            raise ResourceError(
                f"Failed to read bad sentences file: {e}",
                details={"file_path": str(path), "original_error": str(e)}
            ) from e

        sentences = [
            line for line in lines
            if line.strip() and not line.lstrip().startswith("#")
        ]

        logger.debug(f"Loaded {len(sentences)} bad sentences from {path}")
        return cls(sentences)
