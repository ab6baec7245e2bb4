"""
Per-file lyrics resolution.

LyricsResolver decides, for one audio file, what ends up in its lyrics
tag. It runs in one of two modes:

    FIX     Rewrite the lyrics already in the file, unchanged. Used to
            normalize the tag (encoding, frame layout) without any lookup.

    SEARCH  Keep usable lyrics already in the file. Otherwise try every
            spelling of the artist name against every provider, in order,
            and store the first lyrics returned. If the final text is not
            usable the field is cleared and the file is reported.

Search order for an artist with variants [V1, V2] and providers [P1, P2]:

    P1(V1, title) -> P2(V1, title) -> P1(V2, title) -> P2(V2, title)

The first provider answer ends the search. Providers answering None are
skipped silently; any exception aborts the file, which is reported as an
error. Errors never escape resolve().
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Sequence

from lyrics_explorer.core.exceptions import MissingTagError
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.library.sinks import OutputSink
from lyrics_explorer.library.tags import TagFile
from lyrics_explorer.lyrics.alternate_names import AlternateNames
from lyrics_explorer.lyrics.base import Lyrics, LyricsProvider
from lyrics_explorer.lyrics.filters import BadSentenceFilter

logger = get_logger(__name__)


class ResolutionMode(Enum):
    FIX = "fix"
    SEARCH = "search"


class ResolutionStatus(Enum):
    """
    Result of resolving one file.

    FOUND, NOT_FOUND and ERROR are reported to the sinks; KEPT and
    REWRITTEN are silent and only counted.
    """
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"
    KEPT = "kept"
    REWRITTEN = "rewritten"


@dataclass
class Track:
    """
    The tag fields of one file while it is being resolved.

    Only lyrics change during resolution.
    """
    path: Path
    artist: str
    title: str
    lyrics: str


@dataclass(frozen=True)
class ResolutionOutcome:
    status: ResolutionStatus
    path: Path
    artist: str = ""
    title: str = ""
    source: str | None = None
    error: Exception | None = None


def found_message(track: Track) -> str:
    return f"Lyrics found for {track.title} by {track.artist}"


def not_found_message(track: Track) -> str:
    return f"Lyrics not found for {track.title} by {track.artist}"


def error_message(path: Path) -> str:
    return f"Error getting lyrics for {path}"


class LyricsResolver:
    """
    Resolves the lyrics of one file at a time.

    Attributes:
        providers: Lyrics providers in trial order.
        alternate_names: Artist spellings to try.
        bad_sentences: Usability check for existing and fetched lyrics.
        sinks: Notified, in order, of every reported outcome.
        open_tags: Factory returning the tag accessor of a file.

    Example:
        resolver = LyricsResolver(providers, names, bad_sentences, [LoggingSink()])
        outcome = resolver.resolve(Path("song.mp3"), ResolutionMode.SEARCH)
    """

    def __init__(
        self,
        providers: Sequence[LyricsProvider],
        alternate_names: AlternateNames,
        bad_sentences: BadSentenceFilter,
        sinks: Sequence[OutputSink] = (),
        open_tags: Callable[[Path], TagFile] = TagFile.open
    ) -> None:
        self.providers = tuple(providers)
        self.alternate_names = alternate_names
        self.bad_sentences = bad_sentences
        self.sinks = tuple(sinks)
        self.open_tags = open_tags

    def resolve(self, path: Path, mode: ResolutionMode) -> ResolutionOutcome:
        """
        Resolve the lyrics of one file.

        Never raises: every error is logged, reported to the sinks and
        returned as an ERROR outcome.
        """
        try:
            if mode is ResolutionMode.FIX:
                return self._rewrite(path)
            return self._search(path)
        except Exception as e:
            logger.error(f"{error_message(path)}: {e}", exc_info=True)
            self._notify_failure(error_message(path))
            return ResolutionOutcome(ResolutionStatus.ERROR, path, error=e)

    def _rewrite(self, path: Path) -> ResolutionOutcome:
        tag_file = self.open_tags(path)
        fields = tag_file.read()
        if fields is None:
            logger.warning(f"No tag found in {path}: writing empty lyrics")
            track = Track(path, "", "", "")
        else:
            track = Track(path, fields.artist, fields.title, fields.lyrics)

        tag_file.set_lyrics(track.lyrics)
        tag_file.commit()
        logger.debug(f"Rewrote lyrics of {path}")
        return ResolutionOutcome(ResolutionStatus.REWRITTEN, path, track.artist, track.title)

    def _search(self, path: Path) -> ResolutionOutcome:
        tag_file = self.open_tags(path)
        fields = tag_file.read()
        if fields is None:
            raise MissingTagError(
                f"No tag found in {path}",
                details={"file_path": str(path)}
            )
        track = Track(path, fields.artist, fields.title, fields.lyrics)

        hit: Lyrics | None = None
        for variant in self.alternate_names.variants_for(track.artist):
            if self.bad_sentences.is_usable(track.lyrics):
                break
            hit = self._search_providers(variant, track.title)
            if hit is not None:
                track.lyrics = hit.text
                tag_file.set_lyrics(track.lyrics)
                tag_file.commit()
                self._notify_success(found_message(track))
                break

        if not self.bad_sentences.is_usable(track.lyrics):
            track.lyrics = ""
            tag_file.set_lyrics(track.lyrics)
            tag_file.commit()
            self._notify_failure(not_found_message(track))
            return ResolutionOutcome(
                ResolutionStatus.NOT_FOUND, path, track.artist, track.title,
                source=hit.source if hit else None
            )

        if hit is None:
            logger.debug(f"Keeping lyrics already in {path}")
            return ResolutionOutcome(ResolutionStatus.KEPT, path, track.artist, track.title)

        return ResolutionOutcome(
            ResolutionStatus.FOUND, path, track.artist, track.title, source=hit.source
        )

    def _search_providers(self, artist: str, title: str) -> Lyrics | None:
        """Return the first provider answer for artist/title, or None if none has it."""
        for provider in self.providers:
            lyrics = provider.lookup(artist, title)
            if lyrics is not None:
                logger.debug(f"{provider.name} has lyrics for {artist} - {title}")
                return lyrics
            logger.debug(f"{provider.name}: no lyrics for {artist} - {title}")
        return None

    def _notify_success(self, message: str) -> None:
        for sink in self.sinks:
            sink.on_success(message)

    def _notify_failure(self, message: str) -> None:
        for sink in self.sinks:
            sink.on_failure(message)
