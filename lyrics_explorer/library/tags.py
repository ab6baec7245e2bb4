"""
Audio tag access.

TagFile wraps a mutagen file and exposes the three fields the resolver
works with: artist, title and (unsynchronized) lyrics.

Supported tag containers and fields:
    - ID3 (MP3, AIFF, WAV): TPE1, TIT2, USLT
    - MP4 (M4A, AAC, ALAC): \\xa9ART, \\xa9nam, \\xa9lyr
    - Vorbis comments (FLAC, Ogg Vorbis, Opus): ARTIST, TITLE, LYRICS
    - APEv2 (Monkey's Audio, WavPack, Musepack): Artist, Title, Lyrics

Writing lyrics only changes the in-memory tag; commit() saves the file.
An empty lyrics text removes the field instead of storing an empty value.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import mutagen
from mutagen.apev2 import APEv2
from mutagen.id3 import ID3, USLT, Encoding
from mutagen.mp4 import MP4Tags
from mutagen._vorbis import VCommentDict

from lyrics_explorer.core.exceptions import TagReadError, TagWriteError
from lyrics_explorer.core.logger import get_logger

logger = get_logger(__name__)


# ID3 requires a 3-letter language code for USLT frames
ID3_LYRICS_LANGUAGE = "eng"

MP4_TAGS = {
    "artist": "\xa9ART",
    "title": "\xa9nam",
    "lyrics": "\xa9lyr",
}

VORBIS_TAGS = {
    "artist": "ARTIST",
    "title": "TITLE",
    "lyrics": "LYRICS",
}

# Written by foobar2000 and Mp3tag, read as a fallback
VORBIS_LEGACY_LYRICS = "UNSYNCEDLYRICS"

APE_TAGS = {
    "artist": "Artist",
    "title": "Title",
    "lyrics": "Lyrics",
}


@dataclass(frozen=True)
class TagFields:
    """
    Snapshot of the fields read from a tag container.

    Missing fields are read as empty strings.
    """
    artist: str
    title: str
    lyrics: str


class TagFile:
    """
    Tag access for one audio file.

    Attributes:
        path: The audio file.
        audio: The mutagen file object.

    Example:
        tag_file = TagFile.open(Path("song.mp3"))
        fields = tag_file.read()
        if fields is not None and not fields.lyrics:
            tag_file.set_lyrics("Is this the real life?")
            tag_file.commit()
    """

    def __init__(self, path: Path, audio: Any) -> None:
        self.path = path
        self.audio = audio

    @classmethod
    def open(cls, path: Path) -> "TagFile":
        """
        Open an audio file.

        Raises:
            TagReadError: If the file cannot be read or is not an audio
                          file mutagen recognizes.
        """
        try:
            audio = mutagen.File(path)
        except (mutagen.MutagenError, OSError) as e:
            raise TagReadError(
                f"Cannot read audio file: {e}",
                details={"file_path": str(path), "original_error": str(e)}
            ) from e

        if audio is None:
            raise TagReadError(
                f"Unsupported or unrecognized audio file: {path}",
                details={"file_path": str(path)}
            )

        return cls(path, audio)

    @property
    def has_tags(self) -> bool:
        return self.audio.tags is not None

    def read(self) -> TagFields | None:
        """
        Read artist, title and lyrics.

        Returns:
            TagFields, or None if the file has no tag container at all.

        Raises:
            TagReadError: If the tag container type is not supported.
        """
        tags = self.audio.tags
        if tags is None:
            return None

        if isinstance(tags, ID3):
            return _read_id3(tags)
        if isinstance(tags, MP4Tags):
            return _read_mapping(tags, MP4_TAGS)
        if isinstance(tags, VCommentDict):
            fields = _read_mapping(tags, VORBIS_TAGS)
            if not fields.lyrics:
                legacy = _first_text(tags.get(VORBIS_LEGACY_LYRICS))
                fields = TagFields(fields.artist, fields.title, legacy)
            return fields
        if isinstance(tags, APEv2):
            return _read_mapping(tags, APE_TAGS)

        raise TagReadError(
            f"Unsupported tag format: {type(tags).__name__}",
            details={"file_path": str(self.path)}
        )

    def set_lyrics(self, text: str) -> None:
        """
        Replace the lyrics in the tag. Nothing is written until commit().

        A tag container is created when the file has none.

        Raises:
            TagWriteError: If no tag container can be created or its type
                           is not supported.
        """
        if self.audio.tags is None:
            try:
                self.audio.add_tags()
            except (mutagen.MutagenError, NotImplementedError) as e:
                raise TagWriteError(
                    f"Cannot create a tag for {self.path}: {e}",
                    details={"file_path": str(self.path), "original_error": str(e)}
                ) from e
            logger.debug(f"Created tag container for {self.path}")

        tags = self.audio.tags

        if isinstance(tags, ID3):
            tags.delall("USLT")
            if text:
                tags.add(USLT(encoding=Encoding.UTF8, lang=ID3_LYRICS_LANGUAGE, desc="", text=text))
        elif isinstance(tags, MP4Tags):
            _write_mapping(tags, MP4_TAGS["lyrics"], [text] if text else None)
        elif isinstance(tags, VCommentDict):
            _write_mapping(tags, VORBIS_LEGACY_LYRICS, None)
            _write_mapping(tags, VORBIS_TAGS["lyrics"], [text] if text else None)
        elif isinstance(tags, APEv2):
            _write_mapping(tags, APE_TAGS["lyrics"], text or None)
        else:
            raise TagWriteError(
                f"Unsupported tag format: {type(tags).__name__}",
                details={"file_path": str(self.path)}
            )

    def commit(self) -> None:
        """
        Save the tag to the file.

        Raises:
            TagWriteError: If the file cannot be written.
        """
        try:
            self.audio.save()
        except (mutagen.MutagenError, OSError) as e:
            raise TagWriteError(
                f"Cannot save tag: {e}",
                details={"file_path": str(self.path), "original_error": str(e)}
            ) from e


def _read_id3(tags: ID3) -> TagFields:
    uslt_frames = tags.getall("USLT")
    lyrics = uslt_frames[0].text if uslt_frames else ""
    return TagFields(
        artist=_first_text(tags.get("TPE1")),
        title=_first_text(tags.get("TIT2")),
        lyrics=lyrics or "",
    )


def _read_mapping(tags: Any, keys: dict[str, str]) -> TagFields:
    return TagFields(
        artist=_first_text(tags.get(keys["artist"])),
        title=_first_text(tags.get(keys["title"])),
        lyrics=_first_text(tags.get(keys["lyrics"])),
    )


def _write_mapping(tags: Any, key: str, value: Any) -> None:
    if value is None:
        if key in tags:
            del tags[key]
    else:
        tags[key] = value


def _first_text(value: Any) -> str:
    """
    Extract the first text value of a tag field.

    ID3 text frames and Vorbis/MP4 fields hold lists, APEv2 a single value
    (multiple values are separated by NUL bytes).
    """
    if value is None:
        return ""
    if hasattr(value, "text"):
        value = value.text
    if isinstance(value, (list, tuple)):
        return str(value[0]) if value else ""
    return str(value).split("\x00")[0]
