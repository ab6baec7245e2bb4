"""Test configuration and fixtures"""

import pytest
import tempfile
from pathlib import Path

from lyrics_explorer.core.exceptions import TagReadError
from lyrics_explorer.library.tags import TagFields
from lyrics_explorer.lyrics.alternate_names import AlternateNames
from lyrics_explorer.lyrics.base import Lyrics
from lyrics_explorer.lyrics.filters import BadSentenceFilter


class FakeProvider:
    """Provider answering from a {(artist, title): text} table"""

    def __init__(self, name, answers=None, error=None, call_log=None):
        self.name = name
        self.answers = answers or {}
        self.error = error
        self.calls = []
        self.call_log = call_log

    def lookup(self, artist, title):
        self.calls.append((artist, title))
        if self.call_log is not None:
            self.call_log.append((self.name, artist, title))
        if self.error is not None:
            raise self.error
        text = self.answers.get((artist, title))
        if text is None:
            return None
        return Lyrics(text=text, source=self.name)


class FakeTagFile:
    """In-memory TagFile: records every write and commit"""

    def __init__(self, path, fields, commit_error=None):
        self.path = path
        self.fields = fields
        self.lyrics = fields.lyrics if fields is not None else None
        self.writes = []
        self.commits = []
        self.commit_error = commit_error

    def read(self):
        return self.fields

    def set_lyrics(self, text):
        self.writes.append(text)
        self.lyrics = text

    def commit(self):
        if self.commit_error is not None:
            raise self.commit_error
        self.commits.append(self.lyrics)


class FakeLibrary:
    """Tag opener backed by FakeTagFile objects"""

    def __init__(self):
        self.files = {}
        self.opened = []

    def add(self, path, artist="", title="", lyrics="", **kwargs):
        tag_file = FakeTagFile(path, TagFields(artist, title, lyrics), **kwargs)
        self.files[path] = tag_file
        return tag_file

    def add_untagged(self, path):
        tag_file = FakeTagFile(path, None)
        self.files[path] = tag_file
        return tag_file

    def open(self, path):
        self.opened.append(path)
        if path not in self.files:
            raise TagReadError(f"Unsupported or unrecognized audio file: {path}")
        return self.files[path]


class RecordingSink:
    """Sink keeping every notification"""

    def __init__(self, events=None, name="sink"):
        self.name = name
        self.successes = []
        self.failures = []
        self.events = events if events is not None else []

    def on_success(self, message):
        self.successes.append(message)
        self.events.append((self.name, "success", message))

    def on_failure(self, message):
        self.failures.append(message)
        self.events.append((self.name, "failure", message))


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def fake_library():
    """Empty in-memory tag store"""
    return FakeLibrary()


@pytest.fixture
def sink():
    """Sink recording the resolver notifications"""
    return RecordingSink()


@pytest.fixture
def bad_sentences():
    """Filter with a couple of placeholder phrases"""
    return BadSentenceFilter(["We do not have the lyrics for", "Lyrics not found"])


@pytest.fixture
def no_alternate_names():
    """Empty alternate names table"""
    return AlternateNames()


@pytest.fixture
def no_genius_token(monkeypatch):
    """Make sure no Genius token leaks in from the environment"""
    monkeypatch.delenv("GENIUS_ACCESS_TOKEN", raising=False)
