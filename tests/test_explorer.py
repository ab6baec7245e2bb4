"""Test library exploration"""

import pytest
from pathlib import Path
from unittest.mock import patch

from conftest import FakeProvider
from lyrics_explorer.core.config import default_config
from lyrics_explorer.library.explorer import ExplorationStats, LibraryExplorer
from lyrics_explorer.library.resolver import (
    LyricsResolver,
    ResolutionMode,
    ResolutionOutcome,
    ResolutionStatus,
)
from lyrics_explorer.library.sinks import LoggingSink
from lyrics_explorer.library.walker import LibraryWalker
from lyrics_explorer.lyrics.alternate_names import AlternateNames


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


class TestExplorationStats:
    """Test run counters"""

    def test_record_counts_each_status(self):
        """Test every outcome status lands in its counter"""
        stats = ExplorationStats()
        for status in [
            ResolutionStatus.FOUND,
            ResolutionStatus.FOUND,
            ResolutionStatus.NOT_FOUND,
            ResolutionStatus.KEPT,
            ResolutionStatus.REWRITTEN,
            ResolutionStatus.ERROR,
        ]:
            stats.record(ResolutionOutcome(status, Path("song.mp3")))

        assert stats.total == 6
        assert stats.found == 2
        assert stats.not_found == 1
        assert stats.kept == 1
        assert stats.rewritten == 1
        assert stats.errors == 1

    def test_found_rate(self):
        """Test found rate only considers searched files"""
        assert ExplorationStats().found_rate == 0.0
        assert ExplorationStats(total=5, found=3, not_found=1, kept=1).found_rate == 0.75


class TestLibraryExplorer:
    """Test the walker/resolver pipeline"""

    def test_end_to_end_hidden_directory_and_fallback(self, temp_dir, fake_library, bad_sentences, sink):
        """Test hidden directory skipped and second provider used after a miss"""
        song = touch(temp_dir / "a.mp3")
        hidden = touch(temp_dir / ".hidden" / "b.mp3")
        tag_file = fake_library.add(song, "Foo", "Bar", "")
        fake_library.add(hidden, "Foo", "Hidden", "")

        p1 = FakeProvider("p1")
        p2 = FakeProvider("p2", {("Foo", "Bar"): "Real lyrics"})
        resolver = LyricsResolver(
            providers=[p1, p2],
            alternate_names=AlternateNames(),
            bad_sentences=bad_sentences,
            sinks=[sink],
            open_tags=fake_library.open,
        )
        explorer = LibraryExplorer(LibraryWalker(temp_dir), resolver, show_progress=False)

        stats = explorer.explore()

        assert fake_library.opened == [song]
        assert tag_file.lyrics == "Real lyrics"
        assert sink.successes == ["Lyrics found for Bar by Foo"]
        assert p1.calls == [("Foo", "Bar")]
        assert p2.calls == [("Foo", "Bar")]
        assert stats.total == 1
        assert stats.found == 1

    def test_errors_do_not_stop_the_walk(self, temp_dir, fake_library, bad_sentences, sink):
        """Test a broken file is reported and the next file is still processed"""
        touch(temp_dir / "01 broken.mp3")
        good = touch(temp_dir / "02 good.mp3")
        fake_library.add(good, "Foo", "Bar", "")

        provider = FakeProvider("p1", {("Foo", "Bar"): "Real lyrics"})
        resolver = LyricsResolver(
            [provider], AlternateNames(), bad_sentences, [sink], open_tags=fake_library.open
        )
        explorer = LibraryExplorer(LibraryWalker(temp_dir), resolver, show_progress=False)

        stats = explorer.explore()

        assert stats.errors == 1
        assert stats.found == 1
        assert sink.failures == [f"Error getting lyrics for {temp_dir / '01 broken.mp3'}"]
        assert sink.successes == ["Lyrics found for Bar by Foo"]

    def test_fix_mode_applies_to_every_file(self, temp_dir, fake_library, bad_sentences, sink):
        """Test fix mode rewrites every file without lookup"""
        first = fake_library.add(touch(temp_dir / "a.mp3"), "Foo", "A", "Hello")
        second = fake_library.add(touch(temp_dir / "b.flac"), "Foo", "B", "")
        provider = FakeProvider("p1")
        resolver = LyricsResolver(
            [provider], AlternateNames(), bad_sentences, [sink], open_tags=fake_library.open
        )
        explorer = LibraryExplorer(
            LibraryWalker(temp_dir), resolver, ResolutionMode.FIX, show_progress=False
        )

        stats = explorer.explore()

        assert stats.rewritten == 2
        assert first.commits == ["Hello"]
        assert second.commits == [""]
        assert provider.calls == []

    def test_unreadable_root_propagates(self, temp_dir, fake_library, bad_sentences):
        """Test a missing library root raises OSError"""
        resolver = LyricsResolver([], AlternateNames(), bad_sentences, open_tags=fake_library.open)
        explorer = LibraryExplorer(
            LibraryWalker(temp_dir / "missing"), resolver, show_progress=False
        )

        with pytest.raises(OSError):
            explorer.explore()

    def test_from_config_uses_packaged_resources(self, temp_dir, no_genius_token):
        """Test assembly from the default configuration"""
        with patch("lyrics_explorer.library.explorer.build_providers") as mock_build:
            mock_build.return_value = [FakeProvider("p1")]
            explorer = LibraryExplorer.from_config(default_config(), temp_dir, show_progress=False)

        assert explorer.walker.root == temp_dir
        assert explorer.mode is ResolutionMode.SEARCH
        assert len(explorer.resolver.alternate_names) > 0
        assert len(explorer.resolver.bad_sentences) > 0
        assert [p.name for p in explorer.resolver.providers] == ["p1"]
        assert isinstance(explorer.resolver.sinks[0], LoggingSink)

    def test_from_config_fix_mode_builds_no_provider(self, temp_dir, no_genius_token):
        """Test fix mode does not need any provider"""
        with patch("lyrics_explorer.library.explorer.build_providers") as mock_build:
            explorer = LibraryExplorer.from_config(default_config(), temp_dir, ResolutionMode.FIX)

        mock_build.assert_not_called()
        assert explorer.resolver.providers == ()
