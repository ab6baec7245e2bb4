"""
Library exploration.

LibraryExplorer feeds every file found by the walker to the resolver, one
at a time, and counts the outcomes. It is the entry point used by the CLI:

    explorer = LibraryExplorer.from_config(config, Path("~/Music"), ResolutionMode.SEARCH)
    stats = explorer.explore()
    print(f"{stats.found} files got new lyrics")
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from lyrics_explorer.core.config import Config
from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.library.resolver import (
    LyricsResolver,
    ResolutionMode,
    ResolutionOutcome,
    ResolutionStatus,
)
from lyrics_explorer.library.sinks import LoggingSink, OutputSink
from lyrics_explorer.library.walker import LibraryWalker
from lyrics_explorer.lyrics.alternate_names import AlternateNames
from lyrics_explorer.lyrics.filters import BadSentenceFilter
from lyrics_explorer.lyrics.providers import build_providers

logger = get_logger(__name__)


@dataclass
class ExplorationStats:
    """
    Counters of one library run.

    Attributes:
        total: Files processed.
        found: Files that got lyrics from a provider.
        not_found: Files left without usable lyrics (field cleared).
        kept: Files that already had usable lyrics.
        rewritten: Files rewritten in fix mode.
        errors: Files aborted by an error.
    """
    total: int = 0
    found: int = 0
    not_found: int = 0
    kept: int = 0
    rewritten: int = 0
    errors: int = 0

    def record(self, outcome: ResolutionOutcome) -> None:
        self.total += 1
        if outcome.status is ResolutionStatus.FOUND:
            self.found += 1
        elif outcome.status is ResolutionStatus.NOT_FOUND:
            self.not_found += 1
        elif outcome.status is ResolutionStatus.KEPT:
            self.kept += 1
        elif outcome.status is ResolutionStatus.REWRITTEN:
            self.rewritten += 1
        else:
            self.errors += 1

    @property
    def found_rate(self) -> float:
        """Share of searched files (found + not found) that got lyrics, 0.0 to 1.0."""
        searched = self.found + self.not_found
        if searched == 0:
            return 0.0
        return self.found / searched


class LibraryExplorer:
    """
    Runs the resolver over a whole library.

    Attributes:
        walker: Source of the files to process.
        resolver: Per-file resolution.
        mode: FIX or SEARCH, the same for every file.
        show_progress: Display a tqdm file counter on the console.
    """

    def __init__(
        self,
        walker: LibraryWalker,
        resolver: LyricsResolver,
        mode: ResolutionMode = ResolutionMode.SEARCH,
        show_progress: bool = True
    ) -> None:
        self.walker = walker
        self.resolver = resolver
        self.mode = mode
        self.show_progress = show_progress

    @classmethod
    def from_config(
        cls,
        config: Config,
        root: Path,
        mode: ResolutionMode = ResolutionMode.SEARCH,
        sinks: Sequence[OutputSink] | None = None,
        show_progress: bool = True
    ) -> "LibraryExplorer":
        """
        Assemble an explorer from the configuration.

        Loads the alternate names and bad sentences resources and builds
        the providers. In fix mode no provider is needed, so none is built.

        Raises:
            ResourceError: If a resource file cannot be loaded.
            ConfigError: If no provider can be built in search mode.
        """
        alternate_names = AlternateNames.load(config.resources.alternate_names)
        bad_sentences = BadSentenceFilter.load(config.resources.bad_sentences)
        providers = build_providers(config) if mode is ResolutionMode.SEARCH else []

        resolver = LyricsResolver(
            providers=providers,
            alternate_names=alternate_names,
            bad_sentences=bad_sentences,
            sinks=[LoggingSink()] if sinks is None else sinks,
        )
        return cls(LibraryWalker(root), resolver, mode, show_progress)

    def explore(self) -> ExplorationStats:
        """
        Process every file of the library.

        Returns:
            ExplorationStats for the run.

        Raises:
            OSError: If a directory cannot be listed. Files processed up to
                     that point keep their changes.
        """
        stats = ExplorationStats()
        logger.info(f"Exploring {self.walker.root} ({self.mode.value} mode)")

        files = tqdm(
            self.walker.iter_files(),
            desc="Files",
            unit="file",
            disable=not self.show_progress,
            leave=False,
        )
        try:
            for path in files:
                outcome = self.resolver.resolve(path, self.mode)
                stats.record(outcome)
        finally:
            files.close()

        logger.debug(f"Exploration finished: {stats}")
        return stats
