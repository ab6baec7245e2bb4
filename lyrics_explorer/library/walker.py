"""
Music library traversal.

The walker yields every regular file below a root directory, depth-first,
one at a time. Hidden entries (name starting with '.') are skipped: hidden
files are not yielded and hidden directories are never entered.

Files are not filtered by extension; files that are not audio are
rejected by TagFile.open().
"""

from pathlib import Path
from typing import Iterator

from lyrics_explorer.core.logger import get_logger
from lyrics_explorer.utils import is_hidden

logger = get_logger(__name__)


class LibraryWalker:
    """
    Depth-first, lazy traversal of a music library.

    Siblings are visited in name order so that runs are reproducible.

    Example:
        for path in LibraryWalker(Path("~/Music").expanduser()).iter_files():
            print(path)
    """

    def __init__(self, root: Path) -> None:
        self.root = root

    def iter_files(self) -> Iterator[Path]:
        """
        Yield the files of the library.

        A root that is itself a file is yielded as is.

        Raises:
            OSError: If a directory cannot be listed. The generator stops
                     at that point.
        """
        if self.root.is_file():
            yield self.root
            return
        visited: set[tuple[int, int]] = set()
        yield from self._walk(self.root, visited)

    def _walk(self, directory: Path, visited: set[tuple[int, int]]) -> Iterator[Path]:
        # Directory symlinks are followed; (device, inode) stops loops
        stat = directory.stat()
        visited.add((stat.st_dev, stat.st_ino))

        for entry in sorted(directory.iterdir(), key=lambda p: p.name):
            if is_hidden(entry):
                logger.debug(f"Skipping hidden entry: {entry}")
                continue
            if entry.is_dir():
                entry_stat = entry.stat()
                if (entry_stat.st_dev, entry_stat.st_ino) in visited:
                    logger.debug(f"Skipping already visited directory: {entry}")
                    continue
                yield from self._walk(entry, visited)
            elif entry.is_file():
                yield entry
            else:
                logger.debug(f"Skipping special file or broken link: {entry}")
