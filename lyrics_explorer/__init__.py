"""
lyrics-explorer: Fill in the missing lyrics of a local music library.

The explorer walks a music directory, reads the tags of every audio file
and completes the lyrics tag of the files that have none (or only a
placeholder text) using online lyrics providers.

Architecture:
    For every file found by the walker, the resolver:

    1. Reads artist, title and lyrics from the tag (mutagen)
    2. Keeps the lyrics if they are usable (non-blank, no placeholder text)
    3. Otherwise, for each spelling of the artist name (alternate names
       table), asks each provider in order for the lyrics
    4. Writes the first answer into the tag and saves the file
    5. Clears the field and reports the file when nothing usable is found

    Fix mode skips the lookup and rewrites the existing lyrics unchanged.

Modules:
    core/       - Configuration, logging, exceptions
    lyrics/     - Lyrics providers, alternate names, bad sentences
    library/    - Walker, tag access, resolver, sinks, explorer
    utils/      - Text and file system helpers
    resources/  - Default alternate names and bad sentences
    cli.py      - Command-line interface

Usage:
    Command Line:
        lyrics-explorer ~/Music
        lyrics-explorer ~/Music --fix
        lyrics-explorer ~/Music --proxy-host proxy.local --proxy-port 3128

    Python API:
        from lyrics_explorer.core import load_config, setup_logging
        from lyrics_explorer.library import LibraryExplorer, ResolutionMode

        config = load_config()
        setup_logging(config.logging.directory)

        explorer = LibraryExplorer.from_config(config, Path("~/Music").expanduser())
        stats = explorer.explore()

Dependencies:
    - mutagen: Audio tag reading and writing
    - requests: LRCLIB API client
    - lyricsgenius: Genius API client
    - syncedlyrics: Multi-source lyrics search
    - rich-click: CLI and colors
    - tqdm: Progress counter
    - pyyaml: Configuration and alternate names parsing
    - python-dotenv: .env support for the Genius token
"""

__version__ = "0.1.0"
__author__ = "lyrics-explorer"
__license__ = "MIT"
