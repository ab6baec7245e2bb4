"""
Command-line interface for lyrics-explorer.

This module implements the CLI using Click, exploring a music library
and filling in the missing lyrics of every audio file in it.
rich-click is used for the output colors.

Usage:
    # Search lyrics for every file without usable lyrics
    lyrics-explorer ~/Music

    # Rewrite the lyrics already in the files, without any lookup
    lyrics-explorer ~/Music --fix

    # Go through an HTTP proxy, LRCLIB and Genius only
    lyrics-explorer ~/Music --proxy-host proxy.local --proxy-port 3128 \\
        --providers lrclib,genius

Exit codes:
    0    Library explored (files without lyrics are not an error)
    1    Configuration error or unexpected error
    2    Library path missing or a directory could not be read
    130  Interrupted by the user
"""

import dataclasses
import sys
from pathlib import Path

import rich_click as click

# Configure rich-click for better help formatting
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = ""
click.rich_click.MAX_WIDTH = 100
click.rich_click.OPTION_GROUPS = {
    "lyrics-explorer": [
        {
            "name": "Mode",
            "options": ["--fix"],
        },
        {
            "name": "Lookup Options",
            "options": ["--providers", "--proxy-host", "--proxy-port"],
        },
        {
            "name": "Advanced Options",
            "options": ["--config", "--log-dir", "--no-progress", "--verbose"],
        },
        {
            "name": "Info",
            "options": ["--version", "--help"],
        },
    ],
}

from lyrics_explorer import __version__
from lyrics_explorer.core import (
    Config,
    ConfigError,
    LyricsExplorerError,
    get_logger,
    load_config,
    setup_logging,
    shutdown_logging,
)
from lyrics_explorer.core.config import parse_provider_order, parse_proxy
from lyrics_explorer.library import ExplorationStats, LibraryExplorer, ResolutionMode

logger = get_logger(__name__)


@click.command()
@click.argument(
    "library_path",
    type=click.Path(exists=True, path_type=Path),
    metavar="LIBRARY_PATH"
)
@click.option(
    "--fix",
    is_flag=True,
    help="Rewrite the lyrics already in the files, without searching"
)
@click.option(
    "--providers",
    type=str,
    default=None,
    metavar="<name,name,...>",
    help="Lyrics providers in trial order (lrclib, genius, syncedlyrics)"
)
@click.option(
    "--proxy-host",
    type=str,
    default=None,
    metavar="<host>",
    help="HTTP proxy host for the lyrics providers"
)
@click.option(
    "--proxy-port",
    type=int,
    default=None,
    metavar="<port>",
    help="HTTP proxy port (requires --proxy-host)"
)
@click.option(
    "--config", "config_path",
    type=click.Path(path_type=Path),
    default=None,
    metavar="<config.yaml>",
    help="Configuration file (default: ./config.yaml if present)"
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    metavar="<directory>",
    help="Write log files and the lyrics failures report here"
)
@click.option(
    "--no-progress",
    is_flag=True,
    help="Hide the progress counter"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show debug messages on the console"
)
@click.version_option(__version__, "--version", prog_name="lyrics-explorer")
def cli(
    library_path: Path,
    fix: bool,
    providers: str | None,
    proxy_host: str | None,
    proxy_port: int | None,
    config_path: Path | None,
    log_dir: Path | None,
    no_progress: bool,
    verbose: bool
) -> None:
    """
    lyrics-explorer: Fill in the missing lyrics of a music library.

    Walks LIBRARY_PATH, reads the tags of every audio file and, when a file
    has no usable lyrics, asks the lyrics providers for them, trying the
    alternate spellings of the artist name. Lyrics are written into the
    file tags (MP3, M4A, FLAC, Ogg, Opus, APE).

    \b
    BASIC USAGE:
        lyrics-explorer ~/Music                  # Search missing lyrics
        lyrics-explorer ~/Music --fix            # Rewrite existing lyrics

    \b
    NETWORK:
        lyrics-explorer ~/Music --proxy-host proxy.local --proxy-port 3128
    """
    mode = ResolutionMode.FIX if fix else ResolutionMode.SEARCH

    try:
        config = _load_configuration(config_path, providers, proxy_host, proxy_port, log_dir)

        _setup_logging(config.logging.directory, verbose)
        logger.info("lyrics-explorer starting")

        explorer = LibraryExplorer.from_config(
            config,
            library_path.expanduser().resolve(),
            mode,
            show_progress=not no_progress,
        )
        stats = explorer.explore()

        _print_final_stats(stats, mode)
        logger.info("lyrics-explorer completed successfully")

    except ConfigError as e:
        click.echo(f"Configuration error: {e.message}", err=True)
        sys.exit(1)

    except LyricsExplorerError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error(f"Error: {e.message}", exc_info=True)
        sys.exit(1)

    except OSError as e:
        click.echo(f"Cannot read library: {e}", err=True)
        logger.error(f"Cannot read library: {e}", exc_info=True)
        sys.exit(2)

    except KeyboardInterrupt:
        click.echo("\nInterrupted by user", err=True)
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        logger.exception("Unexpected error")
        sys.exit(1)

    finally:
        shutdown_logging()


def _load_configuration(
    config_path: Path | None,
    providers: str | None,
    proxy_host: str | None,
    proxy_port: int | None,
    log_dir: Path | None
) -> Config:
    """
    Load the configuration and apply the command line overrides.

    Raises:
        ConfigError: If the configuration or an override is invalid.
    """
    config = load_config(config_path)

    if proxy_host is not None or proxy_port is not None:
        proxy = parse_proxy(proxy_host, proxy_port)
        config = dataclasses.replace(
            config, network=dataclasses.replace(config.network, proxy=proxy)
        )

    if providers is not None:
        order = parse_provider_order(providers)
        config = dataclasses.replace(
            config, providers=dataclasses.replace(config.providers, order=order)
        )

    if log_dir is not None:
        config = dataclasses.replace(
            config,
            logging=dataclasses.replace(config.logging, directory=log_dir.expanduser().resolve())
        )

    return config


def _setup_logging(log_dir: Path | None, verbose: bool) -> None:
    """
    Configure logging for the run.

    Raises:
        ConfigError: If the log directory or a log file cannot be created.
    """
    try:
        setup_logging(log_dir, verbose=verbose)
    except OSError as e:
        raise ConfigError(
            f"Cannot create log files in {log_dir}: {e}",
            details={"log_dir": str(log_dir)}
        ) from e


def _print_final_stats(stats: ExplorationStats, mode: ResolutionMode) -> None:
    """
    Print the run summary.

    Output:
        In search mode: files processed, lyrics found, not found, already
        present, errors and the found rate. In fix mode: files processed,
        rewritten and errors.
    """
    logger.info("=" * 60)
    logger.info("FINAL STATISTICS")
    logger.info("=" * 60)
    logger.info(f"Files processed:   {stats.total}")
    if mode is ResolutionMode.FIX:
        logger.info(f"Rewritten:         {stats.rewritten}")
    else:
        logger.info(f"Lyrics found:      {stats.found}")
        logger.info(f"Lyrics not found:  {stats.not_found}")
        logger.info(f"Already present:   {stats.kept}")
        logger.info(f"Found rate:        {stats.found_rate:.0%}")
    logger.info(f"Errors:            {stats.errors}")
    logger.info("=" * 60)


def main() -> None:
    """
    Entry point for the CLI.

    This function is called when running `lyrics-explorer` from the command line.
    """
    cli()


if __name__ == "__main__":
    main()
