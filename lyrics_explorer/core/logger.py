"""
Logging configuration for lyrics-explorer.

This module sets up the logging system with multiple outputs:
    - Console: Real-time output with tqdm-compatible formatting
    - log_full.log: Complete log of all events (DEBUG and above)
    - log_errors.log: Only ERROR and CRITICAL level messages
    - lyrics_failures.log: Files and tracks where no usable lyrics were found

Log files are only written when a log directory is configured; without one
the console is the only output.

Usage:
    from lyrics_explorer.core.logger import setup_logging, get_logger

    setup_logging(log_dir)  # Call once at startup (log_dir may be None)
    logger = get_logger(__name__)  # Get logger for each module

    logger.info("Exploring library")
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

from tqdm import tqdm


# Log file name prefixes (created in the log directory with a run timestamp)
LOG_FULL_FILENAME = "log_full"
LOG_ERRORS_FILENAME = "log_errors"
LYRICS_FAILURES_FILENAME = "lyrics_failures"

# Log format for file output (detailed with timestamp)
FILE_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Extra field marking a record for the lyrics failures report
LYRICS_FAILURE_FIELD = "lyrics_failure_message"

# Extra field holding the console color of a record's message
CONSOLE_COLOR_FIELD = "console_color"


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLD = "\033[1m"


class ColoredConsoleFormatter(logging.Formatter):
    """
    Custom formatter that adds colors to console output.

    Colors:
        - DEBUG: Blue
        - INFO: Green
        - WARNING: Yellow
        - ERROR: Red
        - CRITICAL: Bold Red

    Records carrying the CONSOLE_COLOR_FIELD extra attribute also get
    their message colored. File handlers never see the color codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.BLUE,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        colored_levelname = f"{color}{record.levelname}{Colors.RESET}"
        message = record.getMessage()
        message_color = getattr(record, CONSOLE_COLOR_FIELD, None)
        if message_color:
            message = f"{message_color}{message}{Colors.RESET}"
        return f"{colored_levelname}: {message}"


class TqdmLoggingHandler(logging.Handler):
    """
    Logging handler that writes to console without breaking tqdm progress bars.

    tqdm redraws its bar in place with carriage returns; plain writes to
    stderr would corrupt it. tqdm.write() prints the message above the bar.
    """

    def __init__(self, stream: TextIO = sys.stderr) -> None:
        super().__init__()
        self.stream = stream

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            tqdm.write(msg, file=self.stream)
        except Exception:
            self.handleError(record)


class LyricsFailedTrackHandler(logging.Handler):
    """
    Handler that collects lyrics failures into the lyrics failures report.

    Only records carrying the LYRICS_FAILURE_FIELD extra attribute are
    written, one message per line:

        Lyrics not found for Bohemian Rhapsody by Queen
        Error getting lyrics for /music/Queen/broken.mp3

    Use log_lyrics_failure() to emit such records.

    Attributes:
        report_path: Path to the lyrics_failures.log file.
        report_file: Open file handle (None until open() is called).
    """

    def __init__(self, report_path: Path) -> None:
        super().__init__()
        self.report_path = report_path
        self.report_file: TextIO | None = None

    def open(self) -> None:
        """
        Open the report file for writing.

        Called by setup_logging() after handler is created.
        File is opened in write mode (overwrites existing content).
        """
        self.report_file = open(self.report_path, "w", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        if not hasattr(record, LYRICS_FAILURE_FIELD):
            return

        if self.report_file is None:
            return

        try:
            self.report_file.write(f"{getattr(record, LYRICS_FAILURE_FIELD)}\n")
            self.report_file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """
        Close the report file handle.

        Safe to call multiple times.
        """
        if self.report_file is not None:
            try:
                self.report_file.close()
            except OSError:
                pass
            self.report_file = None
        super().close()


class ErrorOnlyFilter(logging.Filter):
    """Filter that only allows ERROR and CRITICAL level records."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno >= logging.ERROR


def setup_logging(log_dir: Path | None = None, verbose: bool = False) -> None:
    """
    Configure the logging system for the application.

    This function should be called ONCE at application startup, after
    the configuration is loaded but before the library is explored.

    Args:
        log_dir: Directory where log files will be created, or None to
                 log to the console only.
        verbose: Show DEBUG records on the console.

    Behavior:
        1. Configure root logger level to DEBUG, dropping existing handlers
        2. Add the console handler (TqdmLoggingHandler, INFO or DEBUG)
        3. If log_dir is given:
           a. Create it if it doesn't exist
           b. Add log_full_{timestamp}.log (DEBUG)
           c. Add log_errors_{timestamp}.log (ERROR and above)
           d. Add lyrics_failures_{timestamp}.log (LyricsFailedTrackHandler)
        4. Quiet the chatty third-party loggers (urllib3)
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = TqdmLoggingHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(ColoredConsoleFormatter())
    root_logger.addHandler(console_handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if log_dir is None:
        return

    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")

    full_handler = logging.FileHandler(
        log_dir / f"{LOG_FULL_FILENAME}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    full_handler.setLevel(logging.DEBUG)
    full_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    root_logger.addHandler(full_handler)

    error_handler = logging.FileHandler(
        log_dir / f"{LOG_ERRORS_FILENAME}_{timestamp}.log", mode="w", encoding="utf-8"
    )
    error_handler.setLevel(logging.DEBUG)  # Filter handles the level restriction
    error_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, FILE_DATE_FORMAT))
    error_handler.addFilter(ErrorOnlyFilter())
    root_logger.addHandler(error_handler)

    lyrics_handler = LyricsFailedTrackHandler(
        log_dir / f"{LYRICS_FAILURES_FILENAME}_{timestamp}.log"
    )
    lyrics_handler.open()
    root_logger.addHandler(lyrics_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The logger name, typically __name__ of the calling module.

    Note:
        Loggers obtained before setup_logging() is called will have no
        handlers and will not produce output.
    """
    return logging.getLogger(name)


def log_lyrics_found(logger: logging.Logger, message: str) -> None:
    """Log a 'Lyrics found' notification, shown in green on the console."""
    logger.info(message, extra={CONSOLE_COLOR_FIELD: Colors.GREEN})


def log_lyrics_failure(logger: logging.Logger, message: str) -> None:
    """
    Log a lyrics failure so that it also lands in lyrics_failures.log.

    Args:
        logger: The logger to use for the message.
        message: Failure notification, e.g. "Lyrics not found for Song by Artist".

    Behavior:
        Logs a WARNING level message and attaches the extra field that
        LyricsFailedTrackHandler uses to write to the report. The console
        shows the message in red.
    """
    logger.warning(
        message,
        extra={LYRICS_FAILURE_FIELD: message, CONSOLE_COLOR_FIELD: Colors.RED}
    )


def shutdown_logging() -> None:
    """
    Properly shut down the logging system.

    Flushes and closes every handler of the root logger, then removes them.
    Called from the CLI in a finally block.
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        try:
            handler.flush()
            handler.close()
        except OSError:
            pass
        root_logger.removeHandler(handler)
