"""
Notification sinks.

The resolver reports every outcome the user should see (lyrics found,
lyrics not found, error on a file) to an ordered list of sinks. A sink is
any object with on_success(message) and on_failure(message); all sinks
are notified, in the order they were given, for every event.
"""

import logging
from typing import Protocol, runtime_checkable

from lyrics_explorer.core.logger import get_logger, log_lyrics_failure, log_lyrics_found

logger = get_logger(__name__)


@runtime_checkable
class OutputSink(Protocol):
    """Receiver of the resolver notifications."""

    def on_success(self, message: str) -> None:
        ...

    def on_failure(self, message: str) -> None:
        ...


class LoggingSink:
    """
    Sends notifications to the logging system.

    Successes are logged at INFO level, failures at WARNING level with the
    lyrics-failure marker, so they also land in lyrics_failures.log when
    log files are enabled.
    """

    def __init__(self, sink_logger: logging.Logger | None = None) -> None:
        self.logger = sink_logger or logger

    def on_success(self, message: str) -> None:
        log_lyrics_found(self.logger, message)

    def on_failure(self, message: str) -> None:
        log_lyrics_failure(self.logger, message)
