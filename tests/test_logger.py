"""Test logging setup and the lyrics failures report"""

import logging

from lyrics_explorer.core.logger import (
    Colors,
    ColoredConsoleFormatter,
    LyricsFailedTrackHandler,
    TqdmLoggingHandler,
    get_logger,
    log_lyrics_failure,
    log_lyrics_found,
    setup_logging,
    shutdown_logging,
)
from lyrics_explorer.library.sinks import LoggingSink


def read_log(log_dir, prefix):
    files = list(log_dir.glob(f"{prefix}_*.log"))
    assert len(files) == 1
    return files[0].read_text(encoding="utf-8")


class TestLogging:
    """Test logger configuration"""

    def test_console_only(self):
        """Test no file handler without log directory"""
        try:
            setup_logging(None)
            handlers = logging.getLogger().handlers

            assert len(handlers) == 1
            assert isinstance(handlers[0], TqdmLoggingHandler)
        finally:
            shutdown_logging()

    def test_log_files(self, temp_dir):
        """Test full log, error log and failures report"""
        log_dir = temp_dir / "logs"
        try:
            setup_logging(log_dir)
            logger = get_logger("lyrics_explorer.test")
            logger.debug("debug message")
            logger.error("error message")
            log_lyrics_failure(logger, "Lyrics not found for Bar by Foo")
        finally:
            shutdown_logging()

        full_log = read_log(log_dir, "log_full")
        assert "debug message" in full_log
        assert "error message" in full_log

        error_log = read_log(log_dir, "log_errors")
        assert "error message" in error_log
        assert "debug message" not in error_log

        assert read_log(log_dir, "lyrics_failures") == "Lyrics not found for Bar by Foo\n"

    def test_logging_sink_reports_failures_only(self, temp_dir):
        """Test LoggingSink failures land in the report, successes do not"""
        log_dir = temp_dir / "logs"
        try:
            setup_logging(log_dir)
            sink = LoggingSink()
            sink.on_success("Lyrics found for Bar by Foo")
            sink.on_failure("Error getting lyrics for /music/broken.mp3")
        finally:
            shutdown_logging()

        assert read_log(log_dir, "lyrics_failures") == "Error getting lyrics for /music/broken.mp3\n"
        assert "Lyrics found for Bar by Foo" in read_log(log_dir, "log_full")

    def test_failure_handler_ignores_plain_records(self, temp_dir):
        """Test records without the failure marker are not written"""
        handler = LyricsFailedTrackHandler(temp_dir / "report.log")
        handler.open()
        try:
            record = logging.LogRecord("test", logging.WARNING, __file__, 1, "plain", None, None)
            handler.emit(record)
        finally:
            handler.close()

        assert (temp_dir / "report.log").read_text(encoding="utf-8") == ""

    def test_log_files_have_no_color_codes(self, temp_dir):
        """Test sink notifications are written to the files as plain text"""
        log_dir = temp_dir / "logs"
        try:
            setup_logging(log_dir)
            sink = LoggingSink()
            sink.on_success("Lyrics found for Bar by Foo")
            sink.on_failure("Lyrics not found for Baz by Foo")
        finally:
            shutdown_logging()

        full_log = read_log(log_dir, "log_full")
        assert "Lyrics found for Bar by Foo" in full_log
        assert "Lyrics not found for Baz by Foo" in full_log
        assert "\033[" not in full_log
        assert "\033[" not in read_log(log_dir, "lyrics_failures")

    def test_console_colors_notifications(self):
        """Test the console formatter colors marked messages only"""
        logger = get_logger("lyrics_explorer.test")
        formatter = ColoredConsoleFormatter()
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            log_lyrics_found(logger, "Lyrics found for Bar by Foo")
            log_lyrics_failure(logger, "Lyrics not found for Baz by Foo")
            logger.info("plain message")
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        found, failure, plain = (formatter.format(r) for r in records)
        assert f"{Colors.GREEN}Lyrics found for Bar by Foo{Colors.RESET}" in found
        assert f"{Colors.RED}Lyrics not found for Baz by Foo{Colors.RESET}" in failure
        assert plain.endswith(": plain message")
        assert records[0].getMessage() == "Lyrics found for Bar by Foo"

    def test_logging_sink_uses_given_logger(self):
        """Test LoggingSink sends notifications to the logger it was given"""
        logger = get_logger("lyrics_explorer.test.sink")
        records = []
        handler = logging.Handler()
        handler.emit = records.append
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            LoggingSink(logger).on_success("Lyrics found for Bar by Foo")
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        assert [r.getMessage() for r in records] == ["Lyrics found for Bar by Foo"]
        assert records[0].levelno == logging.INFO
