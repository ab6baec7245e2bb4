"""
Exception classes for lyrics-explorer.

Each exception carries a human-readable message and an optional details
dictionary, and each one maps to a distinct failure mode of a library run.

Exception Hierarchy:
    LyricsExplorerError (base)
        ConfigError - Configuration file issues
        ResourceError - Alternate-names / bad-sentences resources
        TagError - Audio tag access issues
            TagReadError - File cannot be opened or parsed
            MissingTagError - File has no tag container
            TagWriteError - Tag could not be saved
        ProviderError - A lyrics provider failed (not a "not found")

Not finding lyrics is NOT an exception: providers return None for that case.
"""


class LyricsExplorerError(Exception):
    """
    Base exception for all lyrics-explorer errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context (file path, provider...).

    Example:
        try:
            # some operation
        except LyricsExplorerError as e:
            logger.error(f"Operation failed: {e.message}")
            if e.details:
                logger.debug(f"Details: {e.details}")
    """

    def __init__(self, message: str, details: dict | None = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable error description that will be shown to the user.
            details: Optional dictionary containing additional context about the error.
                     Common keys include:
                     - 'file_path': Audio file involved in the error
                     - 'provider': Name of the lyrics provider
                     - 'original_error': The underlying exception if wrapping another error
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return the error message for display."""
        return self.message


class ConfigError(LyricsExplorerError):
    """
    Raised when there's an issue with the configuration.

    This is a CRITICAL error that should stop program execution.

    Common causes:
        - Explicit --config file not found
        - config.yaml has invalid YAML syntax
        - Invalid field values (e.g., proxy port out of range)
        - Unknown provider name in providers.order
    """
    pass


class ResourceError(LyricsExplorerError):
    """
    Raised when the alternate-names table or the bad-sentences list
    cannot be loaded.

    This is a CRITICAL error: both resources are loaded once at startup.
    """
    pass


class TagError(LyricsExplorerError):
    """
    Base class for audio tag access errors.

    This is a NON-CRITICAL error - it aborts processing of a single file,
    the library walk continues with the next one.
    """
    pass


class TagReadError(TagError):
    """
    Raised when a file cannot be opened as an audio file.

    Common causes:
        - Not an audio file (cover.jpg, playlist.m3u...)
        - Corrupted file
        - Permission denied
    """
    pass


class MissingTagError(TagError):
    """
    Raised when lyrics are searched for a file without any tag container.

    In fix mode a missing tag is only a warning; in search mode there is
    no artist or title to look up, so the file is reported as an error.
    """
    pass


class TagWriteError(TagError):
    """
    Raised when a tag cannot be saved back to the file.

    Common causes:
        - Read-only file or directory
        - Disk full
        - Unsupported tag container
    """
    pass


class ProviderError(LyricsExplorerError):
    """
    Raised when a lyrics provider fails for a reason other than "not found".

    Network errors, unexpected HTTP status codes, malformed responses.
    The resolver treats this as an error for the current file.

    Example:
        raise ProviderError(
            "LRCLIB request failed: 503 Service Unavailable",
            details={'provider': 'lrclib', 'artist': 'Queen', 'title': 'Bohemian Rhapsody'}
        )
    """
    pass
