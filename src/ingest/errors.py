"""Exceptions for the ingest layer.

Ranking itself never raises for string input; these errors cover the
steps that turn files and feeds into ContentItem lists.
"""


class IngestError(Exception):
    """Base exception for all ingest errors."""


class ItemsFileError(IngestError):
    """Raised when an items file cannot be read or parsed."""

    def __init__(self, path: str, reason: str) -> None:
        """Initialize the error.

        Args:
            path: Path of the offending file.
            reason: Human-readable cause.
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load items from {path}: {reason}")


class ItemsValidationError(IngestError):
    """Raised when submitted items break the batch limits."""

    def __init__(self, errors: list[dict[str, str]], path: str) -> None:
        """Initialize the error.

        Args:
            errors: Validation error details ({loc, msg, type}).
            path: Path of the offending file.
        """
        self.errors = errors
        self.path = path
        super().__init__(f"Validation failed for {path}: {len(errors)} errors")


class FeedParseError(IngestError):
    """Raised when a feed document cannot be parsed at all."""

    def __init__(self, source: str, reason: str) -> None:
        """Initialize the error.

        Args:
            source: Source name of the feed.
            reason: Parser error message.
        """
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot parse feed '{source}': {reason}")
