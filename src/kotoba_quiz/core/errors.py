"""Errors raised by the word list pipeline and session navigation."""


class DataUnavailable(Exception):
    """A category or the manifest could not be retrieved or parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason


class FetchError(DataUnavailable):
    """The source file is missing or unreadable."""


class ParseError(DataUnavailable):
    """The source file exists but its content is not a valid word list."""


class IndexOutOfRange(IndexError):
    """Raised when jumping to a position outside the working set."""
