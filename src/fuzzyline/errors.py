from __future__ import annotations


class FuzzyLineError(Exception):
    """Base class for errors reported to the user by the driver."""


class DocumentUnreadable(FuzzyLineError):
    """The document path is missing, unreadable, or yields zero lines."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Could not open source file: {path}"
        super().__init__(f"{msg} ({reason})" if reason else msg)


class QuerySourceUnreadable(FuzzyLineError):
    """A query file could not be opened or holds no queries."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"Could not open input word set file: {path}"
        super().__init__(f"{msg} ({reason})" if reason else msg)


class EmptyCorpus(FuzzyLineError):
    """The document has no non-empty lines to search."""

    def __init__(self, source: str = "<document>") -> None:
        self.source = source
        super().__init__(f"No non-empty lines to search in {source}")
