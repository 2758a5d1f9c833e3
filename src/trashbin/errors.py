"""Error types raised by trashbin."""

from pathlib import Path


class TrashError(Exception):
    """Base exception for all trashbin errors."""


class TrashIOError(TrashError):
    """A filesystem operation failed (open, create, rename, copy or remove)."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class SerializationError(TrashError):
    """The ledger is malformed or could not be written."""


class PatternError(TrashError):
    """A single target pattern could not be expanded."""

    def __init__(self, message: str, pattern: str):
        super().__init__(message)
        self.pattern = pattern


class NoHistoryError(TrashError):
    """Undo was requested but the ledger holds no batches."""

    def __init__(self, message: str = "No history found!"):
        super().__init__(message)


class UnresolvableAppPathsError(TrashError):
    """The staging area or ledger location could not be determined."""
