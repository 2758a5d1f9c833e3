"""
trashbin - a reversible "soft delete" for the command line.

Files and directories are moved into a staging area instead of being
erased, and every move is recorded in a ledger so it can be undone.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .errors import (
    NoHistoryError,
    PatternError,
    SerializationError,
    TrashError,
    TrashIOError,
    UnresolvableAppPathsError,
)
from .history import Batch, History, Ledger, PathPair
from .mover import TrashMover, UndoResult, disambiguate, move_file
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Errors
    "TrashError",
    "TrashIOError",
    "SerializationError",
    "PatternError",
    "NoHistoryError",
    "UnresolvableAppPathsError",
    # History
    "PathPair",
    "Batch",
    "History",
    "Ledger",
    # Mover
    "TrashMover",
    "UndoResult",
    "disambiguate",
    "move_file",
]
