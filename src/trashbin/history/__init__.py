"""History module: the undo ledger and its persisted form."""

from .ledger import Ledger
from .models import Batch, History, PathPair

__all__ = [
    "PathPair",
    "Batch",
    "History",
    "Ledger",
]
