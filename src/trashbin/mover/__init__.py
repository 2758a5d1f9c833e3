"""Mover module for reversible relocation into the staging area."""

from .mover import TrashMover, UndoResult
from .naming import disambiguate
from .primitive import move_file

__all__ = [
    "TrashMover",
    "UndoResult",
    "disambiguate",
    "move_file",
]
