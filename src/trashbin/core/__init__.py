"""Core module containing the invocation orchestrator."""

from .session import RemoveResult, TrashSession

__all__ = [
    "RemoveResult",
    "TrashSession",
]
