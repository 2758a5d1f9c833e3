"""Utility modules for trashbin."""

from .logging import get_console, get_logger, setup_logging
from .targets import TargetResolver, absolute_path

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
    "TargetResolver",
    "absolute_path",
]
