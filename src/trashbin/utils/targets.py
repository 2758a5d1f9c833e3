"""Expansion of user-supplied patterns into concrete target paths."""

import glob
from collections.abc import Iterable, Iterator
from pathlib import Path

from ..errors import PatternError
from .logging import get_logger

logger = get_logger(__name__)


def absolute_path(path: Path) -> Path:
    """
    Canonicalize a path without following a symlink in its last component.

    Trashing a symlink must move the link, not the file it points to.
    """
    path = Path(path)
    if path.name in ("", ".", ".."):
        return path.resolve(strict=True)
    return path.parent.resolve(strict=True) / path.name


class TargetResolver:
    """
    Resolves glob patterns into existing absolute paths.

    Every argument is treated as a glob since plain names and patterns cannot
    be told apart reliably. Entries that are the ledger itself, live inside
    the staging area, or contain either of them are skipped.
    """

    def __init__(self, ledger_path: Path, staging_path: Path):
        """
        Initialize the resolver.

        Args:
            ledger_path: Ledger file that must never be trashed
            staging_path: Staging area that must never be trashed into itself
        """
        ledger_path = Path(ledger_path)
        self.ledger_path = ledger_path.parent.resolve() / ledger_path.name
        self.staging_path = Path(staging_path).resolve()

    def expand(self, pattern: str) -> list[Path]:
        """
        Expand one pattern into matching paths.

        Raises:
            PatternError: If the pattern is empty or cannot be evaluated
        """
        if not pattern or not pattern.strip():
            raise PatternError("Empty pattern", pattern)
        try:
            matches = glob.glob(pattern, recursive=True)
        except (OSError, ValueError) as e:
            raise PatternError(f"Failed to read glob {pattern!r}: {e}", pattern) from e
        return [Path(match) for match in sorted(matches)]

    def is_protected(self, path: Path) -> bool:
        """Check whether a resolved path must not be trashed."""
        if path == self.ledger_path or path.is_relative_to(self.staging_path):
            return True
        # An ancestor of the staging area or ledger would swallow them
        return self.staging_path.is_relative_to(path) or self.ledger_path.is_relative_to(path)

    def resolve(self, patterns: Iterable[str]) -> Iterator[Path]:
        """
        Lazily yield canonical paths for all patterns.

        Patterns that fail and entries that cannot be canonicalized are
        logged and skipped.
        """
        for pattern in patterns:
            try:
                matches = self.expand(pattern)
            except PatternError as e:
                logger.warning(f"Skipping pattern {pattern!r}: {e}")
                continue

            if not matches:
                logger.warning(f"No match for {pattern!r}")

            for match in matches:
                try:
                    path = absolute_path(match)
                except OSError as e:
                    logger.warning(f"Skipping {match}: {e}")
                    continue

                if self.is_protected(path):
                    logger.warning(f"Skipping {path}: it is part of the trash itself")
                    continue

                yield path
