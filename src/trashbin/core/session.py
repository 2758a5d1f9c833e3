"""Orchestrates one trash invocation: load history, act, write history back."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..config.models import TrashConfig
from ..config.paths import AppPaths, resolve_app_paths
from ..errors import TrashIOError
from ..history import Batch, History, Ledger
from ..mover import TrashMover, UndoResult
from ..utils.logging import get_logger
from ..utils.targets import TargetResolver

logger = get_logger(__name__)


@dataclass
class RemoveResult:
    """Result of trashing a set of patterns."""

    batch: Batch = field(default_factory=Batch)
    targets: list[Path] = field(default_factory=list)
    failures: list[TrashIOError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


class TrashSession:
    """
    One invocation of the trash tool.

    History is loaded once when the session is created and written back once
    by ``save``. In explain mode nothing is moved and ``save`` is a no-op, so
    in-memory history changes never reach the ledger.
    """

    def __init__(self, paths: AppPaths, explain: bool = False, preserve_extension: bool = False):
        """
        Initialize the session.

        Args:
            paths: Resolved ledger and staging locations
            explain: Only log what would happen
            preserve_extension: Keep file extensions when disambiguating names

        Raises:
            SerializationError: If the ledger cannot be read
        """
        self.paths = paths
        self.explain = explain
        self.ledger = Ledger(paths.ledger_path)
        self.history: History = self.ledger.load()
        self.mover = TrashMover(
            staging_path=paths.staging_path,
            dry_run=explain,
            preserve_extension=preserve_extension,
        )
        self.resolver = TargetResolver(paths.ledger_path, paths.staging_path)

        if explain:
            logger.info("Explain mode - No actions will be taken")

    @classmethod
    def from_config(cls, config: TrashConfig, explain: bool = False) -> "TrashSession":
        """Create a session from configuration, resolving application paths."""
        paths = resolve_app_paths(config.paths)
        return cls(paths, explain=explain, preserve_extension=config.naming.preserve_extension)

    def remove(self, patterns: Iterable[str]) -> RemoveResult:
        """
        Trash every path matched by ``patterns`` as one batch.

        Each resolved target is relocated on its own; a failure inside one
        target stops that target only. The batch is pushed onto history if
        anything was moved.

        Args:
            patterns: Glob patterns or plain paths

        Returns:
            RemoveResult with the batch and any per-target failures
        """
        result = RemoveResult()

        for target in self.resolver.resolve(patterns):
            result.targets.append(target)
            try:
                self.mover.relocate(target, self.paths.staging_path, result.batch)
            except TrashIOError as e:
                logger.error(f"Failed to trash {target}: {e}")
                result.failures.append(e)

        if len(result.batch):
            self.history.push(result.batch)

        return result

    def undo(self) -> UndoResult:
        """
        Restore the most recent batch.

        Raises:
            NoHistoryError: If there is nothing to undo
        """
        return self.mover.undo(self.history)

    def save(self) -> None:
        """Persist history unless in explain mode."""
        if self.explain:
            logger.debug("Explain mode - history not written")
            return
        self.ledger.save(self.history)
