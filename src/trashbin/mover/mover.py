"""Reversible relocation of file trees into the staging area, and undo."""

from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import NoHistoryError, TrashIOError
from ..history import Batch, History, PathPair
from ..utils.logging import get_logger
from .naming import disambiguate
from .primitive import move_file

logger = get_logger(__name__)


@dataclass
class UndoResult:
    """Result of undoing the most recent batch."""

    restored: list[PathPair] = field(default_factory=list)
    unresolved: Batch = field(default_factory=Batch)
    dry_run: bool = False

    @property
    def success(self) -> bool:
        """True when every pair was restored."""
        return len(self.unresolved) == 0


class TrashMover:
    """
    Moves file trees into the staging area and restores them.

    Directories are never moved as a unit: every file below a directory is
    relocated individually and recorded as a PathPair, and the emptied
    original directories are removed afterwards.
    """

    def __init__(
        self,
        staging_path: Path,
        dry_run: bool = False,
        preserve_extension: bool = False,
    ):
        """
        Initialize the mover.

        Args:
            staging_path: Root of the staging area
            dry_run: Log what would happen without touching the filesystem
            preserve_extension: Keep file extensions when disambiguating names
        """
        self.staging_path = Path(staging_path)
        self.dry_run = dry_run
        self.preserve_extension = preserve_extension

    def _disambiguate(self, candidate: Path) -> Path:
        new_path = disambiguate(candidate, self.preserve_extension)
        if new_path != candidate:
            logger.info(f"Path {candidate} already exists. Switching to {new_path}")
        return new_path

    def relocate(
        self,
        root_path: Path,
        destination_base: Path | None = None,
        batch: Batch | None = None,
    ) -> Batch:
        """
        Move the tree rooted at ``root_path`` underneath ``destination_base``.

        The tree is walked breadth-first with an explicit queue. Directories
        are recreated at the destination; files are moved one by one and each
        successful move is appended to ``batch``. The first failing file
        aborts the rest of the walk; files already moved stay recorded and
        files not yet reached stay where they were.

        Args:
            root_path: File or directory to relocate
            destination_base: Directory to move into (defaults to the staging area)
            batch: Batch receiving one PathPair per relocated file (created if None)

        Returns:
            The batch the relocations were appended to

        Raises:
            TrashIOError: If creating a directory, listing one or moving a file fails
        """
        if batch is None:
            batch = Batch()
        base_dir = Path(destination_base) if destination_base is not None else self.staging_path
        logger.debug(f"Moving target {root_path} - Base dir: {base_dir}")

        if not self.dry_run and not base_dir.is_dir():
            try:
                base_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise TrashIOError(f"Unable to create {base_dir}: {e}", base_dir) from e

        queue: deque[tuple[Path, Path]] = deque([(Path(root_path), base_dir)])
        visited_dirs: list[Path] = []

        try:
            while queue:
                item, base = queue.popleft()
                candidate = base / item.name

                if item.is_dir() and not item.is_symlink():
                    candidate = self._disambiguate(candidate)
                    logger.debug(f"Creating directory {candidate}")

                    try:
                        if not self.dry_run:
                            candidate.mkdir(parents=True)
                        children = sorted(item.iterdir())
                    except OSError as e:
                        raise TrashIOError(f"Unable to process directory {item}: {e}", item) from e

                    queue.extend((child, candidate) for child in children)
                    visited_dirs.append(item)

                elif item.is_file():
                    candidate = self._disambiguate(candidate)
                    logger.info(f"Moving {item} to {candidate}")

                    if self.dry_run:
                        continue

                    try:
                        move_file(item, candidate)
                    except OSError as e:
                        raise TrashIOError(f"Unable to move {item}: {e}", item) from e

                    batch.append(PathPair(item, candidate))

                else:
                    logger.warning(f"Path {item} is not a file or a directory. Skipping...")
        finally:
            if not self.dry_run:
                self._remove_emptied_dirs(visited_dirs)

        return batch

    def _remove_emptied_dirs(self, directories: list[Path]) -> None:
        """
        Remove original directories whose contents were relocated.

        Only empty directories are removed, deepest first. A directory still
        holding skipped entries, or files an aborted walk never reached, is
        left in place so nothing without a ledger entry is ever deleted.
        """
        for directory in reversed(directories):
            try:
                directory.rmdir()
                logger.debug(f"Removed directory {directory}")
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.debug(f"Leaving directory {directory} in place: {e}")

    def undo(self, history: History) -> UndoResult:
        """
        Reverse the most recent batch in ``history``.

        Each staged file is moved back to its exact original path, recreating
        the parent directory if needed. Pairs that cannot be restored are
        pushed back onto ``history`` as a new batch, in order, so a later undo
        can retry them. The staging area is pruned of empty directories
        afterwards.

        Args:
            history: History to pop from (modified in place)

        Returns:
            UndoResult listing restored and unresolved pairs

        Raises:
            NoHistoryError: If history is empty
        """
        last = history.pop()
        if last is None:
            raise NoHistoryError()

        result = UndoResult(dry_run=self.dry_run)

        for pair in last:
            logger.info(f"Moving {pair.staged} to {pair.original}")

            if self.dry_run:
                result.restored.append(pair)
                continue

            try:
                pair.original.parent.mkdir(parents=True, exist_ok=True)
                move_file(pair.staged, pair.original)
            except OSError as e:
                logger.error(f"Unable to restore {pair.original}: {e}")
                result.unresolved.append(pair)
                continue

            result.restored.append(pair)

        if not result.success:
            history.push(result.unresolved)

        if not self.dry_run:
            self.cleanup_staging()

        return result

    def cleanup_staging(self) -> None:
        """Remove directories left empty in the staging area. Failures are ignored."""
        if self.staging_path.is_dir():
            _prune_empty_dirs(self.staging_path)


def _prune_empty_dirs(directory: Path) -> None:
    try:
        entries = list(directory.iterdir())
    except OSError:
        return

    for entry in entries:
        if not entry.is_dir() or entry.is_symlink():
            continue
        try:
            entry.rmdir()
        except OSError:
            _prune_empty_dirs(entry)
            try:
                entry.rmdir()
            except OSError:
                pass
