"""Single-file relocation: atomic rename with a copy-and-delete fallback."""

import errno
import os
import shutil
from pathlib import Path

from ..utils.logging import get_logger

logger = get_logger(__name__)

CHUNK_SIZE = 8192


def move_file(source: Path, destination: Path) -> None:
    """
    Relocate exactly one file from ``source`` to ``destination``.

    A rename is used when both paths live on the same filesystem. Otherwise
    the bytes are copied in chunks, the copy is flushed and closed, and only
    then is the source removed. A failed copy removes the partial destination
    and leaves the source untouched.

    Args:
        source: Existing file (or symlink) to relocate
        destination: Path that must not exist yet

    Raises:
        OSError: If the preconditions do not hold or the move fails
    """
    source = Path(source)
    destination = Path(destination)

    if not os.path.lexists(source):
        raise FileNotFoundError(errno.ENOENT, "Source not found", str(source))
    if source.is_dir() and not source.is_symlink():
        raise IsADirectoryError(errno.EISDIR, "Source is a directory", str(source))
    if os.path.lexists(destination):
        raise FileExistsError(errno.EEXIST, "Destination already exists", str(destination))

    try:
        os.rename(source, destination)
        return
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise

    logger.debug(f"Cross-device move, copying {source} to {destination}")
    _copy_then_delete(source, destination)


def _copy_then_delete(source: Path, destination: Path) -> None:
    created = False
    try:
        if source.is_symlink():
            os.symlink(os.readlink(source), destination)
            created = True
        else:
            with open(source, "rb") as src:
                with open(destination, "xb") as dst:
                    created = True
                    shutil.copyfileobj(src, dst, CHUNK_SIZE)
                    dst.flush()
                    os.fsync(dst.fileno())
            shutil.copystat(source, destination)
    except BaseException:
        if created:
            _discard(destination)
        raise

    try:
        source.unlink()
    except OSError:
        # Keep the intact source as the only copy
        _discard(destination)
        raise


def _discard(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.error(f"Unable to remove partial copy {path}: {e}")
