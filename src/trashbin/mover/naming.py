"""Collision-free naming for destination paths."""

import os
from itertools import count
from pathlib import Path


def _exists(path: Path) -> bool:
    # Broken symlinks occupy a name too
    return os.path.lexists(path)


def disambiguate(path: Path, preserve_extension: bool = False) -> Path:
    """
    Find an unused alternative for a destination path.

    The counter replaces the path's extension, so a colliding ``notes.txt``
    becomes ``notes.1``, then ``notes.2``. With ``preserve_extension`` the
    counter is inserted before the extension instead (``notes.1.txt``).

    Args:
        path: Desired destination path
        preserve_extension: Keep the original extension after the counter

    Returns:
        ``path`` itself if unused, otherwise the first unused candidate
    """
    path = Path(path)
    if not _exists(path):
        return path

    stem, suffix = path.stem, path.suffix
    for counter in count(1):
        if preserve_extension:
            candidate = path.with_name(f"{stem}.{counter}{suffix}")
        else:
            candidate = path.with_name(f"{stem}.{counter}")
        if not _exists(candidate):
            return candidate
