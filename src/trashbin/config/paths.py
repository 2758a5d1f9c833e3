"""Resolution of the ledger and staging area locations."""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from ..errors import SerializationError, UnresolvableAppPathsError
from ..history.ledger import Ledger
from ..utils.logging import get_logger
from .models import PathSettings, default_ledger_path, default_staging_path

logger = get_logger(__name__)


@dataclass(frozen=True)
class AppPaths:
    """Resolved ledger file and staging directory."""

    ledger_path: Path
    staging_path: Path


def _check_owner(path: Path) -> None:
    """Refuse a ledger planted by another user in a shared directory."""
    if not hasattr(os, "getuid"):
        return
    owner = path.stat().st_uid
    if owner != os.getuid():
        raise UnresolvableAppPathsError(
            f"Ledger {path} is owned by uid {owner}, not by the current user"
        )


def resolve_app_paths(settings: PathSettings, prepare: bool = True) -> AppPaths:
    """
    Determine and prepare the ledger and staging locations.

    A missing ledger means the staged content can no longer be restored, so
    the staging area is emptied (when enabled) and a fresh empty ledger is
    written. The staging directory is created if absent. An existing ledger
    must belong to the current user.

    Args:
        settings: Path settings from the configuration
        prepare: Create, reset and check the locations; False only computes them

    Returns:
        AppPaths with absolute locations

    Raises:
        UnresolvableAppPathsError: If either location cannot be determined or prepared
    """
    try:
        ledger_path = (settings.ledger_path or default_ledger_path()).expanduser().absolute()
        staging_path = (settings.staging_path or default_staging_path()).expanduser().absolute()
    except RuntimeError as e:
        raise UnresolvableAppPathsError(f"Could not determine application paths: {e}") from e

    if ledger_path == staging_path or ledger_path.is_relative_to(staging_path):
        raise UnresolvableAppPathsError(
            f"Ledger {ledger_path} must not live inside the staging area {staging_path}"
        )

    if not prepare:
        return AppPaths(ledger_path=ledger_path, staging_path=staging_path)

    try:
        if ledger_path.exists():
            _check_owner(ledger_path)
        else:
            if settings.reset_orphaned_staging and staging_path.exists():
                logger.warning(f"No ledger found at {ledger_path}, emptying {staging_path}")
                shutil.rmtree(staging_path)
            Ledger(ledger_path).reset()

        staging_path.mkdir(parents=True, exist_ok=True)
    except (OSError, SerializationError) as e:
        raise UnresolvableAppPathsError(f"Could not prepare application paths: {e}") from e

    return AppPaths(ledger_path=ledger_path, staging_path=staging_path)
