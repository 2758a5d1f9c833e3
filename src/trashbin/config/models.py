"""Configuration models using Pydantic for validation."""

import os
import tempfile
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_ledger_path() -> Path:
    """Ledger lives in the temp dir so it is cleared together with a reboot."""
    if hasattr(os, "getuid"):
        return Path(tempfile.gettempdir()) / f"trashbin-history-{os.getuid()}.json"
    return Path(tempfile.gettempdir()) / "trashbin-history.json"


def default_staging_path() -> Path:
    """Staging area under the user's cache directory."""
    cache_home = os.environ.get("XDG_CACHE_HOME")
    base = Path(cache_home) if cache_home else Path.home() / ".cache"
    return base / "trashbin-staging"


class PathSettings(BaseModel):
    """Locations of the ledger and the staging area."""

    ledger_path: Path | None = Field(
        default=None, description="JSON undo ledger (defaults to the system temp dir)"
    )
    staging_path: Path | None = Field(
        default=None, description="Staging area for trashed files (defaults to the user cache dir)"
    )
    reset_orphaned_staging: bool = Field(
        default=True,
        description="Empty the staging area when the ledger is missing, since it can't be undone",
    )


class NamingSettings(BaseModel):
    """Settings for resolving name collisions in the staging area."""

    preserve_extension: bool = Field(
        default=False,
        description="Insert the counter before the extension (notes.1.txt) instead of replacing it (notes.1)",
    )


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(
        default_factory=lambda: Path.home() / ".config" / "trashbin" / "logs",
        description="Directory for log files",
    )
    max_bytes: int = Field(
        default=1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=3, ge=1, description="Number of rotated log files to keep")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class TrashConfig(BaseModel):
    """Main configuration for trashbin."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    paths: PathSettings = Field(default_factory=PathSettings, description="Ledger and staging paths")
    naming: NamingSettings = Field(default_factory=NamingSettings, description="Collision naming")
    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging settings")
