"""Configuration module for trashbin."""

from .manager import ConfigManager
from .models import LoggingSettings, NamingSettings, PathSettings, TrashConfig
from .paths import AppPaths, resolve_app_paths

__all__ = [
    "TrashConfig",
    "PathSettings",
    "NamingSettings",
    "LoggingSettings",
    "ConfigManager",
    "AppPaths",
    "resolve_app_paths",
]
