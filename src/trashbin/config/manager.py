"""Configuration management - loading and validation."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import TrashConfig


class ConfigManager:
    """Manages loading configuration."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path.home() / ".config" / "trashbin" / "config.yaml",
        Path.home() / ".trashbin" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path
        self._config: TrashConfig | None = None

    def load(self) -> TrashConfig:
        """
        Load configuration from file, falling back to defaults.

        Returns:
            Loaded and validated configuration.

        Raises:
            ValueError: If the config file is not valid YAML or fails validation.
        """
        config_file = self._find_config_file()

        if config_file is None:
            self._config = TrashConfig()
            return self._config

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            self._config = TrashConfig(**config_dict)
            self.config_path = config_file
            return self._config

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except (ValidationError, TypeError) as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

    def _find_config_file(self) -> Path | None:
        """Find the first existing config file in default locations."""
        if self.config_path is not None:
            return self.config_path if self.config_path.exists() else None

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None

    @property
    def config(self) -> TrashConfig:
        """Get current configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config

