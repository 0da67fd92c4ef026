"""Configuration file loader."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models import Listing, ReferenceData
from .models import LotgridConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Load lotgrid configuration and derive the startup data from it."""

    CONFIG_FILENAME = "lotgrid.yaml"
    USER_CONFIG_DIR = Path.home() / ".lotgrid"

    def __init__(self, project_path: Path | None = None):
        """Initialize config loader.

        Args:
            project_path: Project directory path. If None, uses current directory.
        """
        self._project_path = project_path or Path.cwd()

    def get_config_path(self) -> Path | None:
        """Find config file (project-level first, then user-level).

        Returns:
            Path to config file if found, None otherwise.
        """
        project_config = self._project_path / self.CONFIG_FILENAME
        if project_config.exists():
            return project_config

        user_config = self.USER_CONFIG_DIR / self.CONFIG_FILENAME
        if user_config.exists():
            return user_config

        return None

    def load(self) -> LotgridConfig:
        """Load configuration, returning defaults if no usable config exists."""
        config_path = self.get_config_path()
        if config_path is None:
            logger.debug("No config file found, using defaults")
            return LotgridConfig()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}

            config = LotgridConfig.model_validate(data)
            # Reference data must be buildable (at least one make)
            self.reference_data(config)
            logger.info(f"Loaded config from: {config_path}")
            return config
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}")
            return LotgridConfig()

    @staticmethod
    def reference_data(config: LotgridConfig) -> ReferenceData:
        """Build the immutable reference data from the config section."""
        section = config.reference
        return ReferenceData(
            make_options=tuple(section.makes),
            models_by_make={
                make: tuple(models) for make, models in section.models_by_make.items()
            },
        )

    @staticmethod
    def seed_listings(config: LotgridConfig) -> list[Listing]:
        return [Listing(**seed.model_dump()) for seed in config.seed_listings]


def load_config(project_path: Path | str | None = None) -> LotgridConfig:
    """Load configuration from project or user directory.

    Args:
        project_path: Project directory path. If None, uses current directory.

    Returns:
        LotgridConfig with loaded or default values.
    """
    path = Path(project_path) if project_path else None
    return ConfigLoader(path).load()
