"""Configuration module for lotgrid."""

from .loader import ConfigLoader, load_config
from .models import LotgridConfig, LotgridSettings, ReferenceSettings, SeedListing

__all__ = [
    "ConfigLoader",
    "LotgridConfig",
    "LotgridSettings",
    "ReferenceSettings",
    "SeedListing",
    "load_config",
]
