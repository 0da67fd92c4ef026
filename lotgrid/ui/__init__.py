"""castella user interface for lotgrid."""

from .app import LotgridApp

__all__ = ["LotgridApp"]
