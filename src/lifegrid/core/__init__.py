"""Core Game of Life logic."""

from .errors import LifeError, SettingsError, BoardFormatError, GeometryError
from .cell import Cell
from .grid import Grid
from .settings import BoardSettings, DEFAULT_SETTINGS, load_settings, save_settings, load_or_init_settings
from .persistence import dumps, loads, load_board, save_board
from .patterns import Pattern, PatternLibrary

__all__ = [
    "LifeError",
    "SettingsError",
    "BoardFormatError",
    "GeometryError",
    "Cell",
    "Grid",
    "BoardSettings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "save_settings",
    "load_or_init_settings",
    "dumps",
    "loads",
    "load_board",
    "save_board",
    "Pattern",
    "PatternLibrary",
]
