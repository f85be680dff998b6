"""Conway's Game of Life on a toroidal grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid
from .core.settings import BoardSettings
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Grid", "BoardSettings", "Pattern", "PatternLibrary"]
