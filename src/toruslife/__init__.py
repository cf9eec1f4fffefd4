"""Conway's Game of Life on a fixed-size toroidal grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.errors import InvalidDimension
from .core.grid import Universe
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "InvalidDimension", "Universe", "Pattern", "PatternLibrary"]
