"""Core cellular automaton logic."""

from .cell import Cell
from .errors import InvalidDimension
from .grid import Universe
from .patterns import Pattern, PatternLibrary
from .seeds import SEED_RULES, get_seed_rule

__all__ = ["Cell", "InvalidDimension", "Universe", "Pattern", "PatternLibrary", "SEED_RULES", "get_seed_rule"]
