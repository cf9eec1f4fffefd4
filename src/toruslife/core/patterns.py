"""Classic Game of Life patterns and pattern management."""

from typing import Any, Dict, List, Optional, Tuple, Union
import json
import logging
from pathlib import Path

from .cell import Cell
from .grid import Universe
from .seeds import SeedRule, text_seed

logger = logging.getLogger(__name__)


class Pattern:
    """A named set of live cells, given as (row, col) offsets."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    def apply_to_universe(self, universe: Universe, offset_row: int = 0, offset_col: int = 0) -> None:
        """Clear a universe and place this pattern on it.

        Cells past an edge wrap around to the opposite side.

        Args:
            universe: Target universe
            offset_row: Vertical offset
            offset_col: Horizontal offset
        """
        universe.clear()
        universe.set_cells((row + offset_row, col + offset_col) for row, col in self.cells)

    def as_seed(self, width: int, height: int, offset_row: int = 0, offset_col: int = 0) -> SeedRule:
        """Build a seed rule that places this pattern on a width x height universe.

        Returns:
            Callable accepted as the ``seed`` argument of Universe
        """
        live = {((row + offset_row) % height, (col + offset_col) % width) for row, col in self.cells}

        def rule(row: int, col: int) -> bool:
            return (row, col) in live

        return rule

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_col - min_col + 1, max_row - min_row + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates shifted to start at (0, 0)."""
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_row, min_col, _, _ = self.get_bounding_box()
        normalized_cells = [(row - min_row, col - min_col) for row, col in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization."""
        return {
            "name": self.name,
            "cells": [list(cell) for cell in self.cells],
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Raises:
            KeyError: If name or cells are missing
            ValueError: If a cell is not a (row, col) pair
        """
        cells = []
        for cell in data["cells"]:
            if len(cell) != 2:
                raise ValueError(f"Pattern cell {cell!r} is not a (row, col) pair")
            cells.append((int(cell[0]), int(cell[1])))

        return cls(
            name=data["name"],
            cells=cells,
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )

    @classmethod
    def from_text(cls, name: str, text: str, description: str = "") -> "Pattern":
        """Create pattern from a picture such as ``".#.\\n..#\\n###"``."""
        cells = [
            (row, col)
            for row, values in enumerate(text_seed(text))
            for col, value in enumerate(values)
            if value is Cell.ALIVE
        ]
        return cls(name, cells, description)

    @classmethod
    def from_universe(cls, universe: Universe, name: str, description: str = "") -> "Pattern":
        """Capture the live cells of a universe's current generation."""
        cells = []
        for row in range(universe.height):
            for col in range(universe.width):
                if universe.get_cell(row, col) is Cell.ALIVE:
                    cells.append((row, col))

        metadata = {
            "source_size": universe.shape,
            "generation": universe.generation,
            "population": len(cells),
        }

        return cls(name, cells, description, metadata)


class PatternLibrary:
    """Manages a collection of patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))

        self.add_pattern(
            Pattern(
                "Beehive",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)],
                "Beehive still life",
            )
        )

        self.add_pattern(
            Pattern(
                "Loaf",
                [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)],
                "Loaf still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(0, 0), (0, 1), (0, 2)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "Toad",
                [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "Beacon",
                [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)],
                "Smallest spaceship, period-4",
            )
        )

        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, ignoring case.

        Returns:
            Pattern instance or None if not found
        """
        if name in self._patterns:
            return self._patterns[name]

        lowered = name.lower()
        for pattern_name, pattern in self._patterns.items():
            if pattern_name.lower() == lowered:
                return pattern
        return None

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns that are not built in are listed under "Custom".
        """
        categories = {category: list(names) for category, names in self.CATEGORIES.items()}
        builtin = {name for names in self.CATEGORIES.values() for name in names}
        categories["Custom"] = [name for name in self._patterns if name not in builtin]

        # Remove empty categories
        return {category: names for category, names in categories.items() if names}

    def save_pattern(self, pattern: Pattern, path: Union[str, Path]) -> None:
        """Save a pattern to a JSON file."""
        with open(path, "w") as f:
            json.dump(pattern.to_dict(), f, indent=2)

    def load_pattern(self, path: Union[str, Path]) -> Pattern:
        """Load a pattern from a JSON file and add it to the library.

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is invalid
        """
        with open(path, "r") as f:
            data = json.load(f)

        try:
            pattern = Pattern.from_dict(data)
        except KeyError as e:
            raise ValueError(f"Pattern file {path} is missing field {e}") from e

        self.add_pattern(pattern)
        logger.debug("Loaded pattern '%s' (%d cells) from %s", pattern.name, len(pattern.cells), path)
        return pattern
