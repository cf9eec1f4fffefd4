"""Toroidal grid and generation transition for Conway's Game of Life."""

import logging
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .errors import InvalidDimension
from .seeds import ALIVE_GLYPHS, SeedRule, reference_seed, text_seed

logger = logging.getLogger(__name__)

Seed = Union[None, SeedRule, str, Sequence[Sequence[object]]]


def _is_positive_int(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        return False
    return value > 0


class Universe:
    """A fixed-size toroidal grid of cells.

    Cells live in a flat row-major buffer indexed by ``row * width + col``.
    A second buffer of the same size receives each new generation, and the
    two are swapped once the whole generation has been computed, so neighbour
    counts are always taken from the previous generation.

    Rendering uses ``■`` for live cells and ``□`` for dead ones.
    """

    ALIVE_GLYPH = "■"
    DEAD_GLYPH = "□"
    REFERENCE_SIZE = 64

    def __init__(self, width: int, height: int, seed: Seed = None) -> None:
        """Initialize a new universe.

        Args:
            width: Number of columns, must be positive
            height: Number of rows, must be positive
            seed: Initial pattern. Either a callable ``(row, col) -> bool``,
                a picture string (see :func:`~toruslife.core.seeds.text_seed`),
                a sequence of ``height`` rows of ``width`` values, or None for
                an empty universe.

        Raises:
            InvalidDimension: If width or height is not a positive integer
            ValueError: If a row-based seed does not match the dimensions
        """
        if not _is_positive_int(width) or not _is_positive_int(height):
            raise InvalidDimension(width, height)

        self._width = int(width)
        self._height = int(height)
        self._generation = 0
        self._cells = np.zeros(self._width * self._height, dtype=np.int8)
        self._next_cells = np.zeros_like(self._cells)

        # Reused for every neighbour count
        self._torch_input = torch.zeros(1, 1, self._height, self._width, dtype=torch.float32)
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        if seed is not None:
            self._apply_seed(seed)

        logger.debug(
            "Created %dx%d universe with %d live cells", self._width, self._height, self.population
        )

    @classmethod
    def reference(cls, width: int = REFERENCE_SIZE, height: int = REFERENCE_SIZE) -> "Universe":
        """Create a universe seeded with the reference pattern used for visual checks."""
        return cls(width, height, reference_seed)

    def _apply_seed(self, seed: Seed) -> None:
        if callable(seed):
            for row in range(self._height):
                for col in range(self._width):
                    self._cells[self.get_index(row, col)] = Cell.of(seed(row, col))
            return

        rows = text_seed(seed) if isinstance(seed, str) else list(seed)
        if len(rows) != self._height:
            raise ValueError(f"Seed has {len(rows)} rows, expected {self._height}")

        for row, values in enumerate(rows):
            if len(values) != self._width:
                raise ValueError(f"Seed row {row} has {len(values)} cells, expected {self._width}")
            for col, value in enumerate(values):
                if isinstance(value, str):
                    value = value in ALIVE_GLYPHS
                self._cells[self.get_index(row, col)] = Cell.of(value)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self._width, self._height)

    @property
    def generation(self) -> int:
        """Number of ticks applied since construction."""
        return self._generation

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def cells(self) -> np.ndarray:
        """Read-only (height, width) view of the current generation.

        The view refers to the current buffer, which becomes the spare after
        the next tick. Copy it to keep a snapshot.
        """
        view = self._cells.reshape(self._height, self._width).view()
        view.flags.writeable = False
        return view

    def get_index(self, row: int, col: int) -> int:
        """Flat buffer index of an in-range coordinate."""
        return row * self._width + col

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell. Coordinates wrap around the torus."""
        return Cell(int(self._cells[self.get_index(row % self._height, col % self._width)]))

    def set_cell(self, row: int, col: int, state: Union[Cell, bool]) -> None:
        """Set the state of a cell. Coordinates wrap around the torus.

        Args:
            row: Row coordinate
            col: Column coordinate
            state: Cell state, or a bool where True means alive
        """
        self._cells[self.get_index(row % self._height, col % self._width)] = Cell.of(state)

    def set_cells(self, coords: Iterable[Tuple[int, int]], state: Union[Cell, bool] = Cell.ALIVE) -> None:
        """Set every ``(row, col)`` in coords to the same state."""
        for row, col in coords:
            self.set_cell(row, col, state)

    def toggle_cell(self, row: int, col: int) -> Cell:
        """Flip a cell and return its new state."""
        new_state = Cell.DEAD if self.get_cell(row, col) is Cell.ALIVE else Cell.ALIVE
        self.set_cell(row, col, new_state)
        return new_state

    def clear(self) -> None:
        """Set all cells dead."""
        self._cells.fill(Cell.DEAD)

    def live_neighbor_count(self, row: int, col: int) -> int:
        """Count living neighbours of a single cell.

        All 8 surrounding cells are considered, wrapping across the edges, so
        a cell in the top row sees the bottom row and a cell in the left
        column sees the right column.

        Args:
            row: Row coordinate
            col: Column coordinate

        Returns:
            Number of living neighbours (0-8)
        """
        count = 0
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue

                neighbor_row = (row + delta_row) % self._height
                neighbor_col = (col + delta_col) % self._width
                count += int(self._cells[self.get_index(neighbor_row, neighbor_col)])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbours for all cells using a circular-padded convolution.

        Returns:
            (height, width) array with the live neighbour count of each cell
        """
        self._torch_input[0, 0] = torch.from_numpy(
            self._cells.reshape(self._height, self._width).astype(np.float32)
        )
        padded = F.pad(self._torch_input, (1, 1, 1, 1), mode="circular")
        neighbors = F.conv2d(padded, self._torch_kernel)
        return neighbors[0, 0].numpy().astype(np.int8)

    def tick(self) -> None:
        """Advance the universe by exactly one generation.

        The next generation is written to the spare buffer and then swapped
        in, so no cell ever sees a neighbour's updated state within a tick.
        """
        neighbor_counts = self.count_all_neighbors().ravel()
        alive = self._cells == Cell.ALIVE

        # Survival: live cell with 2 or 3 neighbours
        survive = alive & ((neighbor_counts == 2) | (neighbor_counts == 3))
        # Birth: dead cell with exactly 3 neighbours
        birth = ~alive & (neighbor_counts == 3)

        self._next_cells[:] = survive | birth
        self._cells, self._next_cells = self._next_cells, self._cells
        self._generation += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Generation %d: population %d", self._generation, self.population)

    def render(self) -> str:
        """Render the current generation as text.

        Returns:
            One line of glyphs per row, joined by newlines, with no trailing newline
        """
        glyphs = np.array([self.DEAD_GLYPH, self.ALIVE_GLYPH])
        rows = glyphs[self._cells.reshape(self._height, self._width)]
        return "\n".join("".join(row) for row in rows)

    def to_rows(self) -> List[List[int]]:
        """Convert the current generation to nested lists of 0/1 values."""
        return self._cells.reshape(self._height, self._width).tolist()

    def copy(self) -> "Universe":
        """Return an independent universe with the same cells and generation."""
        other = Universe(self._width, self._height)
        other._cells[:] = self._cells
        other._generation = self._generation
        return other

    def __eq__(self, other: object) -> bool:
        """Universes are equal when their dimensions and cells match."""
        if not isinstance(other, Universe):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return (
            f"Universe(width={self._width}, height={self._height}, "
            f"generation={self._generation}, population={self.population})"
        )

    def __str__(self) -> str:
        return self.render()
