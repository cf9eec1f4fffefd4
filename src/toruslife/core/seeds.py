"""Deterministic seed rules for initializing a universe.

A seed rule maps a ``(row, col)`` coordinate to an initial cell state. Any
callable with that signature returning a truthy value for live cells is
accepted by :class:`~toruslife.core.grid.Universe`; the helpers here cover
the patterns used for visual verification and testing.
"""

from typing import Callable, Dict, List

import numpy as np

from .cell import Cell

SeedRule = Callable[[int, int], object]

# Characters treated as live cells when parsing a text picture
ALIVE_GLYPHS = frozenset("■#*O1")


def reference_seed(row: int, col: int) -> bool:
    """Reference pattern: alive iff (row + col) is divisible by 2 or by 7."""
    return (row + col) % 2 == 0 or (row + col) % 7 == 0


def flat_index_seed(width: int) -> SeedRule:
    """Pattern keyed on the row-major flat index ``row * width + col``.

    Args:
        width: Width of the universe the rule will seed

    Returns:
        Seed rule marking a cell alive iff its flat index is divisible by 2 or by 7
    """

    def rule(row: int, col: int) -> bool:
        index = row * width + col
        return index % 2 == 0 or index % 7 == 0

    return rule


def checkerboard_seed(row: int, col: int) -> bool:
    """Alternate live and dead cells."""
    return (row + col) % 2 == 0


def empty_seed(row: int, col: int) -> bool:
    return False


def random_seed(probability: float, seed: int) -> SeedRule:
    """Pseudo-random pattern that is fully determined by ``seed``.

    The decisions are drawn lazily per coordinate from a hash of
    ``(seed, row, col)``, so the rule does not depend on the universe size
    or on the order in which cells are visited.

    Args:
        probability: Chance each cell starts alive (0.0 to 1.0)
        seed: Seed for the numpy random generator

    Returns:
        Seed rule

    Raises:
        ValueError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    def rule(row: int, col: int) -> bool:
        rng = np.random.default_rng([seed, row, col])
        return bool(rng.random() < probability)

    return rule


def text_seed(text: str) -> List[List[Cell]]:
    """Parse a multi-line picture into rows of cells.

    ``■``, ``#``, ``*``, ``O`` and ``1`` mark live cells; every other
    character is dead. Shorter lines are padded with dead cells up to the
    longest line.

    Args:
        text: Picture with one line per row

    Returns:
        List of rows, each a list of Cell values
    """
    lines = text.splitlines()
    width = max((len(line) for line in lines), default=0)
    return [
        [Cell.ALIVE if char in ALIVE_GLYPHS else Cell.DEAD for char in line.ljust(width)]
        for line in lines
    ]


SEED_RULES: Dict[str, Callable[[int], SeedRule]] = {
    "reference": lambda width: reference_seed,
    "flat-index": flat_index_seed,
    "checkerboard": lambda width: checkerboard_seed,
    "empty": lambda width: empty_seed,
}


def get_seed_rule(name: str, width: int) -> SeedRule:
    """Look up a named seed rule for a universe of the given width.

    Raises:
        ValueError: If no rule has that name
    """
    try:
        factory = SEED_RULES[name]
    except KeyError:
        raise ValueError(f"Unknown seed rule '{name}'. Available: {', '.join(SEED_RULES)}") from None
    return factory(width)
