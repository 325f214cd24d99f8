"""
food.py - Food placement.

Picks a free cell uniformly at random. A bounded number of random samples
is tried first, then the free cells are enumerated and one is chosen
from those.
"""

import random

from .config import FOOD_SAMPLE_ATTEMPTS
from .grid import Grid


class NoSpaceAvailable(Exception):
    """Raised when the snake covers every cell of the board."""

    def __init__(self, grid: Grid):
        super().__init__(f"no free cell left on {grid!r}")
        self.grid = grid


def place_food(snake_cells, grid: Grid, rng=random,
               attempts: int = FOOD_SAMPLE_ATTEMPTS) -> tuple[int, int]:
    occupied = set(snake_cells)

    for _ in range(attempts):
        pos = (rng.randrange(grid.cols) * grid.cell, rng.randrange(grid.rows) * grid.cell)
        if pos not in occupied:
            return pos

    free = [c for c in grid.cells() if c not in occupied]
    if not free:
        raise NoSpaceAvailable(grid)
    return rng.choice(free)
