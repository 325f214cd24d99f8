"""
grid.py - Coordinate space of the board.

Cells are (x, y) pairs measured in the same units as the board size, so a
board of 400x400 with a cell size of 20 has 20 columns and 20 rows and its
cells are (0, 0), (20, 0), ... (380, 380).
"""

from .config import BOARD_W, BOARD_H, CELL


class Grid:
    """Immutable board geometry. Pure, no side effects."""

    def __init__(self, width: int = BOARD_W, height: int = BOARD_H, cell: int = CELL):
        if cell <= 0:
            raise ValueError(f"cell size must be positive, got {cell}")
        if width <= 0 or height <= 0:
            raise ValueError(f"board must have a positive size, got {width}x{height}")
        if width % cell or height % cell:
            raise ValueError(f"board {width}x{height} is not a multiple of cell size {cell}")
        self.width = width
        self.height = height
        self.cell = cell

    @property
    def cols(self) -> int:
        return self.width // self.cell

    @property
    def rows(self) -> int:
        return self.height // self.cell

    def contains(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return (
            0 <= x < self.width
            and 0 <= y < self.height
            and x % self.cell == 0
            and y % self.cell == 0
        )

    def cells(self):
        """Every cell of the board, row by row."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (col * self.cell, row * self.cell)

    def __len__(self) -> int:
        return self.cols * self.rows

    def __repr__(self):
        return f"Grid({self.width}x{self.height}, cell={self.cell})"
