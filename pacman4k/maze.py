"""
maze.py - Tile grid parsed from the level text.

The maze owns the cell kinds and the count of dots still on the board.
It is rebuilt from the layout every time a level starts and mutated in
place as Pac-Man eats.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from pacman4k.constants import (
    CH_DOT,
    CH_EMPTY,
    CH_GHOST,
    CH_PACMAN,
    CH_POWER,
    CH_WALL,
    GHOST_COUNT,
)
from pacman4k.errors import LayoutError, OutOfBounds

logger = logging.getLogger(__name__)


class Cell(IntEnum):
    WALL = 1
    EMPTY = 2
    DOT = 3
    POWER = 4
    CLEAR = 5


_CHAR_CELLS = {
    CH_WALL: Cell.WALL,
    CH_DOT: Cell.DOT,
    CH_POWER: Cell.POWER,
    CH_EMPTY: Cell.EMPTY,
}


class Maze:
    """
    A parsed level.

    Attributes
    ----------
    grid         : list  - rows of Cell values, grid[row][col].
    pacman_start : tuple - (row, col) of the ``P`` marker.
    ghost_starts : list  - [(row, col), ...] one per ghost slot.
    dots_left    : int   - dots and power items not yet eaten.
    """

    def __init__(self, grid, pacman_start, ghost_starts):
        self.grid = grid
        self.pacman_start = pacman_start
        self.ghost_starts = list(ghost_starts)
        self.dots_left = sum(
            1 for row in grid for cell in row if cell in (Cell.DOT, Cell.POWER)
        )

    @classmethod
    def load(cls, layout, ghost_count: int = GHOST_COUNT) -> "Maze":
        rows = list(layout)
        if not rows or not rows[0]:
            raise LayoutError("layout has no cells")
        width = len(rows[0])
        for r, line in enumerate(rows):
            if len(line) != width:
                raise LayoutError(
                    f"row {r} has {len(line)} columns, expected {width}"
                )

        grid = []
        pacman_start = None
        ghost_starts = []
        for r, line in enumerate(rows):
            row = []
            for c, ch in enumerate(line):
                if ch == CH_PACMAN:
                    if pacman_start is not None:
                        raise LayoutError(
                            f"second Pac-Man start at ({r}, {c}), "
                            f"first at {pacman_start}"
                        )
                    pacman_start = (r, c)
                elif ch == CH_GHOST and len(ghost_starts) < ghost_count:
                    ghost_starts.append((r, c))
                row.append(_CHAR_CELLS.get(ch, Cell.CLEAR))
            grid.append(row)

        if pacman_start is None:
            raise LayoutError("layout has no Pac-Man start")
        if len(ghost_starts) < ghost_count:
            raise LayoutError(
                f"layout has {len(ghost_starts)} ghost starts, "
                f"need {ghost_count}"
            )

        maze = cls(grid, pacman_start, ghost_starts)
        if maze.dots_left == 0:
            raise LayoutError("layout has no dots")
        logger.debug(
            "Loaded %dx%d maze with %d dots", maze.rows, maze.cols, maze.dots_left
        )
        return maze

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0])

    def in_bounds(self, row, col) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def can_move(self, row, col) -> bool:
        """True when (row, col) is on the board and not a wall."""
        return self.in_bounds(row, col) and self.grid[row][col] != Cell.WALL

    def cell_at(self, row, col) -> Cell:
        if not self.in_bounds(row, col):
            raise OutOfBounds(row, col, self.rows, self.cols)
        return self.grid[row][col]

    def consume_at(self, row, col):
        """Eat whatever is on (row, col); returns the Cell eaten or None."""
        cell = self.cell_at(row, col)
        if cell not in (Cell.DOT, Cell.POWER):
            return None
        self.grid[row][col] = Cell.CLEAR
        self.dots_left -= 1
        return cell

    def cells(self):
        """Immutable copy of the grid for renderers."""
        return tuple(tuple(row) for row in self.grid)
