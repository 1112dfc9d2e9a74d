"""
errors.py - Exception types raised by the engine.
"""


class LayoutError(ValueError):
    """The level text can't be turned into a playable maze."""


class OutOfBounds(IndexError):
    """A grid coordinate outside the maze was looked up."""

    def __init__(self, row, col, rows, cols):
        super().__init__(f"cell ({row}, {col}) outside {rows}x{cols} maze")
        self.row = row
        self.col = col
