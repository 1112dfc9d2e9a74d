import random

import pytest

from pacman4k.config import GameConfig
from pacman4k.constants import MAZE
from pacman4k.game import Game
from pacman4k.maze import Maze

# Four ghosts sealed in single cells below a short corridor, plus one dot
# nobody can reach, so the level never completes by accident.
SEALED = [
    "111111111",
    "1P0200001",
    "111111111",
    "1G1G1G1G1",
    "111111111",
    "111101111",
    "111111111",
]

# Ghost 0 starts right next to Pac-Man; the others are sealed away.
AMBUSH = [
    "1111111",
    "1PG0001",
    "1111111",
    "1G1G1G1",
    "1111111",
    "1110111",
    "1111111",
]

# A single dot beside Pac-Man.
ONE_DOT = [
    "111111111",
    "1P0EEEEE1",
    "111111111",
    "1G1G1G1G1",
    "111111111",
]


class FixedRng:
    """Stand-in for random.Random with a fixed coin and first-pick choice."""

    def __init__(self, coin=0.9):
        self.coin = coin

    def random(self):
        return self.coin

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def ref_maze():
    return Maze.load(MAZE)


@pytest.fixture
def make_game():
    def _make(layout=None, seed=0, **overrides):
        if layout is not None:
            overrides["layout"] = tuple(layout)
        return Game(GameConfig(**overrides), rng=random.Random(seed))

    return _make
