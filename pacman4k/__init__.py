"""
pacman4k - AC's Pac-Man 4K: tick-driven maze chase engine with a pygame front end.

  constants  - direction codes, layout characters, scoring and timing.
  config     - GameConfig, the tunable rule set.
  maze       - Maze.load() parser, Cell kinds, dot bookkeeping.
  entities   - Pacman and Ghost movement.
  game       - Game round state machine, Phase, Snapshot.
  app        - pygame window, input mapping, renderer, main().
"""

from pacman4k.config import GameConfig
from pacman4k.errors import LayoutError, OutOfBounds
from pacman4k.game import Game, Phase, Snapshot
from pacman4k.maze import Cell, Maze

__all__ = [
    "Cell",
    "Game",
    "GameConfig",
    "LayoutError",
    "Maze",
    "OutOfBounds",
    "Phase",
    "Snapshot",
]
