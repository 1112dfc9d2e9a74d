"""
game.py - Round state machine and per-tick update.

``Game`` owns every piece of mutable engine state: the maze, Pac-Man,
the ghosts, the score/lives/level counters and the shared fright timer.
A front end calls ``tick()`` once per period, forwards input through the
``request_*`` methods and reads ``snapshot()`` to draw.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from pacman4k.config import GameConfig
from pacman4k.constants import DIRECTIONS
from pacman4k.entities import Ghost, Pacman
from pacman4k.maze import Cell, Maze

logger = logging.getLogger(__name__)


class Phase(Enum):
    INTRO = "intro"
    ACTIVE = "active"
    DYING = "dying"
    LEVEL_COMPLETE = "level_complete"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GhostView:
    row: int
    col: int
    dir: int
    frightened: bool


@dataclass(frozen=True)
class Snapshot:
    phase: Phase
    grid: tuple
    pacman: tuple  # (row, col, dir)
    ghosts: tuple  # GhostView per slot
    score: int
    lives: int
    level: int
    fright_timer: int
    dots_left: int


class Game:
    def __init__(self, config: GameConfig | None = None, rng: random.Random | None = None):
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else random.Random()
        self.phase = Phase.INTRO
        self.lives = self.config.lives
        self.score = 0
        self.level = 1
        self.fright_timer = 0
        self.ticks = 0
        self.pending_start = None
        self._load_maze()

    # ── Setup ─────────────────────────────────────────────────────────────────

    def _load_maze(self):
        self.maze = Maze.load(self.config.layout, self.config.ghost_count)
        self.pac = Pacman(self.maze.pacman_start)
        self.ghosts = [Ghost(i, s) for i, s in enumerate(self.maze.ghost_starts)]

    def reset_positions(self):
        self.pac.reset()
        for g in self.ghosts:
            g.reset()
        self.fright_timer = 0

    def start_level(self):
        """Fresh maze for the current level; score and lives carry over."""
        self.pending_start = None
        self._load_maze()
        self.fright_timer = 0
        self.phase = Phase.ACTIVE
        logger.info(
            "Level %d started (%d dots, lives=%d, score=%d)",
            self.level, self.maze.dots_left, self.lives, self.score,
        )

    def reset_game(self):
        self.level = 1
        self.lives = self.config.lives
        self.score = 0
        self.start_level()

    # ── Input ─────────────────────────────────────────────────────────────────

    def request_direction(self, d):
        # Single assignment; the next tick reads whatever was written last.
        if d in DIRECTIONS:
            self.pac.next_dir = d

    def request_start(self):
        if self.phase not in (Phase.INTRO, Phase.GAME_OVER):
            return False
        self.reset_game()
        return True

    def request_pause(self):
        # Only the phase changes; resuming goes through request_start,
        # which begins a new game.
        if self.phase != Phase.ACTIVE:
            return False
        self.phase = Phase.INTRO
        logger.info("Paused on level %d", self.level)
        return True

    # ── Update ────────────────────────────────────────────────────────────────

    def tick(self):
        """Advance one step. Returns the list of event names that fired."""
        self.ticks += 1
        events = []
        if self.phase == Phase.ACTIVE:
            self._tick_active(events)
        elif self.phase == Phase.LEVEL_COMPLETE:
            if self.pending_start is not None and self.ticks >= self.pending_start:
                self.start_level()
                events.append("level_start")
        return events

    def _tick_active(self, events):
        if self.fright_timer > 0:
            self.fright_timer -= 1
            if self.fright_timer == 0:
                for g in self.ghosts:
                    g.frightened = False
                events.append("fright_end")

        self.pac.step(self.maze)
        self._eat(events)

        if self.maze.dots_left == 0:
            self._complete_level(events)
            return

        for g in self.ghosts:
            if not self._check_collision(g, events):
                return
            g.step(self.maze, self.pac.pos, self.rng)

    def _eat(self, events):
        eaten = self.maze.consume_at(*self.pac.pos)
        if eaten == Cell.DOT:
            self.score += self.config.dot_points
            events.append("dot")
        elif eaten == Cell.POWER:
            self.score += self.config.power_points
            self.fright_timer = self.config.fright_ticks
            for g in self.ghosts:
                g.frightened = True
                g.reverse()
            events.append("power")
            logger.debug("Power item at %s, ghosts frightened", self.pac.pos)

    def _check_collision(self, g, events):
        """Resolve contact between Pac-Man and ``g``; False ends the tick."""
        dr = abs(self.pac.row - g.row)
        dc = abs(self.pac.col - g.col)
        if g.frightened:
            if dr == 0 and dc == 0:
                self.score += self.config.ghost_points
                g.send_home()
                events.append("ghost_eaten")
                logger.debug("Ghost %d eaten at %s", g.id, self.pac.pos)
        elif max(dr, dc) <= 1:
            self._die(events)
            return False
        return True

    def _die(self, events):
        self.phase = Phase.DYING
        self.lives -= 1
        events.append("death")
        if self.lives == 0:
            self.level = 1
            self.phase = Phase.GAME_OVER
            events.append("game_over")
            logger.info("Game over with score %d", self.score)
        else:
            self.reset_positions()
            self.phase = Phase.ACTIVE
            logger.info("Pac-Man caught, %d lives left", self.lives)

    def _complete_level(self, events):
        self.phase = Phase.LEVEL_COMPLETE
        self.level += 1
        self.pending_start = self.ticks + self.config.level_complete_ticks
        events.append("level_complete")
        logger.info("Level %d complete, score %d", self.level - 1, self.score)

    # ── Queries ───────────────────────────────────────────────────────────────

    def tick_interval_ms(self) -> int:
        return self.config.tick_interval_ms(self.level)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            phase=self.phase,
            grid=self.maze.cells(),
            pacman=(self.pac.row, self.pac.col, self.pac.dir),
            ghosts=tuple(
                GhostView(g.row, g.col, g.dir, g.frightened) for g in self.ghosts
            ),
            score=self.score,
            lives=self.lives,
            level=self.level,
            fright_timer=self.fright_timer,
            dots_left=self.maze.dots_left,
        )
