"""
config.py - Tunable game rules bundled into one value.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pacman4k.constants import (
    BASE_TICK_MS,
    DOT_POINTS,
    FRIGHT_TICKS,
    GHOST_COUNT,
    GHOST_POINTS,
    LEVEL_COMPLETE_TICKS,
    MAZE,
    MIN_TICK_MS,
    POWER_POINTS,
    START_LIVES,
    TICK_MS_STEP,
)


@dataclass(frozen=True)
class GameConfig:
    layout: tuple = field(default_factory=lambda: tuple(MAZE))
    ghost_count: int = GHOST_COUNT
    lives: int = START_LIVES
    dot_points: int = DOT_POINTS
    power_points: int = POWER_POINTS
    ghost_points: int = GHOST_POINTS
    fright_ticks: int = FRIGHT_TICKS
    level_complete_ticks: int = LEVEL_COMPLETE_TICKS
    base_tick_ms: int = BASE_TICK_MS
    tick_ms_step: int = TICK_MS_STEP
    min_tick_ms: int = MIN_TICK_MS

    def tick_interval_ms(self, level: int) -> int:
        """Driver period for ``level``; ghosts get faster each level."""
        return max(self.base_tick_ms - (level - 1) * self.tick_ms_step, self.min_tick_ms)
