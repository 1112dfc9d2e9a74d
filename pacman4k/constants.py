"""
constants.py - Shared constants for the pacman4k engine and front end.

Direction codes, layout characters, scoring and timing values all live
here so the engine and the pygame front end agree on them.
"""

# ── Directions ────────────────────────────────────────────────────────────────
UP, DOWN, LEFT, RIGHT = 0, 1, 2, 3
STOP = -1
DX = {UP: 0, DOWN: 0, LEFT: -1, RIGHT: 1, STOP: 0}
DY = {UP: -1, DOWN: 1, LEFT: 0, RIGHT: 0, STOP: 0}
OPP = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT, STOP: STOP}

DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Ghost candidate scan order; ties in flee mode go to the earliest entry.
GHOST_SCAN = (LEFT, RIGHT, UP, DOWN)

# ── Layout characters ─────────────────────────────────────────────────────────
CH_WALL = "1"
CH_DOT = "0"
CH_POWER = "2"
CH_PACMAN = "P"
CH_GHOST = "G"
CH_EMPTY = "E"

# ── Rules ─────────────────────────────────────────────────────────────────────
GHOST_COUNT = 4
START_LIVES = 3
DOT_POINTS = 10
POWER_POINTS = 50
GHOST_POINTS = 200
FRIGHT_TICKS = 100

# Ticks spent on the level-complete screen before the next level loads.
LEVEL_COMPLETE_TICKS = 15

# Tick period: 150 ms on level 1, 10 ms faster per level, never below 50 ms.
BASE_TICK_MS = 150
TICK_MS_STEP = 10
MIN_TICK_MS = 50

# ── Maze Data ─────────────────────────────────────────────────────────────────
# 1:Wall, 0:Dot, 2:Power, P:Pac-Man start, G:Ghost start, E:Empty (no dot)
MAZE = [
    "1111111111111111111",
    "1200000001000000021",
    "1011011101011101101",
    "1000000000000000001",
    "1011010111110101101",
    "1000010001000100001",
    "1111011101011101111",
    "111101000E000101111",
    "11110101G1G10101111",
    "00000001G1G10000000",  # Tunnel row
    "1111010111110101111",
    "1111010000000101111",
    "1111010111110101111",
    "100000000P000000001",
    "1011011101011101101",
    "1200010001000100021",
    "1101010111110101011",
    "1000000000000000001",
    "1011111111111111101",
    "1000000000000000001",
    "1111111111111111111",
]
