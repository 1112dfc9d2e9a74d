"""
AC'S PAC-MAN 4K - pygame front end.

Opens the window, turns key presses into engine requests, ticks the
engine at the per-level period and paints each snapshot. Everything
animated here (mouth, pellet blink) is local to the renderer; the engine
never sees it.
"""

from __future__ import annotations

import argparse
import logging
import math
import random
import sys

import pygame

from pacman4k.constants import DOWN, DX, DY, LEFT, RIGHT, UP
from pacman4k.game import Game, Phase
from pacman4k.maze import Cell

logger = logging.getLogger(__name__)

# ── Constants ─────────────────────────────────────────────────────────────────
TILE = 20
HUD_H = 48
FPS = 60

# Colors
BK = (0, 0, 0)
WC = (33, 33, 222)   # Wall color
DC = (255, 184, 174)  # Dot color
YL = (255, 255, 0)
RED = (255, 0, 0)
PNK = (255, 184, 255)
CYN = (0, 255, 255)
ORG = (255, 184, 82)
BLU = (33, 33, 255)  # Frightened blue
WH = (255, 255, 255)
GHOST_COLORS = [RED, PNK, CYN, ORG]

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}
START_KEYS = (pygame.K_RETURN, pygame.K_SPACE)


def handle_key(game, key):
    """Forward one KEYDOWN to the engine. Returns False on quit keys."""
    if key == pygame.K_q:
        return False
    if key == pygame.K_ESCAPE:
        game.request_pause()
    elif key in START_KEYS:
        game.request_start()
    elif key in KEY_DIRECTIONS:
        game.request_direction(KEY_DIRECTIONS[key])
    return True


class Renderer:
    def __init__(self, surf, font=None):
        self.surf = surf
        self.font = font
        self.frame = 0
        self.mouth_open = 0.0
        self.mouth_speed = 0.2

    def tile_center(self, r, c):
        return (c * TILE + TILE // 2, HUD_H + r * TILE + TILE // 2)

    def draw(self, snap):
        self.frame += 1
        self.mouth_open += self.mouth_speed
        if self.mouth_open > 1 or self.mouth_open < 0:
            self.mouth_speed *= -1

        self.surf.fill(BK)
        self.draw_maze(snap)
        if snap.phase in (Phase.ACTIVE, Phase.INTRO, Phase.LEVEL_COMPLETE):
            self.draw_pacman(*snap.pacman)
            for i, g in enumerate(snap.ghosts):
                self.draw_ghost(i, g, snap.fright_timer)
        self.draw_hud(snap)

    def draw_maze(self, snap):
        for r, row in enumerate(snap.grid):
            for c, val in enumerate(row):
                x, y = c * TILE, HUD_H + r * TILE
                if val == Cell.WALL:
                    pygame.draw.rect(self.surf, WC, (x + 2, y + 2, TILE - 4, TILE - 4))
                elif val == Cell.DOT:
                    pygame.draw.circle(self.surf, DC, (x + TILE // 2, y + TILE // 2), 2)
                elif val == Cell.POWER:
                    if (self.frame // 12) % 2 == 0:
                        pygame.draw.circle(self.surf, DC, (x + TILE // 2, y + TILE // 2), 6)

    def draw_pacman(self, row, col, d):
        px, py = self.tile_center(row, col)
        radius = TILE // 2 - 2
        angle_offsets = {RIGHT: 0, DOWN: 90, LEFT: 180, UP: 270}
        base_angle = angle_offsets.get(d, 0)

        if self.mouth_open <= 0.1:
            pygame.draw.circle(self.surf, YL, (px, py), radius)
            return
        start_angle = base_angle + (45 * self.mouth_open)
        end_angle = base_angle + 360 - (45 * self.mouth_open)
        points = [(px, py)]
        steps = 16
        for i in range(steps + 1):
            a = math.radians(start_angle + (end_angle - start_angle) * (i / steps))
            points.append((px + radius * math.cos(a), py + radius * math.sin(a)))
        pygame.draw.polygon(self.surf, YL, points)

    def draw_ghost(self, idx, g, fright_timer):
        px, py = self.tile_center(g.row, g.col)
        c = GHOST_COLORS[idx % len(GHOST_COLORS)]
        if g.frightened:
            c = BLU
            # Flash white for the last stretch of the fright window.
            if fright_timer < 30 and (fright_timer // 3) % 2 == 0:
                c = WH
        r = TILE // 2 - 2
        pygame.draw.circle(self.surf, c, (px, py), r)
        pygame.draw.rect(self.surf, c, (px - r, py, r * 2, r))

        eye_off_x = DX[g.dir] * 2
        eye_off_y = DY[g.dir] * 2 - 2
        pygame.draw.circle(self.surf, WH, (px - 3 + eye_off_x, py + eye_off_y), 2)
        pygame.draw.circle(self.surf, WH, (px + 3 + eye_off_x, py + eye_off_y), 2)

    def draw_hud(self, snap):
        w, h = self.surf.get_size()
        for i in range(snap.lives):
            pygame.draw.circle(self.surf, YL, (20 + i * 20, HUD_H // 2 + 10), 6)
        if self.font is None:
            return
        self.blit(f"SCORE: {snap.score}", WH, (10, 4))
        self.blit(f"LVL: {snap.level}", YL, (w - 90, 4))

        banner = None
        if snap.phase == Phase.INTRO:
            banner = ("PRESS ENTER TO START", YL)
        elif snap.phase == Phase.LEVEL_COMPLETE:
            banner = (f"LEVEL {snap.level - 1} COMPLETE!", YL)
        elif snap.phase == Phase.GAME_OVER:
            banner = ("GAME OVER", RED)
        if banner:
            lbl = self.font.render(banner[0], True, banner[1])
            self.surf.blit(lbl, (w // 2 - lbl.get_width() // 2, h // 2))

    def blit(self, text, color, pos):
        self.surf.blit(self.font.render(text, True, color), pos)


class TickDriver:
    """Calls ``game.tick()`` once per elapsed period, never more per frame."""

    def __init__(self, game):
        self.game = game
        self.acc = 0

    def advance(self, elapsed_ms):
        self.acc += elapsed_ms
        period = self.game.tick_interval_ms()
        if self.acc < period:
            return None
        # Frames that lag behind drop the backlog instead of bursting ticks.
        self.acc = 0 if self.acc >= 2 * period else self.acc - period
        return self.game.tick()


def run(game, scale=1):
    pygame.init()
    grid_w, grid_h = game.maze.cols * TILE, game.maze.rows * TILE + HUD_H
    window = pygame.display.set_mode((grid_w * scale, grid_h * scale))
    pygame.display.set_caption("AC's Pac-Man 4K")
    surf = pygame.Surface((grid_w, grid_h))
    renderer = Renderer(surf, pygame.font.SysFont("monospace", 16, bold=True))
    driver = TickDriver(game)
    clock = pygame.time.Clock()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = handle_key(game, event.key)

        driver.advance(clock.tick(FPS))
        renderer.draw(game.snapshot())
        pygame.transform.scale(surf, window.get_size(), window)
        pygame.display.flip()
    pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="pacman4k", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--seed", type=int, default=None, help="seed for ghost tie-breaks")
    parser.add_argument("--scale", type=int, default=2, help="window scale factor")
    parser.add_argument("--autostart", action="store_true", help="skip the intro screen")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    game = Game(rng=random.Random(args.seed))
    if args.autostart:
        game.request_start()
    logger.info("Starting window (seed=%s, scale=%d)", args.seed, args.scale)
    run(game, scale=max(1, args.scale))
    return 0


if __name__ == "__main__":
    sys.exit(main())
