"""
entities.py - Pac-Man and the ghosts.

Both move one tile per tick on the maze grid. Positions are (row, col)
tile coordinates; directions are the codes from ``constants``.
"""

from __future__ import annotations

from pacman4k.constants import DIRECTIONS, DX, DY, GHOST_SCAN, LEFT, OPP, RIGHT, STOP, UP

# ── Classes ───────────────────────────────────────────────────────────────────


class Entity:
    def __init__(self, start):
        self.start = start
        self.row, self.col = start
        self.dir = STOP

    @property
    def pos(self):
        return (self.row, self.col)

    def reset(self):
        self.row, self.col = self.start
        self.dir = STOP

    def ahead(self, d):
        return self.row + DY[d], self.col + DX[d]


class Pacman(Entity):
    def __init__(self, start):
        super().__init__(start)
        self.next_dir = STOP

    def reset(self):
        super().reset()
        self.next_dir = STOP

    def step(self, maze):
        """Resolve one tick of movement against ``maze``."""
        # Tunnel exits; the regular move below still applies this tick.
        if self.col == 0 and self.dir == LEFT:
            self.col = maze.cols - 1
        elif self.col == maze.cols - 1 and self.dir == RIGHT:
            self.col = 0

        req = self.next_dir
        if req in DIRECTIONS and maze.can_move(*self.ahead(req)):
            self.dir = req

        nr, nc = self.ahead(self.dir)
        if maze.can_move(nr, nc):
            self.row, self.col = nr, nc
        return self.pos


class Ghost(Entity):
    """
    One chaser. Pursues Pac-Man by default and flees while ``frightened``.

    There is no stored "returning" mode: an eaten ghost is put straight
    back on its start tile by ``send_home``.
    """

    def __init__(self, g_id, start):
        super().__init__(start)
        self.id = g_id
        self.dir = UP
        self.frightened = False

    def reset(self):
        self.row, self.col = self.start
        self.dir = UP
        self.frightened = False

    def send_home(self):
        self.row, self.col = self.start
        self.frightened = False

    def reverse(self):
        self.dir = OPP[self.dir]

    def candidates(self, maze):
        back = OPP[self.dir]
        return [
            d for d in GHOST_SCAN
            if d != back and maze.can_move(*self.ahead(d))
        ]

    def choose(self, opts, target, rng):
        tr, tc = target
        best_d = STOP
        if self.frightened:
            max_dist = -1
            for d in opts:
                nr, nc = self.ahead(d)
                dist = abs(nr - tr) + abs(nc - tc)
                if dist > max_dist:
                    max_dist = dist
                    best_d = d
        else:
            min_dist = None
            for d in opts:
                nr, nc = self.ahead(d)
                dist = abs(nr - tr) + abs(nc - tc)
                if min_dist is None or dist < min_dist:
                    min_dist = dist
                    best_d = d
                elif dist == min_dist and rng.random() < 0.5:
                    best_d = d
        return best_d

    def step(self, maze, target, rng):
        """Pick a heading toward (or away from) ``target`` and move."""
        opts = self.candidates(maze)

        if not opts:
            # Dead end: turn around if we can, otherwise sit still.
            if maze.can_move(*self.ahead(OPP[self.dir])):
                self.reverse()
        elif len(opts) == 1 and self.dir != STOP:
            if opts[0] != self.dir:
                self.dir = opts[0]
        else:
            self.dir = self.choose(opts, target, rng)

        nr, nc = self.ahead(self.dir)
        if nc == -1 and self.dir == LEFT:
            nc = maze.cols - 1
        elif nc == maze.cols and self.dir == RIGHT:
            nc = 0

        if maze.can_move(nr, nc):
            self.row, self.col = nr, nc
        elif opts:
            self.dir = rng.choice(opts)
            nr, nc = self.ahead(self.dir)
            if maze.can_move(nr, nc):
                self.row, self.col = nr, nc
        return self.pos
