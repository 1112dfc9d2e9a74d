from conftest import FixedRng

from pacman4k.constants import DOWN, LEFT, RIGHT, STOP, UP
from pacman4k.entities import Ghost, Pacman
from pacman4k.maze import Maze

OPEN = [
    "11111",
    "1P001",
    "10G01",
    "10001",
    "11111",
]

TUNNEL = [
    "11111",
    "G00P0",
    "11111",
]


def _ghost(layout, d):
    maze = Maze.load(layout, ghost_count=1)
    g = Ghost(0, maze.ghost_starts[0])
    g.dir = d
    return maze, g


# ── Pac-Man ───────────────────────────────────────────────────────────────────


def test_pacman_adopts_open_request_and_moves(ref_maze) -> None:
    pac = Pacman(ref_maze.pacman_start)
    pac.next_dir = LEFT
    assert pac.step(ref_maze) == (13, 8)
    assert pac.dir == LEFT


def test_pacman_ignores_request_into_wall(ref_maze) -> None:
    pac = Pacman(ref_maze.pacman_start)
    pac.next_dir = UP
    assert pac.step(ref_maze) == (13, 9)
    assert pac.dir == STOP


def test_pacman_keeps_direction_when_blocked() -> None:
    maze = Maze.load(OPEN, ghost_count=1)
    pac = Pacman(maze.pacman_start)
    pac.next_dir = LEFT
    pac.dir = LEFT
    assert pac.step(maze) == (1, 1)
    assert pac.dir == LEFT


def test_pacman_buffered_turn_waits_for_opening(ref_maze) -> None:
    pac = Pacman(ref_maze.pacman_start)
    pac.dir = LEFT
    pac.next_dir = UP
    positions = [pac.step(ref_maze) for _ in range(5)]
    # Row 12 opens above column 6.
    assert positions[:3] == [(13, 8), (13, 7), (13, 6)]
    assert positions[3] == (12, 6)
    assert pac.dir == UP


def test_pacman_wraps_through_left_tunnel(ref_maze) -> None:
    pac = Pacman((9, 0))
    pac.dir = LEFT
    assert pac.step(ref_maze) == (9, ref_maze.cols - 2)
    assert pac.dir == LEFT


def test_pacman_wraps_through_right_tunnel(ref_maze) -> None:
    pac = Pacman((9, ref_maze.cols - 1))
    pac.dir = RIGHT
    assert pac.step(ref_maze) == (9, 1)


def test_pacman_reset_clears_request() -> None:
    pac = Pacman((2, 3))
    pac.row, pac.col, pac.dir, pac.next_dir = 5, 5, LEFT, UP
    pac.reset()
    assert (pac.pos, pac.dir, pac.next_dir) == ((2, 3), STOP, STOP)


# ── Ghosts ────────────────────────────────────────────────────────────────────


def test_ghost_candidates_exclude_reverse() -> None:
    maze, g = _ghost(OPEN, UP)
    assert g.candidates(maze) == [LEFT, RIGHT, UP]


def test_stationary_ghost_may_go_any_way() -> None:
    maze, g = _ghost(OPEN, STOP)
    assert g.candidates(maze) == [LEFT, RIGHT, UP, DOWN]


def test_pursuit_takes_closest_tile() -> None:
    maze, g = _ghost(OPEN, DOWN)
    # From (2, 2) toward (3, 3): DOWN and RIGHT both reach distance 1.
    assert g.step(maze, (3, 3), FixedRng(coin=0.9)) == (2, 3)
    assert g.dir == RIGHT


def test_pursuit_tie_replaced_on_heads() -> None:
    maze, g = _ghost(OPEN, UP)
    # Toward (1, 1): LEFT and UP tie at distance 1.
    g.step(maze, (1, 1), FixedRng(coin=0.9))
    assert g.dir == LEFT

    maze, g = _ghost(OPEN, UP)
    g.step(maze, (1, 1), FixedRng(coin=0.1))
    assert g.dir == UP


def test_flee_maximises_distance() -> None:
    maze, g = _ghost(OPEN, UP)
    g.frightened = True
    assert g.step(maze, (1, 1), FixedRng()) == (2, 3)
    assert g.dir == RIGHT


def test_flee_tie_keeps_first_found() -> None:
    maze, g = _ghost(OPEN, STOP)
    g.frightened = True
    g.step(maze, (2, 2), FixedRng(coin=0.0))
    assert g.dir == LEFT


def test_ghost_reverses_out_of_dead_end() -> None:
    maze, g = _ghost(["1111111", "1P000G1", "1111111"], RIGHT)
    assert g.step(maze, (1, 1), FixedRng()) == (1, 4)
    assert g.dir == LEFT


def test_sealed_ghost_stays_put() -> None:
    maze, g = _ghost(["11111", "1P1G1", "11111", "11011"], UP)
    assert g.step(maze, (1, 1), FixedRng()) == (1, 3)
    assert g.dir == UP


def test_corridor_turn_follows_only_exit() -> None:
    maze, g = _ghost(["11111", "10PG1", "11101", "11111"], RIGHT)
    assert g.step(maze, (1, 2), FixedRng()) == (2, 3)
    assert g.dir == DOWN


def test_ghost_turns_back_at_tunnel_mouth() -> None:
    maze, g = _ghost(TUNNEL, LEFT)
    assert g.step(maze, (1, 3), FixedRng()) == (1, 1)
    assert g.dir == RIGHT


def test_send_home_keeps_heading() -> None:
    g = Ghost(1, (4, 4))
    g.row, g.col, g.dir, g.frightened = 1, 1, LEFT, True
    g.send_home()
    assert (g.pos, g.dir, g.frightened) == ((4, 4), LEFT, False)

    g.frightened = True
    g.reset()
    assert (g.pos, g.dir, g.frightened) == ((4, 4), UP, False)


def test_pacman_ignores_non_direction_request(ref_maze) -> None:
    pac = Pacman(ref_maze.pacman_start)
    pac.dir = LEFT
    pac.next_dir = STOP
    assert pac.step(ref_maze) == (13, 8)
    assert pac.dir == LEFT
    pac.next_dir = 7
    assert pac.step(ref_maze) == (13, 7)
    assert pac.dir == LEFT
