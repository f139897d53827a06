# src/friheten/mapgen/door.py
from typing import List

from ..cells import DOOR, EMPTY
from ..grid import Grid, XY, grid_size, neighbors
from ..rng import PMRandom


def ring_candidates(grid: Grid) -> List[XY]:
    """Outer-ring cells that are not corners: left/right walls, then top/bottom."""
    w, h = grid_size(grid)
    out: List[XY] = []
    for y in range(1, h - 1):
        out.append((0, y))
        out.append((w - 1, y))
    for x in range(1, w - 1):
        out.append((x, 0))
        out.append((x, h - 1))
    return out


def _opens_inward(grid: Grid, pos: XY) -> bool:
    w, h = grid_size(grid)
    for x, y in neighbors(pos):
        if 0 < x < w - 1 and 0 < y < h - 1 and grid[y][x] == EMPTY:
            return True
    return False


def place_door(grid: Grid, rng: PMRandom) -> XY:
    """
    Scan the ring in shuffled order and take the first cell whose interior
    neighbour is floor. If none qualifies, force the door onto the middle of
    the left wall. Writes DOOR and returns its position.
    """
    _, h = grid_size(grid)
    candidates = ring_candidates(grid)
    rng.shuffle(candidates)
    for pos in candidates:
        if _opens_inward(grid, pos):
            grid[pos[1]][pos[0]] = DOOR
            return pos

    fallback = (0, h // 2)
    grid[fallback[1]][fallback[0]] = DOOR
    return fallback
