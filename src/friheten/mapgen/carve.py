# src/friheten/mapgen/carve.py
# Wall carving: outer ring, L/U partitions, sectioned layouts, scattered walls.
# Coordinates are 0-based, (x, y) with the outer ring at 0 and w-1 / h-1.

from math import floor

from ..cells import EMPTY, WALL
from ..config import GENERATOR, GeneratorConfig
from ..grid import Grid, grid_size, make_grid
from ..rng import PMRandom


def empty_room(width: int, height: int) -> Grid:
    """Fresh grid: interior floor, outer ring walls."""
    grid = make_grid(width, height, EMPTY)
    add_outer_walls(grid)
    return grid


def add_outer_walls(grid: Grid) -> None:
    w, h = grid_size(grid)
    for x in range(w):
        grid[0][x] = WALL
        grid[h - 1][x] = WALL
    for y in range(h):
        grid[y][0] = WALL
        grid[y][w - 1] = WALL


def carve_shaped_room(grid: Grid, complexity: float, rng: PMRandom, config: GeneratorConfig = GENERATOR) -> bool:
    """
    L partition: a vertical arm from the top wall down to 70% of the height
    and a horizontal arm from it to the right wall at 40% of the height.
    A second vertical arm at 70% of the width turns it into a U.
    Returns True when the U arm was added.
    """
    w, h = grid_size(grid)
    # The coin is always drawn so the stream does not depend on complexity.
    u_shape = rng.random() > 0.5 and complexity > config.u_shape_threshold

    arm_x = floor(w * 0.4)
    second_x = floor(w * 0.7)
    arm_y = floor(h * 0.4)
    arm_end_y = floor(h * 0.7)

    for y in range(1, arm_end_y):
        grid[y][arm_x] = WALL
    for x in range(arm_x, w - 1):
        grid[arm_y][x] = WALL
    if u_shape:
        for y in range(1, arm_end_y):
            grid[y][second_x] = WALL
    return u_shape


def carve_sections(grid: Grid, complexity: float, rng: PMRandom) -> int:
    """
    floor(2 + 3c) straight dividers of random orientation, each leaving
    exactly one gap cell. Returns the number of dividers drawn.
    """
    w, h = grid_size(grid)
    dividers = floor(2 + complexity * 3)
    for _ in range(dividers):
        if rng.random() > 0.5:
            y = floor(h * 0.3 + rng.random() * h * 0.4)
            start = floor(1 + rng.random() * (w * 0.3))
            end = floor(w * 0.7 + rng.random() * (w * 0.3) - 1)
            gap = floor(start + rng.random() * max(0, end - start - 1))
            for x in range(start, end + 1):
                if x != gap:
                    grid[y][x] = WALL
        else:
            x = floor(w * 0.3 + rng.random() * w * 0.4)
            start = floor(1 + rng.random() * (h * 0.3))
            end = floor(h * 0.7 + rng.random() * (h * 0.3) - 1)
            gap = floor(start + rng.random() * max(0, end - start - 1))
            for y in range(start, end + 1):
                if y != gap:
                    grid[y][x] = WALL
    return dividers


def scatter_walls(grid: Grid, density: float, rng: PMRandom) -> int:
    """
    Turn floor(interior * density) random interior empty cells into walls.
    Cells already non-empty are skipped and redrawn. Returns walls added.
    """
    w, h = grid_size(grid)
    interior = (w - 2) * (h - 2)
    free = sum(1 for y in range(1, h - 1) for x in range(1, w - 1) if grid[y][x] == EMPTY)
    target = min(floor(interior * density), free)

    added = 0
    while added < target:
        x = 1 + rng.below(w - 2)
        y = 1 + rng.below(h - 2)
        if grid[y][x] == EMPTY:
            grid[y][x] = WALL
            added += 1
    return added
