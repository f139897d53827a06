from __future__ import annotations

import csv
from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from .cells import (
    DOOR, EMPTY, WALL,
    SOFA_SINGLE, SOFA_RECT_H, SOFA_RECT_V,
    SOFA_L_0, SOFA_L_90, SOFA_L_180, SOFA_L_270,
)

XY = Tuple[int, int]
Grid = List[List[str]]

# right, left, down, up
DIRECTIONS: Tuple[XY, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

GLYPHS: Dict[str, str] = {
    EMPTY: ".",
    WALL: "#",
    DOOR: "D",
    SOFA_SINGLE: "s",
    SOFA_RECT_H: "-",
    SOFA_RECT_V: "|",
    SOFA_L_0: "F",
    SOFA_L_90: "L",
    SOFA_L_180: "J",
    SOFA_L_270: "7",
}
CELLS_BY_GLYPH: Dict[str, str] = {g: c for c, g in GLYPHS.items()}


def make_grid(width: int, height: int, fill: str = EMPTY) -> Grid:
    if width <= 0 or height <= 0:
        raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
    return [[fill for _ in range(width)] for _ in range(height)]


def grid_size(grid: Grid) -> XY:
    """
    Return (width, height). Rows of inconsistent length break every
    bounds check downstream, so they are rejected here.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must have at least one row and one column")
    width = len(grid[0])
    for y, row in enumerate(grid):
        if len(row) != width:
            raise ValueError(f"row {y} has {len(row)} cells, expected {width}")
    return width, len(grid)


def in_bounds(grid: Grid, pos: XY) -> bool:
    x, y = pos
    return 0 <= y < len(grid) and 0 <= x < len(grid[y])


def neighbors(pos: XY) -> Iterator[XY]:
    x, y = pos
    for dx, dy in DIRECTIONS:
        yield (x + dx, y + dy)


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def positions_of(grid: Grid, predicate: Callable[[str], bool]) -> List[XY]:
    return [(x, y) for y, row in enumerate(grid) for x, c in enumerate(row) if predicate(c)]


def find_door(grid: Grid) -> Optional[XY]:
    for y, row in enumerate(grid):
        for x, c in enumerate(row):
            if c == DOOR:
                return (x, y)
    return None


def to_ascii(grid: Grid, marks: Optional[Set[XY]] = None, mark: str = "*") -> str:
    marks = marks or set()
    lines = []
    for y, row in enumerate(grid):
        lines.append("".join(mark if (x, y) in marks else GLYPHS[c] for x, c in enumerate(row)))
    return "\n".join(lines)


def from_ascii(text: str) -> Grid:
    rows = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
    try:
        grid = [[CELLS_BY_GLYPH[ch] for ch in row] for row in rows]
    except KeyError as e:
        raise ValueError(f"unknown grid glyph {e.args[0]!r}") from None
    grid_size(grid)
    return grid


def read_tsv(path) -> Grid:
    """Grid of cell tags, one row per line, tab-separated."""
    with open(path, encoding="utf-8") as f:
        rows = [line.rstrip("\n").split("\t") for line in f if line.strip()]
    grid_size(rows)
    return rows


def write_tsv(grid: Grid, path) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t")
        for row in grid:
            w.writerow(row)
