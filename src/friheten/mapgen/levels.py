# src/friheten/mapgen/levels.py
# Level catalogue: two hand-made rooms, then generated ones of rising complexity.

from typing import List, Optional, Tuple

from ..grid import XY
from ..level import Inventory, Level
from ..rng import PMRandom
from .generator import generate_level


def _ring(width: int, height: int, door: XY) -> List[XY]:
    cells = []
    for y in range(height):
        for x in range(width):
            on_ring = x in (0, width - 1) or y in (0, height - 1)
            if on_ring and (x, y) != door:
                cells.append((x, y))
    return cells


def _level(name: str, size: Tuple[int, int], door: XY, inner: List[XY], inventory: Inventory) -> Level:
    w, h = size
    return Level(
        width=w,
        height=h,
        walls=tuple(_ring(w, h, door) + inner),
        door=door,
        name=name,
        inventory=inventory,
    )


PREDEFINED_LEVELS: Tuple[Level, ...] = (
    _level("Level 1: Small Room", (6, 6), (0, 2), [], Inventory(3, 2, 1)),
    _level(
        "Level 2: L-Shaped Room", (8, 8), (0, 4),
        # (1,4) stays open so the door keeps its floor neighbour.
        [(2, 4), (3, 4), (4, 4), (4, 1), (4, 2), (4, 3)],
        Inventory(4, 3, 2),
    ),
)


def complexity_for(index: int) -> float:
    """0.2 for the first generated level, +0.1 per level, capped at 0.9."""
    extra = index - len(PREDEFINED_LEVELS)
    return min(round(0.2 + extra * 0.1, 6), 0.9)


def get_level(index: int, rng: Optional[PMRandom] = None) -> Level:
    if index < 0:
        raise ValueError(f"level index must be >= 0, got {index}")
    if index < len(PREDEFINED_LEVELS):
        return PREDEFINED_LEVELS[index]
    return generate_level(complexity_for(index), index + 1, rng=rng)
