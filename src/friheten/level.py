from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .cells import DOOR, WALL, SINGLE, RECTANGULAR, L_SHAPED
from .grid import Grid, XY, make_grid


@dataclass(frozen=True)
class Inventory:
    single: int = 0
    rectangular: int = 0
    l_shaped: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {SINGLE: self.single, RECTANGULAR: self.rectangular, L_SHAPED: self.l_shaped}


@dataclass(frozen=True)
class Level:
    width: int
    height: int
    walls: Tuple[XY, ...]
    door: XY
    name: str
    inventory: Inventory

    def to_grid(self) -> Grid:
        """Fresh mutable grid for one play session."""
        grid = make_grid(self.width, self.height)
        for x, y in self.walls:
            grid[y][x] = WALL
        dx, dy = self.door
        grid[dy][dx] = DOOR
        return grid

    def to_dict(self):
        return {
            "name": self.name,
            "width": self.width,
            "height": self.height,
            "walls": [list(p) for p in self.walls],
            "door": list(self.door),
            "inventory": self.inventory.as_dict(),
        }
