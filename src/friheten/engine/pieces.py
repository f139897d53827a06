# src/friheten/engine/pieces.py
# Footprint table shared by the core and its consumers: which cells a piece
# covers for a given type, anchor and rotation.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..cells import EMPTY, SINGLE, RECTANGULAR, L_SHAPED, ROTATIONS, is_open, piece_cell
from ..grid import Grid, XY, in_bounds

# Offsets from the anchor, keyed by (type, rotation).
FOOTPRINTS: Dict[Tuple[str, int], Tuple[XY, ...]] = {
    (SINGLE, 0): ((0, 0),),
    (SINGLE, 90): ((0, 0),),
    (SINGLE, 180): ((0, 0),),
    (SINGLE, 270): ((0, 0),),
    (RECTANGULAR, 0): ((0, 0), (1, 0)),
    (RECTANGULAR, 90): ((0, 0), (0, 1)),
    (RECTANGULAR, 180): ((0, 0), (1, 0)),
    (RECTANGULAR, 270): ((0, 0), (0, 1)),
    (L_SHAPED, 0): ((0, 0), (1, 0), (0, 1)),
    (L_SHAPED, 90): ((0, 0), (0, -1), (1, 0)),
    (L_SHAPED, 180): ((0, 0), (-1, 0), (0, -1)),
    (L_SHAPED, 270): ((0, 0), (-1, 0), (0, 1)),
}


def footprint(piece_type: str, anchor: XY, rotation: int) -> List[XY]:
    key = (piece_type, rotation)
    if key not in FOOTPRINTS:
        if rotation not in ROTATIONS:
            raise ValueError(f"rotation must be one of {ROTATIONS}, got {rotation!r}")
        raise ValueError(f"unknown piece type {piece_type!r}")
    ax, ay = anchor
    return [(ax + dx, ay + dy) for dx, dy in FOOTPRINTS[key]]


@dataclass(frozen=True)
class Piece:
    id: int
    piece_type: str
    anchor: XY
    rotation: int = 0

    @property
    def cells(self) -> List[XY]:
        return footprint(self.piece_type, self.anchor, self.rotation)

    @property
    def tag(self) -> str:
        return piece_cell(self.piece_type, self.rotation)


def fits(grid: Grid, piece_type: str, anchor: XY, rotation: int = 0) -> bool:
    return all(
        in_bounds(grid, (x, y)) and is_open(grid[y][x])
        for x, y in footprint(piece_type, anchor, rotation)
    )


def stamp(grid: Grid, piece: Piece) -> None:
    tag = piece.tag
    for x, y in piece.cells:
        grid[y][x] = tag


def clear(grid: Grid, piece: Piece) -> None:
    for x, y in piece.cells:
        grid[y][x] = EMPTY
