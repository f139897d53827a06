# Canonical cell tags for the room grid.

from typing import Optional

EMPTY = "empty"
WALL = "wall"
DOOR = "door"

SOFA_SINGLE = "sofa-single"
SOFA_RECT_H = "sofa-rect-h"
SOFA_RECT_V = "sofa-rect-v"
SOFA_L_0 = "sofa-l-0"
SOFA_L_90 = "sofa-l-90"
SOFA_L_180 = "sofa-l-180"
SOFA_L_270 = "sofa-l-270"

PIECE_CELLS = frozenset({
    SOFA_SINGLE, SOFA_RECT_H, SOFA_RECT_V,
    SOFA_L_0, SOFA_L_90, SOFA_L_180, SOFA_L_270,
})

# Piece types (inventory keys)
SINGLE = "single"
RECTANGULAR = "rectangular"
L_SHAPED = "l-shaped"
PIECE_TYPES = (SINGLE, RECTANGULAR, L_SHAPED)
ROTATIONS = (0, 90, 180, 270)


def is_open(cell: str) -> bool:
    # Only bare floor is walkable; the door is an entry point, never floor.
    return cell == EMPTY


def is_piece(cell: str) -> bool:
    return cell in PIECE_CELLS


def piece_cell(piece_type: str, rotation: int) -> str:
    """Tag written into every cell covered by a piece of this type/rotation."""
    if rotation not in ROTATIONS:
        raise ValueError(f"rotation must be one of {ROTATIONS}, got {rotation!r}")
    if piece_type == SINGLE:
        return SOFA_SINGLE
    if piece_type == RECTANGULAR:
        return SOFA_RECT_H if rotation in (0, 180) else SOFA_RECT_V
    if piece_type == L_SHAPED:
        return f"sofa-l-{rotation}"
    raise ValueError(f"unknown piece type {piece_type!r}")


def piece_type_of(cell: str) -> Optional[str]:
    if cell == SOFA_SINGLE:
        return SINGLE
    if cell in (SOFA_RECT_H, SOFA_RECT_V):
        return RECTANGULAR
    if cell in (SOFA_L_0, SOFA_L_90, SOFA_L_180, SOFA_L_270):
        return L_SHAPED
    return None
