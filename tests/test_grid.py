import pytest

from friheten.cells import (
    DOOR, EMPTY, L_SHAPED, RECTANGULAR, SINGLE, WALL,
    is_open, is_piece, piece_cell, piece_type_of,
)
from friheten.grid import (
    copy_grid, find_door, from_ascii, grid_size, in_bounds,
    make_grid, neighbors, positions_of, to_ascii,
)

ROOM = """
#####
D.s.#
#-|F#
#####
"""

def test_piece_tags():
    assert piece_cell(SINGLE, 270) == "sofa-single"
    assert piece_cell(RECTANGULAR, 0) == piece_cell(RECTANGULAR, 180) == "sofa-rect-h"
    assert piece_cell(RECTANGULAR, 90) == piece_cell(RECTANGULAR, 270) == "sofa-rect-v"
    assert [piece_cell(L_SHAPED, r) for r in (0, 90, 180, 270)] == [
        "sofa-l-0", "sofa-l-90", "sofa-l-180", "sofa-l-270",
    ]
    assert piece_type_of("sofa-l-180") == L_SHAPED
    assert piece_type_of("sofa-rect-v") == RECTANGULAR
    assert piece_type_of(WALL) is None

def test_piece_tags_reject_bad_input():
    with pytest.raises(ValueError):
        piece_cell(SINGLE, 45)
    with pytest.raises(ValueError):
        piece_cell("sofa-bed", 0)

def test_only_empty_is_walkable():
    assert is_open(EMPTY)
    assert not is_open(DOOR) and not is_open(WALL) and not is_open("sofa-single")
    assert is_piece("sofa-l-90") and not is_piece(DOOR)

def test_ascii_round_trip_and_marks():
    g = from_ascii(ROOM)
    assert grid_size(g) == (5, 4)
    assert g[1][0] == DOOR and g[1][2] == "sofa-single"
    assert g[2][1:4] == ["sofa-rect-h", "sofa-rect-v", "sofa-l-0"]
    assert to_ascii(g) == ROOM.strip()
    assert to_ascii(g, marks={(1, 1), (3, 1)}).splitlines()[1] == "D*s*#"

def test_unknown_glyph_and_ragged_rows():
    with pytest.raises(ValueError):
        from_ascii("##\n#?")
    with pytest.raises(ValueError):
        from_ascii("###\n##")
    with pytest.raises(ValueError):
        grid_size([])
    with pytest.raises(ValueError):
        make_grid(0, 3)

def test_grid_helpers():
    g = make_grid(3, 2, WALL)
    assert grid_size(g) == (3, 2)
    assert in_bounds(g, (2, 1)) and not in_bounds(g, (3, 1)) and not in_bounds(g, (0, -1))
    assert list(neighbors((1, 1))) == [(2, 1), (0, 1), (1, 2), (1, 0)]
    assert find_door(g) is None
    c = copy_grid(g)
    c[0][0] = DOOR
    assert g[0][0] == WALL
    assert find_door(c) == (0, 0)
    assert positions_of(c, lambda cell: cell != WALL) == [(0, 0)]
