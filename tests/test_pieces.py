import pytest

from friheten.cells import EMPTY, L_SHAPED, RECTANGULAR, SINGLE
from friheten.grid import from_ascii
from friheten.engine.pieces import Piece, clear, fits, footprint, stamp

ROOM = """
######
#....#
D....#
#..#.#
######
"""

def test_footprints_per_rotation():
    assert footprint(SINGLE, (2, 2), 90) == [(2, 2)]
    assert footprint(RECTANGULAR, (1, 1), 0) == [(1, 1), (2, 1)]
    assert footprint(RECTANGULAR, (1, 1), 270) == [(1, 1), (1, 2)]
    assert footprint(L_SHAPED, (2, 2), 0) == [(2, 2), (3, 2), (2, 3)]
    assert footprint(L_SHAPED, (2, 2), 90) == [(2, 2), (2, 1), (3, 2)]
    assert footprint(L_SHAPED, (2, 2), 180) == [(2, 2), (1, 2), (2, 1)]
    assert footprint(L_SHAPED, (2, 2), 270) == [(2, 2), (1, 2), (2, 3)]

def test_footprint_rejects_bad_input():
    with pytest.raises(ValueError):
        footprint(SINGLE, (1, 1), 30)
    with pytest.raises(ValueError):
        footprint("ottoman", (1, 1), 0)

def test_fits_only_on_floor():
    g = from_ascii(ROOM)
    assert fits(g, RECTANGULAR, (1, 1), 0)
    assert not fits(g, RECTANGULAR, (4, 1), 0)   # right wall
    assert fits(g, L_SHAPED, (2, 2), 0)
    assert not fits(g, L_SHAPED, (3, 2), 0)      # (3,3) is a wall
    assert not fits(g, SINGLE, (0, 2))           # door
    assert not fits(g, L_SHAPED, (1, 1), 90)     # pokes into the top wall
    assert not fits(g, SINGLE, (9, 9))

def test_stamp_and_clear():
    g = from_ascii(ROOM)
    p = Piece(1, L_SHAPED, (4, 2), 180)
    assert p.cells == [(4, 2), (3, 2), (4, 1)]
    stamp(g, p)
    assert {g[y][x] for x, y in p.cells} == {"sofa-l-180"}
    assert not fits(g, SINGLE, (3, 2))
    clear(g, p)
    assert all(g[y][x] == EMPTY for x, y in p.cells)
