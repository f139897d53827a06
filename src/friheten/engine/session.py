# src/friheten/engine/session.py
# One play session over a level: live grid, stock, placed pieces, score.
# Reachability is re-validated from scratch after every mutation.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from ..cells import EMPTY
from ..config import HINTS, HintConfig
from ..grid import XY, in_bounds, positions_of
from ..level import Level
from .critical import identify_critical_paths, unreachable_groups
from .pathfinding import door_adjacent_empty
from .pieces import Piece, clear, fits, stamp

log = logging.getLogger(__name__)

PLACED = "placed"
OUT_OF_STOCK = "out-of-stock"
BLOCKED = "blocked"


@dataclass
class PlaceOutcome:
    piece: Optional[Piece]
    reason: str

    @property
    def placed(self) -> bool:
        return self.piece is not None


@dataclass
class ConstraintReport:
    door_blocked: bool = False
    unreachable: List[Piece] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.door_blocked and not self.unreachable


@dataclass
class SolutionReport:
    constraints: ConstraintReport
    critical: Set[XY] = field(default_factory=set)
    fillable: int = 0
    slack: int = HINTS.fillable_slack

    @property
    def solved(self) -> bool:
        return self.constraints.ok and self.fillable <= self.slack


class Session:
    def __init__(self, level: Level, *, hints: Optional[HintConfig] = None) -> None:
        self.level = level
        self.hints = hints or HINTS
        self.reset()

    def reset(self) -> None:
        self.grid = self.level.to_grid()
        self.stock: Dict[str, int] = self.level.inventory.as_dict()
        self.pieces: Dict[int, Piece] = {}
        self._next_id = 1

    @property
    def door(self) -> XY:
        return self.level.door

    @property
    def score(self) -> int:
        # One point per covered cell.
        return sum(len(p.cells) for p in self.pieces.values())

    # ---- Placement ----
    def can_place(self, piece_type: str, anchor: XY, rotation: int = 0) -> bool:
        if self.stock.get(piece_type, 0) <= 0:
            return False
        return fits(self.grid, piece_type, anchor, rotation)

    def place(self, piece_type: str, anchor: XY, rotation: int = 0) -> PlaceOutcome:
        if self.stock.get(piece_type, 0) <= 0:
            return PlaceOutcome(None, OUT_OF_STOCK)
        if not fits(self.grid, piece_type, anchor, rotation):
            return PlaceOutcome(None, BLOCKED)

        piece = Piece(self._next_id, piece_type, anchor, rotation)
        self._next_id += 1
        stamp(self.grid, piece)
        self.pieces[piece.id] = piece
        self.stock[piece_type] -= 1
        log.debug("placed %s #%d at %s rot %d", piece_type, piece.id, anchor, rotation)
        return PlaceOutcome(piece, PLACED)

    def piece_at(self, pos: XY) -> Optional[Piece]:
        for piece in self.pieces.values():
            if pos in piece.cells:
                return piece
        return None

    def remove_at(self, pos: XY) -> Optional[Piece]:
        if not in_bounds(self.grid, pos):
            return None
        piece = self.piece_at(pos)
        if piece is None:
            return None
        clear(self.grid, piece)
        del self.pieces[piece.id]
        self.stock[piece.piece_type] += 1
        log.debug("removed %s #%d", piece.piece_type, piece.id)
        return piece

    # ---- Validation ----
    def check_constraints(self) -> ConstraintReport:
        if door_adjacent_empty(self.grid, self.door) is None:
            return ConstraintReport(door_blocked=True, unreachable=list(self.pieces.values()))
        ordered = list(self.pieces.values())
        # Check placed pieces one by one, not merged clusters: a piece boxed in
        # behind a reachable neighbour is still unreachable.
        stuck = {tuple(cells) for cells in unreachable_groups(self.grid, self.door, groups=[p.cells for p in ordered])}
        return ConstraintReport(unreachable=[p for p in ordered if tuple(p.cells) in stuck])

    def critical_cells(self) -> Set[XY]:
        return identify_critical_paths(self.grid, self.door, self.hints)

    def check_solution(self) -> SolutionReport:
        constraints = self.check_constraints()
        if not constraints.ok:
            return SolutionReport(constraints, slack=self.hints.fillable_slack)
        critical = self.critical_cells()
        fillable = sum(1 for pos in positions_of(self.grid, lambda c: c == EMPTY) if pos not in critical)
        return SolutionReport(constraints, critical, fillable, self.hints.fillable_slack)
