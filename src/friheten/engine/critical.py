# src/friheten/engine/critical.py
# Critical-cell hints: which empty cells must stay free so every group of
# placed pieces keeps a route to the door.
#
# Three layered passes, each catching what the previous one misses:
#   1) every cell on a shortest route from the door to each group's frontier
#   2) every cell whose removal (turned to wall) cuts some group off
#   3) cells shared by all sampled routes to a frontier cell (bottlenecks)
# The result is a hint for the player, not a minimum vertex cut.

from __future__ import annotations

import logging
from collections import deque
from typing import Iterator, List, Optional, Set

from ..cells import EMPTY, WALL, is_open, is_piece
from ..config import HINTS, HintConfig
from ..grid import Grid, XY, copy_grid, grid_size, in_bounds, neighbors, positions_of
from .pathfinding import door_adjacent_empty, find_all_reachable_positions, find_path

log = logging.getLogger(__name__)


def piece_groups(grid: Grid) -> List[List[XY]]:
    """Maximal 4-connected clusters of piece cells, in row-major discovery order."""
    seen: Set[XY] = set()
    groups: List[List[XY]] = []
    for origin in positions_of(grid, is_piece):
        if origin in seen:
            continue
        seen.add(origin)
        group = []
        queue = deque([origin])
        while queue:
            cur = queue.popleft()
            group.append(cur)
            for n in neighbors(cur):
                if n not in seen and in_bounds(grid, n) and is_piece(grid[n[1]][n[0]]):
                    seen.add(n)
                    queue.append(n)
        groups.append(group)
    return groups


def group_frontier(group: List[XY], grid: Grid) -> List[XY]:
    """Distinct empty cells touching the group."""
    out: List[XY] = []
    seen: Set[XY] = set()
    for cell in group:
        for n in neighbors(cell):
            if n not in seen and in_bounds(grid, n) and is_open(grid[n[1]][n[0]]):
                seen.add(n)
                out.append(n)
    return out


def _group_reachable(seed: XY, group: List[XY], grid: Grid) -> bool:
    return any(find_path(seed, cell, grid) is not None for cell in group_frontier(group, grid))


def unreachable_groups(grid: Grid, door: XY, groups: Optional[List[List[XY]]] = None) -> List[List[XY]]:
    """
    Groups with no frontier cell reachable from the door. With the door
    blocked every group is unreachable. `groups` lets callers check
    individual pieces instead of merged clusters.
    """
    if groups is None:
        groups = piece_groups(grid)
    seed = door_adjacent_empty(grid, door)
    if seed is None:
        return list(groups)
    reachable = find_all_reachable_positions(seed, grid)
    return [grp for grp in groups if not any(c in reachable for c in group_frontier(grp, grid))]


def _open_steps(pos: XY, grid: Grid) -> Iterator[XY]:
    for n in neighbors(pos):
        if in_bounds(grid, n) and is_open(grid[n[1]][n[0]]):
            yield n


def sample_simple_paths(start: XY, target: XY, grid: Grid, limit: int, max_cells: int) -> List[List[XY]]:
    """
    Depth-first enumeration of up to `limit` simple paths of at most
    `max_cells` cells, in neighbour order. One shared on-path set with
    backtracking replaces per-branch copies.
    """
    if start == target:
        return [[start]]
    paths: List[List[XY]] = []
    path = [start]
    on_path = {start}
    stack = [_open_steps(start, grid)]
    while stack and len(paths) < limit:
        step = next(stack[-1], None)
        if step is None:
            stack.pop()
            on_path.discard(path.pop())
            continue
        if step in on_path:
            continue
        if step == target:
            if len(path) + 1 <= max_cells:
                paths.append(path + [step])
            continue
        if len(path) + 1 >= max_cells:
            continue  # no room left to reach the target from here
        path.append(step)
        on_path.add(step)
        stack.append(_open_steps(step, grid))
    return paths


def identify_critical_paths(grid: Grid, door: XY, config: Optional[HintConfig] = None) -> Set[XY]:
    cfg = config or HINTS
    grid_size(grid)

    seed = door_adjacent_empty(grid, door)
    if seed is None:
        return set()  # door blocked: nothing is reachable, nothing to protect
    groups = piece_groups(grid)
    if not groups:
        return set()

    critical: Set[XY] = {seed}
    frontiers = [group_frontier(grp, grid) for grp in groups]

    # 1) shortest routes to every frontier cell
    for frontier in frontiers:
        for cell in frontier:
            path = find_path(seed, cell, grid)
            if path:
                critical.update(path)
    pass1 = len(critical)

    # 2) hypothetical removal, one fresh grid copy per candidate
    live = [grp for grp in groups if _group_reachable(seed, grp, grid)]
    for cell in positions_of(grid, lambda c: c == EMPTY):
        if cell in critical:
            continue
        trial = copy_grid(grid)
        trial[cell[1]][cell[0]] = WALL
        if any(not _group_reachable(seed, grp, trial) for grp in live):
            critical.add(cell)
    pass2 = len(critical)

    # 3) bottlenecks among sampled routes
    targets: List[XY] = []
    for frontier in frontiers:
        targets.extend(c for c in frontier if c not in targets)
    for target in targets:
        shortest = find_path(seed, target, grid)
        if not shortest:
            continue
        paths = sample_simple_paths(
            seed, target, grid,
            limit=cfg.path_samples,
            max_cells=len(shortest) * cfg.path_length_factor,
        )
        if len(paths) == 1:
            critical.update(paths[0])
        elif paths:
            common = set(paths[0])
            for p in paths[1:]:
                common &= set(p)
            critical.update(common)

    log.debug(
        "critical cells: %d after routes, %d after removal test, %d after bottlenecks (%d groups)",
        pass1, pass2, len(critical), len(groups),
    )
    return critical
