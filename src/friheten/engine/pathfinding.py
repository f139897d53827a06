# src/friheten/engine/pathfinding.py
# Shortest paths and flood fills over the room grid. Only `empty` cells are
# walkable; the door is an entry point and never part of a path.

from __future__ import annotations

import heapq
from collections import deque
from itertools import count
from typing import Dict, List, Optional, Set

from ..cells import is_open
from ..grid import Grid, XY, grid_size, in_bounds, neighbors


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _walkable(grid: Grid, pos: XY) -> bool:
    return in_bounds(grid, pos) and is_open(grid[pos[1]][pos[0]])


def find_path(start: XY, target: XY, grid: Grid) -> Optional[List[XY]]:
    """
    A* from start to target over 4-connected empty cells.

    Returns the path start..target inclusive, or None when either end is
    out of bounds, the target is not empty, or no route exists. The start
    cell itself may be occupied (callers pass a door-adjacent cell).
    """
    grid_size(grid)
    if not in_bounds(grid, start) or not in_bounds(grid, target):
        return None
    if not _walkable(grid, target):
        return None

    tie = count()
    g: Dict[XY, int] = {start: 0}
    parent: Dict[XY, Optional[XY]] = {start: None}
    open_heap = [(manhattan(start, target), next(tie), start)]
    closed: Set[XY] = set()

    while open_heap:
        _, _, cur = heapq.heappop(open_heap)
        if cur in closed:
            continue  # stale entry, a cheaper one was already expanded
        closed.add(cur)

        if cur == target:
            path = []
            node: Optional[XY] = cur
            while node is not None:
                path.append(node)
                node = parent[node]
            path.reverse()
            return path

        step_g = g[cur] + 1
        for nxt in neighbors(cur):
            if nxt in closed or not _walkable(grid, nxt):
                continue
            if step_g < g.get(nxt, step_g + 1):
                g[nxt] = step_g
                parent[nxt] = cur
                heapq.heappush(open_heap, (step_g + manhattan(nxt, target), next(tie), nxt))

    return None


def find_all_reachable_positions(start: XY, grid: Grid) -> Set[XY]:
    """BFS flood fill from start over empty cells; start is always included."""
    grid_size(grid)
    reachable = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt in neighbors(cur):
            if nxt not in reachable and _walkable(grid, nxt):
                reachable.add(nxt)
                queue.append(nxt)
    return reachable


def is_adjacent_to_reachable(position: XY, reachable: Set[XY], grid: Grid) -> bool:
    return any(in_bounds(grid, n) and n in reachable for n in neighbors(position))


def door_adjacent_empty(grid: Grid, door: XY) -> Optional[XY]:
    """First empty neighbour of the door (right, left, down, up), the search origin."""
    for n in neighbors(door):
        if _walkable(grid, n):
            return n
    return None
