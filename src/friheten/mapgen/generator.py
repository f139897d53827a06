# src/friheten/mapgen/generator.py
# Procedural rooms: carve, place the door, size the inventory, then validate
# reachability through the engine. Failed rooms are regenerated at a lower
# complexity; after a fixed number of attempts a minimal room is emitted.

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import floor
from typing import Optional, Tuple

from ..cells import DOOR, WALL
from ..config import GENERATOR, GeneratorConfig
from ..engine.pathfinding import door_adjacent_empty, find_all_reachable_positions
from ..grid import Grid, XY, positions_of
from ..level import Inventory, Level
from ..rng import PMRandom
from .carve import carve_sections, carve_shaped_room, empty_room, scatter_walls
from .door import place_door

log = logging.getLogger(__name__)

SIZE_NAMES = ("Small", "Medium", "Large", "Huge")
COMPLEXITY_NAMES = ("Simple", "Cozy", "Interesting", "Complex", "Challenging")
ROOM_TYPES = ("Room", "Apartment", "Studio", "Loft", "Suite")


@dataclass(frozen=True)
class RoomSettings:
    complexity: float
    width: int
    height: int
    wall_density: float
    min_reachable: int
    inventory: Inventory


def settings_for(complexity: float, config: GeneratorConfig = GENERATOR) -> RoomSettings:
    size = floor(config.min_size + complexity * config.size_span)
    # Harder rooms ship fewer pieces.
    floor_cells = size * size * config.floor_ratio
    scale = 1 - complexity * config.inventory_falloff
    counts = [
        max(minimum, floor(floor_cells / divisor * scale))
        for divisor, minimum in zip(config.piece_divisors, config.piece_minimums)
    ]
    return RoomSettings(
        complexity=complexity,
        width=size,
        height=size,
        wall_density=config.wall_density_base + complexity * config.wall_density_span,
        min_reachable=floor(config.min_reachable_base + complexity * config.min_reachable_span),
        inventory=Inventory(*counts),
    )


def build_room(settings: RoomSettings, rng: PMRandom, config: GeneratorConfig = GENERATOR) -> Tuple[Grid, XY]:
    grid = empty_room(settings.width, settings.height)
    c = settings.complexity
    if c > config.carve_threshold:
        if c > config.sections_threshold:
            carve_sections(grid, c, rng)
        else:
            carve_shaped_room(grid, c, rng, config)
    scatter_walls(grid, settings.wall_density, rng)
    door = place_door(grid, rng)
    return grid, door


def validate_room(grid: Grid, door: XY, settings: RoomSettings) -> bool:
    """The door must open onto floor and enough floor must be reachable from it."""
    seed = door_adjacent_empty(grid, door)
    if seed is None:
        return False
    return len(find_all_reachable_positions(seed, grid)) >= settings.min_reachable


def level_name(level_number: int, settings: RoomSettings, rng: PMRandom) -> str:
    size_idx = min(floor((settings.width + settings.height) / 12) - 1, len(SIZE_NAMES) - 1)
    complexity_idx = min(floor(settings.complexity * 5), len(COMPLEXITY_NAMES) - 1)
    room = rng.choice(ROOM_TYPES)
    return f"Level {level_number}: {SIZE_NAMES[size_idx]} {COMPLEXITY_NAMES[complexity_idx]} {room}"


def _emit(level_number: int, grid: Grid, door: XY, settings: RoomSettings, rng: PMRandom) -> Level:
    return Level(
        width=settings.width,
        height=settings.height,
        walls=tuple(positions_of(grid, lambda c: c == WALL)),
        door=door,
        name=level_name(level_number, settings, rng),
        inventory=settings.inventory,
    )


def fallback_room(config: GeneratorConfig = GENERATOR) -> Tuple[Grid, XY, RoomSettings]:
    """Outer ring only, door in the middle of the left wall. Always valid."""
    settings = settings_for(0.0, config)
    grid = empty_room(settings.width, settings.height)
    door = (0, settings.height // 2)
    grid[door[1]][door[0]] = DOOR
    return grid, door, settings


def generate_level(
    complexity: float,
    level_number: int,
    rng: Optional[PMRandom] = None,
    config: Optional[GeneratorConfig] = None,
) -> Level:
    if not 0.0 <= complexity <= 1.0:
        raise ValueError(f"complexity must be within [0, 1], got {complexity!r}")
    cfg = config or GENERATOR
    if rng is None:
        rng = PMRandom.from_entropy()

    c = complexity
    for attempt in range(1, cfg.max_attempts + 1):
        settings = settings_for(c, cfg)
        grid, door = build_room(settings, rng, cfg)
        if validate_room(grid, door, settings):
            if attempt > 1:
                log.info("level %d accepted on attempt %d at complexity %.2f (asked %.2f)",
                         level_number, attempt, c, complexity)
            return _emit(level_number, grid, door, settings, rng)
        log.debug("level %d attempt %d rejected: %dx%d at complexity %.2f",
                  level_number, attempt, settings.width, settings.height, c)
        c = max(0.0, round(c - cfg.retry_step, 6))

    log.warning("level %d: no valid room after %d attempts, using fallback layout",
                level_number, cfg.max_attempts)
    grid, door, settings = fallback_room(cfg)
    return _emit(level_number, grid, door, settings, rng)
