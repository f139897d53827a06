from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GeneratorConfig:
    # Room edge grows linearly with complexity: min_size .. min_size + size_span
    min_size: int = 6
    size_span: int = 6

    # Inventory: share of the room expected to stay floor, per-type divisors
    # and minimums (single, rectangular, l-shaped).
    floor_ratio: float = 0.6
    piece_divisors: Tuple[int, int, int] = (10, 15, 20)
    piece_minimums: Tuple[int, int, int] = (2, 1, 1)
    inventory_falloff: float = 0.3

    # Interior structure
    carve_threshold: float = 0.3
    sections_threshold: float = 0.7
    u_shape_threshold: float = 0.5
    wall_density_base: float = 0.1
    wall_density_span: float = 0.2

    # Validation gate: floor(min_reachable_base + min_reachable_span * c)
    min_reachable_base: int = 10
    min_reachable_span: int = 20

    # Retry loop
    retry_step: float = 0.1
    max_attempts: int = 12


@dataclass(frozen=True)
class HintConfig:
    path_samples: int = 5
    path_length_factor: int = 2
    # Empty non-critical cells a finished room may still have.
    fillable_slack: int = 3


# Defaults used when callers pass no config.
GENERATOR = GeneratorConfig()
HINTS = HintConfig()
