from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

A = 16807
M = 0x7FFFFFFF  # 2^31-1
LEVEL_SEED_OFFSET = 0x0FCDD36


def pm_next(state: int) -> int:
    return (state * A) % M


@dataclass
class PMRandom:
    """
    Park–Miller minimal standard generator. Every random decision in level
    generation draws from an instance passed in by the caller, so a fixed
    seed reproduces a level exactly.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        # Valid states are 1..M-1; 0 would lock the generator at 0.
        return cls((seed % M) or 1)

    @classmethod
    def from_entropy(cls) -> "PMRandom":
        return cls.from_seed(int.from_bytes(os.urandom(4), "little"))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        """Uniform float in [0, 1)."""
        return (self.next32() - 1) / (M - 1)

    def below(self, n: int) -> int:
        """0..n-1 inclusive."""
        if n <= 0:
            raise ValueError(f"bound must be positive, got {n}")
        return int(self.random() * n)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise ValueError("cannot choose from an empty sequence")
        return seq[self.below(len(seq))]

    def shuffle(self, items: List[T]) -> None:
        # Fisher–Yates, in place, back to front.
        for i in range(len(items) - 1, 0, -1):
            j = self.below(i + 1)
            items[i], items[j] = items[j], items[i]


def seed_for_level(level_number: int) -> int:
    """Closed-form seed for a level ordinal; distinct ordinals give distinct seeds."""
    return (A * level_number + LEVEL_SEED_OFFSET) % M
