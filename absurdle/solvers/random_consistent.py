"""
Random Consistent solver.

Guess a word the adversary still keeps, picked with the seeded RNG. Every
such guess either comes back all green or knocks itself out of the
candidate set, so a game against the adversary always ends within
|candidates| rounds.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.1.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
