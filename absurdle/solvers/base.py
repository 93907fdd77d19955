from __future__ import annotations
import random
from typing import Dict, Iterable, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


class BaseSolver:
    """
    An automatic guesser playing against the adversary.

    There is no secret to find, only a candidate set to shrink. The harness
    calls reset() once per game, then next_guess(state) once per round with:
      - "turn":       1-based round number
      - "N":          word length
      - "candidates": sorted words the adversary still keeps (never empty)
      - "history":    (guess, pattern) pairs reported so far

    `probes` are extra words a solver may guess to split the candidates
    without hoping to win on that round.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.N: int = 5
        self.probes: List[str] = []
        self.rng = random.Random()

    def reset(self, *, N: int, probes: Iterable[str] = (), seed: int | None = None) -> None:
        self.N = int(N)
        self.probes = sorted({w for w in probes if len(w) == self.N})
        self.rng = random.Random(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
