"""
Adversarial narrowing.

Given a guess and the live candidate set, score every candidate against the
guess, bucket candidates by pattern and keep the biggest bucket. The engine
never commits to a secret word, only to a pattern: keeping the largest group
is what makes the game absurd, because it leaves the guesser with as many
possibilities as the feedback allows.

Ties between buckets of equal size go to the smallest pattern under
`pattern_key` (ABSENT < PRESENT < EXACT), so a given dictionary and guess
sequence always replays identically.

Narrowing is pure: the input collection is left alone and a new frozenset is
returned. Callers rebind their reference (see `AbsurdleGame`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set

from .scoring import pattern_for, pattern_key, is_solved


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"


@dataclass(frozen=True)
class Narrowing:
    """Outcome of one guess: the reported pattern and the surviving words."""
    pattern: str
    candidates: FrozenSet[str]
    group_sizes: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}), compare=False)

    @property
    def status(self) -> GameStatus:
        return GameStatus.SOLVED if is_solved(self.pattern) else GameStatus.IN_PROGRESS


def group_by_pattern(guess: str, candidates: Iterable[str]) -> Dict[str, FrozenSet[str]]:
    """
    Partition `candidates` by the pattern each would produce against `guess`.

    Every candidate lands in exactly one group and no group is empty.
    Keys come back in pattern order.
    """
    buckets: Dict[str, Set[str]] = {}
    for word in candidates:
        buckets.setdefault(pattern_for(word, guess), set()).add(word)
    return {p: frozenset(buckets[p]) for p in sorted(buckets, key=pattern_key)}


def most_common_pattern(groups: Dict[str, FrozenSet[str]]) -> str:
    """
    Return the pattern with the most words.

    Ties: smallest pattern under `pattern_key`.
    """
    if not groups:
        raise ValueError("cannot pick a pattern from an empty grouping")
    best_pattern = None
    best_size = 0
    for patt in sorted(groups, key=pattern_key):
        size = len(groups[patt])
        if size > best_size:
            best_pattern, best_size = patt, size
    return best_pattern


def record_guess(guess: str, candidates: Iterable[str], N: int) -> Narrowing:
    """
    Narrow `candidates` to the largest pattern group for `guess`.

    Args:
      guess      : the player's word for this round
      candidates : words still consistent with every earlier pattern
      N          : the game's word length

    Raises:
      ValueError if `candidates` is empty or len(guess) != N.
    """
    pool: List[str] = list(candidates)
    if not pool:
        raise ValueError("no candidate words left to narrow")
    if len(guess) != N:
        raise ValueError(f"guess {guess!r} has length {len(guess)}; expected {N}")

    groups = group_by_pattern(guess, pool)
    best = most_common_pattern(groups)
    return Narrowing(
        pattern=best,
        candidates=groups[best],
        group_sizes=MappingProxyType({p: len(ws) for p, ws in groups.items()}),
    )
