from __future__ import annotations
from typing import FrozenSet, Iterable


def prune_dictionary(words: Iterable[str], N: int) -> FrozenSet[str]:
    """
    Keep the words of exactly length N; duplicates collapse.
    This is the starting candidate set of a game.

    Raises ValueError if N < 1.
    """
    if N < 1:
        raise ValueError(f"word length must be at least 1; got {N}")
    return frozenset(w for w in words if len(w) == N)
