"""
Candidate filtering given game history.

Given:
  - a pool of words (e.g., the pruned dictionary)
  - a history of (guess, pattern) pairs the adversary has reported
  - target word length N

Return:
  - words that are consistent with ALL feedback seen so far.

This is a history-replay check: the narrower carries the surviving group
forward and never calls it, but replaying the full history over the starting
dictionary must rebuild exactly the set the narrower kept.
"""

from typing import Iterable, List, Tuple
from .scoring import pattern_for

History = Iterable[Tuple[str, str]]  # (guess, pattern)


def filter_candidates(words: Iterable[str], history: History, N: int) -> List[str]:
    """
    Keep only words (length == N) that would produce exactly the recorded
    patterns for every (guess, pattern) in `history`.

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if len(w) != N:
            continue

        if all(pattern_for(w, g) == patt for g, patt in history):
            out.append(w)

    return out
