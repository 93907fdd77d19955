"""
Minimax (smallest worst bucket).

Idea:
  The adversary always keeps the LARGEST pattern bucket. So for each guess g,
  the number of words left after the round is exactly the size of g's worst
  bucket against the CURRENT candidates. Pick the guess that minimizes it.
  Tie-break: guesses that are themselves candidates (they can still win),
  then more distinct patterns, then RNG.
"""

from __future__ import annotations
from typing import Dict, List, Set, Tuple
from .base import BaseSolver, register
from absurdle.engine import group_by_pattern


def _pattern_stats(guess: str, candidates: List[str]) -> Tuple[int, int]:
    """
    Return (worst_bucket_size, num_distinct_patterns) for guess.
    """
    groups = group_by_pattern(guess, candidates)
    if not groups:
        return 0, 0
    return max(len(ws) for ws in groups.values()), len(groups)


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax Worst Bucket"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 200
    POOL_CAP = 400  # cap pool when probes are many (pre-filtered by a quick heuristic)

    def _distinct_letter_score(self, w: str, alphabet_counts: Dict[str, int]) -> int:
        seen = set(); s = 0
        for ch in w:
            if ch not in seen:
                seen.add(ch); s += alphabet_counts.get(ch, 0)
        return s

    def _select_pool(self, candidates: List[str]) -> List[str]:
        words = sorted(set(candidates) | set(self.probes))
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT and len(words) <= self.POOL_CAP:
            return words
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        alphabet_counts: Dict[str, int] = {}
        for w in candidates:
            for ch in set(w):
                alphabet_counts[ch] = alphabet_counts.get(ch, 0) + 1
        ranked = sorted(words, key=lambda w: self._distinct_letter_score(w, alphabet_counts), reverse=True)
        return ranked[: self.POOL_CAP]

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        pool = self._select_pool(candidates)

        cand_set: Set[str] = set(candidates)
        best_key = None
        best: List[str] = []

        for g in pool:
            worst, distinct = _pattern_stats(g, candidates)
            key = (worst, g not in cand_set, -distinct)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        # nothing in the pool splits the set; a candidate guess always does
        if len(candidates) > 1 and best_key[0] >= len(candidates):
            best = candidates

        return best[self.rng.randrange(len(best))]
