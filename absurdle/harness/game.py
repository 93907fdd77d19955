"""
One game of Absurdle.

AbsurdleGame owns the only mutable state of a game: the current candidate set
and the (guess, pattern) history. Each guess hands the candidate set to the
narrower and rebinds to the frozenset it returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Tuple

from absurdle.engine import GameStatus, record_guess, is_solved, render_pattern


@dataclass(frozen=True)
class GameResult:
    rounds: int
    history: Tuple[Tuple[str, str], ...]


class AbsurdleGame:
    def __init__(self, words: Iterable[str], N: int):
        candidates = frozenset(words)
        if N < 1:
            raise ValueError(f"word length must be at least 1; got {N}")
        if not candidates:
            raise ValueError(f"no words of length {N} to play with")
        self.N = N
        self.candidates: FrozenSet[str] = candidates
        self.history: List[Tuple[str, str]] = []

    @property
    def status(self) -> GameStatus:
        if self.history and is_solved(self.history[-1][1]):
            return GameStatus.SOLVED
        return GameStatus.IN_PROGRESS

    @property
    def finished(self) -> bool:
        return self.status is GameStatus.SOLVED

    @property
    def patterns(self) -> List[str]:
        return [patt for _, patt in self.history]

    def guess(self, word: str) -> str:
        """
        Play one round and return the reported pattern.
        Raises ValueError (state untouched) on a bad guess or a finished game.
        """
        if self.finished:
            raise ValueError("game is already solved")
        outcome = record_guess(word, self.candidates, self.N)
        self.candidates = outcome.candidates
        self.history.append((word, outcome.pattern))
        return outcome.pattern

    def result(self) -> GameResult:
        return GameResult(rounds=len(self.history), history=tuple(self.history))

    def summary(self) -> str:
        """Shareable recap: round count then one emoji row per guess."""
        lines = [f"Absurdle {len(self.history)}/∞", ""]
        lines += [render_pattern(p) for p in self.patterns]
        return "\n".join(lines)
