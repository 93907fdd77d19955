"""
Feedback pattern for a single (candidate, guess) pair.

Conventions:
  - 'G'  : exact   = correct letter in the correct position
  - 'Y'  : present = correct letter in the wrong position
  - '-'  : absent  = letter not present (or present fewer times than guessed)

Patterns are totally ordered by symbol rank, ABSENT < PRESENT < EXACT,
compared position by position (see `pattern_key`). The adversary uses that
order to break ties between equally large groups.

Algorithm (three passes, duplicate-safe):
  1) Count every letter of the candidate.
  2) Exact pass marks greens and consumes one count per green.
  3) Present pass marks yellows only while the letter still has count left.
The exact pass must finish before the present pass starts.
"""

from collections import Counter
from typing import Literal, Tuple

# Type alias for clarity; each pattern character is one of 'G', 'Y', '-'
PatternChar = Literal["G", "Y", "-"]

EXACT: PatternChar = "G"
PRESENT: PatternChar = "Y"
ABSENT: PatternChar = "-"

_RANK = {ABSENT: 0, PRESENT: 1, EXACT: 2}

_GLYPHS = {EXACT: "🟩", PRESENT: "🟨", ABSENT: "⬜"}


def pattern_for(candidate: str, guess: str) -> str:
    """
    Compute the feedback `guess` would receive if `candidate` were the secret.

    Preconditions:
      - len(candidate) == len(guess)

    Returns:
      - string of length N composed only of 'G', 'Y', '-'

    Examples:
      pattern_for("level", "belle") -> "-GYYY"
      pattern_for("speed", "erase") -> "Y--YY"
    """
    assert len(candidate) == len(guess), "Candidate and guess must be the same length"

    n = len(guess)
    pattern = [ABSENT] * n
    remaining = Counter(candidate)

    for i in range(n):
        if guess[i] == candidate[i]:
            pattern[i] = EXACT
            remaining[guess[i]] -= 1

    for i in range(n):
        if pattern[i] == EXACT:
            continue
        letter = guess[i]
        if remaining[letter] > 0:
            pattern[i] = PRESENT
            remaining[letter] -= 1  # consume one instance

    return "".join(pattern)


def pattern_key(pattern: str) -> Tuple[int, ...]:
    """Sort key giving the total order ABSENT < PRESENT < EXACT per position."""
    return tuple(_RANK[ch] for ch in pattern)


def solved_pattern(N: int) -> str:
    return EXACT * N


def is_solved(pattern: str) -> bool:
    """True once a pattern carries no PRESENT or ABSENT symbol."""
    return bool(pattern) and PRESENT not in pattern and ABSENT not in pattern


def render_pattern(pattern: str) -> str:
    """Map 'G'/'Y'/'-' to the green/yellow/white squares shown to players."""
    return "".join(_GLYPHS[ch] for ch in pattern)
