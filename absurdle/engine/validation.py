"""
Lightweight guess validation.

This module answers the question: "Is this guess acceptable right now?"
The narrower itself only insists on the right length. The interactive game
can be stricter (`--strict`): a guess is then valid iff
  - it is a string
  - it is alphabetic only
  - it has exact length N
  - it exists in the provided `allowed` list/set
"""

from typing import Iterable, Optional, Set


def validate_guess(word: str, allowed: Optional[Iterable[str]], N: int) -> bool:
    """
    Return True if `word` is a valid guess per the rules above.

    Args:
      word    : proposed guess (expected already normalized)
      allowed : iterable of allowed words, or None to skip the membership check
      N       : required word length
    """
    if not isinstance(word, str):
        return False

    if len(word) != N or not word.isalpha():
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return word in allowed_set
