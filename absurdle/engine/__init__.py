from .scoring import (
    ABSENT, EXACT, PRESENT, is_solved, pattern_for, pattern_key, render_pattern, solved_pattern,
)
from .narrower import GameStatus, Narrowing, group_by_pattern, most_common_pattern, record_guess
from .constraints import filter_candidates
from .validation import validate_guess

__all__ = [
    "ABSENT", "EXACT", "PRESENT",
    "pattern_for", "pattern_key", "is_solved", "solved_pattern", "render_pattern",
    "GameStatus", "Narrowing", "group_by_pattern", "most_common_pattern", "record_guess",
    "filter_candidates", "validate_guess",
]
