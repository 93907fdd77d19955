from collections import Counter

import pytest
from absurdle.engine import (
    pattern_for, pattern_key, is_solved, solved_pattern, render_pattern,
    filter_candidates, validate_guess,
)

WORDS = ["crane", "raise", "stare", "trace", "cared", "racer", "scoop",
         "level", "belle", "lemon", "speed", "erase", "abide", "abode", "abate"]


# --- N=5 golden tests (duplicates + placements) ---
@pytest.mark.parametrize("candidate,guess,expected", [
    ("level", "belle", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("level", "lemon", "GG---"),
    ("scoop", "cools", "YYG-Y"),
    ("crane", "raise", "YY--G"),
    ("crane", "stare", "--GYG"),
    ("speed", "erase", "Y--YY"),
    ("abate", "abide", "GG--G"),
    ("abode", "abide", "GG-GG"),
])
def test_pattern_n5_golden(candidate, guess, expected):
    assert pattern_for(candidate, guess) == expected


@pytest.mark.parametrize("candidate,guess,expected", [
    ("letter", "settle", "-GGGYY"),
    ("letter", "little", "G-GG-Y"),
    ("palate", "planet", "GYY-YY"),
    ("tinket", "kitten", "YGYYGY"),
])
def test_pattern_n6_samples(candidate, guess, expected):
    assert pattern_for(candidate, guess) == expected


def test_pattern_is_case_sensitive():
    assert pattern_for("ABIDE", "abide") == "-----"


@pytest.mark.parametrize("candidate", WORDS)
@pytest.mark.parametrize("guess", ["speed", "erase", "level", "belle", "scoop"])
def test_marks_never_exceed_letter_count(candidate, guess):
    patt = pattern_for(candidate, guess)
    marked = Counter(g for g, p in zip(guess, patt) if p != "-")
    have = Counter(candidate)
    for letter, n in marked.items():
        assert n <= have[letter]


def test_exact_matches_take_priority_over_present():
    # the single 'e' is used up by the exact match before any present check
    assert pattern_for("xxxex", "eeeee") == "---G-"
    assert pattern_for("abbey", "kebab") == "-YGYY"


def test_pattern_order_absent_present_exact():
    assert sorted(["GG", "YY", "--", "Y-", "-G"], key=pattern_key) == ["--", "-G", "Y-", "YY", "GG"]


def test_solved_helpers():
    assert solved_pattern(4) == "GGGG"
    assert is_solved("GGGGG")
    assert not is_solved("GGGGY")
    assert not is_solved("G-GGG")
    assert not is_solved("")
    assert render_pattern("GY-") == "🟩🟨⬜"


def test_filter_candidates_n5_history():
    history = [("raise", "YY--G")]
    cand = filter_candidates(WORDS, history, N=5)
    assert "crane" in cand and "stare" not in cand and "scoop" not in cand


def test_filter_candidates_n6_basic():
    words = ["letter", "settle", "little", "tattle", "better"]
    history = [("settle", "-GGGYY")]
    cand = filter_candidates(words, history, N=6)
    assert "letter" in cand and "better" not in cand


def test_validate_guess_n5():
    allowed = ["crane", "raise", "stare"]
    assert validate_guess("crane", allowed, N=5) is True
    assert validate_guess("trace", allowed, N=5) is False
    assert validate_guess("trace", None, N=5) is True
    assert validate_guess("cranes", allowed, N=5) is False
    assert validate_guess("???", allowed, N=5) is False
