from pathlib import Path

import pytest
from absurdle.datasets import validate_dictionary, pretty_summary, load_tokens, prune_dictionary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_tokens_splits_and_lowercases(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["Crane raise", "", "  STARE\tcat  "])
    assert load_tokens(d) == ["crane", "raise", "stare", "cat"]


def test_load_tokens_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_tokens(tmp_path / "nope.txt")


def test_prune_dictionary_keeps_length_and_dedupes():
    words = ["crane", "cat", "crane", "stare", "a"]
    assert prune_dictionary(words, 5) == frozenset({"crane", "stare"})
    assert prune_dictionary(words, 7) == frozenset()


@pytest.mark.parametrize("N", [0, -3])
def test_prune_dictionary_rejects_bad_length(N):
    with pytest.raises(ValueError):
        prune_dictionary(["crane"], N)


def test_validate_dictionary_happy_path(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["crane raise stare", "cat dog"])

    rep = validate_dictionary(str(d), 5)
    assert rep["passed"] is True
    assert rep["tokens"] == 5
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert len(rep["sha256"]) == 64
    s = pretty_summary(rep)
    assert "N=5" in s and "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_problems(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["crane crane", "???", "cat"])

    rep = validate_dictionary(str(d), 5)
    assert rep["passed"] is True
    assert rep["invalid_tokens"] == 1
    assert rep["unique_count"] == 1
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_dictionary_no_words_of_length(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["cat", "dog"])

    rep = validate_dictionary(str(d), 5)
    assert rep["passed"] is False
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_dictionary_missing_file(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"), 5)
    assert rep["exists"] is False and rep["passed"] is False
    assert any("not found" in msg for msg in rep["issues"])


def test_public_api():
    import absurdle.datasets as ds
    assert sorted(ds.__all__) == [
        "load_tokens", "pretty_summary", "prune_dictionary", "read_lines", "validate_dictionary",
    ]
    assert not hasattr(ds, "write_lines")
