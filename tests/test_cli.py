from pathlib import Path

import pytest
from apps.cli import play, run


def _dictionary(tmp_path: Path) -> str:
    d = tmp_path / "dict.txt"
    d.write_text("cat bat\nhat cot\ncrane\n", encoding="utf-8")
    return str(d)


def test_play_until_solved(tmp_path, monkeypatch, capsys):
    guesses = iter(["ca", "CAT", "bat", "hat"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(guesses))

    play.main(["--dictionary", _dictionary(tmp_path), "--N", "3"])

    out = capsys.readouterr().out
    assert "has length 2; expected 3" in out
    assert ": ⬜🟩🟩" in out
    assert out.rstrip().endswith("Absurdle 3/∞\n\n⬜🟩🟩\n⬜🟩🟩\n🟩🟩🟩")


def test_play_strict_rejects_unknown_words(tmp_path, monkeypatch, capsys):
    guesses = iter(["zzz", "hat", "cat", "bat"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(guesses))

    play.main(["--dictionary", _dictionary(tmp_path), "--N", "3", "--strict"])

    out = capsys.readouterr().out
    assert "not a 3-letter dictionary word" in out
    assert "Absurdle 3/∞" in out


def test_play_rejects_zero_length(tmp_path):
    with pytest.raises(ValueError):
        play.main(["--dictionary", _dictionary(tmp_path), "--N", "0"])


def test_run_writes_reports(tmp_path, capsys):
    outdir = tmp_path / "reports"
    run.main(["--dictionary", _dictionary(tmp_path), "--N", "3", "--games", "2",
              "--progress", "off", "--outdir", str(outdir)])

    out = capsys.readouterr().out
    assert "minimax: solved 2/2" in out
    assert "random_consistent: solved 2/2" in out
    assert len(list((outdir / "minimax").glob("run_*.csv"))) == 1
    assert len(list((outdir / "random_consistent").glob("run_*_manifest.json"))) == 1


def test_run_fails_on_empty_length(tmp_path):
    with pytest.raises(SystemExit):
        run.main(["--dictionary", _dictionary(tmp_path), "--N", "7", "--progress", "off",
                  "--outdir", str(tmp_path / "r")])
