# apps/cli/run.py
"""
Benchmark automatic guessers against the adversary.

This script:
  1) Validates the dictionary (prints counts + SHA for the chosen length).
  2) Instantiates each requested solver.
  3) Plays `--games` seeded games per solver with a live progress indicator and writes:
       - CSV:  <outdir>/<solver_id>/run_<timestamp>.csv, one row per game
       - JSON: matching manifest with config, dictionary hash, git commit, etc.
  4) Prints a per-solver line: solved count and mean/max rounds.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm

from absurdle.datasets import validate_dictionary, pretty_summary, load_tokens
from absurdle.harness import run_game, DEFAULT_MAX_TURNS
from absurdle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from absurdle.solvers import create_solver, get_solver_ids


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _run_one_solver(solver_id: str, words: List[str], *, N: int, games: int, base_seed: int,
                    max_turns: int, progress: str) -> List[Dict]:
    solver = create_solver(solver_id)
    seeds = [base_seed + i for i in range(1, games + 1)]
    iterator = tqdm(seeds, ncols=80, desc=solver_id, unit="game") if progress == "bar" else seeds

    results = []
    start = time.time()
    last_print = 0.0
    for idx, seed in enumerate(iterator, 1):
        r = run_game(solver, words, N=N, max_turns=max_turns, seed=seed)
        r["seed"] = seed
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if progress == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == games):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (games - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, games)
                sys.stderr.write(
                    f"\r[{solver_id}] [{idx}/{games}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if progress == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()
    return results


def _summarize(solver_id: str, results: List[Dict]) -> str:
    solved = [r for r in results if r["solved"]]
    rounds = [r["rounds"] for r in solved]
    mean = sum(rounds) / len(rounds) if rounds else 0.0
    worst = max(rounds) if rounds else 0
    return f"{solver_id}: solved {len(solved)}/{len(results)} | mean rounds {mean:.2f} | max {worst}"


def main(argv=None):
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="absurdle — benchmark solvers against the adversary")
    ap.add_argument("--solvers", nargs="+", default=get_solver_ids(),
                    help=f"solver ids (any of: {solver_choices})")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--dictionary", required=True, help="path to the dictionary file")
    ap.add_argument("--games", type=int, default=20, help="seeded games per solver")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-turns", type=int, default=DEFAULT_MAX_TURNS,
                    help="give up on a game after this many rounds")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    rep = validate_dictionary(args.dictionary, args.N)
    print(pretty_summary(rep))
    if not rep["passed"]:
        for issue in rep["issues"]:
            print(f"  - {issue}")
        sys.exit(1)

    words = load_tokens(args.dictionary)
    progress = _progress_mode(args.progress)
    run_id = timestamp_id()
    commit = git_commit_or_unknown()

    written: List[Tuple[str, str]] = []
    for solver_id in args.solvers:
        results = _run_one_solver(solver_id, words, N=args.N, games=args.games,
                                  base_seed=args.seed, max_turns=args.max_turns,
                                  progress=progress)
        print(_summarize(solver_id, results))

        outdir = Path(args.outdir) / solver_id
        csv_path = write_csv(results, str(outdir / f"run_{run_id}.csv"), N=args.N)
        manifest_path = write_manifest({
            "run_id": run_id,
            "git_commit": commit,
            "config": vars(args),
            "dictionary": rep,
            "num_games": len(results),
            "solver_id": solver_id,
        }, str(outdir / f"run_{run_id}_manifest.json"))
        written.append((csv_path, manifest_path))

    for csv_path, manifest_path in written:
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
