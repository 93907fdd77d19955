"""
Experiment harness core primitives.

- run_game:  let one automatic guesser play a full game against the adversary.
- run_batch: run the same solver over several seeds.

There is no secret word: the adversary answers every guess, so a run ends when
the solver forces an all-green pattern or hits the `max_turns` safety cap
(a solver that keeps guessing non-candidates could otherwise loop forever).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

from absurdle.datasets import prune_dictionary
from .game import AbsurdleGame

DEFAULT_MAX_TURNS = 50


def run_game(
        solver,
        words: Iterable[str],
        *,
        N: int,
        probes: Iterable[str] | None = None,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game until the adversary is forced to all-green or turns run out.

    Args:
        solver:    an object implementing BaseSolver with next_guess(state)
        words:     dictionary tokens; pruned to length N to form the candidates
        N:         word length
        probes:    extra words the solver may guess (defaults to the pruned dictionary)
        max_turns: safety cap on rounds
        seed:      RNG seed to make solver tie-breaks reproducible

    Returns:
        dict with keys:
            solved (bool), rounds (int), time_ms (float),
            history (list[(guess, pattern)]), final_candidates (sorted list)
    """
    if max_turns < 1:
        raise ValueError(f"max_turns must be positive; got {max_turns}")

    pool = prune_dictionary(words, N)
    game = AbsurdleGame(pool, N)
    solver.reset(N=N, probes=pool if probes is None else probes, seed=seed)

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "N": N,
            # sorted so seeded solvers replay identically
            "candidates": sorted(game.candidates),
            "history": list(game.history),
        }
        game.guess(solver.next_guess(state))
        if game.finished:
            break
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "solved": game.finished,
        "rounds": len(game.history),
        "time_ms": dt,
        "history": list(game.history),
        "final_candidates": sorted(game.candidates),
    }


def run_batch(
        solver,
        words: List[str],
        *,
        N: int,
        games: int,
        probes: List[str] | None = None,
        max_turns: int = DEFAULT_MAX_TURNS,
        seed: int = 0,
) -> List[Dict]:
    """
    Run `games` games back-to-back with seeds seed+1 .. seed+games.
    The adversary is deterministic, so differences between games come only
    from the solver's seeded tie-breaks.
    """
    out: List[Dict] = []
    for idx in range(1, games + 1):
        r = run_game(solver, words, N=N, probes=probes, max_turns=max_turns, seed=seed + idx)
        r["seed"] = seed + idx
        out.append(r)
    return out
