# apps/cli/play.py
"""
Interactive Absurdle.

This script:
  1) Asks for (or takes via flags) a dictionary file and a word length.
  2) Prunes the dictionary to that length; that is the adversary's word pool.
  3) Reads one guess per line and prints the adversary's pattern as emoji
     until a guess comes back all green.
  4) Prints the shareable summary: "Absurdle <rounds>/∞" plus every pattern.

Usage:
    python -m apps.cli.play --dictionary dictionary.txt --N 5
"""

from __future__ import annotations

import argparse
import sys

from absurdle.datasets import load_tokens, prune_dictionary
from absurdle.engine import render_pattern, validate_guess
from absurdle.harness import AbsurdleGame


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        print()
        sys.exit(1)


def main(argv=None):
    ap = argparse.ArgumentParser(description="absurdle — the adversarial word game")
    ap.add_argument("--dictionary", help="path to the dictionary (whitespace-separated words)")
    ap.add_argument("--N", type=int, help="word length to play with")
    ap.add_argument("--strict", action="store_true",
                    help="reject guesses that are not in the dictionary")
    args = ap.parse_args(argv)

    print("Welcome to the game of Absurdle.")

    dict_path = args.dictionary or _ask("What dictionary would you like to use? ")
    if args.N is not None:
        N = args.N
    else:
        raw = _ask("What length word would you like to guess? ")
        try:
            N = int(raw)
        except ValueError:
            ap.error(f"word length must be an integer; got {raw!r}")

    words = prune_dictionary(load_tokens(dict_path), N)
    game = AbsurdleGame(words, N)

    while not game.finished:
        guess = _ask("> ").lower()
        if args.strict and not validate_guess(guess, words, N):
            print(f"not a {N}-letter dictionary word: {guess!r}")
            continue
        try:
            patt = game.guess(guess)
        except ValueError as e:
            print(e)
            continue
        print(": " + render_pattern(patt))
        print()

    print(game.summary())


if __name__ == "__main__":
    main()
