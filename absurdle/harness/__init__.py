from .game import AbsurdleGame, GameResult
from .core import run_game, run_batch, DEFAULT_MAX_TURNS
from .io import write_csv, write_manifest

__all__ = [
    "AbsurdleGame", "GameResult",
    "run_game", "run_batch", "DEFAULT_MAX_TURNS",
    "write_csv", "write_manifest",
]
