from .validator import validate_dictionary, pretty_summary
from .io import read_lines, load_tokens
from .dictionary import prune_dictionary

__all__ = [
    "validate_dictionary", "pretty_summary",
    "read_lines", "load_tokens",
    "prune_dictionary",
]
