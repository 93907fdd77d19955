"""
Dictionary validator for absurdle.

What this module does:
- Inspect a dictionary file (whitespace-separated tokens, any number per line).
- Count tokens, flag non-alphabetic ones, and report how many words of length N
  the game would start with (before and after dedupe).
- Compute SHA-256 of the raw file so run manifests pin the exact word list.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from absurdle.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("dictionary.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import load_tokens


@dataclass
class DictionaryReport:
    """Diagnostics and metadata for one dictionary file at one word length."""
    path: str            # file path (as given)
    N: int               # requested word length
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    tokens: int          # every token read
    invalid_tokens: int  # tokens with non-alphabetic characters
    count: int           # tokens of length N
    unique_count: int    # distinct tokens of length N (the starting candidate set)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def validate_dictionary(path: str, N: int) -> Dict:
    """
    Validate a dictionary file for games of word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see DictionaryReport schema).
        `passed` requires an existing file, a positive N and at least one
        word of length N. Invalid tokens are reported but do not fail the check.
    """
    issues: List[str] = []
    p = Path(path)

    if N < 1:
        issues.append(f"word length must be at least 1; got {N}")

    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
        return asdict(DictionaryReport(path, N, False, "", 0, 0, 0, 0, False, issues))

    tokens = load_tokens(p)
    invalid = sum(1 for t in tokens if not t.isalpha())
    sized = [t for t in tokens if len(t) == N]

    rep = DictionaryReport(
        path=str(p),
        N=N,
        exists=True,
        sha256=_sha256_file(p),
        tokens=len(tokens),
        invalid_tokens=invalid,
        count=len(sized),
        unique_count=len(set(sized)),
    )

    if rep.unique_count == 0:
        issues.append(f"dictionary contains 0 words of length {N}")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid token(s)")
    if rep.count != rep.unique_count:
        issues.append(f"dictionary contains {rep.count - rep.unique_count} duplicate word(s)")

    rep.passed = N >= 1 and rep.unique_count > 0
    rep.issues = issues
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=2315 (uniq=2315) of 10000 tokens | sha=abc123def456 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}) "
        f"of {report['tokens']} tokens | sha={sha} | {status}"
    )
