"""
Word list validator for wordscramble.

What this module does:
- Validate a root word list (e.g. the bundled start.txt) before a game starts.
- Enforce formatting rules (lowercase, a–z only, minimum length, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - must be at least `min_length` letters
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isascii() and w.isalpha() and len(w) >= min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, min_length: int = 3) -> Dict:
    """
    Validate a root word list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport) with counts,
        SHA-256, `passed` (strict: non-empty, no invalid lines) and `issues`.
        Duplicates are reported as an issue but do not fail the check:
        they only skew the random pick.
    """
    p = Path(path)
    if not p.is_file():
        rep = WordListReport(str(path), False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        issues.append("word list contains duplicate lines")

    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=start.txt | count=213 (uniq=213, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    name = Path(report["path"]).name
    return (
        f"words={name} | count={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
