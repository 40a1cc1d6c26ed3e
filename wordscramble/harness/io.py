"""
I/O utilities for replay runs.

Responsibilities:
- write_csv:     flatten per-case results into a tidy CSV (one row per case).
- write_manifest:dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

CSV_FIELDS = ["root_word", "num_accepted", "num_rejected", "num_ignored", "time_ms", "accepted"]


def write_csv(results: List[Dict], path: str) -> str:
    """
    Serialize a batch of replay results to CSV.

    Schema (columns):
      root_word, num_accepted, num_rejected, num_ignored, time_ms, accepted
    where `accepted` is the space-separated guess list, most recent first.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=CSV_FIELDS)
        w.writeheader()
        for r in results:
            w.writerow({
                "root_word": r["root_word"],
                "num_accepted": r["num_accepted"],
                "num_rejected": r["num_rejected"],
                "num_ignored": r["num_ignored"],
                "time_ms": round(float(r["time_ms"]), 3),
                "accepted": " ".join(r["accepted"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and replay totals.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (cases, oracle, rules, outdir)
      - num_cases, num_accepted, num_rejected: replay totals
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
