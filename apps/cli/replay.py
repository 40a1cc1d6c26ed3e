# apps/cli/replay.py
"""
CLI entry point for replaying scripted submissions.

This script:
  1) Loads cases (root word + submissions) from a JSON file.
  2) Builds the requested dictionary oracle and rules.
  3) Replays every case against a fresh session with a live progress
     indicator and writes:
       - CSV:  per-case results (counts + accepted words)
       - JSON: manifest with config, git commit, etc.

Usage:
    python -m apps.cli.replay --cases cases.json --oracle wordfreq
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from tqdm import tqdm

from apps.cli.play import add_engine_args, build_oracle, build_rules
from wordscramble.datasets import ResourceMissing
from wordscramble.harness import load_cases, replay_case
from wordscramble.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main():
    """
    Parse CLI args, load cases, replay with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordscramble — replay scripted submissions")
    ap.add_argument("--cases", required=True,
                    help='JSON list of {"root_word": ..., "submissions": [...]}')
    ap.add_argument("--sample", type=int, help="replay only the first K cases")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    add_engine_args(ap)
    args = ap.parse_args()

    try:
        cases = load_cases(args.cases)
        oracle = build_oracle(args)
    except (ResourceMissing, ValueError) as e:
        print(f"fatal: {e}", file=sys.stderr)
        sys.exit(2)
    if args.sample is not None:
        cases = cases[: args.sample]

    rules = build_rules(args)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Replaying", unit="case") if mode == "bar" else cases

    for idx, case in enumerate(iterator, 1):
        results.append(replay_case(case["root_word"], case["submissions"], oracle=oracle,
                                   rules=rules, language=args.language))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "num_cases": len(results),
        "num_accepted": sum(r["num_accepted"] for r in results),
        "num_rejected": sum(r["num_rejected"] for r in results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
