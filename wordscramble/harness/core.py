"""
Replay harness core primitives.

- load_cases:   read scripted cases (root word + submissions) from JSON.
- replay_case:  play one scripted case against a fresh session.
- replay_batch: replay many cases in sequence (optionally a sample prefix).

These functions are UI-agnostic so they can be reused by the replay CLI,
a notebook, or tests without changes.
"""

from __future__ import annotations
import json
import time
from pathlib import Path
from typing import Dict, Iterable, List

from wordscramble.datasets.io import ResourceMissing
from wordscramble.engine import DEFAULT_RULES, Rules, Rejected, new_session, submit


def load_cases(path: Path | str) -> List[Dict]:
    """
    Read a JSON list of cases, each {"root_word": str, "submissions": [str, ...]}.
    Raises ResourceMissing if the file is absent, ValueError on a malformed case.
    """
    p = Path(path)
    if not p.is_file():
        raise ResourceMissing(f"cases file not found: {p}")
    data = json.loads(p.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("cases file must hold a JSON list")

    cases: List[Dict] = []
    for i, case in enumerate(data):
        if not isinstance(case, dict) or "root_word" not in case:
            raise ValueError(f"case #{i} is missing 'root_word'")
        subs = case.get("submissions", [])
        if not isinstance(subs, list):
            raise ValueError(f"case #{i}: 'submissions' must be a list")
        cases.append({"root_word": str(case["root_word"]), "submissions": [str(s) for s in subs]})
    return cases


def replay_case(
        root_word: str,
        submissions: Iterable[str],
        *,
        oracle,
        rules: Rules = DEFAULT_RULES,
        language: str = "en",
) -> Dict:
    """
    Submit every entry of `submissions` to a fresh session for `root_word`.

    Returns:
        dict with keys:
            root_word (str), accepted (list, most recent first),
            outcomes (list[(input, kind, reason)]), num_accepted,
            num_rejected, num_ignored (int), time_ms (float)
    """
    session = new_session(root_word)
    outcomes = []
    counts = {"accepted": 0, "rejected": 0, "ignored": 0}

    t0 = time.perf_counter()
    for raw in submissions:
        outcome = submit(session, raw, oracle=oracle, language=language, rules=rules)
        reason = outcome.reason.value if isinstance(outcome, Rejected) else ""
        outcomes.append((raw, outcome.kind, reason))
        counts[outcome.kind] += 1
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "root_word": session.root_word,
        "accepted": list(session.guesses),
        "outcomes": outcomes,
        "num_accepted": counts["accepted"],
        "num_rejected": counts["rejected"],
        "num_ignored": counts["ignored"],
        "time_ms": dt,
    }


def replay_batch(
        cases: List[Dict],
        *,
        oracle,
        rules: Rules = DEFAULT_RULES,
        language: str = "en",
        sample: int | None = None,
) -> List[Dict]:
    """
    Replay many cases back-to-back. If 'sample' is provided, only the first K
    cases are used to speed up quick checks.
    """
    pool = cases[:sample] if sample is not None else cases
    return [
        replay_case(c["root_word"], c["submissions"], oracle=oracle, rules=rules,
                    language=language)
        for c in pool
    ]
