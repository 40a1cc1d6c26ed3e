"""
Candidate validation.

This module answers the question: "May this candidate join the guess list?"
A candidate is accepted iff, checked in this order:
  - it is original   : not already in the session's guess list
  - it is possible   : spellable from the root word's letters, each letter
                       occurrence used at most once
  - it is real       : the dictionary oracle reports no misspelling

All checks are pure: they never mutate the guess list or the root word.
Callers are expected to pass normalized candidates (see `normalize`).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Rules:
    """Degenerate-candidate policy applied by `is_real`."""
    min_length: int = 1           # shortest candidate worth a dictionary lookup
    allow_root_word: bool = False  # may the root word itself be guessed?


DEFAULT_RULES = Rules()


def normalize(raw: str) -> str:
    """
    Canonical candidate form: lowercase, surrounding whitespace/newlines trimmed.
    Non-string input normalizes to the empty string (treated as blank).
    """
    if not isinstance(raw, str):
        return ""
    return raw.lower().strip()


def is_original(candidate: str, guesses: Iterable[str]) -> bool:
    """True iff `candidate` has not been accepted before in this session."""
    return candidate not in guesses


def is_possible(candidate: str, root_word: str) -> bool:
    """
    True iff `candidate` can be spelled from the letters of `root_word`.

    Examples:
      is_possible("cat", "tactic")  -> True
      is_possible("ttt", "tactic")  -> False  (only two 't' available)
    """
    # Letters still available in the root; each match consumes one instance.
    remaining = Counter(root_word)
    for ch in candidate:
        if remaining[ch] <= 0:
            return False
        remaining[ch] -= 1
    return True


def is_real(
        candidate: str,
        oracle,
        *,
        root_word: str | None = None,
        language: str = "en",
        rules: Rules = DEFAULT_RULES,
) -> bool:
    """
    True iff `candidate` is a non-degenerate dictionary word.

    Args:
      candidate : normalized candidate
      oracle    : object implementing DictionaryOracle.check_spelling
      root_word : current root word; a candidate equal to it is rejected
                  unless `rules.allow_root_word` is set
      language  : language code forwarded to the oracle
      rules     : degenerate-candidate policy
    """
    if not candidate or len(candidate) < rules.min_length:
        return False
    if root_word is not None and candidate == root_word and not rules.allow_root_word:
        return False
    return oracle.check_spelling(candidate, language) is None
