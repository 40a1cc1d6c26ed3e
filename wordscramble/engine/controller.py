"""
Game controller: turns one raw submission into an outcome.

- submit:     normalize, run the checks in order, commit on success.
- start_game: pick a fresh root word from a word source.
- GameController: owns the single live session plus its collaborators and
  notifies subscribers after every change, so a front-end never has to keep
  game state of its own.

Rejections are returned as values, not raised: a rejected submission leaves
the session untouched and the front-end simply re-prompts.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Union

from .session import Session, new_session, record_guess
from .validation import DEFAULT_RULES, Rules, is_original, is_possible, is_real, normalize

# Root word used when a loaded word list yields nothing to pick from.
FALLBACK_ROOT_WORD = "silkworm"


class RejectReason(str, Enum):
    ALREADY_USED = "already_used"
    NOT_POSSIBLE = "not_possible"
    NOT_REAL = "not_real"


@dataclass(frozen=True)
class Accepted:
    word: str
    kind = "accepted"


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason
    title: str
    message: str
    kind = "rejected"


@dataclass(frozen=True)
class Ignored:
    """Blank submission: nothing accepted, nothing to report."""
    kind = "ignored"


Outcome = Union[Accepted, Rejected, Ignored]


def _reject(reason: RejectReason, root_word: str) -> Rejected:
    if reason is RejectReason.ALREADY_USED:
        return Rejected(reason, "Word used already", "Be more original!")
    if reason is RejectReason.NOT_POSSIBLE:
        return Rejected(reason, "Word not possible",
                        f"You can't spell that word from '{root_word}'!")
    return Rejected(reason, "Word not recognized",
                    "You do know that you can't just make up words, right?")


def submit(
        session: Session,
        raw_input: str,
        *,
        oracle,
        language: str = "en",
        rules: Rules = DEFAULT_RULES,
) -> Outcome:
    """
    Validate `raw_input` against `session` and record it if every check passes.

    Checks run in a fixed order and stop at the first failure:
      is_original -> is_possible -> is_real

    Returns:
      Accepted(word)  - candidate recorded at the front of session.guesses
      Rejected(...)   - session unchanged; carries a title/message pair
      Ignored()       - blank input; session unchanged
    """
    candidate = normalize(raw_input)
    if not candidate:
        return Ignored()

    root = session.root_word
    if not is_original(candidate, session.guesses):
        return _reject(RejectReason.ALREADY_USED, root)
    if not is_possible(candidate, root):
        return _reject(RejectReason.NOT_POSSIBLE, root)
    if not is_real(candidate, oracle, root_word=root, language=language, rules=rules):
        return _reject(RejectReason.NOT_REAL, root)

    record_guess(session, candidate)
    return Accepted(candidate)


def start_game(
        session: Optional[Session],
        source,
        *,
        rng: random.Random | None = None,
) -> Session:
    """
    Start a new game with a root word picked uniformly from `source`.

    The previous `session` (if any) is discarded, never merged. Errors from
    `source.load_words()` (ResourceMissing) propagate: a missing word list is
    a configuration problem, not something to play around. A list that loads
    but is empty falls back to FALLBACK_ROOT_WORD.
    """
    rng = rng or random.Random()
    words = source.load_words()
    root = rng.choice(words) if words else FALLBACK_ROOT_WORD
    return new_session(root)


Listener = Callable[[Session, Optional[Outcome]], None]


class GameController:
    """
    One game instance: collaborators, rules and the single live session.

    Subscribers are called with (session, outcome) after every submission and
    with (session, None) after a new game starts.
    """

    def __init__(self, *, source, oracle, rules: Rules = DEFAULT_RULES,
                 language: str = "en", seed: int | None = None):
        self.source = source
        self.oracle = oracle
        self.rules = rules
        self.language = language
        self.rng = random.Random(seed)
        self.session: Session | None = None
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Listener:
        self._listeners.append(listener)
        return listener

    def _notify(self, outcome: Optional[Outcome]) -> None:
        for listener in list(self._listeners):
            listener(self.session, outcome)

    def start(self) -> Session:
        self.session = start_game(self.session, self.source, rng=self.rng)
        self._notify(None)
        return self.session

    def submit(self, raw_input: str) -> Outcome:
        if self.session is None:
            raise RuntimeError("No game in progress; call start() first")
        outcome = submit(self.session, raw_input, oracle=self.oracle,
                         language=self.language, rules=self.rules)
        self._notify(outcome)
        return outcome
