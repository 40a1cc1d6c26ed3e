from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .validation import normalize


@dataclass
class Session:
    """State of one game: the root word and accepted guesses (most recent first)."""
    root_word: str
    guesses: List[str] = field(default_factory=list)


def new_session(word: str) -> Session:
    """Fresh session for `word` with an empty guess list."""
    return Session(root_word=normalize(word), guesses=[])


def record_guess(session: Session, candidate: str) -> None:
    """
    Put `candidate` at the front of the guess list.
    No validation here; the controller checks before recording.
    """
    session.guesses.insert(0, candidate)
