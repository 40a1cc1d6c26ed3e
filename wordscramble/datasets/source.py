"""
Word list sources: where root words come from.

A source only has to provide `load_words()`. The default source reads the
`start.txt` list bundled with this package.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from .io import read_lines

DEFAULT_START_WORDS = Path(__file__).parent / "data" / "start.txt"


class WordListSource:
    """Newline-delimited word list on disk (one root word per line)."""

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else DEFAULT_START_WORDS

    def load_words(self) -> List[str]:
        """
        Read the list, normalize to lowercase, drop blank lines.
        Raises ResourceMissing if the file is absent or unreadable.
        """
        return [w.strip().lower() for w in read_lines(self.path) if w.strip()]


class StaticWordSource:
    """In-memory word pool."""

    def __init__(self, words: Iterable[str]):
        self.words = [w.strip().lower() for w in words if w.strip()]

    def load_words(self) -> List[str]:
        return list(self.words)
