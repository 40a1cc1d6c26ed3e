"""
Dictionary oracles.

An oracle answers a single question: where (if anywhere) is the first
misspelled word in `text`? `check_spelling` returns `(start, length)` of that
token, or None when every alphabetic token is known. The validator only cares
whether the result is None.

Oracles register themselves by `id` so front-ends can pick one by name:

    oracle = create_oracle("wordlist", path="words.txt")
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple, Type

from wordfreq import word_frequency

from wordscramble.datasets.io import read_lines

# Misspelled span: (start offset, length) within the checked text
MisspelledRange = Tuple[int, int]

_TOKEN_RE = re.compile(r"[^\W\d_]+")

# ---- Global oracle registry ----
REGISTRY: Dict[str, Type["DictionaryOracle"]] = {}


def register(cls: Type["DictionaryOracle"]) -> Type["DictionaryOracle"]:
    """
    Decorator: @register on an oracle class adds it to REGISTRY by its `id`.
    """
    oid = getattr(cls, "id", None)
    if not oid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if oid in REGISTRY:
        raise ValueError(f"Duplicate oracle id: {oid}")
    REGISTRY[oid] = cls
    return cls


# ---- Base class that oracles inherit ----
class DictionaryOracle:
    id = "base"
    name = "Base"

    def is_known(self, token: str, language: str) -> bool:
        raise NotImplementedError("Override in subclass")

    def check_spelling(self, text: str, language: str = "en") -> Optional[MisspelledRange]:
        """Scan alphabetic tokens left to right; report the first unknown one."""
        for m in _TOKEN_RE.finditer(text):
            if not self.is_known(m.group(0).lower(), language):
                return m.start(), m.end() - m.start()
        return None


@register
class WordSetOracle(DictionaryOracle):
    """Fixed set of known words. Language is ignored."""
    id = "wordset"
    name = "Word Set"

    def __init__(self, words: Iterable[str] = ()):
        self.words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    def is_known(self, token: str, language: str) -> bool:
        return token in self.words


@register
class WordListOracle(WordSetOracle):
    """Known words loaded from a newline-delimited file (one word per line)."""
    id = "wordlist"
    name = "Word List"

    def __init__(self, path: Path | str):
        super().__init__(read_lines(path))
        self.path = str(path)


@register
class WordfreqOracle(DictionaryOracle):
    """
    Backed by the `wordfreq` corpus: a token counts as a real word when its
    frequency in `language` is above `threshold`. Unsupported languages make
    wordfreq raise LookupError, which propagates to the caller.
    """
    id = "wordfreq"
    name = "wordfreq"

    def __init__(self, threshold: float = 1e-8):
        self.threshold = float(threshold)

    def is_known(self, token: str, language: str) -> bool:
        return word_frequency(token, language) > self.threshold


def create_oracle(oracle_id: str, **kwargs) -> DictionaryOracle:
    """
    Factory: instantiate a registered oracle by id.
    """
    try:
        cls = REGISTRY[oracle_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown oracle id: {oracle_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**kwargs)


def get_oracle_ids() -> List[str]:
    """
    Return all registered oracle ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
