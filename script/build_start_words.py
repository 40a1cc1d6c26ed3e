"""
Regenerate the bundled root word list from the wordfreq corpus.

Features:
- Keeps lowercase a–z words of an exact length (8 by default).
- Preserves frequency order and drops duplicates (stable dedupe).
- Optional --limit to cap the number of words written.

Usage:
    python -m script.build_start_words --out wordscramble/datasets/data/start.txt --limit 500
"""

import argparse
from typing import Iterable, List

from wordfreq import top_n_list

from wordscramble.datasets.io import write_lines


def select_start_words(words: Iterable[str], length: int = 8, limit: int | None = None) -> List[str]:
    seen, out = set(), []
    for w in words:
        w = w.strip().lower()
        if len(w) != length or not (w.isascii() and w.isalpha()) or w in seen:
            continue
        seen.add(w)
        out.append(w)
        if limit is not None and len(out) >= limit:
            break
    return out


def main():
    ap = argparse.ArgumentParser(description="Build a root word list from wordfreq.")
    ap.add_argument("--out", required=True, help="output .txt file")
    ap.add_argument("--length", type=int, default=8, help="root word length")
    ap.add_argument("--limit", type=int, help="maximum number of words to keep")
    ap.add_argument("--language", default="en", help="wordfreq language code")
    ap.add_argument("--top", type=int, default=50000, help="how many frequent words to scan")
    args = ap.parse_args()

    words = select_start_words(top_n_list(args.language, args.top), args.length, args.limit)
    path = write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {path}")


if __name__ == "__main__":
    main()
