# apps/cli/play.py
"""
Interactive terminal front-end for the word scramble game.

This script:
  1) Validates the root word list (prints counts + SHA) and fails fast if it
     can't be loaded, before any prompt is shown.
  2) Builds the requested dictionary oracle and a GameController.
  3) Reads words from stdin; ':new' starts a new game, ':quit' (or EOF) exits.

Usage:
    python -m apps.cli.play --oracle wordfreq --seed 7
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from wordscramble.datasets import (DEFAULT_START_WORDS, ResourceMissing, WordListSource,
                                   pretty_summary, validate_wordlist)
from wordscramble.engine import (Accepted, GameController, Rejected, Rules, create_oracle,
                                 get_oracle_ids)

NEW_GAME = ":new"
QUIT = ":quit"


def add_engine_args(ap: argparse.ArgumentParser) -> None:
    """Options shared by the play and replay CLIs (oracle + rules)."""
    ap.add_argument("--oracle", default="wordfreq",
                    help=f"dictionary oracle id (one of: {', '.join(get_oracle_ids())})")
    ap.add_argument("--dictionary",
                    help="word file for --oracle wordlist (one word per line)")
    ap.add_argument("--threshold", type=float, default=1e-8,
                    help="minimum word frequency for --oracle wordfreq")
    ap.add_argument("--language", default="en", help="language code passed to the oracle")
    ap.add_argument("--min-length", type=int, default=1,
                    help="shortest candidate accepted as a real word")
    ap.add_argument("--allow-root-word", action="store_true",
                    help="accept the root word itself as a guess")


def build_oracle(args: argparse.Namespace):
    """Instantiate the oracle chosen on the command line."""
    if args.oracle == "wordfreq":
        return create_oracle("wordfreq", threshold=args.threshold)
    if args.oracle == "wordlist":
        if not args.dictionary:
            raise SystemExit("--oracle wordlist requires --dictionary PATH")
        return create_oracle("wordlist", path=args.dictionary)
    # Any other registered oracle must be constructible without arguments.
    return create_oracle(args.oracle)


def build_rules(args: argparse.Namespace) -> Rules:
    return Rules(min_length=args.min_length, allow_root_word=args.allow_root_word)


def render(session, outcome, write: Callable[[str], None] = print) -> None:
    """Listener: print the board after a new game, or the result of a submission."""
    if outcome is None:
        write(f"\n== {session.root_word} ==")
        write(f"Spell words from '{session.root_word}'. {NEW_GAME} for a new word, {QUIT} to exit.")
    elif isinstance(outcome, Accepted):
        write(f"  + {outcome.word}   ({len(session.guesses)} found: {', '.join(session.guesses)})")
    elif isinstance(outcome, Rejected):
        write(f"  ! {outcome.title}: {outcome.message}")


def _fatal(e: Exception) -> None:
    print(f"fatal: {e}", file=sys.stderr)
    sys.exit(2)


def _start_or_exit(controller: GameController) -> None:
    """Start a new game; an unreadable word list ends the program with status 2."""
    try:
        controller.start()
    except ResourceMissing as e:
        _fatal(e)


def run_loop(controller: GameController, read: Callable[[str], str] = input) -> int:
    """
    Prompt until QUIT or end of input. Returns the number of words accepted
    in the final game.
    """
    while True:
        try:
            line = read("> ")
        except (EOFError, KeyboardInterrupt):
            break
        cmd = line.strip().lower()
        if cmd == QUIT:
            break
        if cmd == NEW_GAME:
            _start_or_exit(controller)
            continue
        controller.submit(line)
    return len(controller.session.guesses) if controller.session else 0


def main():
    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--words", default=str(DEFAULT_START_WORDS),
                    help="root word list (one word per line)")
    ap.add_argument("--seed", type=int, help="RNG seed for root word picks")
    add_engine_args(ap)
    args = ap.parse_args()

    # Startup integrity check: no prompt until the word list is known to load.
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"warning: {issue}", file=sys.stderr)

    try:
        oracle = build_oracle(args)
    except ResourceMissing as e:
        _fatal(e)

    controller = GameController(
        source=WordListSource(args.words),
        oracle=oracle,
        rules=build_rules(args),
        language=args.language,
        seed=args.seed,
    )
    controller.subscribe(render)
    _start_or_exit(controller)

    found = run_loop(controller)
    print(f"\nFound {found} word(s). Bye!")


if __name__ == "__main__":
    main()
