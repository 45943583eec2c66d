# apps/cli/play.py
"""
Interactive assistant for a five-letter word game.

This script:
  1) Loads the dictionary once from the configured word source and prints a
     one-line summary of it.
  2) Suggests a guess, reads the game's feedback, and repeats until a win or
     until no dictionary word fits the feedback.

Feedback is one character per letter: 'g' green, 'y' yellow, '.' gray.
Type "<feedback> <word>" if you played a different word than suggested.

    python -m apps.cli.play --source file:/usr/share/dict/words
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordle_assistant.config import Settings, positive_int
from wordle_assistant.datasets import load_candidates, make_source, pretty_summary, validate_words
from wordle_assistant.errors import WordleAssistantError
from wordle_assistant.harness.session import play_session
from wordle_assistant.rankers import get_ranker_ids


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordle-assistant: suggest guesses from feedback")
    ap.add_argument("--source", default=settings.source,
                    help="word source: aspell, file:<path>, url:<url> or a path "
                         f"(default: {settings.source})")
    ap.add_argument("--limit", type=positive_int, default=settings.limit,
                    help="how many suggestions to compute per turn")
    ap.add_argument("--ranker", default=settings.ranker, choices=get_ranker_ids(),
                    help="ranking heuristic for suggestions")
    ap.add_argument("--show", action="store_true",
                    help="print the runner-up suggestions too")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return ap


def main(argv=None) -> int:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # 1) Load the candidate universe once; failure here is fatal
    try:
        source = make_source(args.source)
        raw = list(source())
        print(pretty_summary(validate_words(raw)))
        candidates = load_candidates(lambda: raw)
    except (WordleAssistantError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    # 2) Play
    result = play_session(candidates, limit=args.limit, ranker=args.ranker, show=args.show)
    return 0 if result.won else 1


if __name__ == "__main__":
    sys.exit(main())
