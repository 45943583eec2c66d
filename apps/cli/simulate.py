# apps/cli/simulate.py
"""
Evaluate the assistant offline against a list of known answers.

This script:
  1) Loads the dictionary from the word source and prints a summary line.
  2) Loads the answers list (one word per line).
  3) Plays every answer with the assistant's top suggestion each turn,
     feedback computed by the engine, with a progress bar, and writes:
       - CSV:  per-game results + guess/feedback history columns
       - JSON: manifest with config, word list report, summary, git commit
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from wordle_assistant.config import WORDLE_MAX_TURNS, Settings, positive_int
from wordle_assistant.datasets import (
    load_candidates, make_source, playable_words, pretty_summary, read_lines, validate_words,
)
from wordle_assistant.errors import WordleAssistantError
from wordle_assistant.harness import run_batch, summarize
from wordle_assistant.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from wordle_assistant.rankers import get_ranker_ids


def main(argv=None) -> int:
    """
    Parse CLI args, load word lists, run the batch and write outputs.
    """
    try:
        settings = Settings.from_env()
    except ValueError as e:
        print(f"ERROR: {e}")
        return 2

    ap = argparse.ArgumentParser(description="wordle-assistant: simulate games against known answers")
    ap.add_argument("--answers", default="data/answers_5.txt",
                    help="path to answers list (see script/extract_wordle_answers.py)")
    ap.add_argument("--source", default=settings.source,
                    help="dictionary word source: aspell, file:<path>, url:<url> or a path")
    ap.add_argument("--ranker", default=settings.ranker, choices=get_ranker_ids())
    ap.add_argument("--sample", type=positive_int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    # 1) Dictionary
    try:
        raw = list(make_source(args.source)())
        rep = validate_words(raw)
        print(pretty_summary(rep))
        candidates = load_candidates(lambda: raw)
        lines = [w.strip().lower() for w in read_lines(args.answers, skip_blank=True)]
    except (WordleAssistantError, FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1

    # 2) Only playable answers can be scored; report the rest up front
    answers = playable_words(lines)
    skipped = len(lines) - len(answers)
    if skipped:
        print(f"Skipped {skipped} answer line(s) that are not five letters a-z (or repeat)")

    # 3) Deterministic sample without replacement: shuffle by seed, run_batch keeps the first K
    if args.sample:
        random.Random(args.seed).shuffle(answers)

    results = run_batch(answers, candidates, ranker=args.ranker, sample=args.sample,
                        progress=not args.no_progress)
    summary = summarize(results)

    # 4) Outputs
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"sim_{run_id}.csv"
    manifest_path = outdir / f"sim_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "summary": summary,
        "num_cases": len(results),
        "ranker_id": args.ranker,
    }, str(manifest_path))

    print(json.dumps(summary, indent=2))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
