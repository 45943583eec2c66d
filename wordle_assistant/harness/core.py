"""
Offline simulation: let the assistant play against known answers.

- run_case:  play one hidden answer, feedback computed by engine.score.
- run_batch: play many answers in sequence, with a tqdm progress bar.
- summarize: aggregate a batch (win rate, guess-count statistics).
- Enforces Wordle's 6-turn limit at the harness layer.

The assistant always plays its top suggestion, exactly as a user following
the interactive loop would.
"""

from __future__ import annotations

import time
from typing import Dict, List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from wordle_assistant.config import DEFAULT_RANKER, WORDLE_MAX_TURNS
from wordle_assistant.engine import EMPTY_STATE, Candidate, is_win, score, suggest, update_state


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a non-Wordle turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        candidates: Sequence[Candidate],
        *,
        ranker: str = DEFAULT_RANKER,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game until a win, an empty suggestion list, or the turn budget.

    Returns:
        dict with keys:
            answer (str), success (bool), exhausted (bool), guesses (int),
            time_ms (float), history (list[(guess, feedback)])
    """
    _assert_wordle_turns(max_turns)

    state = EMPTY_STATE
    history: List[Tuple[str, str]] = []
    exhausted = False
    success = False

    t0 = time.perf_counter()
    for _ in range(max_turns):
        words = suggest(state, candidates, limit=1, ranker=ranker)
        if not words:
            # answer not in the dictionary (or contradictory feedback)
            exhausted = True
            break
        guess = words[0]
        feedback = score(guess, answer)
        history.append((guess, feedback))
        if is_win(feedback):
            success = True
            break
        state = update_state(state, guess, feedback)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": answer, "success": success, "exhausted": exhausted,
        "guesses": len(history), "time_ms": dt, "history": history,
    }


def run_batch(
        answers: Sequence[str],
        candidates: Sequence[Candidate],
        *,
        ranker: str = DEFAULT_RANKER,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        progress: bool = True,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are played, to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for ans in tqdm(pool, ncols=80, desc=ranker, unit="game", disable=not progress):
        r = run_case(ans, candidates, ranker=ranker, max_turns=max_turns)
        r["ranker_id"] = ranker
        out.append(r)
    return out


def summarize(results: List[Dict], max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Aggregate a batch.

    Guess statistics cover solved games only. `distribution[k]` counts games
    solved in k+1 guesses.
    """
    n = len(results)
    solved = np.array([r["guesses"] for r in results if r["success"]], dtype=int)
    exhausted = sum(1 for r in results if r.get("exhausted"))
    dist = np.bincount(solved - 1, minlength=max_turns) if solved.size else np.zeros(max_turns, int)

    return {
        "games": n,
        "wins": int(solved.size),
        "win_rate": float(solved.size / n) if n else 0.0,
        "exhausted": exhausted,
        "mean_guesses": float(solved.mean()) if solved.size else None,
        "median_guesses": float(np.median(solved)) if solved.size else None,
        "p90_guesses": float(np.percentile(solved, 90)) if solved.size else None,
        "distribution": [int(x) for x in dist[:max_turns]],
    }
