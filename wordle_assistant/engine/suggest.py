"""
Filter the candidate universe by the current state and rank the survivors.

This is the per-turn step of the assistant. It is pure: same state, same
candidates, same ranker -> same list, every time. Ties keep dictionary order
because sorted() is stable.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from wordle_assistant.config import DEFAULT_RANKER, SUGGESTION_LIMIT
from wordle_assistant.rankers import BaseRanker, create_ranker
from .candidate import Candidate
from .predicates import fits_pred
from .state import ConstraintState


def filter_candidates(state: ConstraintState, candidates: Iterable[Candidate]) -> List[Candidate]:
    """Candidates consistent with `state`, in their original order."""
    pred = fits_pred(state)
    return [c for c in candidates if pred(c)]


def suggest(
        state: ConstraintState,
        candidates: Iterable[Candidate],
        *,
        limit: int = SUGGESTION_LIMIT,
        ranker: Union[str, BaseRanker] = DEFAULT_RANKER,
) -> List[str]:
    """
    Return up to `limit` words, best first. An empty list means the state
    is unsatisfiable against this dictionary.

    Raises ValueError if `limit` is below 1.
    """
    if limit < 1:
        raise ValueError(f"limit must be >= 1; got {limit}")
    if isinstance(ranker, str):
        ranker = create_ranker(ranker)

    survivors = filter_candidates(state, candidates)
    ranker.prepare(survivors)
    ranked = sorted(survivors, key=ranker.score, reverse=True)
    return [c.word for c in ranked[:limit]]
