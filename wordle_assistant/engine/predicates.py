"""
Build the candidate predicate for a ConstraintState.

fits_pred(state) is the conjunction of up to four rules; a rule is only
included when the state has something for it to check, so EMPTY_STATE
accepts every candidate:

  1. greens          : every green letter sits at each of its positions
  2. no bad yellows  : no yellow letter sits where it was already yellow
  3. has yellows     : every yellow letter occurs somewhere
  4. grays           : no gray letter occurs, unless it is a known letter
"""

from __future__ import annotations

from typing import Callable, FrozenSet, List, Mapping

from wordle_assistant.config import WORD_LENGTH
from .candidate import Candidate
from .state import ConstraintState

Predicate = Callable[[Candidate], bool]


def every_pred(preds: List[Predicate]) -> Predicate:
    """Logical AND over `preds`; short-circuits on the first failure."""
    preds = list(preds)

    def pred(c: Candidate) -> bool:
        return all(p(c) for p in preds)

    return pred


def fits_greens_pred(greens: Mapping[str, FrozenSet[int]]) -> Predicate:
    required = [(pos, letter) for letter, positions in greens.items() for pos in positions]

    def pred(c: Candidate) -> bool:
        return all(c.letters[pos] == letter for pos, letter in required)

    return pred


def no_bad_yellows_pred(yellows: Mapping[str, FrozenSet[int]]) -> Predicate:
    # prohibited[i] = letters already seen yellow at position i
    prohibited = [
        frozenset(letter for letter, positions in yellows.items() if i in positions)
        for i in range(WORD_LENGTH)
    ]

    def pred(c: Candidate) -> bool:
        return not any(c.letters[i] in prohibited[i] for i in range(WORD_LENGTH))

    return pred


def has_yellows_pred(yellows: Mapping[str, FrozenSet[int]]) -> Predicate:
    needed = frozenset(yellows)

    def pred(c: Candidate) -> bool:
        return needed <= c.letter_set

    return pred


def fits_grays_pred(state: ConstraintState) -> Predicate:
    """
    Reject candidates containing a gray letter.

    Letters already known to be present (green or yellow) are masked out of
    the candidate first: a gray mark on a repeated letter only says the letter
    does not occur again, so it must not knock out a word containing it once.
    """
    known = state.known_letters
    grays = state.grays

    def pred(c: Candidate) -> bool:
        diminished = c.letter_set - known
        return diminished.isdisjoint(grays)

    return pred


def fits_pred(state: ConstraintState) -> Predicate:
    """Predicate a candidate must satisfy to be consistent with `state`."""
    preds: List[Predicate] = []
    if state.greens:
        preds.append(fits_greens_pred(state.greens))
    if state.yellows:
        preds.append(no_bad_yellows_pred(state.yellows))
        preds.append(has_yellows_pred(state.yellows))
    preds.append(fits_grays_pred(state))
    return every_pred(preds)
