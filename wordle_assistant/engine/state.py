"""
Accumulated clues for one game, and the rule that folds new feedback in.

ConstraintState shape:
  greens  : letter -> positions where the letter is known to be
  yellows : letter -> positions where the letter is known NOT to be
  grays   : letters reported gray somewhere

A gray mark on a letter that is also green or yellow means "does not occur
again", not "absent". The state still records it; predicates.fits_grays_pred
masks known letters before checking grays.

States are values: update_state never mutates its input, so any state can be
kept around for replay or what-if exploration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Tuple

from .validation import GREEN, YELLOW, validate_feedback, validate_guess

Positions = FrozenSet[int]


def _freeze(m: Mapping[str, Iterable[int]]) -> Mapping[str, Positions]:
    return MappingProxyType({k: frozenset(v) for k, v in m.items()})


@dataclass(frozen=True)
class ConstraintState:
    greens: Mapping[str, Positions] = field(default_factory=dict)
    yellows: Mapping[str, Positions] = field(default_factory=dict)
    grays: FrozenSet[str] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "greens", _freeze(self.greens))
        object.__setattr__(self, "yellows", _freeze(self.yellows))
        object.__setattr__(self, "grays", frozenset(self.grays))

    # MappingProxyType neither hashes nor compares by value
    def _key(self):
        return (
            frozenset(self.greens.items()),
            frozenset(self.yellows.items()),
            self.grays,
        )

    def __eq__(self, other):
        if not isinstance(other, ConstraintState):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        def fmt(m):
            return {k: sorted(v) for k, v in sorted(m.items())}
        return (f"ConstraintState(greens={fmt(self.greens)}, "
                f"yellows={fmt(self.yellows)}, grays={sorted(self.grays)})")

    @property
    def known_letters(self) -> FrozenSet[str]:
        """Letters confirmed present by a green or yellow mark."""
        return frozenset(self.greens) | frozenset(self.yellows)

    @property
    def is_empty(self) -> bool:
        return not (self.greens or self.yellows or self.grays)


EMPTY_STATE = ConstraintState()


def update_state(state: ConstraintState, guessed: str, feedback: str) -> ConstraintState:
    """
    Fold one (guess, feedback) pair into `state` and return the new state.

    Sample:
        update_state(EMPTY_STATE, "later", "...gy")
        -> greens {e: {3}}, yellows {r: {4}}, grays {l, a, t}

    Raises InvalidFeedbackError if either string has the wrong shape.
    """
    guessed = validate_guess(guessed)
    feedback = validate_feedback(feedback)

    greens = {k: set(v) for k, v in state.greens.items()}
    yellows = {k: set(v) for k, v in state.yellows.items()}
    grays = set(state.grays)

    for i, (letter, mark) in enumerate(zip(guessed, feedback)):
        if mark == GREEN:
            greens.setdefault(letter, set()).add(i)
        elif mark == YELLOW:
            yellows.setdefault(letter, set()).add(i)
        else:
            grays.add(letter)

    return ConstraintState(greens=greens, yellows=yellows, grays=grays)


def replay(history: Iterable[Tuple[str, str]],
           state: ConstraintState = EMPTY_STATE) -> ConstraintState:
    """Fold a sequence of (guess, feedback) pairs, oldest first."""
    for guessed, feedback in history:
        state = update_state(state, guessed, feedback)
    return state
