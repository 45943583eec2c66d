"""
Candidate words and the validity rule for the dictionary.

A Candidate is built once per dictionary word at startup. It carries three
views of the same word so predicates can pick whichever is cheapest:
  - word       : the string itself (for display)
  - letters    : tuple indexed by board position (for green/yellow checks)
  - letter_set : distinct letters (for presence/absence checks)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from wordle_assistant.config import WORD_LENGTH

WORDLE_WORD_RE = re.compile(rf"^[a-z]{{{WORD_LENGTH}}}$")


def is_wordle_word(word: str) -> bool:
    """A playable word is exactly five lowercase letters a-z."""
    return bool(WORDLE_WORD_RE.match(word))


@dataclass(frozen=True)
class Candidate:
    word: str
    letters: Tuple[str, ...] = field(init=False, repr=False)
    letter_set: FrozenSet[str] = field(init=False, repr=False)

    def __post_init__(self):
        # frozen dataclass: derived views are set once, here
        object.__setattr__(self, "letters", tuple(self.word))
        object.__setattr__(self, "letter_set", frozenset(self.word))


def to_candidate(word: str) -> Candidate:
    return Candidate(word)
