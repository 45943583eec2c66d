"""
Letter-Frequency ranker (distinct-letter coverage).

Idea:
  - Build a histogram over the CURRENT survivors: for each letter, how many
    surviving words contain it. Score a word as the sum over its DISTINCT
    letters, so repeated letters earn nothing extra.

Early on this favours words made of common letters; later the histogram
reflects the constraints and top words tend to split the survivors well.
Ignores positions.
"""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from .base import BaseRanker, register


@register
class LetterFreqRanker(BaseRanker):
    id = "letter_freq"
    name = "Letter Frequency (distinct)"
    version = "1.0.0"

    def __init__(self):
        self.counts: Counter = Counter()

    def prepare(self, pool: Sequence) -> None:
        self.counts = Counter(letter for c in pool for letter in c.letter_set)

    def score(self, candidate) -> int:
        return sum(self.counts[letter] for letter in candidate.letter_set)
